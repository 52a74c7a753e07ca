# -*- coding: utf-8 -*-
from numpy import nan, sqrt, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import (
    rolling_reduce,
    v_aligned,
    v_length,
    v_offset,
    v_series,
)


def _pearson(wa, wb):
    da = wa - wa.mean(axis=1, keepdims=True)
    db = wb - wb.mean(axis=1, keepdims=True)
    num = (da * db).sum(axis=1)
    den = sqrt((da * da).sum(axis=1) * (db * db).sum(axis=1))
    return where(den == 0, nan, num / den)


def correlation(
    a: SeriesLike, b: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Correlation Coefficient

    Pearson correlation of two series over the trailing window. NaN when
    either series is constant within the window.

    Parameters:
        a (Series): first Series
        b (Series): second Series
        length (int): The period. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    a = v_series(a, "a")
    b = v_series(b, "b")
    v_aligned(a, b)
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    result = rolling_reduce(a.to_numpy(), length, _pearson, b.to_numpy())
    result = Series(result, index=a.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"CORREL_{length}"
    result.category = "statistics"

    return result
