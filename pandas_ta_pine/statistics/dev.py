# -*- coding: utf-8 -*-
from numpy import abs as np_abs
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def _mean_abs_dev(w):
    mean = w.mean(axis=1, keepdims=True)
    return np_abs(w - mean).mean(axis=1)


def np_dev(x: Array, length: Int) -> Array:
    return rolling_reduce(x, length, _mean_abs_dev)


def dev(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Mean Absolute Deviation

    Average distance of each window value from the window mean.

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    result = Series(np_dev(source.to_numpy(), length), index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"DEV_{length}"
    result.category = "statistics"

    return result
