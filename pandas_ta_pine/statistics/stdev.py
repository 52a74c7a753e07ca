# -*- coding: utf-8 -*-
from numpy import sqrt
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.statistics.variance import np_variance
from pandas_ta_pine.utils import v_length, v_offset, v_series


def np_stdev(x: Array, length: Int) -> Array:
    return sqrt(np_variance(x, length, biased=True))


def stdev(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Standard Deviation

    Population (biased) standard deviation of the trailing window.

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
    result = Series(np_stdev(source.to_numpy(), length), index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"STDEV_{length}"
    result.category = "statistics"

    return result
