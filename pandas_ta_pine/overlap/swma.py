# -*- coding: utf-8 -*-
from numpy import array
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_offset, v_series

_SWMA_WEIGHTS = array([1.0, 2.0, 2.0, 1.0]) / 6.0


def swma(source: SeriesLike, offset: Int = None, **kwargs: DictLike) -> Series:
    """Symmetric Weighted Moving Average (SWMA)

    Fixed four bar average with weights ```[1/6, 2/6, 2/6, 1/6]```.

    Parameters:
        source (Series): ```source``` Series
        offset (int): Post shift. Default: ```0```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    offset = v_offset(offset)

    # Calculate
    result = rolling_reduce(source.to_numpy(), 4, lambda w: w @ _SWMA_WEIGHTS)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = "SWMA"
    result.category = "overlap"

    return result
