# -*- coding: utf-8 -*-
from numpy import arange, float64
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def np_wma(x: Array, length: Int) -> Array:
    """Linearly weighted window sum; the newest bar weighs ```length```."""
    weights = arange(1, length + 1, dtype=float64)
    total = weights.sum()
    return rolling_reduce(x, length, lambda w: w @ weights / total)


def wma(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Weighted Moving Average (WMA)

    Weights decrease linearly from ```length``` on the current bar to
    ```1``` on the oldest bar of the window.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.wma)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 10)
    offset = v_offset(offset)

    # Calculate
    result = np_wma(source.to_numpy(), length)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"WMA_{length}"
    result.category = "overlap"

    return result
