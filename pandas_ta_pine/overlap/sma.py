# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def _window_mean(windows):
    return windows.mean(axis=1)


def np_sma(x: Array, length: Int) -> Array:
    return rolling_reduce(x, length, _window_mean)


def sma(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Simple Moving Average (SMA)

    The arithmetic mean of the trailing ```length``` values. A NaN inside
    the window yields NaN for that bar.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.sma)

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
    result = np_sma(source.to_numpy(), length)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"SMA_{length}"
    result.category = "overlap"

    return result
