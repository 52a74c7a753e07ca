# -*- coding: utf-8 -*-
from numpy import errstate, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.series.extrema import np_highest, np_lowest
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series


def wpr(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Williams %R

    Where the close sits in the ```length```-bar range, from ```0``` (at
    the high) to ```-100``` (at the low). A flat range gives ```-50```.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.wpr)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    length = v_length(length, 14)
    offset = v_offset(offset)

    # Calculate
    hh = np_highest(high.to_numpy(), length)
    ll = np_lowest(low.to_numpy(), length)
    span = hh - ll
    with errstate(divide="ignore", invalid="ignore"):
        result = where(span == 0, -50.0, (hh - close.to_numpy()) / span * -100.0)
    result = Series(result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"WILLR_{length}"
    result.category = "momentum"

    return result
