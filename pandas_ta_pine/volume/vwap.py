# -*- coding: utf-8 -*-
from numpy import cumsum, errstate, nan, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_aligned, v_offset, v_series


def vwap(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, volume: SeriesLike,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Volume Weighted Average Price (VWAP)

    Running ```sum(typical price * volume) / sum(volume)``` from the first
    bar, without session anchoring. NaN while the cumulative volume is
    zero.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#var_ta.vwap)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        volume (Series): ```volume``` Series
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
    volume = v_series(volume, "volume")
    v_aligned(high, low, close, volume)
    offset = v_offset(offset)

    # Calculate
    tp = (high.to_numpy() + low.to_numpy() + close.to_numpy()) / 3.0
    np_volume = volume.to_numpy()
    cum_pv, cum_vol = cumsum(tp * np_volume), cumsum(np_volume)
    with errstate(divide="ignore", invalid="ignore"):
        result = where(cum_vol == 0, nan, cum_pv / cum_vol)
    result = Series(result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = "VWAP"
    result.category = "volume"

    return result
