# -*- coding: utf-8 -*-
from numpy import errstate, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.sma import np_sma
from pandas_ta_pine.statistics.dev import np_dev
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series


def cci(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Commodity Channel Index (CCI)

    Distance of the typical price ```(high + low + close) / 3``` from its
    SMA, in units of ```0.015``` times its mean absolute deviation. Zero
    when the deviation is zero.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.cci)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): The period. Default: ```20```
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
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    tp = (high.to_numpy() + low.to_numpy() + close.to_numpy()) / 3.0
    mean_tp, mad = np_sma(tp, length), np_dev(tp, length)
    with errstate(divide="ignore", invalid="ignore"):
        result = where(mad == 0, 0.0, (tp - mean_tp) / (0.015 * mad))
    result = Series(result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"CCI_{length}"
    result.category = "momentum"

    return result
