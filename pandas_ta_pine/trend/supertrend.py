# -*- coding: utf-8 -*-
from numba import njit
from numpy import full, isnan, nan, ones
from pandas import DataFrame

from pandas_ta_pine._typing import DictLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.utils import (
    v_aligned,
    v_length,
    v_offset,
    v_scalar,
    v_series,
)
from pandas_ta_pine.volatility.atr import np_atr


# Bands only tighten unless the previous close broke through them. Bars
# without an ATR keep direction 1 and leave the carried state untouched.
@njit(cache=True)
def nb_supertrend(hl2, close, atr, factor):
    n = close.size
    trend, direction = full(n, nan), ones(n)
    prev_lower, prev_upper, prev_trend = nan, nan, nan

    for i in range(n):
        if isnan(atr[i]):
            continue

        upper = hl2[i] + factor * atr[i]
        lower = hl2[i] - factor * atr[i]

        if not isnan(prev_lower) and not isnan(prev_upper):
            if not (lower > prev_lower or close[i - 1] < prev_lower):
                lower = prev_lower
            if not (upper < prev_upper or close[i - 1] > prev_upper):
                upper = prev_upper

        if isnan(prev_trend):
            dir_ = 1.0
        elif prev_trend == prev_upper:
            dir_ = -1.0 if close[i] > upper else 1.0
        else:
            dir_ = 1.0 if close[i] < lower else -1.0

        trend[i] = lower if dir_ == -1.0 else upper
        direction[i] = dir_
        prev_lower, prev_upper, prev_trend = lower, upper, trend[i]

    return trend, direction


def supertrend(
    high: SeriesLike, low: SeriesLike, close: SeriesLike,
    factor: IntFloat = None, atr_length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """SuperTrend

    A trailing stop ```factor``` ATRs away from ```hl2```. The lower band
    may only rise and the upper band only fall, unless the previous close
    broke through it. Direction ```-1``` means the trend follows the lower
    band (bullish), ```1``` the upper band (bearish).

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.supertrend)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        factor (float): ATR multiplier. Default: ```3```
        atr_length (int): ATR period. Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): trend, direction columns

    Note:
        Direction is ```1``` during the ATR warm-up and on the first bar
        with a defined trend.
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    factor = v_scalar(factor, 3.0, name="factor")
    atr_length = v_length(atr_length, 10, name="atr_length")
    offset = v_offset(offset)

    # Calculate
    np_high, np_low, np_close = high.to_numpy(), low.to_numpy(), close.to_numpy()
    atr_ = np_atr(np_high, np_low, np_close, atr_length)
    trend, direction = nb_supertrend(
        (np_high + np_low) / 2.0, np_close, atr_, factor
    )

    _props = f"_{atr_length}_{factor}"
    df = DataFrame({
        f"SUPERT{_props}": trend,
        f"SUPERTd{_props}": direction,
    }, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"SUPERT{_props}"
    df.category = "trend"

    return df
