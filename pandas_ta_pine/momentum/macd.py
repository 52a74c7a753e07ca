# -*- coding: utf-8 -*-
from pandas import DataFrame

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.ema import nb_ema
from pandas_ta_pine.utils import v_length, v_offset, v_series


def macd(
    source: SeriesLike, fast: Int = None, slow: Int = None,
    signal: Int = None, offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Moving Average Convergence Divergence (MACD)

    The MACD line is ```ema(fast) - ema(slow)```, the signal line is an
    EMA of the MACD line and the histogram their difference.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.macd)

    Parameters:
        source (Series): ```source``` Series
        fast (int): Fast period. Default: ```12```
        slow (int): Slow period. Default: ```26```
        signal (int): Signal period. Default: ```9```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): macd, signal, histogram columns
    """
    # Validate
    source = v_series(source)
    fast = v_length(fast, 12, name="fast")
    slow = v_length(slow, 26, name="slow")
    signal = v_length(signal, 9, name="signal")
    offset = v_offset(offset)

    # Calculate
    x = source.to_numpy()
    line = nb_ema(x, 2.0 / (fast + 1.0)) - nb_ema(x, 2.0 / (slow + 1.0))
    signal_line = nb_ema(line, 2.0 / (signal + 1.0))
    histogram = line - signal_line

    _props = f"_{fast}_{slow}_{signal}"
    df = DataFrame({
        f"MACD{_props}": line,
        f"MACDs{_props}": signal_line,
        f"MACDh{_props}": histogram,
    }, index=source.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"MACD{_props}"
    df.category = "momentum"

    return df
