# -*- coding: utf-8 -*-
from numpy import full, nan
from pandas import DataFrame

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.series.extrema import np_highest, np_lowest
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series


def np_donchian_mid(high: Array, low: Array, length: Int) -> Array:
    return (np_highest(high, length) + np_lowest(low, length)) / 2.0


def ichimoku(
    high: SeriesLike, low: SeriesLike, close: SeriesLike,
    conversion: Int = None, base: Int = None, lagging: Int = None,
    displacement: Int = None, offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Ichimoku Kinkō Hyō

    Tenkan, kijun and senkou B are Donchian midpoints over the conversion,
    base and lagging periods; senkou A is the mean of tenkan and kijun.
    The spans are aligned to the bar they are computed on, not projected
    forward. Chikou is the close pulled back ```displacement``` bars, so
    its last ```displacement``` bars are NaN.

    Sources:
        * [tradingview](https://www.tradingview.com/support/solutions/43000589152-ichimoku-cloud/)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        conversion (int): Tenkan period. Default: ```9```
        base (int): Kijun period. Default: ```26```
        lagging (int): Senkou B period. Default: ```52```
        displacement (int): Chikou shift. Default: ```26```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): tenkan, kijun, senkou_a, senkou_b, chikou columns

    Warning:
        Chikou reads ```displacement``` bars into the future; do not use it
        as a live signal.
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    conversion = v_length(conversion, 9, name="conversion")
    base = v_length(base, 26, name="base")
    lagging = v_length(lagging, 52, name="lagging")
    displacement = v_length(displacement, 26, minimum=0, name="displacement")
    offset = v_offset(offset)

    # Calculate
    np_high, np_low, np_close = high.to_numpy(), low.to_numpy(), close.to_numpy()
    tenkan = np_donchian_mid(np_high, np_low, conversion)
    kijun = np_donchian_mid(np_high, np_low, base)
    senkou_a = (tenkan + kijun) / 2.0
    senkou_b = np_donchian_mid(np_high, np_low, lagging)

    n = np_close.size
    chikou = full(n, nan)
    if displacement < n:
        chikou[:n - displacement] = np_close[displacement:]

    _props = f"_{conversion}_{base}_{lagging}"
    df = DataFrame({
        f"ITS_{conversion}": tenkan,
        f"IKS_{base}": kijun,
        f"ISA_{conversion}": senkou_a,
        f"ISB_{lagging}": senkou_b,
        f"ICS_{displacement}": chikou,
    }, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"ICHIMOKU{_props}"
    df.category = "trend"

    return df
