# -*- coding: utf-8 -*-
from numpy import errstate, where
from pandas import DataFrame

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.sma import np_sma
from pandas_ta_pine.series.extrema import np_highest, np_lowest
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series


def stoch(
    close: SeriesLike, high: SeriesLike, low: SeriesLike,
    k: Int = None, smooth_k: Int = None, smooth_d: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Stochastic Oscillator

    Raw %K places the close inside the ```k```-bar high/low range on a
    ```0 .. 100``` scale. %K is its SMA over ```smooth_k``` bars and %D
    the SMA of %K over ```smooth_d``` bars.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.stoch)

    Parameters:
        close (Series): ```close``` Series
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        k (int): Range period. Default: ```14```
        smooth_k (int): %K smoothing. Default: ```3```
        smooth_d (int): %D smoothing. Default: ```3```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): k, d columns

    Note:
        A flat range (```highest == lowest```) gives a raw %K of ```50```.
    """
    # Validate
    close = v_series(close, "close")
    high = v_series(high, "high")
    low = v_series(low, "low")
    v_aligned(close, high, low)
    k = v_length(k, 14, name="k")
    smooth_k = v_length(smooth_k, 3, name="smooth_k")
    smooth_d = v_length(smooth_d, 3, name="smooth_d")
    offset = v_offset(offset)

    # Calculate
    hh = np_highest(high.to_numpy(), k)
    ll = np_lowest(low.to_numpy(), k)
    span = hh - ll
    with errstate(divide="ignore", invalid="ignore"):
        raw_k = where(span == 0, 50.0, (close.to_numpy() - ll) / span * 100.0)
    stoch_k = np_sma(raw_k, smooth_k)
    stoch_d = np_sma(stoch_k, smooth_d)

    _props = f"_{k}_{smooth_k}_{smooth_d}"
    df = DataFrame({
        f"STOCHk{_props}": stoch_k,
        f"STOCHd{_props}": stoch_d,
    }, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"STOCH{_props}"
    df.category = "momentum"

    return df
