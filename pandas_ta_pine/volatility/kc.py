# -*- coding: utf-8 -*-
from pandas import DataFrame, Series

from pandas_ta_pine._typing import Array, DictLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.overlap.ema import nb_ema
from pandas_ta_pine.utils import (
    v_aligned,
    v_length,
    v_offset,
    v_scalar,
    v_series,
)
from pandas_ta_pine.volatility.atr import np_atr
from pandas_ta_pine.volatility.bbands import np_band_width


def np_kc(
    high: Array, low: Array, close: Array,
    length: Int, mult: IntFloat, atr_length: Int
):
    basis = nb_ema(close, 2.0 / (length + 1.0))
    spread = mult * np_atr(high, low, close, atr_length)
    return basis, basis + spread, basis - spread


def _v_kc(high, low, close, length, mult, atr_length, offset):
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    length = v_length(length, 20)
    mult = v_scalar(mult, 2.0, name="mult")
    atr_length = v_length(atr_length, 10, name="atr_length")
    offset = v_offset(offset)
    return high, low, close, length, mult, atr_length, offset


def kc(
    high: SeriesLike, low: SeriesLike, close: SeriesLike,
    length: Int = None, mult: IntFloat = None, atr_length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Keltner Channels (KC)

    An EMA basis of the close with bands ```mult``` ATRs above and below.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.kc)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): Basis period. Default: ```20```
        mult (float): ATR multiplier. Default: ```2```
        atr_length (int): ATR period. Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): basis, upper, lower columns
    """
    # Validate
    high, low, close, length, mult, atr_length, offset = _v_kc(
        high, low, close, length, mult, atr_length, offset
    )

    # Calculate
    basis, upper, lower = np_kc(
        high.to_numpy(), low.to_numpy(), close.to_numpy(),
        length, mult, atr_length
    )

    _props = f"_{length}_{mult}_{atr_length}"
    df = DataFrame({
        f"KCB{_props}": basis,
        f"KCU{_props}": upper,
        f"KCL{_props}": lower,
    }, index=close.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"KC{_props}"
    df.category = "volatility"

    return df


def kcw(
    high: SeriesLike, low: SeriesLike, close: SeriesLike,
    length: Int = None, mult: IntFloat = None, atr_length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Keltner Channels Width: ```(upper - lower) / basis```, ```0``` on a zero basis."""
    # Validate
    high, low, close, length, mult, atr_length, offset = _v_kc(
        high, low, close, length, mult, atr_length, offset
    )

    # Calculate
    result = np_band_width(*np_kc(
        high.to_numpy(), low.to_numpy(), close.to_numpy(),
        length, mult, atr_length
    ))
    result = Series(result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"KCW_{length}_{mult}_{atr_length}"
    result.category = "volatility"

    return result
