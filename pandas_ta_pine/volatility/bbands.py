# -*- coding: utf-8 -*-
from numpy import errstate, where
from pandas import DataFrame, Series

from pandas_ta_pine._typing import Array, DictLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.overlap.sma import np_sma
from pandas_ta_pine.statistics.stdev import np_stdev
from pandas_ta_pine.utils import v_length, v_offset, v_scalar, v_series


def np_band_width(basis: Array, upper: Array, lower: Array) -> Array:
    """```(upper - lower) / basis```, ```0``` where the basis is zero."""
    with errstate(divide="ignore", invalid="ignore"):
        return where(basis == 0, 0.0, (upper - lower) / basis)


def np_bbands(x: Array, length: Int, mult: IntFloat):
    basis = np_sma(x, length)
    spread = mult * np_stdev(x, length)
    return basis, basis + spread, basis - spread


def bbands(
    source: SeriesLike, length: Int = None, mult: IntFloat = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Bollinger Bands (BBANDS)

    An SMA basis with bands ```mult``` population standard deviations
    above and below it.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.bb)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```20```
        mult (float): Standard deviation multiplier. Default: ```2```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): basis, upper, lower columns
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 20)
    mult = v_scalar(mult, 2.0, name="mult")
    offset = v_offset(offset)

    # Calculate
    basis, upper, lower = np_bbands(source.to_numpy(), length, mult)

    _props = f"_{length}_{mult}"
    df = DataFrame({
        f"BBM{_props}": basis,
        f"BBU{_props}": upper,
        f"BBL{_props}": lower,
    }, index=source.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"BBANDS{_props}"
    df.category = "volatility"

    return df


def bbw(
    source: SeriesLike, length: Int = None, mult: IntFloat = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Bollinger Bands Width: ```(upper - lower) / basis```, ```0``` on a zero basis."""
    # Validate
    source = v_series(source)
    length = v_length(length, 20)
    mult = v_scalar(mult, 2.0, name="mult")
    offset = v_offset(offset)

    # Calculate
    result = np_band_width(*np_bbands(source.to_numpy(), length, mult))
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"BBW_{length}_{mult}"
    result.category = "volatility"

    return result
