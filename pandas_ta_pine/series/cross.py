# -*- coding: utf-8 -*-
from numbers import Real

from numpy import full, zeros
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, IntFloat, SeriesLike, Union
from pandas_ta_pine.series.extrema import _finalize
from pandas_ta_pine.utils import v_aligned, v_offset, v_series

__all__ = ["cross", "crossover", "crossunder"]


def _v_pair(a: SeriesLike, b: Union[SeriesLike, IntFloat]):
    a = v_series(a, "a")
    if isinstance(b, Real):
        # a constant level, e.g. crossover(rsi, 70)
        b = Series(full(a.size, float(b)), index=a.index)
    else:
        b = v_series(b, "b")
    v_aligned(a, b)
    return a, b


def _cross(a, b, above: bool):
    x, y = a.to_numpy(), b.to_numpy()
    result = zeros(x.size, dtype=bool)
    if above:
        result[1:] = (x[1:] > y[1:]) & (x[:-1] <= y[:-1])
    else:
        result[1:] = (x[1:] < y[1:]) & (x[:-1] >= y[:-1])
    return result


def crossover(
    a: SeriesLike, b: Union[SeriesLike, IntFloat],
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True on the bar where ```a``` moves from at or below ```b``` to above it.

    The first bar is always False; any NaN involved compares False.

    Parameters:
        a (Series): first Series
        b (Series, float): second Series or a constant level
        offset (int): Post shift, shifting in ```False```. Default: ```0```

    Returns:
        (Series): 1 bool column
    """
    a, b = _v_pair(a, b)
    offset = v_offset(offset)

    result = Series(_cross(a, b, True), index=a.index)
    return _finalize(result, offset, "XOVER", **kwargs)


def crossunder(
    a: SeriesLike, b: Union[SeriesLike, IntFloat],
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True on the bar where ```a``` moves from at or above ```b``` to below it."""
    a, b = _v_pair(a, b)
    offset = v_offset(offset)

    result = Series(_cross(a, b, False), index=a.index)
    return _finalize(result, offset, "XUNDER", **kwargs)


def cross(
    a: SeriesLike, b: Union[SeriesLike, IntFloat],
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """```crossover(a, b) | crossunder(a, b)```"""
    a, b = _v_pair(a, b)
    offset = v_offset(offset)

    result = _cross(a, b, True) | _cross(a, b, False)
    return _finalize(Series(result, index=a.index), offset, "XCROSS", **kwargs)
