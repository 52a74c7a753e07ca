# -*- coding: utf-8 -*-
from numba import njit
from numpy import fmax, fmin, full, nan
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def np_highest(x: Array, length: Int) -> Array:
    # fmax skips NaN and only returns NaN for an all-NaN window
    return rolling_reduce(x, length, lambda w: fmax.reduce(w, axis=1))


def np_lowest(x: Array, length: Int) -> Array:
    return rolling_reduce(x, length, lambda w: fmin.reduce(w, axis=1))


# Offset (<= 0) to the extreme of each window. Ties keep the newest bar; a
# NaN current bar never compares, so it reports 0.
@njit(cache=True)
def nb_extreme_bars(x, length, highest):
    n = x.size
    result = full(n, nan)

    for i in range(length - 1, n):
        best, best_idx = x[i], 0
        for j in range(1, length):
            candidate = x[i - j]
            if highest:
                better = candidate > best
            else:
                better = candidate < best
            if better:
                best, best_idx = candidate, j
        result[i] = -best_idx

    return result


def _finalize(result, offset, name, **kwargs):
    """Offset, fill, name and category shared by the series utilities.

    Bool results shift in ```False``` so they stay bool.
    """
    if offset != 0:
        if result.dtype == bool:
            result = result.shift(offset, fill_value=False)
        else:
            result = result.shift(offset)
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)
    result.name = name
    result.category = "series"
    return result


def highest(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Highest value of the trailing ```length``` bars, NaN values ignored.

    Returns NaN during warm-up and for windows that are entirely NaN.
    """
    source = v_series(source)
    length = v_length(length, 14)
    offset = v_offset(offset)

    result = Series(np_highest(source.to_numpy(), length), index=source.index)
    return _finalize(result, offset, f"HIGHEST_{length}", **kwargs)


def lowest(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Lowest value of the trailing ```length``` bars, NaN values ignored."""
    source = v_series(source)
    length = v_length(length, 14)
    offset = v_offset(offset)

    result = Series(np_lowest(source.to_numpy(), length), index=source.index)
    return _finalize(result, offset, f"LOWEST_{length}", **kwargs)


def highestbars(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Offset to the highest bar of the window, e.g. ```-2``` for two bars ago."""
    source = v_series(source)
    length = v_length(length, 14)
    offset = v_offset(offset)

    result = nb_extreme_bars(source.to_numpy(), length, True)
    result = Series(result, index=source.index)
    return _finalize(result, offset, f"HIGHESTBARS_{length}", **kwargs)


def lowestbars(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Offset to the lowest bar of the window, e.g. ```-2``` for two bars ago."""
    source = v_series(source)
    length = v_length(length, 14)
    offset = v_offset(offset)

    result = nb_extreme_bars(source.to_numpy(), length, False)
    result = Series(result, index=source.index)
    return _finalize(result, offset, f"LOWESTBARS_{length}", **kwargs)
