# -*- coding: utf-8 -*-
from numpy import cumsum, full, maximum as np_maximum, minimum as np_minimum, nan
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.series.extrema import _finalize
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series

__all__ = ["change", "cum", "hl_range", "maximum", "minimum"]


def np_change(x: Array, length: Int) -> Array:
    result = full(x.size, nan)
    if length < x.size:
        result[length:] = x[length:] - x[:-length]
    return result


def change(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Difference between the current value and the value ```length``` bars ago."""
    source = v_series(source)
    length = v_length(length, 1)
    offset = v_offset(offset)

    result = Series(np_change(source.to_numpy(), length), index=source.index)
    return _finalize(result, offset, f"CHANGE_{length}", **kwargs)


def cum(source: SeriesLike, offset: Int = None, **kwargs: DictLike) -> Series:
    """Cumulative sum. A NaN poisons every later bar."""
    source = v_series(source)
    offset = v_offset(offset)

    result = Series(cumsum(source.to_numpy()), index=source.index)
    return _finalize(result, offset, "CUM", **kwargs)


def hl_range(
    high: SeriesLike, low: SeriesLike,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Bar range, ```high - low```."""
    high = v_series(high, "high")
    low = v_series(low, "low")
    v_aligned(high, low)
    offset = v_offset(offset)

    result = Series(high.to_numpy() - low.to_numpy(), index=high.index)
    return _finalize(result, offset, "RANGE", **kwargs)


def maximum(
    a: SeriesLike, b: SeriesLike, offset: Int = None, **kwargs: DictLike
) -> Series:
    """Element-wise maximum of two Series; NaN wins."""
    a, b = v_series(a, "a"), v_series(b, "b")
    v_aligned(a, b)
    offset = v_offset(offset)

    result = Series(np_maximum(a.to_numpy(), b.to_numpy()), index=a.index)
    return _finalize(result, offset, "MAX", **kwargs)


def minimum(
    a: SeriesLike, b: SeriesLike, offset: Int = None, **kwargs: DictLike
) -> Series:
    """Element-wise minimum of two Series; NaN wins."""
    a, b = v_series(a, "a"), v_series(b, "b")
    v_aligned(a, b)
    offset = v_offset(offset)

    result = Series(np_minimum(a.to_numpy(), b.to_numpy()), index=a.index)
    return _finalize(result, offset, "MIN", **kwargs)
