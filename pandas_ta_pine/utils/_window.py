# -*- coding: utf-8 -*-
from numpy import errstate, full, nan
from numpy.lib.stride_tricks import sliding_window_view

from pandas_ta_pine._typing import Array, Callable, Int

__all__ = ["rolling_reduce", "rolling_windows"]


def rolling_windows(x: Array, length: Int) -> Array:
    """Read-only 2-D view of the trailing windows of *x*.

    Row ``k`` holds ``x[k:k + length]`` (oldest first) and belongs to output
    position ``k + length - 1``. Callers must check ``length <= x.size``.
    """
    return sliding_window_view(x, length)


def rolling_reduce(
    x: Array, length: Int, reducer: Callable[[Array], Array], *others: Array
) -> Array:
    """Slide a window of *length* over *x* and reduce each window.

    *reducer* receives one ``(n - length + 1, length)`` window matrix per
    input (``x`` first, then *others*) and returns one value per row. The
    first ``length - 1`` positions are warm-up and hold NaN, as does every
    position when the series is shorter than the window.
    """
    n = x.size
    result = full(n, nan)
    if length > n:
        return result

    windows = [rolling_windows(x, length)]
    windows += [rolling_windows(o, length) for o in others]
    with errstate(divide="ignore", invalid="ignore"):
        result[length - 1:] = reducer(*windows)
    return result
