# -*- coding: utf-8 -*-
from numba import njit
from numpy import full, nan
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.series.extrema import _finalize
from pandas_ta_pine.utils import v_length, v_offset, v_series

__all__ = ["pivothigh", "pivotlow"]


# A candidate must beat every neighbour strictly; comparisons against NaN
# neighbours never disqualify it. The pivot is written on the confirming bar.
@njit(cache=True)
def nb_pivot(x, left, right, high):
    n = x.size
    result = full(n, nan)

    for i in range(left, n - right):
        center = x[i]
        is_pivot = True
        for j in range(1, left + 1):
            if (high and x[i - j] >= center) or (not high and x[i - j] <= center):
                is_pivot = False
                break
        if is_pivot:
            for j in range(1, right + 1):
                if (high and x[i + j] >= center) or (not high and x[i + j] <= center):
                    is_pivot = False
                    break
        if is_pivot:
            result[i + right] = center

    return result


def _pivot(source, left, right, offset, high, name, **kwargs):
    source = v_series(source)
    left = v_length(left, 2, minimum=0, name="left")
    right = v_length(right, 2, minimum=0, name="right")
    offset = v_offset(offset)

    result = nb_pivot(source.to_numpy(), left, right, high)
    result = Series(result, index=source.index)
    return _finalize(result, offset, f"{name}_{left}_{right}", **kwargs)


def pivothigh(
    source: SeriesLike, left: Int = None, right: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Pivot High

    A bar whose value is strictly greater than the ```left``` bars before
    and the ```right``` bars after it. The pivot value is reported
    ```right``` bars later, on the bar that confirms it; every other bar
    is NaN.

    Parameters:
        source (Series): ```source``` Series
        left (int): Bars to the left. Default: ```2```
        right (int): Bars to the right. Default: ```2```
        offset (int): Post shift. Default: ```0```

    Returns:
        (Series): 1 column
    """
    return _pivot(source, left, right, offset, True, "PIVOTH", **kwargs)


def pivotlow(
    source: SeriesLike, left: Int = None, right: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Pivot Low

    Mirror of ```pivothigh```: strictly lower than every neighbour.
    """
    return _pivot(source, left, right, offset, False, "PIVOTL", **kwargs)
