# -*- coding: utf-8 -*-
from numba import njit
from numpy import empty, full, int64, isnan, nan, zeros
from pandas import Series

from pandas_ta_pine._typing import BoolLike, DictLike, Int, SeriesLike
from pandas_ta_pine.series.extrema import _finalize
from pandas_ta_pine.utils import (
    rolling_reduce,
    v_aligned,
    v_bool_series,
    v_length,
    v_offset,
    v_series,
)

__all__ = ["barssince", "falling", "rising", "valuewhen"]


@njit(cache=True)
def nb_barssince(condition):
    n = condition.size
    result = full(n, nan)
    count = nan

    for i in range(n):
        if condition[i]:
            count = 0.0
        elif not isnan(count):
            count += 1.0
        result[i] = count

    return result


@njit(cache=True)
def nb_valuewhen(condition, x, occurrence):
    n = condition.size
    result = full(n, nan)
    hits = empty(n, dtype=int64)
    k = 0

    for i in range(n):
        if condition[i]:
            hits[k] = i
            k += 1
        if k > occurrence:
            result[i] = x[hits[k - 1 - occurrence]]

    return result


def _monotonic(source, length, rising_):
    x = source.to_numpy()
    steps = zeros(x.size)
    # a NaN step never breaks the run, only a failed comparison does
    if rising_:
        steps[1:] = ~(x[1:] <= x[:-1])
    else:
        steps[1:] = ~(x[1:] >= x[:-1])
    runs = rolling_reduce(steps, length, lambda w: w.min(axis=1))
    return runs == 1.0


def rising(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True when ```source``` rose strictly on each of the last ```length``` bars.

    Always False for the first ```length``` bars.
    """
    source = v_series(source)
    length = v_length(length, 1)
    offset = v_offset(offset)

    result = Series(_monotonic(source, length, True), index=source.index)
    return _finalize(result, offset, f"RISING_{length}", **kwargs)


def falling(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True when ```source``` fell strictly on each of the last ```length``` bars."""
    source = v_series(source)
    length = v_length(length, 1)
    offset = v_offset(offset)

    result = Series(_monotonic(source, length, False), index=source.index)
    return _finalize(result, offset, f"FALLING_{length}", **kwargs)


def barssince(
    condition: BoolLike, offset: Int = None, **kwargs: DictLike
) -> Series:
    """Number of bars since ```condition``` was last True.

    ```0``` on a True bar, NaN before the first True bar.

    Parameters:
        condition (Series): bool Series
        offset (int): Post shift. Default: ```0```

    Returns:
        (Series): 1 column
    """
    condition = v_bool_series(condition)
    offset = v_offset(offset)

    result = Series(nb_barssince(condition.to_numpy()), index=condition.index)
    return _finalize(result, offset, "BARSSINCE", **kwargs)


def valuewhen(
    condition: BoolLike, source: SeriesLike, occurrence: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Value of ```source``` on the n-th most recent bar where ```condition``` held.

    ```occurrence=0``` is the latest True bar (including the current one).
    NaN until ```occurrence + 1``` True bars have been seen.

    Parameters:
        condition (Series): bool Series
        source (Series): ```source``` Series
        occurrence (int): Which match, counting back from ```0```. Default: ```0```
        offset (int): Post shift. Default: ```0```

    Returns:
        (Series): 1 column
    """
    condition = v_bool_series(condition)
    source = v_series(source)
    v_aligned(condition, source)
    occurrence = v_length(occurrence, 0, minimum=0, name="occurrence")
    offset = v_offset(offset)

    result = nb_valuewhen(condition.to_numpy(), source.to_numpy(), occurrence)
    result = Series(result, index=source.index)
    return _finalize(result, offset, f"VALUEWHEN_{occurrence}", **kwargs)
