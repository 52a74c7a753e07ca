# -*- coding: utf-8 -*-
from numba import njit
from numpy import full, isnan, nan
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_length, v_offset, v_series


@njit(cache=True)
def _same(a, b):
    if isnan(a):
        return isnan(b)
    return a == b


# Candidates are visited newest first and only a strictly higher count
# replaces the leader, so ties resolve to the most recent value.
@njit(cache=True)
def nb_mode(x, length):
    n = x.size
    result = full(n, nan)

    for i in range(length - 1, n):
        best, best_count = nan, 0
        for j in range(length):
            candidate = x[i - j]
            count = 0
            for k in range(length):
                if _same(x[i - k], candidate):
                    count += 1
            if count > best_count:
                best, best_count = candidate, count
        result[i] = best

    return result


def mode(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Rolling Mode

    Most frequent value of the trailing window. When several values share
    the highest count, the one seen most recently wins. NaN is counted as a
    value of its own.

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    result = nb_mode(source.to_numpy(), length)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"MODE_{length}"
    result.category = "statistics"

    return result
