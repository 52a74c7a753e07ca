# -*- coding: utf-8 -*-
from numba import njit
from numpy import full, isnan, nan
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_length, v_offset, v_series


# Seeds on the first valid sample; NaN inputs hold the previous value.
@njit(cache=True)
def nb_ema(x, alpha):
    n = x.size
    result = full(n, nan)
    value = nan

    for i in range(n):
        if not isnan(x[i]):
            if isnan(value):
                value = x[i]
            else:
                value = alpha * x[i] + (1.0 - alpha) * value
        result[i] = value

    return result


def ema(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Exponential Moving Average (EMA)

    Recursive average with ```alpha = 2 / (length + 1)```. The first
    valid sample is the seed, so the output starts at the first non-NaN
    input. NaN inputs after the seed repeat the previous value instead of
    resetting the recursion.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.ema)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 10)
    offset = v_offset(offset)

    # Calculate
    np_source = source.to_numpy()
    result = nb_ema(np_source, 2.0 / (length + 1.0))
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"EMA_{length}"
    result.category = "overlap"

    return result
