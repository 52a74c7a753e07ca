# -*- coding: utf-8 -*-
from numba import njit
from numpy import full, isnan, nan
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_length, v_offset, v_series


# Wilder smoothing. NaN samples are skipped while seeding and held after.
@njit(cache=True)
def nb_rma(x, length):
    n = x.size
    result = full(n, nan)
    alpha = 1.0 / length
    value, total, count = nan, 0.0, 0

    for i in range(n):
        if count < length:
            if not isnan(x[i]):
                total += x[i]
                count += 1
                if count == length:
                    value = total / length
                    result[i] = value
            continue

        if not isnan(x[i]):
            value = alpha * x[i] + (1.0 - alpha) * value
        result[i] = value

    return result


def rma(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """wildeR's Moving Average (RMA)

    Wilder's smoothing, ```alpha = 1 / length```. Seeded with the mean of
    the first ```length``` valid samples and emitted at the bar where the
    last of them arrives; NaN inputs never count toward the seed. Once
    seeded, NaN inputs hold the previous value.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.rma)

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
    result = nb_rma(np_source, length)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"RMA_{length}"
    result.category = "overlap"

    return result
