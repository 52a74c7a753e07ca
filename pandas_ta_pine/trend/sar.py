# -*- coding: utf-8 -*-
from numba import njit
from numpy import empty, isnan, nan
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.utils import (
    v_aligned,
    v_offset,
    v_scalar,
    v_series,
)


# min/max where any NaN operand gives NaN
@njit(cache=True)
def nb_min3(a, b, c):
    if isnan(a) or isnan(b) or isnan(c):
        return nan
    return min(a, min(b, c))


@njit(cache=True)
def nb_max3(a, b, c):
    if isnan(a) or isnan(b) or isnan(c):
        return nan
    return max(a, max(b, c))


# Starts long with the stop and extreme point on low[0]. The stop is
# clamped to the prior one or two bars before the reversal test.
@njit(cache=True)
def nb_sar(high, low, start, increment, maximum):
    n = high.size
    result = empty(n)
    if n == 0:
        return result

    af, ep, is_long, sar_ = start, low[0], True, low[0]
    result[0] = sar_

    for i in range(1, n):
        sar_ = sar_ + af * (ep - sar_)
        j = i - 2 if i > 1 else i - 1

        if is_long:
            sar_ = nb_min3(sar_, low[i - 1], low[j])
            if low[i] < sar_:
                is_long, sar_, ep, af = False, ep, low[i], start
            elif high[i] > ep:
                ep = high[i]
                af = min(af + increment, maximum)
        else:
            sar_ = nb_max3(sar_, high[i - 1], high[j])
            if high[i] > sar_:
                is_long, sar_, ep, af = True, ep, high[i], start
            elif low[i] < ep:
                ep = low[i]
                af = min(af + increment, maximum)

        result[i] = sar_

    return result


def sar(
    high: SeriesLike, low: SeriesLike, start: IntFloat = None,
    increment: IntFloat = None, maximum: IntFloat = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Parabolic Stop and Reverse (SAR)

    Trails price with an acceleration factor that begins at ```start```,
    grows by ```increment``` on each new extreme and is capped at
    ```maximum```. When price crosses the stop the position flips and the
    stop jumps to the last extreme point.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.sar)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        start (float): Initial acceleration factor. Default: ```0.02```
        increment (float): Acceleration step. Default: ```0.02```
        maximum (float): Acceleration cap. Default: ```0.2```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    v_aligned(high, low)
    start = v_scalar(start, 0.02, name="start")
    increment = v_scalar(increment, 0.02, name="increment")
    maximum = v_scalar(maximum, 0.2, name="maximum")
    offset = v_offset(offset)

    # Calculate
    result = nb_sar(high.to_numpy(), low.to_numpy(), start, increment, maximum)
    result = Series(result, index=high.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"SAR_{start}_{increment}_{maximum}"
    result.category = "trend"

    return result
