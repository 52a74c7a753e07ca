# -*- coding: utf-8 -*-
from numpy import abs as np_abs, empty, maximum
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_aligned, v_offset, v_series


def np_true_range(high: Array, low: Array, close: Array) -> Array:
    """The first bar has no previous close and uses ```high - low``` only."""
    result = empty(high.size)
    if high.size == 0:
        return result

    result[0] = high[0] - low[0]
    prev_close = close[:-1]
    result[1:] = maximum(
        maximum(high[1:] - low[1:], np_abs(high[1:] - prev_close)),
        np_abs(low[1:] - prev_close),
    )
    return result


def true_range(
    high: SeriesLike, low: SeriesLike, close: SeriesLike,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True Range

    The largest of ```high - low```, ```|high - close[1]|``` and
    ```|low - close[1]|```. NaN in any candidate propagates.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#var_ta.tr)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    offset = v_offset(offset)

    # Calculate
    result = np_true_range(high.to_numpy(), low.to_numpy(), close.to_numpy())
    result = Series(result, index=high.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = "TRUERANGE"
    result.category = "volatility"

    return result
