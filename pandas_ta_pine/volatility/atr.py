# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.rma import nb_rma
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series
from pandas_ta_pine.volatility.true_range import np_true_range


def np_atr(high: Array, low: Array, close: Array, length: Int) -> Array:
    return nb_rma(np_true_range(high, low, close), length)


def atr(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Average True Range (ATR)

    Wilder's RMA of the True Range.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.atr)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): The period. Default: ```14```
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
    length = v_length(length, 14)
    offset = v_offset(offset)

    # Calculate
    result = np_atr(high.to_numpy(), low.to_numpy(), close.to_numpy(), length)
    result = Series(result, index=high.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"ATRr_{length}"
    result.category = "volatility"

    return result
