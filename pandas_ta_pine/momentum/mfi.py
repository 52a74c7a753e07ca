# -*- coding: utf-8 -*-
from numpy import nan, where, zeros
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import (
    rolling_reduce,
    v_aligned,
    v_length,
    v_offset,
    v_series,
)


def _mfi(w_pos, w_neg):
    pos, neg = w_pos.sum(axis=1), w_neg.sum(axis=1)
    return where(neg == 0, 100.0, 100.0 - 100.0 / (1.0 + pos / neg))


def mfi(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, volume: SeriesLike,
    length: Int = None, offset: Int = None, **kwargs: DictLike
) -> Series:
    """Money Flow Index (MFI)

    A volume weighted RSI. Raw money flow is ```typical price * volume```;
    it counts as positive when the typical price rose from the previous
    bar and as negative otherwise, so an unchanged typical price is
    negative flow.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.mfi)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        volume (Series): ```volume``` Series
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
    volume = v_series(volume, "volume")
    v_aligned(high, low, close, volume)
    length = v_length(length, 14)
    offset = v_offset(offset)

    # Calculate
    tp = (high.to_numpy() + low.to_numpy() + close.to_numpy()) / 3.0
    flow = tp * volume.to_numpy()
    rising = zeros(tp.size, dtype=bool)
    rising[1:] = tp[1:] > tp[:-1]
    positive = where(rising, flow, 0.0)
    negative = where(rising, 0.0, flow)

    result = rolling_reduce(positive, length, _mfi, negative)
    result[:length] = nan
    result = Series(result, index=close.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"MFI_{length}"
    result.category = "momentum"

    return result
