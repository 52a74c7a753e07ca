# -*- coding: utf-8 -*-
from numpy import arange, float64, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def cog(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Center of Gravity (COG)

    Ehlers' Center of Gravity. The newest bar of the window carries weight
    ```1``` and the oldest weight ```length```; the result is the negated
    weighted sum over the plain sum, or ```0``` when the plain sum is zero.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.cog)

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
    # windows are oldest first, so the weights run length .. 1
    weights = arange(length, 0, -1, dtype=float64)

    def _cog(w):
        num, den = w @ weights, w.sum(axis=1)
        return where(den == 0, 0.0, -num / den)

    result = rolling_reduce(source.to_numpy(), length, _cog)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"COG_{length}"
    result.category = "statistics"

    return result
