# -*- coding: utf-8 -*-
from numpy import errstate, full, nan, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import v_length, v_offset, v_series


def roc(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Rate of Change (ROC)

    Percentage change against the value ```length``` bars ago; NaN where
    that value is zero.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.roc)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```9```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 9)
    offset = v_offset(offset)

    # Calculate
    x = source.to_numpy()
    result = full(x.size, nan)
    if length < x.size:
        prior = x[:-length]
        with errstate(divide="ignore", invalid="ignore"):
            result[length:] = where(
                prior == 0, nan, (x[length:] - prior) / prior * 100.0
            )
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"ROC_{length}"
    result.category = "momentum"

    return result
