# -*- coding: utf-8 -*-
from math import sqrt

from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.wma import np_wma
from pandas_ta_pine.utils import v_length, v_offset, v_series


def hma(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Hull Moving Average (HMA)

    ```WMA(2 * WMA(source, length // 2) - WMA(source, length), isqrt(length))```

    Sources:
        * [Alan Hull](https://alanhull.com/hull-moving-average)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period, at least ```2```. Default: ```10```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 10, minimum=2)
    offset = v_offset(offset)

    # Calculate
    half_length = length // 2
    sqrt_length = int(sqrt(length))

    np_source = source.to_numpy()
    diff = 2.0 * np_wma(np_source, half_length) - np_wma(np_source, length)
    result = Series(np_wma(diff, sqrt_length), index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"HMA_{length}"
    result.category = "overlap"

    return result
