# -*- coding: utf-8 -*-
from numpy import errstate, nan, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.sma import np_sma
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series


def vwma(
    source: SeriesLike, volume: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Volume Weighted Moving Average (VWMA)

    ```SMA(source * volume) / SMA(volume)```. Windows whose volume averages
    to zero are NaN.

    Parameters:
        source (Series): ```source``` Series
        volume (Series): ```volume``` Series
        length (int): The period. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    volume = v_series(volume, "volume")
    v_aligned(source, volume)
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    np_source, np_volume = source.to_numpy(), volume.to_numpy()
    num = np_sma(np_source * np_volume, length)
    den = np_sma(np_volume, length)
    with errstate(divide="ignore", invalid="ignore"):
        result = where(den == 0, nan, num / den)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"VWMA_{length}"
    result.category = "overlap"

    return result
