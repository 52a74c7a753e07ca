# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def percentrank(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Percent Rank

    Percentage of the previous ```length - 1``` values that are less than
    or equal to the current value.

    Parameters:
        source (Series): ```source``` Series
        length (int): The period, at least ```2```. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 20, minimum=2)
    offset = v_offset(offset)

    # Calculate
    def _rank(w):
        return (w[:, :-1] <= w[:, -1:]).sum(axis=1) / (length - 1) * 100.0

    result = rolling_reduce(source.to_numpy(), length, _rank)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"PCTRANK_{length}"
    result.category = "statistics"

    return result
