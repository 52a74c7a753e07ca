# -*- coding: utf-8 -*-
from numpy import median as np_median
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def median(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Rolling Median

    Middle value of the trailing window; the mean of the two middle values
    for an even ```length```. Any NaN in the window yields NaN.

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```20```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 20)
    offset = v_offset(offset)

    # Calculate
    result = rolling_reduce(
        source.to_numpy(), length, lambda w: np_median(w, axis=1)
    )
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"MEDIAN_{length}"
    result.category = "statistics"

    return result
