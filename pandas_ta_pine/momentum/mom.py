# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.series.arithmetic import np_change
from pandas_ta_pine.utils import v_length, v_offset, v_series


def mom(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Momentum (MOM)

    ```source - source[length]```.

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
    result = Series(np_change(source.to_numpy(), length), index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"MOM_{length}"
    result.category = "momentum"

    return result
