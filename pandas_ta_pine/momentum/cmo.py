# -*- coding: utf-8 -*-
from numpy import diff, full, nan, where
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def _cmo(w_up, w_down):
    up, down = w_up.sum(axis=1), w_down.sum(axis=1)
    total = up + down
    return where(total == 0, 0.0, (up - down) / total * 100.0)


def cmo(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Chande Momentum Oscillator (CMO)

    ```100 * (up - down) / (up + down)``` where ```up``` and ```down```
    sum the positive and negative changes of the last ```length``` bars.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.cmo)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```9```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Note:
        The first ```length``` bars are NaN and a window without any
        movement is ```0```.
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 9)
    offset = v_offset(offset)

    # Calculate
    x = source.to_numpy()
    change = full(x.size, nan)
    change[1:] = diff(x)
    # a NaN change poisons the down side
    up = where(change > 0, change, 0.0)
    down = where(change > 0, 0.0, -change)

    result = rolling_reduce(up, length, _cmo, down)
    result[:length] = nan
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"CMO_{length}"
    result.category = "momentum"

    return result
