# -*- coding: utf-8 -*-
from numpy import abs as np_abs, diff, errstate, where, zeros
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.ema import nb_ema
from pandas_ta_pine.utils import v_length, v_offset, v_series


def tsi(
    source: SeriesLike, short: Int = None, long: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """True Strength Index (TSI)

    Double smoothed momentum: ```ema(ema(change, long), short)``` divided
    by the same smoothing of the absolute change, times ```100```. The
    first change is taken as ```0``` so both EMAs seed on the first bar.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.tsi)

    Parameters:
        source (Series): ```source``` Series
        short (int): Second smoothing period. Default: ```13```
        long (int): First smoothing period. Default: ```25```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    short = v_length(short, 13, name="short")
    long = v_length(long, 25, name="long")
    offset = v_offset(offset)

    # Calculate
    x = source.to_numpy()
    change = zeros(x.size)
    change[1:] = diff(x)
    a_short, a_long = 2.0 / (short + 1.0), 2.0 / (long + 1.0)
    smooth = nb_ema(nb_ema(change, a_long), a_short)
    smooth_abs = nb_ema(nb_ema(np_abs(change), a_long), a_short)
    with errstate(divide="ignore", invalid="ignore"):
        result = where(smooth_abs == 0, 0.0, smooth / smooth_abs * 100.0)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"TSI_{short}_{long}"
    result.category = "momentum"

    return result
