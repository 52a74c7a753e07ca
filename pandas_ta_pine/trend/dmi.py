# -*- coding: utf-8 -*-
from numpy import abs as np_abs, errstate, where, zeros
from pandas import DataFrame

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.rma import nb_rma
from pandas_ta_pine.utils import v_aligned, v_length, v_offset, v_series
from pandas_ta_pine.volatility.true_range import np_true_range


def dmi(
    high: SeriesLike, low: SeriesLike, close: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> DataFrame:
    """Directional Movement Index (DMI) and ADX

    +DM is the up move when it beats the down move and is positive, -DM
    the mirror. True Range and both DMs are smoothed with Wilder's RMA;
    ```+DI``` / ```-DI``` are the smoothed DMs as a percentage of the
    smoothed TR and ADX is the RMA of
    ```DX = |+DI - -DI| / (+DI + -DI) * 100```.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.dmi)

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): The period for DI and ADX. Default: ```14```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): plus_di, minus_di, adx columns

    Note:
        A zero smoothed TR gives DIs of ```0``` and a zero DI sum a DX of
        ```0```.
    """
    # Validate
    high = v_series(high, "high")
    low = v_series(low, "low")
    close = v_series(close, "close")
    v_aligned(high, low, close)
    length = v_length(length, 14)
    offset = v_offset(offset)

    # Calculate
    h, l = high.to_numpy(), low.to_numpy()
    n = h.size
    plus_dm, minus_dm = zeros(n), zeros(n)
    up, down = h[1:] - h[:-1], l[:-1] - l[1:]
    plus_dm[1:] = where((up > down) & (up > 0), up, 0.0)
    minus_dm[1:] = where((down > up) & (down > 0), down, 0.0)

    smooth_tr = nb_rma(np_true_range(h, l, close.to_numpy()), length)
    smooth_plus, smooth_minus = nb_rma(plus_dm, length), nb_rma(minus_dm, length)

    with errstate(divide="ignore", invalid="ignore"):
        plus_di = where(smooth_tr == 0, 0.0, smooth_plus / smooth_tr * 100.0)
        minus_di = where(smooth_tr == 0, 0.0, smooth_minus / smooth_tr * 100.0)
        di_sum = plus_di + minus_di
        dx = where(di_sum == 0, 0.0, np_abs(plus_di - minus_di) / di_sum * 100.0)
    adx = nb_rma(dx, length)

    df = DataFrame({
        f"DMP_{length}": plus_di,
        f"DMN_{length}": minus_di,
        f"ADX_{length}": adx,
    }, index=high.index)

    # Offset
    if offset != 0:
        df = df.shift(offset)

    # Fill
    if "fillna" in kwargs:
        df.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    df.name = f"DMI_{length}"
    df.category = "trend"

    return df
