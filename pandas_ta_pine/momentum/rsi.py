# -*- coding: utf-8 -*-
from numpy import diff, errstate, full, nan, where
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.overlap.rma import nb_rma
from pandas_ta_pine.utils import v_length, v_offset, v_series


def np_rsi(x: Array, length: Int) -> Array:
    result = full(x.size, nan)
    if x.size < 2:
        return result

    change = diff(x)
    # a NaN change contributes to neither side
    gains = where(change > 0, change, 0.0)
    losses = where(change < 0, -change, 0.0)
    avg_gain, avg_loss = nb_rma(gains, length), nb_rma(losses, length)

    with errstate(divide="ignore", invalid="ignore"):
        rs = avg_gain / avg_loss
        result[1:] = where(avg_loss == 0, 100.0, 100.0 - 100.0 / (1.0 + rs))
    return result


def rsi(
    source: SeriesLike, length: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Relative Strength Index (RSI)

    Bar-to-bar changes are split into gains and (sign flipped) losses, each
    smoothed with Wilder's RMA, and combined as
    ```100 - 100 / (1 + avg_gain / avg_loss)```. The first bar has no
    change and is always NaN.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.rsi)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```14```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column

    Note:
        A window without losses yields exactly ```100```.
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 14)
    offset = v_offset(offset)

    # Calculate
    result = Series(np_rsi(source.to_numpy(), length), index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"RSI_{length}"
    result.category = "momentum"

    return result
