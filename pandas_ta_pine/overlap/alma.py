# -*- coding: utf-8 -*-
from numpy import arange, exp, float64
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.utils import (
    rolling_reduce,
    v_length,
    v_offset,
    v_scalar,
    v_series,
)


def alma(
    source: SeriesLike, length: Int = None, distribution_offset: IntFloat = None,
    sigma: IntFloat = None, offset: Int = None, **kwargs: DictLike
) -> Series:
    """Arnaud Legoux Moving Average (ALMA)

    A Gaussian weighted window. The kernel is centred at
    ```distribution_offset * (length - 1)``` (```0``` is the oldest bar)
    with a spread of ```length / sigma```.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.alma)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```9```
        distribution_offset (float): Kernel centre, ```0``` to ```1```.
            Default: ```0.85```
        sigma (float): Kernel sharpness. Default: ```6```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 9)
    distribution_offset = v_scalar(distribution_offset, 0.85, "distribution_offset")
    sigma = v_scalar(sigma, 6.0, "sigma")
    offset = v_offset(offset)

    # Calculate
    m = distribution_offset * (length - 1)
    s = length / sigma
    weights = exp(-((arange(length, dtype=float64) - m) ** 2) / (2.0 * s * s))
    total = weights.sum()

    result = rolling_reduce(source.to_numpy(), length, lambda w: w @ weights / total)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"ALMA_{length}_{sigma}_{distribution_offset}"
    result.category = "overlap"

    return result
