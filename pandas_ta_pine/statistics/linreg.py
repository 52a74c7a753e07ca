# -*- coding: utf-8 -*-
from numpy import arange, float64
from pandas import Series

from pandas_ta_pine._typing import DictLike, Int, SeriesLike
from pandas_ta_pine.utils import rolling_reduce, v_length, v_offset, v_series


def linreg(
    source: SeriesLike, length: Int = None, regression_offset: Int = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Linear Regression Curve

    Fits a least-squares line through each trailing window (x runs
    ```0 .. length - 1```, oldest first) and evaluates it at
    ```length - 1 - regression_offset```, i.e. the current bar when the
    regression offset is ```0```.

    Sources:
        * [tradingview](https://www.tradingview.com/pine-script-reference/v6/#fun_ta.linreg)

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```14```
        regression_offset (int): Bars back along the fitted line. Default: ```0```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    length = v_length(length, 14)
    regression_offset = v_offset(regression_offset)
    offset = v_offset(offset)

    # Calculate
    x = arange(length, dtype=float64)
    sum_x, sum_x2 = x.sum(), (x * x).sum()
    divisor = length * sum_x2 - sum_x * sum_x
    at = length - 1 - regression_offset

    def _fit(w):
        sum_y = w.sum(axis=1)
        sum_xy = w @ x
        slope = (length * sum_xy - sum_x * sum_y) / divisor
        intercept = (sum_y - slope * sum_x) / length
        return intercept + slope * at

    result = rolling_reduce(source.to_numpy(), length, _fit)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"LINREG_{length}_{regression_offset}"
    result.category = "statistics"

    return result
