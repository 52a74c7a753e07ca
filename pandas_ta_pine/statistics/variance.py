# -*- coding: utf-8 -*-
from pandas import Series

from pandas_ta_pine._typing import Array, DictLike, Int, SeriesLike
from pandas_ta_pine.utils import (
    rolling_reduce,
    v_bool,
    v_length,
    v_offset,
    v_series,
)


def np_variance(x: Array, length: Int, biased: bool = True) -> Array:
    """Two-pass windowed variance: window mean first, then squared deviations."""
    ddof = 0 if biased else 1

    def _variance(w):
        mean = w.mean(axis=1, keepdims=True)
        return ((w - mean) ** 2).sum(axis=1) / (length - ddof)

    return rolling_reduce(x, length, _variance)


def variance(
    source: SeriesLike, length: Int = None, biased: bool = None,
    offset: Int = None, **kwargs: DictLike
) -> Series:
    """Variance

    Windowed variance around the window mean, normalised by ```length```
    (biased, the default) or ```length - 1```.

    Parameters:
        source (Series): ```source``` Series
        length (int): The period. Default: ```20```
        biased (bool): Population variance when True. Default: ```True```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (Series): 1 column
    """
    # Validate
    source = v_series(source)
    biased = v_bool(biased, True)
    length = v_length(length, 20, minimum=1 if biased else 2)
    offset = v_offset(offset)

    # Calculate
    result = np_variance(source.to_numpy(), length, biased)
    result = Series(result, index=source.index)

    # Offset
    if offset != 0:
        result = result.shift(offset)

    # Fill
    if "fillna" in kwargs:
        result.fillna(kwargs["fillna"], inplace=True)

    # Name and Category
    result.name = f"VAR_{length}" if biased else f"VARu_{length}"
    result.category = "statistics"

    return result
