# -*- coding: utf-8 -*-
from math import isfinite

from numpy import asarray, bool_, float64, floating, integer, isnan
from pandas import DataFrame, Series

from pandas_ta_pine._typing import Any, BoolLike, Int, IntFloat, SeriesLike
from pandas_ta_pine.utils._errors import InvalidParameterError

__all__ = [
    "v_aligned",
    "v_bool",
    "v_bool_series",
    "v_length",
    "v_offset",
    "v_scalar",
    "v_series",
]

_NUMBERS = (int, float, integer, floating)


def v_series(series: SeriesLike, name: str = "source") -> Series:
    """Return *series* as a float64 Series; the input is never modified.

    A ``pandas.Series`` keeps its index, any other 1-D array-like gets a
    ``RangeIndex``.
    """
    if isinstance(series, DataFrame):
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got a DataFrame"
        )
    if isinstance(series, Series):
        if series.dtype == float64:
            return series
        return series.astype(float64)
    if series is None:
        raise InvalidParameterError(f"{name} is required")

    values = asarray(series, dtype=float64)
    if values.ndim != 1:
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got shape {values.shape}"
        )
    return Series(values)


def v_bool_series(condition: BoolLike, name: str = "condition") -> Series:
    """Return *condition* as a bool Series. NaN counts as False."""
    if isinstance(condition, DataFrame):
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got a DataFrame"
        )
    index = condition.index if isinstance(condition, Series) else None
    values = asarray(condition)
    if values.ndim != 1:
        raise InvalidParameterError(
            f"{name} must be one-dimensional, got shape {values.shape}"
        )
    if values.dtype != bool_:
        numeric = asarray(values, dtype=float64)
        values = (numeric != 0.0) & ~isnan(numeric)
    return Series(values, index=index, dtype=bool)


def v_aligned(*series: Series) -> None:
    """All inputs of a multi-series indicator must have the same length."""
    sizes = {s.size for s in series}
    if len(sizes) > 1:
        raise InvalidParameterError(
            f"input series lengths differ: {[s.size for s in series]}"
        )


def v_length(
    value: IntFloat, default: Int, minimum: Int = 1, name: str = "length"
) -> int:
    """Resolve a window length. Fractions truncate toward zero."""
    if value is None:
        value = default
    if isinstance(value, bool) or not isinstance(value, _NUMBERS):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    length = int(value)
    if length < minimum:
        raise InvalidParameterError(
            f"{name} must be >= {minimum}, got {value!r}"
        )
    return length


def v_scalar(value: IntFloat, default: IntFloat, name: str = "scalar") -> float:
    if value is None:
        value = default
    if isinstance(value, bool) or not isinstance(value, _NUMBERS):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return float(value)


def v_offset(value: Int) -> int:
    if value is None:
        return 0
    return v_length(value, 0, minimum=-(2 ** 63), name="offset")


def v_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return bool(value)
