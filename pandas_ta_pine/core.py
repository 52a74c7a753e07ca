# -*- coding: utf-8 -*-
from inspect import signature
from warnings import warn

from pandas import DataFrame, Series
from pandas.api.extensions import register_dataframe_accessor

from pandas_ta_pine import (
    momentum,
    overlap,
    series,
    statistics,
    trend,
    volatility,
    volume,
)
from pandas_ta_pine._typing import Callable, DictLike, Dict, List, Union
from pandas_ta_pine.maps import Category
from pandas_ta_pine.utils import InvalidParameterError

_PACKAGES = {
    "momentum": momentum,
    "overlap": overlap,
    "series": series,
    "statistics": statistics,
    "trend": trend,
    "volatility": volatility,
    "volume": volume,
}

# Indicator parameters filled from DataFrame columns when not given.
_OHLCV = ("open", "high", "low", "close", "volume")


def _indicator(kind: str) -> Callable:
    for category, names in Category.items():
        if kind in names:
            return getattr(_PACKAGES[category], kind)
    raise InvalidParameterError(f"unknown indicator '{kind}'")


@register_dataframe_accessor("pine")
class AnalysisIndicators:
    """
    This Pandas Extension is named 'pine'. It runs any indicator of the
    package on an OHLCV DataFrame, filling the price and volume arguments
    from its columns (matched case-insensitively).

    Examples:
        ```py
        df.pine("rsi", length=14)
        df.pine("supertrend", factor=3, append=True)
        df.pine("sma", source="hlc3", length=20)
        df.pine.indicators()
        ```
    """

    def __init__(self, pandas_obj: DataFrame):
        self._validate(pandas_obj)
        self._df = pandas_obj

    @staticmethod
    def _validate(obj: DataFrame):
        if not isinstance(obj, DataFrame):
            raise AttributeError("[X] Must be a Pandas DataFrame.")

    def _get_column(self, name: str) -> Series:
        """Column lookup ignoring case; ``hl2``, ``hlc3`` and ``ohlc4`` are derived."""
        if name in ("hl2", "hlc3", "ohlc4"):
            return getattr(self, name)
        if name in self._df.columns:
            return self._df[name]
        matches = [c for c in self._df.columns if str(c).lower() == name.lower()]
        if not matches:
            raise InvalidParameterError(
                f"column '{name}' not found in DataFrame columns {list(self._df.columns)}"
            )
        return self._df[matches[0]]

    # Derived sources
    @property
    def hl2(self) -> Series:
        result = (self._get_column("high") + self._get_column("low")) / 2.0
        result.name = "HL2"
        return result

    @property
    def hlc3(self) -> Series:
        result = (
            self._get_column("high") + self._get_column("low")
            + self._get_column("close")
        ) / 3.0
        result.name = "HLC3"
        return result

    @property
    def ohlc4(self) -> Series:
        result = (
            self._get_column("open") + self._get_column("high")
            + self._get_column("low") + self._get_column("close")
        ) / 4.0
        result.name = "OHLC4"
        return result

    def indicators(self, **kwargs: DictLike) -> Dict[str, List[str]]:
        """Indicator names by category. ``as_list=True`` returns one flat list."""
        if kwargs.pop("as_list", False):
            return sorted(name for names in Category.values() for name in names)
        return {category: list(names) for category, names in Category.items()}

    def __call__(
        self, kind: str, source: str = "close", append: bool = False,
        **kwargs: DictLike
    ) -> Union[Series, DataFrame]:
        fn = _indicator(kind.lower())
        parameters = signature(fn).parameters

        inputs = {}
        for name in parameters:
            if name in kwargs:
                continue
            if name == "source":
                inputs[name] = self._get_column(source)
            elif name in _OHLCV:
                inputs[name] = self._get_column(name)

        result = fn(**inputs, **kwargs)
        if append:
            self._append(result)
        return result

    def _append(self, result: Union[Series, DataFrame]) -> None:
        frame = result.to_frame() if isinstance(result, Series) else result
        overwritten = [c for c in frame.columns if c in self._df.columns]
        if overwritten:
            warn(
                f"[!] Overwriting existing columns: {', '.join(map(str, overwritten))}",
                UserWarning,
                stacklevel=3,
            )
        for column in frame.columns:
            self._df[column] = frame[column]
