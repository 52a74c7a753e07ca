# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version as _version

try:
    version = _version("pandas_ta_pine")
except PackageNotFoundError:
    version = "0.0.0"

from pandas_ta_pine.maps import Category
from pandas_ta_pine.utils import *
from pandas_ta_pine.utils import __all__ as utils_all
from pandas_ta_pine.stateful import *
from pandas_ta_pine.stateful import __all__ as stateful_all

# Flat Structure. Supports ta.ema() or ta.overlap.ema()
from pandas_ta_pine.momentum import *
from pandas_ta_pine.overlap import *
from pandas_ta_pine.series import *
from pandas_ta_pine.statistics import *
from pandas_ta_pine.trend import *
from pandas_ta_pine.volatility import *
from pandas_ta_pine.volume import *
from pandas_ta_pine.momentum import __all__ as momentum_all
from pandas_ta_pine.overlap import __all__ as overlap_all
from pandas_ta_pine.series import __all__ as series_all
from pandas_ta_pine.statistics import __all__ as statistics_all
from pandas_ta_pine.trend import __all__ as trend_all
from pandas_ta_pine.volatility import __all__ as volatility_all
from pandas_ta_pine.volume import __all__ as volume_all

# Enable "pine" DataFrame Extension
from pandas_ta_pine.core import AnalysisIndicators

__all__ = [
    "Category",
    "version",
    "AnalysisIndicators",
]

__all__ += (
    utils_all
    + momentum_all
    + overlap_all
    + series_all
    + statistics_all
    + trend_all
    + volatility_all
    + volume_all
    + stateful_all
)
