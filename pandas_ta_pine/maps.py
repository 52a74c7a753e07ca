# -*- coding: utf-8 -*-
from pandas_ta_pine._typing import Dict, List

# Indicator names by category. Used by the "pine" DataFrame extension for
# dispatch and by df.pine.indicators().
Category: Dict[str, List[str]] = {
    # Moving averages
    "overlap": [
        "alma", "ema", "hma", "rma", "sma", "swma", "vwma", "wma",
    ],

    # Oscillators
    "momentum": [
        "cci", "cmo", "macd", "mfi", "mom", "roc", "rsi", "stoch", "tsi",
        "wpr",
    ],

    # Bands and ranges
    "volatility": [
        "atr", "bbands", "bbw", "kc", "kcw", "true_range",
    ],

    # Windowed statistics and regression
    "statistics": [
        "cog", "correlation", "dev", "linreg", "median", "mode",
        "percentrank", "stdev", "variance",
    ],

    # State machines
    "trend": [
        "dmi", "ichimoku", "sar", "supertrend",
    ],

    "volume": [
        "vwap",
    ],

    # Series utilities
    "series": [
        "barssince", "change", "cross", "crossover", "crossunder", "cum",
        "falling", "highest", "highestbars", "hl_range", "lowest",
        "lowestbars", "maximum", "minimum", "pivothigh", "pivotlow",
        "rising", "valuewhen",
    ],
}
