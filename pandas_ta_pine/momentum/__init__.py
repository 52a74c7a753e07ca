# -*- coding: utf-8 -*-
from .cci import cci
from .cmo import cmo
from .macd import macd
from .mfi import mfi
from .mom import mom
from .roc import roc
from .rsi import rsi
from .stoch import stoch
from .tsi import tsi
from .wpr import wpr

__all__ = [
    "cci",
    "cmo",
    "macd",
    "mfi",
    "mom",
    "roc",
    "rsi",
    "stoch",
    "tsi",
    "wpr",
]
