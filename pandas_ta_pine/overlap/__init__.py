# -*- coding: utf-8 -*-
from .alma import alma
from .ema import ema
from .hma import hma
from .rma import rma
from .sma import sma
from .swma import swma
from .vwma import vwma
from .wma import wma

__all__ = [
    "alma",
    "ema",
    "hma",
    "rma",
    "sma",
    "swma",
    "vwma",
    "wma",
]
