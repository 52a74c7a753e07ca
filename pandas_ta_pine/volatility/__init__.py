# -*- coding: utf-8 -*-
from .atr import atr
from .bbands import bbands, bbw
from .kc import kc, kcw
from .true_range import true_range

__all__ = [
    "atr",
    "bbands",
    "bbw",
    "kc",
    "kcw",
    "true_range",
]
