# -*- coding: utf-8 -*-
from .dmi import dmi
from .ichimoku import ichimoku
from .sar import sar
from .supertrend import supertrend

__all__ = [
    "dmi",
    "ichimoku",
    "sar",
    "supertrend",
]
