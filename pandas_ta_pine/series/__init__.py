# -*- coding: utf-8 -*-
from .arithmetic import change, cum, hl_range, maximum, minimum
from .conditions import barssince, falling, rising, valuewhen
from .cross import cross, crossover, crossunder
from .extrema import highest, highestbars, lowest, lowestbars
from .pivots import pivothigh, pivotlow

__all__ = [
    "barssince",
    "change",
    "cross",
    "crossover",
    "crossunder",
    "cum",
    "falling",
    "highest",
    "highestbars",
    "hl_range",
    "lowest",
    "lowestbars",
    "maximum",
    "minimum",
    "pivothigh",
    "pivotlow",
    "rising",
    "valuewhen",
]
