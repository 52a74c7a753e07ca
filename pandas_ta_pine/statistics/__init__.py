# -*- coding: utf-8 -*-
from .cog import cog
from .correlation import correlation
from .dev import dev
from .linreg import linreg
from .median import median
from .mode import mode
from .percentrank import percentrank
from .stdev import stdev
from .variance import variance

__all__ = [
    "cog",
    "correlation",
    "dev",
    "linreg",
    "median",
    "mode",
    "percentrank",
    "stdev",
    "variance",
]
