# -*- coding: utf-8 -*-
from .vwap import vwap

__all__ = ["vwap"]
