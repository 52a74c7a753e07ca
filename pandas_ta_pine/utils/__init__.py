# -*- coding: utf-8 -*-
from ._errors import InvalidParameterError
from ._validate import *
from ._validate import __all__ as validate_all
from ._window import *
from ._window import __all__ as window_all

__all__ = ["InvalidParameterError"] + validate_all + window_all
