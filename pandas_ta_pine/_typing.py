# -*- coding: utf-8 -*-
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from numpy import floating, integer, ndarray
from pandas import Series

Array = ndarray
DictLike = Union[Dict[str, Any], Any]
Float = Union[float, floating]
Int = Union[int, integer]
IntFloat = Union[Int, Float]
SeriesLike = Union[Series, ndarray, Sequence[float]]
BoolLike = Union[Series, ndarray, Sequence[bool]]
