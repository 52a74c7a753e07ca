# -*- coding: utf-8 -*-
import numpy as np
from numpy.testing import assert_allclose

import pandas_ta_pine as ta

nan = np.nan


def test_vwap_cumulative():
    x = [1.0, 2.0, 3.0]
    result = ta.vwap(x, x, x, [1, 1, 2])
    assert_allclose(result, [1.0, 1.5, 2.25])
    assert result.name == "VWAP"


def test_vwap_nan_until_volume():
    x = [1.0, 2.0, 3.0]
    result = ta.vwap(x, x, x, [0, 1, 1])
    assert_allclose(result, [nan, 2.0, 2.5], equal_nan=True)
