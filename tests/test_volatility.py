# -*- coding: utf-8 -*-
import numpy as np
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta


def test_true_range():
    result = ta.true_range([10, 12], [8, 11], [9, 11.5])
    assert_allclose(result, [2, 3])


def test_atr_is_rma_of_true_range(ohlcv):
    h, l, c = ohlcv["high"], ohlcv["low"], ohlcv["close"]
    result = ta.atr(h, l, c, 14)
    assert_allclose(result, ta.rma(ta.true_range(h, l, c), 14), equal_nan=True)
    assert result.iloc[:13].isna().all()
    assert result.iloc[13:].notna().all()


def test_atr_first_value():
    result = ta.atr([10, 12], [8, 11], [9, 11.5], 2)
    assert result.iloc[1] == pytest.approx(2.5)


def test_bbands(ohlcv):
    close = ohlcv["close"]
    result = ta.bbands(close, 20, 2)
    assert list(result.columns) == ["BBM_20_2.0", "BBU_20_2.0", "BBL_20_2.0"]
    basis, upper, lower = (result.iloc[:, i] for i in range(3))
    assert_allclose(basis, ta.sma(close, 20), equal_nan=True)
    assert_allclose(upper - basis, 2 * ta.stdev(close, 20), equal_nan=True)
    assert_allclose(basis - lower, 2 * ta.stdev(close, 20), equal_nan=True)


def test_bbw():
    assert (ta.bbw(np.zeros(10), 3).iloc[2:] == 0).all()
    assert (ta.bbw(np.full(10, 5.0), 3).iloc[2:] == 0).all()


def test_bbw_matches_bands(ohlcv):
    close = ohlcv["close"]
    bands = ta.bbands(close, 10, 1.5)
    expected = (bands.iloc[:, 1] - bands.iloc[:, 2]) / bands.iloc[:, 0]
    assert_allclose(ta.bbw(close, 10, 1.5), expected, equal_nan=True)


def test_kc(ohlcv):
    h, l, c = ohlcv["high"], ohlcv["low"], ohlcv["close"]
    result = ta.kc(h, l, c, 20, 2, 10)
    assert list(result.columns) == ["KCB_20_2.0_10", "KCU_20_2.0_10", "KCL_20_2.0_10"]
    basis, upper = result.iloc[:, 0], result.iloc[:, 1]
    assert_allclose(basis, ta.ema(c, 20))
    assert_allclose(upper - basis, 2 * ta.atr(h, l, c, 10), equal_nan=True)


def test_kcw(ohlcv):
    h, l, c = ohlcv["high"], ohlcv["low"], ohlcv["close"]
    bands = ta.kc(h, l, c)
    expected = (bands.iloc[:, 1] - bands.iloc[:, 2]) / bands.iloc[:, 0]
    assert_allclose(ta.kcw(h, l, c), expected, equal_nan=True)
