# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta

nan = np.nan


def test_rsi_increasing_is_100():
    result = ta.rsi(np.arange(20, dtype=float), 5)
    assert result.iloc[:5].isna().all()
    assert (result.iloc[5:] == 100).all()
    assert result.name == "RSI_5"


def test_rsi_decreasing_is_0():
    result = ta.rsi(np.arange(20, 0, -1, dtype=float), 5)
    assert_allclose(result.iloc[5:], 0.0)


def test_rsi_bounds(ohlcv):
    result = ta.rsi(ohlcv["close"], 14).dropna()
    assert ((result >= 0) & (result <= 100)).all()


def test_macd_columns_and_histogram(ohlcv):
    result = ta.macd(ohlcv["close"])
    assert list(result.columns) == ["MACD_12_26_9", "MACDs_12_26_9", "MACDh_12_26_9"]
    assert result.category == "momentum"
    assert_allclose(
        result["MACDh_12_26_9"],
        result["MACD_12_26_9"] - result["MACDs_12_26_9"],
    )
    assert result.iloc[0].tolist() == [0.0, 0.0, 0.0]


def test_macd_line_is_ema_difference(ohlcv):
    close = ohlcv["close"]
    line = ta.macd(close, 5, 10, 3).iloc[:, 0]
    assert_allclose(line, ta.ema(close, 5) - ta.ema(close, 10))


def test_stoch_flat_range_is_50():
    flat = np.full(10, 3.0)
    result = ta.stoch(flat, flat, flat, k=3, smooth_k=2, smooth_d=2)
    assert list(result.columns) == ["STOCHk_3_2_2", "STOCHd_3_2_2"]
    k, d = result.iloc[:, 0], result.iloc[:, 1]
    assert k.iloc[:3].isna().all()
    assert (k.iloc[3:] == 50).all()
    assert d.iloc[:4].isna().all()
    assert (d.iloc[4:] == 50).all()


def test_stoch_bounds(ohlcv):
    result = ta.stoch(ohlcv["close"], ohlcv["high"], ohlcv["low"]).dropna()
    assert ((result >= 0) & (result <= 100)).all().all()


def test_cci_zero_deviation():
    flat = np.full(8, 5.0)
    result = ta.cci(flat, flat, flat, 4)
    assert result.iloc[:3].isna().all()
    assert (result.iloc[3:] == 0).all()


def test_cmo():
    up = ta.cmo(np.arange(1, 21, dtype=float), 5)
    assert up.iloc[:5].isna().all()
    assert (up.iloc[5:] == 100).all()

    flat = ta.cmo(np.full(10, 2.0), 3)
    assert (flat.iloc[3:] == 0).all()


def test_cmo_mixed():
    # changes: +2, -1, +3
    result = ta.cmo([1, 3, 2, 5], 3)
    assert result.iloc[3] == pytest.approx((5 - 1) / 6 * 100)


def test_mfi():
    x = np.arange(1, 21, dtype=float)
    volume = np.ones(20)
    rising = ta.mfi(x, x, x, volume, 5)
    assert rising.iloc[:5].isna().all()
    assert (rising.iloc[5:] == 100).all()

    flat = np.full(10, 4.0)
    # an unchanged typical price is negative flow
    result = ta.mfi(flat, flat, flat, np.ones(10), 3)
    assert (result.iloc[3:] == 0).all()


def test_wpr():
    flat = np.full(6, 1.0)
    assert (ta.wpr(flat, flat, flat, 3).iloc[2:] == -50).all()

    high = np.arange(10, dtype=float)
    result = ta.wpr(high, high - 1, high, 3)
    assert (result.iloc[2:] == 0).all()


def test_tsi():
    rising = ta.tsi(np.arange(30, dtype=float))
    assert rising.iloc[0] == 0
    assert_allclose(rising.iloc[1:], 100.0)
    assert (ta.tsi(np.full(10, 3.0)) == 0).all()


def test_roc():
    assert_allclose(ta.roc([1, 2, 4], 1), [nan, 100, 100], equal_nan=True)
    assert ta.roc([0, 1], 1).isna().all()


def test_mom():
    assert_allclose(ta.mom([1, 2, 4], 1), [nan, 1, 2], equal_nan=True)
    assert ta.mom([1, 2], 5).isna().all()


def test_output_length_matches_input(ohlcv):
    h, l, c, v = (ohlcv[k] for k in ("high", "low", "close", "volume"))
    for result in (
        ta.rsi(c), ta.macd(c), ta.stoch(c, h, l), ta.cci(h, l, c),
        ta.cmo(c), ta.mfi(h, l, c, v), ta.wpr(h, l, c), ta.tsi(c),
        ta.roc(c), ta.mom(c),
    ):
        assert len(result) == len(ohlcv)
        assert result.index.equals(ohlcv.index)


def test_mismatched_inputs_raise():
    with pytest.raises(ta.InvalidParameterError):
        ta.cci([1, 2, 3], [1, 2], [1, 2, 3])


def test_input_is_not_mutated(ohlcv):
    before = ohlcv.copy()
    ta.mfi(ohlcv["high"], ohlcv["low"], ohlcv["close"], ohlcv["volume"])
    pd.testing.assert_frame_equal(ohlcv, before)
