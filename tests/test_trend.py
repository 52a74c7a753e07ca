# -*- coding: utf-8 -*-
import numpy as np
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta

nan = np.nan


def test_supertrend_single_flip(trending):
    h, l, c = trending["high"], trending["low"], trending["close"]
    result = ta.supertrend(h, l, c, factor=3, atr_length=3)
    assert list(result.columns) == ["SUPERT_3_3.0", "SUPERTd_3_3.0"]
    trend, direction = result.iloc[:, 0], result.iloc[:, 1]

    assert trend.iloc[:2].isna().all()
    assert (direction.iloc[:7] == 1).all()
    assert (direction.iloc[7:] == -1).all()
    assert (direction.diff().fillna(0) != 0).sum() == 1

    # the upper band holds while price climbs toward it
    assert_allclose(trend.iloc[2:7], 106.0)
    # once bullish, the trend follows the lower band below price
    assert (trend.iloc[7:] < c.iloc[7:]).all()


def test_supertrend_bands_only_tighten_within_a_trend(ohlcv):
    result = ta.supertrend(ohlcv["high"], ohlcv["low"], ohlcv["close"])
    trend = result.iloc[:, 0].to_numpy()
    direction = result.iloc[:, 1].to_numpy()
    for i in range(1, len(trend)):
        if direction[i] == -1 and direction[i - 1] == -1:
            assert trend[i] >= trend[i - 1]
        if direction[i] == 1 and direction[i - 1] == 1 and i > 1 \
                and not np.isnan(trend[i - 2]):
            assert trend[i] <= trend[i - 1]


def test_supertrend_direction_defined_during_warmup(ohlcv):
    result = ta.supertrend(ohlcv["high"], ohlcv["low"], ohlcv["close"], atr_length=10)
    assert result.iloc[:9, 0].isna().all()
    assert (result.iloc[:10, 1] == 1).all()


def test_sar_clamps_to_prior_lows(trending):
    h, l = trending["high"].to_numpy(), trending["low"].to_numpy()
    result = ta.sar(h, l).to_numpy()
    assert_allclose(result[:3], [99.5, 99.5, 99.5])
    assert result[3] == pytest.approx(99.5 + 0.06 * 3)
    for i in range(2, len(result)):
        assert result[i] <= min(l[i - 1], l[i - 2])
    # never flips in a steady uptrend
    assert (result[1:] < l[1:]).all()


def test_sar_reversal_jumps_to_extreme_point():
    high = [10, 11, 12, 13, 8]
    low = [9, 10, 11, 12, 7]
    result = ta.sar(high, low)
    assert_allclose(result, [9, 9, 9, 9.18, 13])
    assert result.name == "SAR_0.02_0.02_0.2"


def test_sar_acceleration_is_capped(trending):
    h, l = trending["high"].to_numpy(), trending["low"].to_numpy()
    tight = ta.sar(h, l, start=0.02, increment=0.02, maximum=0.04).to_numpy()
    # with af pinned at 0.04, sar moves 4% of the distance to the extreme
    prev, ep = tight[10], h[10]
    assert tight[11] == pytest.approx(min(prev + 0.04 * (ep - prev), l[10], l[9]))


def test_sar_empty():
    assert ta.sar([], []).empty


def test_dmi_flat_market_is_zero():
    flat = np.full(40, 10.0)
    result = ta.dmi(flat, flat, flat, 5)
    assert list(result.columns) == ["DMP_5", "DMN_5", "ADX_5"]
    plus_di, minus_di, adx = (result.iloc[:, i] for i in range(3))
    assert plus_di.iloc[:4].isna().all()
    assert (plus_di.iloc[4:] == 0).all()
    assert (minus_di.iloc[4:] == 0).all()
    assert adx.iloc[:8].isna().all()
    assert (adx.iloc[8:] == 0).all()


def test_dmi_uptrend(trending):
    result = ta.dmi(trending["high"], trending["low"], trending["close"], 5)
    last = result.iloc[-1]
    assert last["DMP_5"] > last["DMN_5"]
    assert last["DMN_5"] == 0
    assert last["ADX_5"] == pytest.approx(100.0)


def test_ichimoku(ohlcv):
    h, l, c = ohlcv["high"], ohlcv["low"], ohlcv["close"]
    result = ta.ichimoku(h, l, c)
    assert list(result.columns) == ["ITS_9", "IKS_26", "ISA_9", "ISB_52", "ICS_26"]
    tenkan, kijun, span_a, span_b, chikou = (result.iloc[:, i] for i in range(5))

    expected_tenkan = (ta.highest(h, 9) + ta.lowest(l, 9)) / 2
    assert_allclose(tenkan, expected_tenkan, equal_nan=True)
    assert_allclose(span_a, (tenkan + kijun) / 2, equal_nan=True)
    assert span_b.iloc[:51].isna().all()

    assert_allclose(chikou.iloc[:-26], c.iloc[26:])
    assert chikou.iloc[-26:].isna().all()
    assert len(result) == len(c)


def test_ichimoku_displacement_beyond_history():
    x = np.arange(5, dtype=float)
    result = ta.ichimoku(x, x, x, 2, 2, 2, displacement=10)
    assert len(result) == 5
    assert result.iloc[:, 4].isna().all()
