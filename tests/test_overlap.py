# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta

nan = np.nan


def test_sma_window_mean():
    result = ta.sma([1, 2, 3, 4, 5], 3)
    assert_allclose(result, [nan, nan, 2, 3, 4], equal_nan=True)
    assert result.name == "SMA_3"
    assert result.category == "overlap"


def test_sma_nan_in_window():
    result = ta.sma([1, nan, 3, 4, 5], 2)
    assert_allclose(result, [nan, nan, nan, 3.5, 4.5], equal_nan=True)


def test_ema_seeds_on_first_value():
    result = ta.ema([10, 20, 30], 2)
    assert_allclose(result, [10, 16.666666666, 25.555555555], rtol=1e-8)


def test_ema_holds_through_nan():
    result = ta.ema([nan, 10, nan, 20], 3)
    assert_allclose(result, [nan, 10, 10, 15], equal_nan=True)


def test_ema_never_reenters_warmup(ohlcv):
    close = ohlcv["close"].copy()
    close.iloc[[0, 1, 50, 51, 52]] = nan
    result = ta.ema(close, 10)
    first = result.first_valid_index()
    assert result.loc[first:].notna().all()


def test_rma_sma_seed():
    result = ta.rma([1, 2, 3, 4, 5], 3)
    assert_allclose(
        result, [nan, nan, 2.0, 2.6666666667, 3.4444444444],
        rtol=1e-9, equal_nan=True
    )


def test_rma_skips_nan_while_seeding():
    result = ta.rma([1, nan, 2, 3], 2)
    assert_allclose(result, [nan, nan, 1.5, 2.25], equal_nan=True)


def test_wma_newest_weighs_most():
    result = ta.wma([1, 2, 3], 3)
    assert result.iloc[2] == pytest.approx(14 / 6)
    assert result.iloc[:2].isna().all()


def test_swma():
    result = ta.swma([1, 2, 3, 4, 5])
    assert_allclose(result, [nan, nan, nan, 2.5, 3.5], equal_nan=True)


def test_vwma():
    result = ta.vwma([1, 2, 3], [1, 1, 2], 2)
    assert_allclose(result, [nan, 1.5, 8 / 3], equal_nan=True)


def test_vwma_zero_volume_is_nan():
    result = ta.vwma([1, 2, 3], [0, 0, 1], 2)
    assert np.isnan(result.iloc[1])
    assert result.iloc[2] == pytest.approx(3.0)


def test_vwma_is_ratio_of_smas(ohlcv):
    close, volume = ohlcv["close"], ohlcv["volume"]
    expected = ta.sma(close * volume, 20) / ta.sma(volume, 20)
    assert_allclose(ta.vwma(close, volume, 20), expected, rtol=1e-12, equal_nan=True)


def test_hma_tracks_a_line_without_lag():
    x = np.arange(20, dtype=float)
    result = ta.hma(x, 4)
    assert result.iloc[:4].isna().all()
    assert_allclose(result.iloc[4:], x[4:])


def test_hma_requires_length_two():
    with pytest.raises(ta.InvalidParameterError):
        ta.hma([1, 2, 3], 1)


def test_alma_of_constant_is_constant():
    result = ta.alma(np.full(20, 7.0), 9)
    assert result.iloc[:8].isna().all()
    assert_allclose(result.iloc[8:], 7.0)
    assert result.name == "ALMA_9_6.0_0.85"


def test_offset_and_fillna():
    result = ta.sma([1, 2, 3, 4], 2, offset=1, fillna=0)
    assert_allclose(result, [0, 0, 1.5, 2.5])


def test_keeps_series_index(ohlcv):
    result = ta.ema(ohlcv["close"], 5)
    assert result.index.equals(ohlcv.index)
    assert len(result) == len(ohlcv)


@pytest.mark.parametrize("fn", [ta.sma, ta.ema, ta.rma, ta.wma, ta.hma, ta.alma])
def test_empty_input(fn):
    result = fn(pd.Series([], dtype=float), 3 if fn is not ta.hma else 4)
    assert isinstance(result, pd.Series)
    assert result.empty
