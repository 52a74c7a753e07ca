# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest

import pandas_ta_pine as ta
from pandas_ta_pine import InvalidParameterError


def test_fractional_length_truncates():
    close = pd.Series(np.arange(1.0, 11.0))
    pd.testing.assert_series_equal(
        ta.sma(close, 3.7), ta.sma(close, 3), check_names=False
    )
    assert ta.sma(close, 3.7).name == "SMA_3"


@pytest.mark.parametrize("length", [0, -2, 0.5, "a", np.nan, np.inf, True])
def test_invalid_length_raises(length):
    with pytest.raises(InvalidParameterError):
        ta.sma(pd.Series([1.0, 2.0, 3.0]), length)


def test_error_is_a_value_error():
    assert issubclass(InvalidParameterError, ValueError)


def test_hma_needs_two_bars():
    with pytest.raises(InvalidParameterError):
        ta.hma(pd.Series([1.0, 2.0, 3.0]), 1)


def test_dataframe_source_raises(ohlcv):
    with pytest.raises(InvalidParameterError):
        ta.ema(ohlcv[["close", "open"]], 5)


def test_misaligned_inputs_raise(ohlcv):
    with pytest.raises(InvalidParameterError):
        ta.atr(ohlcv["high"], ohlcv["low"].iloc[:-1], ohlcv["close"], 14)


def test_non_numeric_scalar_raises(ohlcv):
    with pytest.raises(InvalidParameterError):
        ta.bbands(ohlcv["close"], 20, mult="2")


@pytest.mark.parametrize("fn", [ta.sma, ta.ema, ta.rma, ta.wma, ta.rsi, ta.stdev])
def test_empty_input_gives_empty_output(fn):
    result = fn(pd.Series([], dtype=float), 5)
    assert isinstance(result, pd.Series)
    assert result.empty


def test_short_input_is_all_warmup():
    result = ta.sma(pd.Series([1.0, 2.0]), 5)
    assert result.isna().all()
    assert len(result) == 2


def test_list_input_gets_range_index():
    result = ta.sma([1, 2, 3, 4], 2)
    assert isinstance(result.index, pd.RangeIndex)
    np.testing.assert_allclose(result.to_numpy(), [np.nan, 1.5, 2.5, 3.5])


def test_index_is_preserved(ohlcv):
    result = ta.ema(ohlcv["close"], 10)
    assert result.index.equals(ohlcv.index)


def test_input_is_not_mutated(ohlcv):
    close = ohlcv["close"].copy()
    close.iloc[5] = np.nan
    before = close.copy()
    ta.rsi(close, 14, fillna=0)
    ta.ema(close, 10, offset=2)
    pd.testing.assert_series_equal(close, before)


def test_offset_and_fillna(ohlcv):
    close = ohlcv["close"]
    shifted = ta.sma(close, 5, offset=2)
    pd.testing.assert_series_equal(shifted, ta.sma(close, 5).shift(2))

    filled = ta.sma(close, 5, fillna=0.0)
    assert (filled.iloc[:4] == 0.0).all()


def test_series_utilities_offset_and_fillna():
    nan = np.nan
    result = ta.cum([1.0, 2.0, nan, 4.0], offset=1, fillna=0.0)
    np.testing.assert_allclose(result.to_numpy(), [0.0, 1.0, 3.0, 0.0])

    result = ta.hl_range([3.0, 4.0, 5.0], [1.0, 1.0, 1.0], offset=1)
    np.testing.assert_allclose(result.to_numpy(), [nan, 2.0, 3.0])

    result = ta.maximum([1.0, 5.0], [2.0, 3.0], offset=-1, fillna=-1.0)
    np.testing.assert_allclose(result.to_numpy(), [5.0, -1.0])

    result = ta.minimum([1.0, 5.0], [2.0, 3.0], offset=1)
    np.testing.assert_allclose(result.to_numpy(), [nan, 1.0])

    result = ta.barssince([False, True, False, False], offset=1, fillna=-1.0)
    np.testing.assert_allclose(result.to_numpy(), [-1.0, -1.0, 0.0, 1.0])

    result = ta.valuewhen([True, False, True], [10.0, 20.0, 30.0], offset=1)
    np.testing.assert_allclose(result.to_numpy(), [nan, 10.0, 10.0])

    result = ta.pivothigh([1.0, 3.0, 1.0, 0.0], 1, 1, offset=1, fillna=0.0)
    np.testing.assert_allclose(result.to_numpy(), [0.0, 0.0, 0.0, 3.0])


def test_bool_series_offset_shifts_in_false():
    result = ta.crossover([1.0, 3.0, 1.0, 3.0], [2.0, 2.0, 2.0, 2.0], offset=1)
    assert result.dtype == bool
    assert result.tolist() == [False, False, True, False]

    result = ta.crossunder([3.0, 1.0, 3.0], 2.0, offset=1)
    assert result.tolist() == [False, False, True]

    result = ta.cross([1.0, 3.0, 1.0], 2.0, offset=-1)
    assert result.tolist() == [True, True, False]

    result = ta.rising([1.0, 2.0, 3.0, 4.0], 1, offset=1)
    assert result.tolist() == [False, False, True, True]

    result = ta.falling([4.0, 3.0, 5.0], 1, offset=1)
    assert result.tolist() == [False, False, True]


def test_accessor_forwards_offset(ohlcv):
    pd.testing.assert_series_equal(
        ohlcv.pine("cum", offset=2),
        ta.cum(ohlcv["close"]).shift(2),
    )


@pytest.mark.parametrize("factor", [np.nan, np.inf, -np.inf])
def test_non_finite_scalar_raises(factor, ohlcv):
    with pytest.raises(InvalidParameterError):
        ta.supertrend(ohlcv["high"], ohlcv["low"], ohlcv["close"], factor)
    with pytest.raises(InvalidParameterError):
        ta.bbands(ohlcv["close"], 20, mult=factor)
