# -*- coding: utf-8 -*-
import pandas as pd
import pytest

import pandas_ta_pine as ta
from pandas_ta_pine import InvalidParameterError


def test_accessor_fills_inputs_from_columns(ohlcv):
    pd.testing.assert_series_equal(
        ohlcv.pine("rsi", length=14), ta.rsi(ohlcv["close"], 14)
    )
    pd.testing.assert_frame_equal(
        ohlcv.pine("supertrend", factor=3, atr_length=10),
        ta.supertrend(ohlcv["high"], ohlcv["low"], ohlcv["close"], 3, 10),
    )


def test_accessor_source_selects_column(ohlcv):
    hlc3 = (ohlcv["high"] + ohlcv["low"] + ohlcv["close"]) / 3.0
    pd.testing.assert_series_equal(
        ohlcv.pine("sma", source="hlc3", length=20), ta.sma(hlc3, 20)
    )
    pd.testing.assert_series_equal(
        ohlcv.pine("ema", source="open", length=5), ta.ema(ohlcv["open"], 5)
    )


def test_accessor_explicit_argument_wins(ohlcv):
    close = ohlcv["close"] * 2.0
    pd.testing.assert_series_equal(
        ohlcv.pine("atr", close=close, length=14),
        ta.atr(ohlcv["high"], ohlcv["low"], close, 14),
    )
    pd.testing.assert_series_equal(
        ohlcv.pine("sma", source="hl2", length=5), ta.sma(ohlcv.pine.hl2, 5)
    )


def test_accessor_columns_are_case_insensitive(ohlcv):
    upper = ohlcv.rename(columns=str.capitalize)
    pd.testing.assert_series_equal(
        upper.pine("atr", length=14),
        ta.atr(ohlcv["high"], ohlcv["low"], ohlcv["close"], 14),
    )


def test_accessor_append(ohlcv):
    df = ohlcv.copy()
    df.pine("macd", append=True)
    assert {"MACD_12_26_9", "MACDs_12_26_9", "MACDh_12_26_9"} <= set(df.columns)

    df.pine("ema", length=10, append=True)
    assert "EMA_10" in df.columns

    with pytest.warns(UserWarning, match="EMA_10"):
        df.pine("ema", length=10, append=True)


def test_accessor_without_append_leaves_frame(ohlcv):
    columns = list(ohlcv.columns)
    ohlcv.pine("bbands", length=20)
    assert list(ohlcv.columns) == columns


def test_accessor_pairwise_indicator(ohlcv):
    fast, slow = ta.ema(ohlcv["close"], 5), ta.ema(ohlcv["close"], 20)
    pd.testing.assert_series_equal(
        ohlcv.pine("crossover", a=fast, b=slow), ta.crossover(fast, slow)
    )


def test_accessor_unknown_kind(ohlcv):
    with pytest.raises(InvalidParameterError):
        ohlcv.pine("zigzag")


def test_accessor_missing_column(ohlcv):
    with pytest.raises(InvalidParameterError):
        ohlcv.drop(columns="volume").pine("vwap")


def test_indicator_listing(ohlcv):
    listing = ohlcv.pine.indicators()
    assert set(listing) == set(ta.Category)
    assert "supertrend" in listing["trend"]

    flat = ohlcv.pine.indicators(as_list=True)
    assert flat == sorted(flat)
    assert len(flat) == sum(len(v) for v in ta.Category.values())


def test_every_listed_indicator_is_exported():
    for names in ta.Category.values():
        for name in names:
            assert callable(getattr(ta, name))
