# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta
from pandas_ta_pine.stateful import (
    LOOKAHEAD_REGISTRY,
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    get_indicator,
    replay,
    replay_seed,
    stateful_supported_kinds,
)


def _vectorized(kind, df, params):
    h, l, c, v = df["high"], df["low"], df["close"], df["volume"]
    calls = {
        "ema": lambda: ta.ema(c, **params),
        "rma": lambda: ta.rma(c, **params),
        "sma": lambda: ta.sma(c, **params),
        "rsi": lambda: ta.rsi(c, **params),
        "macd": lambda: ta.macd(c, **params),
        "tsi": lambda: ta.tsi(c, **params),
        "atr": lambda: ta.atr(h, l, c, **params),
        "supertrend": lambda: ta.supertrend(h, l, c, **params),
        "sar": lambda: ta.sar(h, l, **params),
        "dmi": lambda: ta.dmi(h, l, c, **params),
        "vwap": lambda: ta.vwap(h, l, c, v, **params),
        "ichimoku": lambda: ta.ichimoku(h, l, c, **params).iloc[:, :4],
    }
    result = calls[kind]()
    return result.to_frame() if isinstance(result, pd.Series) else result


CASES = [
    ("ema", {"length": 10}),
    ("rma", {"length": 7}),
    ("sma", {"length": 5}),
    ("rsi", {"length": 14}),
    ("macd", {"fast": 12, "slow": 26, "signal": 9}),
    ("tsi", {"short": 13, "long": 25}),
    ("atr", {"length": 14}),
    ("supertrend", {"factor": 3, "atr_length": 10}),
    ("sar", {"start": 0.02, "increment": 0.02, "maximum": 0.2}),
    ("dmi", {"length": 14}),
    ("vwap", {}),
]


def _inputs(kind, df):
    return {name: df[name] for name in get_indicator(kind).inputs}


def test_supported_kinds():
    assert stateful_supported_kinds(include_lookahead=False) == sorted(
        k for k, _ in CASES
    )
    assert "ichimoku" in stateful_supported_kinds()
    assert set(SEED_REGISTRY) == set(STATEFUL_REGISTRY) | set(LOOKAHEAD_REGISTRY)


@pytest.mark.parametrize("kind,params", CASES)
def test_replay_matches_vectorized(kind, params, ohlcv):
    expected = _vectorized(kind, ohlcv, params)
    result = replay(kind, _inputs(kind, ohlcv), params)

    assert list(result.columns) == list(expected.columns)
    assert result.index.equals(ohlcv.index)
    assert_allclose(
        result.to_numpy(), expected.to_numpy(),
        rtol=1e-9, atol=1e-9, equal_nan=True
    )


@pytest.mark.parametrize("kind", ["ema", "rma", "sma", "rsi", "macd", "tsi"])
def test_replay_matches_vectorized_with_gaps(kind, ohlcv):
    df = ohlcv.copy()
    df.iloc[[0, 40, 41, 120], df.columns.get_loc("close")] = np.nan
    params = dict(CASES)[kind]
    expected = _vectorized(kind, df, params)
    result = replay(kind, _inputs(kind, df), params)
    assert_allclose(
        result.to_numpy(), expected.to_numpy(),
        rtol=1e-9, atol=1e-9, equal_nan=True
    )


def test_ichimoku_streams_without_chikou(ohlcv):
    params = {"conversion": 9, "base": 26, "lagging": 52}
    with pytest.warns(UserWarning, match="chikou"):
        result = replay("ichimoku", _inputs("ichimoku", ohlcv), params)
    expected = _vectorized("ichimoku", ohlcv, params)
    assert list(result.columns) == list(expected.columns)
    assert_allclose(result.to_numpy(), expected.to_numpy(), equal_nan=True)


@pytest.mark.parametrize("kind,params", CASES)
def test_seed_then_update_continues_the_series(kind, params, ohlcv):
    split = 200
    indicator = get_indicator(kind)
    history = {k: v.iloc[:split] for k, v in _inputs(kind, ohlcv).items()}
    state = replay_seed(kind, history, params)

    values = []
    for i in range(split, len(ohlcv)):
        bar = {k: float(ohlcv[k].iloc[i]) for k in indicator.inputs}
        out, state = indicator.update(state, bar, params)
        values.append([np.nan if v is None else v for v in out])

    expected = _vectorized(kind, ohlcv, params).iloc[split:]
    assert_allclose(np.array(values), expected.to_numpy(), rtol=1e-9, equal_nan=True)


def test_ema_output_only_seed(ohlcv):
    close = ohlcv["close"]
    history = ta.ema(close.iloc[:150], 10)
    state = SEED_REGISTRY["ema"]({history.name: history}, {"length": 10})

    update = STATEFUL_REGISTRY["ema"].update
    values = []
    for x in close.iloc[150:]:
        out, state = update(state, {"close": float(x)}, {"length": 10})
        values.append(out[0])
    assert_allclose(values, ta.ema(close, 10).iloc[150:], rtol=1e-12)


def test_sar_state_exposes_position():
    state = replay_seed(
        "sar", {"high": [10, 11, 12, 13, 8], "low": [9, 10, 11, 12, 7]}, {}
    )
    assert state.is_long is False
    assert state.sar == 13
    assert state.ep == 7


def test_states_are_independent():
    indicator = STATEFUL_REGISTRY["ema"]
    a, b = indicator.init({"length": 3}), indicator.init({"length": 3})
    indicator.update(a, {"close": 1.0}, {"length": 3})
    assert b.last is None


def test_unknown_kind_raises():
    with pytest.raises(ta.InvalidParameterError):
        replay("zigzag", {"close": [1.0, 2.0]}, {})


def test_missing_input_raises():
    with pytest.raises(ta.InvalidParameterError):
        replay("atr", {"close": [1.0, 2.0]}, {})


def test_replay_empty():
    result = replay("ema", {"close": []}, {"length": 3})
    assert result.empty
    assert list(result.columns) == ["EMA_3"]


@pytest.mark.parametrize("kind", ["ema", "rma"])
def test_output_seed_inside_warmup_keeps_history(kind):
    close = pd.Series([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    vectorized = getattr(ta, kind)
    head = close.iloc[:3]
    history = vectorized(head, 5)
    state = SEED_REGISTRY[kind]({"close": head, history.name: history}, {"length": 5})

    update = STATEFUL_REGISTRY[kind].update
    values = []
    for x in close.iloc[3:]:
        out, state = update(state, {"close": x}, {"length": 5})
        values.append(np.nan if out[0] is None else out[0])
    assert_allclose(values, vectorized(close, 5).iloc[3:], equal_nan=True)


def test_rma_seed_without_output_column_replays_inputs():
    close = pd.Series([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])
    state = SEED_REGISTRY["rma"]({"close": close.iloc[:3]}, {"length": 5})

    update = STATEFUL_REGISTRY["rma"].update
    values = []
    for x in close.iloc[3:]:
        out, state = update(state, {"close": x}, {"length": 5})
        values.append(np.nan if out[0] is None else out[0])
    assert_allclose(values, [np.nan, 3.0, 3.6, 4.28], equal_nan=True)


def test_output_seed_without_any_history_raises():
    with pytest.raises(ta.InvalidParameterError):
        SEED_REGISTRY["rma"]({}, {"length": 5})
