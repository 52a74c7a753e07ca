# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- momentum indicators (rsi, macd, tsi)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pandas_ta_pine.utils import v_length

from ._base import (
    NAN,
    EMAState,
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    StatefulIndicator,
    ema_make,
    ema_update_raw,
    replay_seed,
    rma_make,
)


# ===========================================================================
# RSI  (replay)
# ===========================================================================
# delta = close - prev_close; a NaN delta counts as neither gain nor loss.
# avg_gain / avg_loss -> RMA (alpha=1/n, SMA seed)
# RSI = 100 - 100 / (1 + avg_gain / avg_loss), 100 when avg_loss == 0
# First bar: store prev_close only; no delta.  Default length=14

@dataclass
class RSIState:
    avg_gain: EMAState
    avg_loss: EMAState
    prev_close: Optional[float] = None


def _rsi_init(params: Dict[str, Any]) -> RSIState:
    length = v_length(params.get("length"), 14)
    return RSIState(avg_gain=rma_make(length), avg_loss=rma_make(length))


def _rsi_update(
    state: RSIState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], RSIState]:
    close = bar["close"]

    if state.prev_close is None:
        # Very first bar -- no delta yet, just store close.
        state.prev_close = close
        return [None], state

    delta = close - state.prev_close
    state.prev_close = close

    gain = delta if delta > 0 else 0.0
    loss = -delta if delta < 0 else 0.0

    g_val, state.avg_gain = ema_update_raw(state.avg_gain, gain)
    l_val, state.avg_loss = ema_update_raw(state.avg_loss, loss)

    if g_val is None or l_val is None:
        return [None], state
    if l_val == 0.0:
        return [100.0], state
    return [100.0 - 100.0 / (1.0 + g_val / l_val)], state


def _rsi_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"RSI_{v_length(params.get('length'), 14)}"]


def _rsi_seed(series: Dict[str, Any], params: Dict[str, Any]) -> RSIState:
    return replay_seed("rsi", series, params)


STATEFUL_REGISTRY["rsi"] = StatefulIndicator(
    kind="rsi",
    inputs=("close",),
    init=_rsi_init,
    update=_rsi_update,
    output_names=_rsi_output_names,
)
SEED_REGISTRY["rsi"] = _rsi_seed


# ===========================================================================
# MACD  (replay)
# ===========================================================================
# MACD = EMA(close, fast) - EMA(close, slow)
# Signal = EMA(MACD, signal), seeded on the first MACD value
# Hist = MACD - Signal
# Defaults: fast=12, slow=26, signal=9

@dataclass
class MACDState:
    ema_fast: EMAState
    ema_slow: EMAState
    ema_signal: EMAState


def _macd_lengths(params: Dict[str, Any]) -> Tuple[int, int, int]:
    fast = v_length(params.get("fast"), 12, name="fast")
    slow = v_length(params.get("slow"), 26, name="slow")
    signal = v_length(params.get("signal"), 9, name="signal")
    return fast, slow, signal


def _macd_init(params: Dict[str, Any]) -> MACDState:
    fast, slow, signal = _macd_lengths(params)
    return MACDState(
        ema_fast=ema_make(fast),
        ema_slow=ema_make(slow),
        ema_signal=ema_make(signal),
    )


def _macd_update(
    state: MACDState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], MACDState]:
    x = bar["close"]

    fast_val, state.ema_fast = ema_update_raw(state.ema_fast, x)
    slow_val, state.ema_slow = ema_update_raw(state.ema_slow, x)

    macd_val: Optional[float] = None
    if fast_val is not None and slow_val is not None:
        macd_val = fast_val - slow_val

    sig_val, state.ema_signal = ema_update_raw(
        state.ema_signal, NAN if macd_val is None else macd_val
    )
    hist_val: Optional[float] = None
    if macd_val is not None and sig_val is not None:
        hist_val = macd_val - sig_val

    return [macd_val, sig_val, hist_val], state


def _macd_output_names(params: Dict[str, Any]) -> List[str]:
    p = "_{}_{}_{}".format(*_macd_lengths(params))
    return [f"MACD{p}", f"MACDs{p}", f"MACDh{p}"]


def _macd_seed(series: Dict[str, Any], params: Dict[str, Any]) -> MACDState:
    return replay_seed("macd", series, params)


STATEFUL_REGISTRY["macd"] = StatefulIndicator(
    kind="macd",
    inputs=("close",),
    init=_macd_init,
    update=_macd_update,
    output_names=_macd_output_names,
)
SEED_REGISTRY["macd"] = _macd_seed


# ===========================================================================
# TSI  (replay)
# ===========================================================================
# TSI = 100 * EMA(EMA(change, long), short) / EMA(EMA(|change|, long), short)
# The first change is 0; 0 when the absolute smoothing is 0.
# Defaults: short=13, long=25

@dataclass
class TSIState:
    change_long: EMAState
    change_short: EMAState
    abs_long: EMAState
    abs_short: EMAState
    prev_close: Optional[float] = None


def _tsi_lengths(params: Dict[str, Any]) -> Tuple[int, int]:
    short = v_length(params.get("short"), 13, name="short")
    long = v_length(params.get("long"), 25, name="long")
    return short, long


def _tsi_init(params: Dict[str, Any]) -> TSIState:
    short, long = _tsi_lengths(params)
    return TSIState(
        change_long=ema_make(long),
        change_short=ema_make(short),
        abs_long=ema_make(long),
        abs_short=ema_make(short),
    )


def _tsi_update(
    state: TSIState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], TSIState]:
    close = bar["close"]
    change = 0.0 if state.prev_close is None else close - state.prev_close
    state.prev_close = close

    inner, state.change_long = ema_update_raw(state.change_long, change)
    smooth, state.change_short = ema_update_raw(
        state.change_short, NAN if inner is None else inner
    )
    inner_abs, state.abs_long = ema_update_raw(state.abs_long, abs(change))
    smooth_abs, state.abs_short = ema_update_raw(
        state.abs_short, NAN if inner_abs is None else inner_abs
    )

    if smooth is None or smooth_abs is None:
        return [None], state
    if smooth_abs == 0.0:
        return [0.0], state
    return [smooth / smooth_abs * 100.0], state


def _tsi_output_names(params: Dict[str, Any]) -> List[str]:
    return ["TSI_{}_{}".format(*_tsi_lengths(params))]


def _tsi_seed(series: Dict[str, Any], params: Dict[str, Any]) -> TSIState:
    return replay_seed("tsi", series, params)


STATEFUL_REGISTRY["tsi"] = StatefulIndicator(
    kind="tsi",
    inputs=("close",),
    init=_tsi_init,
    update=_tsi_update,
    output_names=_tsi_output_names,
)
SEED_REGISTRY["tsi"] = _tsi_seed
