# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- trend state machines (supertrend, sar, dmi)."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from pandas_ta_pine.utils import v_length, v_scalar

from ._base import (
    NAN,
    ATRState,
    EMAState,
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    StatefulIndicator,
    atr_make,
    atr_update_raw,
    ema_update_raw,
    nan_max,
    nan_min,
    replay_seed,
    rma_make,
    true_range_raw,
)


# ===========================================================================
# SUPERTREND  (replay)
# ===========================================================================
# hl2 +/- factor * ATR with band hysteresis.  Bars without an ATR report
# direction 1 and leave the band state untouched; prev_close always
# advances.  Defaults: factor=3, atr_length=10

@dataclass
class SupertrendState:
    atr: ATRState
    factor: float
    prev_lower: float = NAN
    prev_upper: float = NAN
    prev_trend: float = NAN
    prev_close: float = NAN


def _supertrend_params(params: Dict[str, Any]) -> Tuple[float, int]:
    factor = v_scalar(params.get("factor"), 3.0, name="factor")
    atr_length = v_length(params.get("atr_length"), 10, name="atr_length")
    return factor, atr_length


def _supertrend_init(params: Dict[str, Any]) -> SupertrendState:
    factor, atr_length = _supertrend_params(params)
    return SupertrendState(atr=atr_make(atr_length), factor=factor)


def _supertrend_update(
    state: SupertrendState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], SupertrendState]:
    high, low, close = bar["high"], bar["low"], bar["close"]
    atr, state.atr = atr_update_raw(state.atr, high, low, close)
    prev_close, state.prev_close = state.prev_close, close

    if atr is None:
        return [None, 1.0], state

    hl2 = (high + low) / 2.0
    upper = hl2 + state.factor * atr
    lower = hl2 - state.factor * atr

    if not math.isnan(state.prev_lower) and not math.isnan(state.prev_upper):
        if not (lower > state.prev_lower or prev_close < state.prev_lower):
            lower = state.prev_lower
        if not (upper < state.prev_upper or prev_close > state.prev_upper):
            upper = state.prev_upper

    if math.isnan(state.prev_trend):
        direction = 1.0
    elif state.prev_trend == state.prev_upper:
        direction = -1.0 if close > upper else 1.0
    else:
        direction = 1.0 if close < lower else -1.0

    trend = lower if direction == -1.0 else upper
    state.prev_lower, state.prev_upper, state.prev_trend = lower, upper, trend
    return [trend, direction], state


def _supertrend_output_names(params: Dict[str, Any]) -> List[str]:
    factor, atr_length = _supertrend_params(params)
    p = f"_{atr_length}_{factor}"
    return [f"SUPERT{p}", f"SUPERTd{p}"]


def _supertrend_seed(series: Dict[str, Any], params: Dict[str, Any]) -> SupertrendState:
    return replay_seed("supertrend", series, params)


STATEFUL_REGISTRY["supertrend"] = StatefulIndicator(
    kind="supertrend",
    inputs=("high", "low", "close"),
    init=_supertrend_init,
    update=_supertrend_update,
    output_names=_supertrend_output_names,
)
SEED_REGISTRY["supertrend"] = _supertrend_seed


# ===========================================================================
# SAR  (replay)
# ===========================================================================
# Starts long with sar = ep = low[0].  Each bar: sar += af * (ep - sar),
# clamp to the prior one or two bars, then test for a reversal.
# Defaults: start=0.02, increment=0.02, maximum=0.2

@dataclass
class SarState:
    start: float
    increment: float
    maximum: float
    af: float
    sar: Optional[float] = None
    ep: float = NAN
    is_long: bool = True
    prev_high: float = NAN
    prev_low: float = NAN
    prev_high2: Optional[float] = None
    prev_low2: Optional[float] = None


def _sar_params(params: Dict[str, Any]) -> Tuple[float, float, float]:
    start = v_scalar(params.get("start"), 0.02, name="start")
    increment = v_scalar(params.get("increment"), 0.02, name="increment")
    maximum = v_scalar(params.get("maximum"), 0.2, name="maximum")
    return start, increment, maximum


def _sar_init(params: Dict[str, Any]) -> SarState:
    start, increment, maximum = _sar_params(params)
    return SarState(start=start, increment=increment, maximum=maximum, af=start)


def _sar_update(
    state: SarState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], SarState]:
    high, low = bar["high"], bar["low"]

    if state.sar is None:
        state.sar = state.ep = low
        state.prev_high, state.prev_low = high, low
        return [state.sar], state

    sar = state.sar + state.af * (state.ep - state.sar)
    # two bars back, or the previous bar on the second bar
    high2 = state.prev_high if state.prev_high2 is None else state.prev_high2
    low2 = state.prev_low if state.prev_low2 is None else state.prev_low2

    if state.is_long:
        sar = nan_min(sar, state.prev_low, low2)
        if low < sar:
            state.is_long = False
            sar, state.ep, state.af = state.ep, low, state.start
        elif high > state.ep:
            state.ep = high
            state.af = min(state.af + state.increment, state.maximum)
    else:
        sar = nan_max(sar, state.prev_high, high2)
        if high > sar:
            state.is_long = True
            sar, state.ep, state.af = state.ep, high, state.start
        elif low < state.ep:
            state.ep = low
            state.af = min(state.af + state.increment, state.maximum)

    state.sar = sar
    state.prev_high2, state.prev_low2 = state.prev_high, state.prev_low
    state.prev_high, state.prev_low = high, low
    return [sar], state


def _sar_output_names(params: Dict[str, Any]) -> List[str]:
    return ["SAR_{}_{}_{}".format(*_sar_params(params))]


def _sar_seed(series: Dict[str, Any], params: Dict[str, Any]) -> SarState:
    return replay_seed("sar", series, params)


STATEFUL_REGISTRY["sar"] = StatefulIndicator(
    kind="sar",
    inputs=("high", "low"),
    init=_sar_init,
    update=_sar_update,
    output_names=_sar_output_names,
)
SEED_REGISTRY["sar"] = _sar_seed


# ===========================================================================
# DMI  (replay)
# ===========================================================================
# +DM / -DM from the up and down moves, TR and both DMs smoothed by RMA,
# DI = 100 * DM / TR (0 when TR is 0), ADX = RMA(DX).  Default length = 14

@dataclass
class DMIState:
    tr: EMAState
    plus_dm: EMAState
    minus_dm: EMAState
    adx: EMAState
    prev_high: Optional[float] = None
    prev_low: Optional[float] = None
    prev_close: Optional[float] = None


def _dmi_init(params: Dict[str, Any]) -> DMIState:
    length = v_length(params.get("length"), 14)
    return DMIState(
        tr=rma_make(length),
        plus_dm=rma_make(length),
        minus_dm=rma_make(length),
        adx=rma_make(length),
    )


def _dmi_update(
    state: DMIState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], DMIState]:
    high, low, close = bar["high"], bar["low"], bar["close"]

    plus_dm = minus_dm = 0.0
    if state.prev_high is not None:
        up, down = high - state.prev_high, state.prev_low - low
        plus_dm = up if up > down and up > 0 else 0.0
        minus_dm = down if down > up and down > 0 else 0.0
    tr = true_range_raw(high, low, state.prev_close)
    state.prev_high, state.prev_low, state.prev_close = high, low, close

    s_tr, state.tr = ema_update_raw(state.tr, tr)
    s_plus, state.plus_dm = ema_update_raw(state.plus_dm, plus_dm)
    s_minus, state.minus_dm = ema_update_raw(state.minus_dm, minus_dm)
    if s_tr is None or s_plus is None or s_minus is None:
        return [None, None, None], state

    plus_di = 0.0 if s_tr == 0.0 else s_plus / s_tr * 100.0
    minus_di = 0.0 if s_tr == 0.0 else s_minus / s_tr * 100.0
    di_sum = plus_di + minus_di
    dx = 0.0 if di_sum == 0.0 else abs(plus_di - minus_di) / di_sum * 100.0
    adx, state.adx = ema_update_raw(state.adx, dx)

    return [plus_di, minus_di, adx], state


def _dmi_output_names(params: Dict[str, Any]) -> List[str]:
    length = v_length(params.get("length"), 14)
    return [f"DMP_{length}", f"DMN_{length}", f"ADX_{length}"]


def _dmi_seed(series: Dict[str, Any], params: Dict[str, Any]) -> DMIState:
    return replay_seed("dmi", series, params)


STATEFUL_REGISTRY["dmi"] = StatefulIndicator(
    kind="dmi",
    inputs=("high", "low", "close"),
    init=_dmi_init,
    update=_dmi_update,
    output_names=_dmi_output_names,
)
SEED_REGISTRY["dmi"] = _dmi_seed
