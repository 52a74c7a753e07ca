# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- overlap indicators.

Each section follows the pattern:
  1. State dataclass  (if beyond what _base already provides)
  2. init / update / output_names helpers
  3. STATEFUL_REGISTRY["<kind>"] = StatefulIndicator(...)
  4. SEED_REGISTRY["<kind>"]     = seed_fn

Seed-method legend used throughout:
  output_only -- seed_fn takes the last vectorized output value and
                 rebuilds the minimal state needed to keep updating.
  replay      -- seed_fn replays every historical bar through update().
"""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pandas_ta_pine.utils import v_length, v_series

from ._base import (
    EMAState,
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    StatefulIndicator,
    ema_make,
    ema_update_raw,
    replay_seed,
    rma_make,
)


def _output_only_seed(
    kind: str, state: EMAState, series: Dict[str, Any],
    col: str, params: Dict[str, Any]
) -> EMAState:
    """Mark *state* as seeded with the last valid value of ``series[col]``.

    Without a valid output (column absent, or history still in warm-up)
    the inputs are replayed so partial warm-up sums carry over.
    """
    s = series.get(col)
    last_valid = v_series(s, col).dropna() if s is not None else ()
    if len(last_valid) == 0:
        return replay_seed(kind, series, params)

    state.last = float(last_valid.iloc[-1])
    # warmup already done -- mark as seeded
    state._warmup_count = state.length
    state._warmup_sum = 0.0
    return state


# ===========================================================================
# EMA  (output_only)
# ===========================================================================
# alpha = 2/(length+1), seeded on the first valid close.  Default length = 10.

def _ema_init(params: Dict[str, Any]) -> EMAState:
    return ema_make(v_length(params.get("length"), 10))


def _ema_update(
    state: EMAState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], EMAState]:
    val, state = ema_update_raw(state, bar["close"])
    return [val], state


def _ema_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"EMA_{v_length(params.get('length'), 10)}"]


def _ema_seed(series: Dict[str, Any], params: Dict[str, Any]) -> EMAState:
    """Reconstruct EMAState from the last valid output value."""
    return _output_only_seed(
        "ema", _ema_init(params), series, _ema_output_names(params)[0], params
    )


STATEFUL_REGISTRY["ema"] = StatefulIndicator(
    kind="ema",
    inputs=("close",),
    init=_ema_init,
    update=_ema_update,
    output_names=_ema_output_names,
)
SEED_REGISTRY["ema"] = _ema_seed


# ===========================================================================
# RMA  (output_only)  -- Wilder's MA, alpha = 1/length, SMA seed
# ===========================================================================
# Default length = 10.

def _rma_init(params: Dict[str, Any]) -> EMAState:
    return rma_make(v_length(params.get("length"), 10))


def _rma_update(
    state: EMAState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], EMAState]:
    val, state = ema_update_raw(state, bar["close"])
    return [val], state


def _rma_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"RMA_{v_length(params.get('length'), 10)}"]


def _rma_seed(series: Dict[str, Any], params: Dict[str, Any]) -> EMAState:
    return _output_only_seed(
        "rma", _rma_init(params), series, _rma_output_names(params)[0], params
    )


STATEFUL_REGISTRY["rma"] = StatefulIndicator(
    kind="rma",
    inputs=("close",),
    init=_rma_init,
    update=_rma_update,
    output_names=_rma_output_names,
)
SEED_REGISTRY["rma"] = _rma_seed


# ===========================================================================
# SMA  (replay)
# ===========================================================================
# Rolling window of the last *length* closes; a NaN inside it gives NaN.

@dataclass
class SMAState:
    length: int
    window: deque = field(default_factory=deque)


def _sma_init(params: Dict[str, Any]) -> SMAState:
    length = v_length(params.get("length"), 10)
    return SMAState(length=length, window=deque(maxlen=length))


def _sma_update(
    state: SMAState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], SMAState]:
    state.window.append(bar["close"])
    if len(state.window) < state.length:
        return [None], state
    return [math.fsum(state.window) / state.length], state


def _sma_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"SMA_{v_length(params.get('length'), 10)}"]


def _sma_seed(series: Dict[str, Any], params: Dict[str, Any]) -> SMAState:
    return replay_seed("sma", series, params)


STATEFUL_REGISTRY["sma"] = StatefulIndicator(
    kind="sma",
    inputs=("close",),
    init=_sma_init,
    update=_sma_update,
    output_names=_sma_output_names,
)
SEED_REGISTRY["sma"] = _sma_seed
