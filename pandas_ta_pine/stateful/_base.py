# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- shared base: state classes, helpers, registries.

All category modules (``_overlap``, ``_momentum``, …) import from here
and populate the registries at load time.

Every ``update`` receives each bar as a dict of floats, NaN included, and
reproduces the NaN handling of the matching vectorized indicator, so a
replay over a history equals the vectorized result bar for bar.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import math

from pandas import DataFrame

from pandas_ta_pine.utils import InvalidParameterError, v_aligned, v_series

NAN = float("nan")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def nan_max(*values: float) -> float:
    """max() that returns NaN as soon as one operand is NaN."""
    if any(math.isnan(v) for v in values):
        return NAN
    return max(values)


def nan_min(*values: float) -> float:
    if any(math.isnan(v) for v in values):
        return NAN
    return min(values)


def true_range_raw(
    high: float, low: float, prev_close: Optional[float]
) -> float:
    """True Range of one bar; ``prev_close`` is None on the first bar."""
    if prev_close is None:
        return high - low
    return nan_max(high - low, abs(high - prev_close), abs(low - prev_close))


# ---------------------------------------------------------------------------
# Shared state classes
# ---------------------------------------------------------------------------

@dataclass
class EMAState:
    """Reusable for EMA / RMA.

    EMA  -> alpha = 2 / (length + 1)   via ``ema_make``
    RMA  -> alpha = 1 / length          via ``rma_make``

    presma=True  ->  first output = mean of the first *length* valid samples
    presma=False ->  first output = first valid sample

    NaN samples never count toward the seed and, once seeded, repeat the
    last value.
    """
    length: int
    alpha: float
    last: Optional[float] = None
    presma: bool = True
    _warmup_sum: float = 0.0
    _warmup_count: int = 0


@dataclass
class ATRState:
    """ATR: True Range smoothed with an SMA-seeded Wilder RMA."""
    rma: EMAState
    prev_close: Optional[float] = None


# ---------------------------------------------------------------------------
# Low-level update helpers
# ---------------------------------------------------------------------------

def ema_make(length: int, presma: bool = False) -> EMAState:
    """EMA state -- alpha = 2 / (length + 1)."""
    return EMAState(length=length, alpha=2.0 / (length + 1.0), presma=presma)


def rma_make(length: int, presma: bool = True) -> EMAState:
    """RMA / Wilder state -- alpha = 1 / length."""
    return EMAState(length=length, alpha=1.0 / length, presma=presma)


def ema_update_raw(state: EMAState, x: float) -> Tuple[Optional[float], EMAState]:
    """Single-step EMA / RMA update.  Returns (value | None, state).

    Returns None until seeded.
    """
    if math.isnan(x):
        return state.last, state
    if state.last is None:
        if state.presma:
            state._warmup_sum += x
            state._warmup_count += 1
            if state._warmup_count < state.length:
                return None, state
            state.last = state._warmup_sum / state.length   # SMA seed
            return state.last, state
        state.last = x
        return state.last, state
    state.last = state.alpha * x + (1.0 - state.alpha) * state.last
    return state.last, state


def atr_make(length: int) -> ATRState:
    return ATRState(rma=rma_make(length, presma=True))


def atr_update_raw(
    state: ATRState, high: float, low: float, close: float
) -> Tuple[Optional[float], ATRState]:
    """Single-step ATR (Wilder).  Returns (atr | None, state)."""
    tr = true_range_raw(high, low, state.prev_close)
    state.prev_close = close
    value, state.rma = ema_update_raw(state.rma, tr)
    return value, state


# ---------------------------------------------------------------------------
# Indicator descriptor & registries  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator."""
    kind:         str
    inputs:       Tuple[str, ...]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[float]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]


# Populated by category modules at import time.
STATEFUL_REGISTRY:  Dict[str, StatefulIndicator] = {}
SEED_REGISTRY:      Dict[str, Callable] = {}            # kind -> seed_fn(inputs, params) -> State
LOOKAHEAD_REGISTRY: Dict[str, StatefulIndicator] = {}   # streaming subset of a lookahead indicator


def get_indicator(kind: str) -> StatefulIndicator:
    indicator = STATEFUL_REGISTRY.get(kind) or LOOKAHEAD_REGISTRY.get(kind)
    if indicator is None:
        raise InvalidParameterError(
            f"Indicator '{kind}' not found in STATEFUL_REGISTRY or LOOKAHEAD_REGISTRY"
        )
    return indicator


def _bars(indicator: StatefulIndicator, inputs: Dict[str, Any]):
    """Yield one ``{name: float}`` dict per row of *inputs*."""
    missing = [k for k in indicator.inputs if k not in inputs]
    if missing:
        raise InvalidParameterError(
            f"'{indicator.kind}' needs inputs {list(indicator.inputs)}, missing {missing}"
        )
    columns = [v_series(inputs[k], k) for k in indicator.inputs]
    v_aligned(*columns)
    arrays = [c.to_numpy() for c in columns]
    for row in zip(*arrays):
        yield dict(zip(indicator.inputs, map(float, row)))


# ---------------------------------------------------------------------------
# Replay helpers
# ---------------------------------------------------------------------------

def replay_seed(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Generic seed: replay the stateful update over historical series.

    *inputs* maps input names (``close``, ``high``, …) to sequences.
    Returns the final *State* after processing all rows, ready for
    further ``update`` calls on new bars.
    """
    indicator = get_indicator(kind)
    state = indicator.init(params)
    for bar in _bars(indicator, inputs):
        _, state = indicator.update(state, bar, params)
    return state


def replay(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]):
    """Run *kind* bar by bar over *inputs* and collect every output.

    Returns a DataFrame aligned with the inputs (the index of the first
    input when it is a Series); warm-up bars are NaN.
    """
    indicator = get_indicator(kind)
    state = indicator.init(params)
    rows: List[List[Optional[float]]] = []
    for bar in _bars(indicator, inputs):
        values, state = indicator.update(state, bar, params)
        rows.append([NAN if v is None else v for v in values])

    names = indicator.output_names(params)
    index = v_series(inputs[indicator.inputs[0]], indicator.inputs[0]).index
    df = DataFrame(rows, columns=names, index=index, dtype=float)
    df.name = f"{kind.upper()}_stateful"
    return df


def stateful_supported_kinds(include_lookahead: bool = True) -> List[str]:
    """Return sorted list of supported indicator kinds.

    When include_lookahead=True, include the streaming lookahead kinds.
    """
    kinds = set(STATEFUL_REGISTRY.keys())
    if include_lookahead:
        kinds.update(LOOKAHEAD_REGISTRY.keys())
    return sorted(kinds)
