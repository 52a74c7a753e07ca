# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- volatility indicators (atr)."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pandas_ta_pine.utils import v_length

from ._base import (
    ATRState,
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    StatefulIndicator,
    atr_make,
    atr_update_raw,
    replay_seed,
)


# ===========================================================================
# ATR  (replay)
# ===========================================================================
# Wilder RMA of True Range, SMA seed.  Default length = 14.

def _atr_init(params: Dict[str, Any]) -> ATRState:
    return atr_make(v_length(params.get("length"), 14))


def _atr_update(
    state: ATRState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], ATRState]:
    val, state = atr_update_raw(state, bar["high"], bar["low"], bar["close"])
    return [val], state


def _atr_output_names(params: Dict[str, Any]) -> List[str]:
    return [f"ATRr_{v_length(params.get('length'), 14)}"]


def _atr_seed(series: Dict[str, Any], params: Dict[str, Any]) -> ATRState:
    return replay_seed("atr", series, params)


STATEFUL_REGISTRY["atr"] = StatefulIndicator(
    kind="atr",
    inputs=("high", "low", "close"),
    init=_atr_init,
    update=_atr_update,
    output_names=_atr_output_names,
)
SEED_REGISTRY["atr"] = _atr_seed
