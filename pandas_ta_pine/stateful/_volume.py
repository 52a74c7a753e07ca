# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- volume indicators (vwap)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ._base import (
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    StatefulIndicator,
    replay_seed,
)


# ===========================================================================
# VWAP  (replay)
# ===========================================================================
# Running sum(tp * volume) / sum(volume) from the first bar, no anchor.
# None while the cumulative volume is 0.

@dataclass
class VWAPState:
    cum_pv: float = 0.0
    cum_vol: float = 0.0


def _vwap_init(params: Dict[str, Any]) -> VWAPState:
    return VWAPState()


def _vwap_update(
    state: VWAPState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], VWAPState]:
    tp = (bar["high"] + bar["low"] + bar["close"]) / 3.0
    state.cum_pv += tp * bar["volume"]
    state.cum_vol += bar["volume"]
    if state.cum_vol == 0.0:
        return [None], state
    return [state.cum_pv / state.cum_vol], state


def _vwap_output_names(params: Dict[str, Any]) -> List[str]:
    return ["VWAP"]


def _vwap_seed(series: Dict[str, Any], params: Dict[str, Any]) -> VWAPState:
    return replay_seed("vwap", series, params)


STATEFUL_REGISTRY["vwap"] = StatefulIndicator(
    kind="vwap",
    inputs=("high", "low", "close", "volume"),
    init=_vwap_init,
    update=_vwap_update,
    output_names=_vwap_output_names,
)
SEED_REGISTRY["vwap"] = _vwap_seed
