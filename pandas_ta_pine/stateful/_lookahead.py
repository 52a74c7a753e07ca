# -*- coding: utf-8 -*-
"""pandas-ta-pine stateful -- lookahead indicators.

Only the part of a lookahead indicator that needs no future bars can be
streamed; those kinds live in LOOKAHEAD_REGISTRY.

  1. ichimoku -- CONDITIONAL: chikou span excluded
"""
from __future__ import annotations

import math
import warnings
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pandas_ta_pine.utils import v_length

from ._base import (
    LOOKAHEAD_REGISTRY,
    SEED_REGISTRY,
    StatefulIndicator,
    replay_seed,
)


def _donchian_mid(highs: deque, lows: deque) -> Optional[float]:
    """Midpoint of the window, NaN values ignored; None until full."""
    if len(highs) < highs.maxlen:
        return None
    valid_h = [h for h in highs if not math.isnan(h)]
    valid_l = [v for v in lows if not math.isnan(v)]
    if not valid_h or not valid_l:
        return None
    return 0.5 * (max(valid_h) + min(valid_l))


# ===========================================================================
# ICHIMOKU  (CONDITIONAL: no chikou)
# ===========================================================================
# Outputs: tenkan, kijun, senkou_a, senkou_b (unshifted, like the
# vectorized version).  The chikou span is close pulled back by
# *displacement* bars and cannot be produced bar by bar.

@dataclass
class IchimokuState:
    """Ichimoku state without the chikou span.

    The chikou span reads ``displacement`` bars into the future; only the
    four other components are streaming-compatible.
    """
    conversion: int
    base: int
    lagging: int
    high_conversion: deque = field(default_factory=deque)
    low_conversion: deque = field(default_factory=deque)
    high_base: deque = field(default_factory=deque)
    low_base: deque = field(default_factory=deque)
    high_lagging: deque = field(default_factory=deque)
    low_lagging: deque = field(default_factory=deque)


def _ichimoku_lengths(params: Dict[str, Any]) -> Tuple[int, int, int]:
    conversion = v_length(params.get("conversion"), 9, name="conversion")
    base = v_length(params.get("base"), 26, name="base")
    lagging = v_length(params.get("lagging"), 52, name="lagging")
    return conversion, base, lagging


def _ichimoku_init(params: Dict[str, Any]) -> IchimokuState:
    """Initialize Ichimoku state. Warns that chikou is not streamed."""
    conversion, base, lagging = _ichimoku_lengths(params)
    warnings.warn(
        "[!] stateful ichimoku excludes the chikou span (needs future bars)",
        UserWarning,
        stacklevel=2,
    )
    return IchimokuState(
        conversion=conversion,
        base=base,
        lagging=lagging,
        high_conversion=deque(maxlen=conversion),
        low_conversion=deque(maxlen=conversion),
        high_base=deque(maxlen=base),
        low_base=deque(maxlen=base),
        high_lagging=deque(maxlen=lagging),
        low_lagging=deque(maxlen=lagging),
    )


def _ichimoku_update(
    state: IchimokuState, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], IchimokuState]:
    """Returns: [tenkan, kijun, senkou_a, senkou_b]"""
    high, low = bar["high"], bar["low"]

    for highs, lows in (
        (state.high_conversion, state.low_conversion),
        (state.high_base, state.low_base),
        (state.high_lagging, state.low_lagging),
    ):
        highs.append(high)
        lows.append(low)

    tenkan = _donchian_mid(state.high_conversion, state.low_conversion)
    kijun = _donchian_mid(state.high_base, state.low_base)
    senkou_b = _donchian_mid(state.high_lagging, state.low_lagging)

    senkou_a: Optional[float] = None
    if tenkan is not None and kijun is not None:
        senkou_a = 0.5 * (tenkan + kijun)

    return [tenkan, kijun, senkou_a, senkou_b], state


def _ichimoku_output_names(params: Dict[str, Any]) -> List[str]:
    conversion, base, lagging = _ichimoku_lengths(params)
    return [
        f"ITS_{conversion}",  # Tenkan Sen
        f"IKS_{base}",        # Kijun Sen
        f"ISA_{conversion}",  # Senkou Span A
        f"ISB_{lagging}",     # Senkou Span B
    ]


def _ichimoku_seed(series: Dict[str, Any], params: Dict[str, Any]) -> IchimokuState:
    """Requires replay to fill all rolling windows."""
    return replay_seed("ichimoku", series, params)


LOOKAHEAD_REGISTRY["ichimoku"] = StatefulIndicator(
    kind="ichimoku",
    inputs=("high", "low"),
    init=_ichimoku_init,
    update=_ichimoku_update,
    output_names=_ichimoku_output_names,
)
SEED_REGISTRY["ichimoku"] = _ichimoku_seed
