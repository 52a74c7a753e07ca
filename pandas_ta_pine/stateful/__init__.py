# -*- coding: utf-8 -*-
"""pandas-ta-pine.stateful -- streaming / stateful indicator package.

Category modules populate STATEFUL_REGISTRY, SEED_REGISTRY, and
LOOKAHEAD_REGISTRY at import time.  This package re-exports them
plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    NAN,
    EMAState,
    ATRState,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    SEED_REGISTRY,
    LOOKAHEAD_REGISTRY,
    ema_update_raw,
    ema_make,
    rma_make,
    atr_make,
    atr_update_raw,
    get_indicator,
    replay,
    replay_seed,
    stateful_supported_kinds,
)

# ---------------------------------------------------------------------------
# Category modules -- each populates the shared registries on import
# ---------------------------------------------------------------------------
from . import _overlap      # noqa: F401  ema, rma, sma
from . import _momentum     # noqa: F401  rsi, macd, tsi
from . import _volatility   # noqa: F401  atr
from . import _trend        # noqa: F401  supertrend, sar, dmi
from . import _volume       # noqa: F401  vwap
from . import _lookahead    # noqa: F401  ichimoku

__all__ = [
    # base
    "NAN",
    "EMAState",
    "ATRState",
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "SEED_REGISTRY",
    "LOOKAHEAD_REGISTRY",
    "ema_update_raw",
    "ema_make",
    "rma_make",
    "atr_make",
    "atr_update_raw",
    "get_indicator",
    "replay",
    "replay_seed",
    "stateful_supported_kinds",
]
