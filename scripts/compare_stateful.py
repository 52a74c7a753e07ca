#!/usr/bin/env python3
"""Compare vectorized outputs vs stateful incremental outputs.

For every stateful kind, the head of a synthetic OHLCV frame seeds the
state and the remaining bars are fed one at a time through ``update``.
The streamed values are compared against the vectorized indicator over
the full frame.
"""
from __future__ import annotations

import argparse
import os
import sys
import warnings
from typing import Any, Dict, List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_pine as ta


DEFAULT_PARAMS: Dict[str, Dict[str, Any]] = {
    "ema": {"length": 10},
    "rma": {"length": 10},
    "sma": {"length": 20},
    "rsi": {"length": 14},
    "macd": {"fast": 12, "slow": 26, "signal": 9},
    "tsi": {"short": 13, "long": 25},
    "atr": {"length": 14},
    "supertrend": {"factor": 3, "atr_length": 10},
    "sar": {"start": 0.02, "increment": 0.02, "maximum": 0.2},
    "dmi": {"length": 14},
    "vwap": {},
    "ichimoku": {"conversion": 9, "base": 26, "lagging": 52},
}


def make_ohlcv(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    return pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )


def parse_exclude(value: str | None) -> List[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def stream(kind: str, df: pd.DataFrame, split: int, params: Dict[str, Any]) -> pd.DataFrame:
    """Seed on ``df[:split]``, then update bar by bar over the rest."""
    indicator = ta.get_indicator(kind)
    # seeds read either the raw inputs or the vectorized outputs
    head = {k: df[k].iloc[:split] for k in indicator.inputs}
    seeded = df.iloc[:split].pine(kind, **params)
    seeded = seeded.to_frame() if isinstance(seeded, pd.Series) else seeded
    head.update({c: seeded[c] for c in seeded.columns})
    state = ta.SEED_REGISTRY[kind](head, params)

    rows = []
    for bar in df[list(indicator.inputs)].iloc[split:].itertuples(index=False):
        values, state = indicator.update(state, dict(zip(indicator.inputs, map(float, bar))), params)
        rows.append([np.nan if v is None else v for v in values])

    return pd.DataFrame(rows, columns=indicator.output_names(params), index=df.index[split:])


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2000)
    ap.add_argument("--split", type=int, default=1500, help="bars used to seed")
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--exclude", type=str, default="", help="comma-separated kinds to exclude")
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    if not 0 < args.split < args.rows:
        raise SystemExit("--split must be in (0, --rows)")

    df = make_ohlcv(args.rows, args.seed)
    exclude = parse_exclude(args.exclude)
    kinds = [k for k in ta.stateful_supported_kinds() if k not in exclude]

    summaries = []
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        for kind in kinds:
            params = DEFAULT_PARAMS.get(kind, {})
            test = stream(kind, df, args.split, params)
            ref = df.pine(kind, **params)
            ref = ref.to_frame() if isinstance(ref, pd.Series) else ref
            ref = ref.loc[test.index, list(test.columns)]
            summaries.append(compare_frames(ref, test, args.eps))

    summary = pd.concat(summaries)

    print("[i] rows:", args.rows)
    print("[i] split index:", args.split)
    print("[i] kinds:", len(kinds))
    print("\nBy max_abs:")
    print(summary.sort_values("max_abs", ascending=False))


if __name__ == "__main__":
    main()
