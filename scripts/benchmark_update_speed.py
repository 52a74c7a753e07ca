#!/usr/bin/env python3
"""Benchmark per-bar stateful updates against vectorized recomputation.

For each stateful kind, times feeding ``--tail`` new bars through
``update`` and compares it with recomputing the vectorized indicator over
the whole frame once per new bar.
"""
from __future__ import annotations

import argparse
import os
import sys
import warnings
from time import perf_counter
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_pine as ta

from compare_stateful import DEFAULT_PARAMS, make_ohlcv, parse_exclude


def time_stateful(kind: str, df: pd.DataFrame, split: int) -> float:
    params = DEFAULT_PARAMS.get(kind, {})
    indicator = ta.get_indicator(kind)
    state = ta.replay_seed(kind, {k: df[k].iloc[:split] for k in indicator.inputs}, params)
    bars = [
        dict(zip(indicator.inputs, map(float, row)))
        for row in df[list(indicator.inputs)].iloc[split:].itertuples(index=False)
    ]

    start = perf_counter()
    for bar in bars:
        _, state = indicator.update(state, bar, params)
    return perf_counter() - start


def time_vectorized(kind: str, df: pd.DataFrame, split: int) -> float:
    params = DEFAULT_PARAMS.get(kind, {})
    start = perf_counter()
    for end in range(split + 1, len(df) + 1):
        df.iloc[:end].pine(kind, **params)
    return perf_counter() - start


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=5000)
    ap.add_argument("--tail", type=int, default=100, help="new bars per kind")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--exclude", type=str, default="", help="comma-separated kinds to exclude")
    args = ap.parse_args()

    if not 0 < args.tail < args.rows:
        raise SystemExit("--tail must be in (0, --rows)")

    df = make_ohlcv(args.rows, args.seed)
    split = args.rows - args.tail
    exclude = parse_exclude(args.exclude)

    results = []
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        for kind in ta.stateful_supported_kinds():
            if kind in exclude:
                continue
            # first call compiles the numba kernels
            df.iloc[:split].pine(kind, **DEFAULT_PARAMS.get(kind, {}))
            stateful = time_stateful(kind, df, split)
            vectorized = time_vectorized(kind, df, split)
            results.append({
                "kind": kind,
                "stateful_us_per_bar": stateful / args.tail * 1e6,
                "vectorized_us_per_bar": vectorized / args.tail * 1e6,
                "speedup": vectorized / stateful if stateful > 0 else np.nan,
            })

    print(f"[i] rows: {args.rows}")
    print(f"[i] tail: {args.tail}")
    print(pd.DataFrame(results).set_index("kind").sort_values("speedup"))


if __name__ == "__main__":
    main()
