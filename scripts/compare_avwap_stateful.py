#!/usr/bin/env python3
"""Vectorized avwap vs seed + incremental stateful comparison.

1) seed the registry state on t=0..split with ``SEED_REGISTRY["avwap"]``
2) update bar by bar on t=split+1..end with ``STATEFUL_REGISTRY["avwap"]``
3) compare against vectorized ``avwap()`` over the full frame
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_avwap as ta

from _ohlcv import make_ohlcv


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=1011)
    ap.add_argument("--split", type=int, default=1005, help="seed end index")
    ap.add_argument("--anchor", type=int, default=250, help="anchor row index")
    ap.add_argument("--price", type=str, default="ohlc4")
    ap.add_argument("--zero-every", type=int, default=0, help="zero the volume every N rows")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    if args.split >= args.rows:
        raise SystemExit("--split must be < --rows")
    if not 0 <= args.anchor < args.rows:
        raise SystemExit("--anchor must be a row index")

    df = make_ohlcv(args.rows, args.seed, args.zero_every)
    anchor = df.index[args.anchor]
    params = {"anchor": anchor, "price": args.price}
    indicator = ta.STATEFUL_REGISTRY["avwap"]
    name = indicator.output_names(params)[0]

    # Vectorized reference
    ref = ta.avwap(df["open"], df["high"], df["low"], df["close"], df["volume"],
                   anchor=anchor, price=args.price)

    # Stateful seed (t=0..split)
    seed_inputs = {k: df[k].iloc[: args.split + 1] for k in indicator.inputs}
    state = ta.SEED_REGISTRY["avwap"](seed_inputs, params)

    # Incremental update (t=split+1..end)
    inc = []
    for row in df.iloc[args.split + 1:].itertuples():
        bar = {k: float(getattr(row, k)) for k in indicator.inputs}
        out, state = indicator.update(state, bar, params)
        inc.append(np.nan if out[0] is None else out[0])
    test = pd.Series(inc, index=df.index[args.split + 1:], name=name)

    diff = (test - ref.loc[test.index]).abs()
    rel = diff / (ref.loc[test.index].abs() + args.eps)

    print("[i] rows:", args.rows)
    print("[i] split index:", args.split)
    print("[i] anchor:", anchor)
    print("[i] samples:", state.samples)
    print("[i] column:", name)
    print(f"[i] nan ref/test: {ref.loc[test.index].isna().sum()}/{test.isna().sum()}")
    print(f"[i] max_abs: {diff.max():.3e}  mean_rel: {rel.mean():.3e}")
    print("\nLast rows:")
    print(pd.DataFrame({"vectorized": ref.loc[test.index], "stateful": test}).tail())


if __name__ == "__main__":
    main()
