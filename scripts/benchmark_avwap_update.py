#!/usr/bin/env python3
"""Benchmark per-bar AnchoredVWAP.update throughput.

Feeds synthetic OHLCV bars (as dicts) through the object interface and
reports elapsed time per bar for several history sizes.
"""
from __future__ import annotations

import argparse
import os
import sys
from time import perf_counter
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pandas_ta_avwap as ta

from _ohlcv import make_ohlcv


def parse_list(value: str) -> List[int]:
    return [int(v.strip()) for v in value.split(",") if v.strip()]


def time_call(fn, runs: int) -> float:
    times = []
    for _ in range(max(runs, 1)):
        start = perf_counter()
        fn()
        times.append(perf_counter() - start)
    return sum(times) / len(times)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--sizes", type=str, default="1000,10000,100000",
                    help="comma-separated row counts")
    ap.add_argument("--price", type=str, default="ohlc4")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    args = ap.parse_args()

    sizes = parse_list(args.sizes)
    print(f"[i] sizes: {sizes}")
    print(f"[i] runs: {args.runs}")

    for rows in sizes:
        df = make_ohlcv(rows, args.seed)
        bars = [
            {"end_time": ts, **row}
            for ts, row in zip(df.index, df.drop(columns="timestamp").to_dict("records"))
        ]
        indicator = ta.AnchoredVWAP(df.index[0], price=args.price)

        def run():
            indicator.reset()
            for bar in bars:
                indicator.update(bar)

        avg = time_call(run, args.runs)
        print(f"[update] rows={rows} avg_s={avg:.6f} us_per_bar={1e6 * avg / rows:.3f}")


if __name__ == "__main__":
    main()
