# -*- coding: utf-8 -*-
"""Synthetic OHLCV frames shared by the scripts."""
from __future__ import annotations

import numpy as np
import pandas as pd


def make_ohlcv(rows: int, seed: int, zero_volume_every: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    volume = rng.integers(100, 1000, rows)
    if zero_volume_every > 0:
        volume[::zero_volume_every] = 0
    df = pd.DataFrame(
        {
            "open": open_,
            "high": high,
            "low": low,
            "close": close,
            "volume": volume,
        },
        index=idx,
    )
    # Registry inputs expect a numeric 'timestamp' column. Provide seconds.
    df["timestamp"] = (df.index - pd.Timestamp("1970-01-01")) // pd.Timedelta("1s")
    return df
