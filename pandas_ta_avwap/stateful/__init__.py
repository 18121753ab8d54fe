# -*- coding: utf-8 -*-
"""pandas-ta-avwap.stateful – streaming / stateful indicator package.

Indicator modules populate STATEFUL_REGISTRY and SEED_REGISTRY at import
time.  This package re-exports them plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    IndicatorStatus,
    IndicatorResult,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    SEED_REGISTRY,
    PRICE_SELECTORS,
    ohlc4,
    hlc3,
    hl2,
    close_price,
    resolve_price,
    replay_seed,
    stateful_supported_kinds,
)

# ---------------------------------------------------------------------------
# Indicator modules – each populates the shared registries on import
# ---------------------------------------------------------------------------
from ._volume import AVWAPState, AnchoredVWAP   # avwap

__all__ = [
    # base
    "IndicatorStatus",
    "IndicatorResult",
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "SEED_REGISTRY",
    "PRICE_SELECTORS",
    "ohlc4",
    "hlc3",
    "hl2",
    "close_price",
    "resolve_price",
    "replay_seed",
    "stateful_supported_kinds",
    # volume
    "AVWAPState",
    "AnchoredVWAP",
]
