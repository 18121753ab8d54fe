# -*- coding: utf-8 -*-
"""pandas-ta-avwap stateful – shared base: result types, bar access, registries.

The indicator modules import from here and populate the registries at
load time.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

ZERO = Decimal(0)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing → default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_decimal(value: Any) -> Decimal:
    """Exact decimal from int / float / str / Decimal.

    Floats go through ``str`` so ``10.1`` becomes ``Decimal("10.1")``
    rather than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

class IndicatorStatus(str, Enum):
    """Outcome of a single indicator update."""
    SUCCESS       = "success"
    INVALID_INPUT = "invalid_input"
    MATH_ERROR    = "math_error"


@dataclass(frozen=True)
class IndicatorResult:
    value:  Decimal
    status: IndicatorStatus = IndicatorStatus.SUCCESS
    time:   Any = None

    @property
    def ok(self) -> bool:
        return self.status is IndicatorStatus.SUCCESS


# ---------------------------------------------------------------------------
# Bar access
# ---------------------------------------------------------------------------
# Bars are owned by the caller.  Mappings (``bar["close"]``) follow the
# registry convention; anything else is read by attribute (``bar.close``).
# ---------------------------------------------------------------------------

TIME_FIELDS = ("end_time", "timestamp", "time")


def bar_field(bar: Any, key: str) -> Any:
    if isinstance(bar, Mapping):
        return bar[key]
    try:
        return getattr(bar, key)
    except AttributeError:
        raise KeyError(key) from None


def bar_time(bar: Any) -> Any:
    """End time of *bar*: first of ``end_time``, ``timestamp``, ``time``."""
    for key in TIME_FIELDS:
        try:
            return bar_field(bar, key)
        except KeyError:
            continue
    raise KeyError(f"bar has no time field (tried {', '.join(TIME_FIELDS)})")


# ---------------------------------------------------------------------------
# Representative price selectors
# ---------------------------------------------------------------------------

PriceSelector = Callable[[Any], Decimal]


def ohlc4(bar: Any) -> Decimal:
    """(open + high + low + close) / 4"""
    return (
        _as_decimal(bar_field(bar, "open"))
        + _as_decimal(bar_field(bar, "high"))
        + _as_decimal(bar_field(bar, "low"))
        + _as_decimal(bar_field(bar, "close"))
    ) / 4


def hlc3(bar: Any) -> Decimal:
    """(high + low + close) / 3"""
    return (
        _as_decimal(bar_field(bar, "high"))
        + _as_decimal(bar_field(bar, "low"))
        + _as_decimal(bar_field(bar, "close"))
    ) / 3


def hl2(bar: Any) -> Decimal:
    return (_as_decimal(bar_field(bar, "high")) + _as_decimal(bar_field(bar, "low"))) / 2


def close_price(bar: Any) -> Decimal:
    return _as_decimal(bar_field(bar, "close"))


PRICE_SELECTORS: Dict[str, PriceSelector] = {
    "ohlc4": ohlc4,
    "hlc3":  hlc3,
    "hl2":   hl2,
    "close": close_price,
}


def resolve_price(price: Any) -> PriceSelector:
    """Map *price* (None, a selector name, or a callable) to a selector."""
    if price is None:
        return ohlc4
    if callable(price):
        return price
    selector = PRICE_SELECTORS.get(str(price).lower())
    if selector is None:
        raise ValueError(
            f"Unknown price selector '{price}'; expected one of "
            f"{sorted(PRICE_SELECTORS)} or a callable"
        )
    return selector


# ---------------------------------------------------------------------------
# Indicator descriptor & registries  (populated by indicator modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator."""
    kind:         str
    inputs:       Tuple[str, ...]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[float]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]


# Populated by indicator modules at import time.
STATEFUL_REGISTRY: Dict[str, StatefulIndicator] = {}
SEED_REGISTRY:     Dict[str, Callable] = {}     # kind -> seed_fn(inputs, params) -> State


# ---------------------------------------------------------------------------
# Generic seed helper
# ---------------------------------------------------------------------------

def replay_seed(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Generic seed: replay the stateful update over historical Series.

    *inputs* values must be ``pd.Series`` (or any indexable with ``.iloc``).
    Returns the final *State* after processing all rows.  Rows holding a
    NaN in any input are skipped.  Timestamps are passed through as is;
    every other value becomes a float.
    """
    import pandas as pd          # lazy – pandas not required at module load
    indicator = STATEFUL_REGISTRY.get(kind)
    if indicator is None:
        raise ValueError(f"Indicator '{kind}' not found in STATEFUL_REGISTRY")
    state = indicator.init(params)
    keys = list(inputs.keys())
    if not keys:
        return state
    n = len(inputs[keys[0]])
    for i in range(n):
        bar: Dict[str, Any] = {}
        valid = True
        for k in keys:
            v = inputs[k].iloc[i]
            if pd.isna(v):
                valid = False
                break
            bar[k] = v if isinstance(v, pd.Timestamp) else float(v)
        if not valid:
            continue
        _, state = indicator.update(state, bar, params)
    return state


# ---------------------------------------------------------------------------
# Registry queries
# ---------------------------------------------------------------------------

def stateful_supported_kinds() -> List[str]:
    """Return sorted list of supported indicator kinds."""
    return sorted(STATEFUL_REGISTRY.keys())
