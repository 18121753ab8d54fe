# -*- coding: utf-8 -*-
"""pandas-ta-avwap stateful – anchored volume indicators.

Registered kinds
----------------
output_only : avwap
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from ._base import (
    ZERO, _param, _as_decimal,
    IndicatorResult, IndicatorStatus,
    PriceSelector, bar_field, bar_time, resolve_price,
    StatefulIndicator,
    STATEFUL_REGISTRY, SEED_REGISTRY,
    replay_seed,
)

logger = logging.getLogger(__name__)


# ===========================================================================
# AVWAP – Anchored Volume Weighted Average Price
# ===========================================================================
# price = OHLC4 by default (any selector may be injected)
# Bars with end_time >= anchor:
#   sum_pv += price * volume
#   sum_v  += volume
#   AVWAP   = sum_pv / sum_v
# Bars before the anchor (or a missing bar) are rejected with INVALID_INPUT
# and leave the sums alone.  While sum_v == 0 the bar's close is
# returned with MATH_ERROR.
#
# Sums are Decimal so long runs do not drift.
# ===========================================================================

@dataclass
class AVWAPState:
    anchor:           Any
    sum_volume:       Decimal = ZERO
    sum_price_volume: Decimal = ZERO
    samples:          int     = 0
    anchored:         bool    = False   # an at/after-anchor bar has been seen


def _avwap_accumulate(
    state: AVWAPState, bar: Any, time: Any, price: PriceSelector
) -> IndicatorResult:
    """Single-step accumulation shared by the class and registry paths.

    *time* is the bar's end time already in the same units as
    ``state.anchor``; it is ignored when *bar* is None.
    """
    state.samples += 1
    if bar is None:
        return IndicatorResult(ZERO, IndicatorStatus.INVALID_INPUT, None)
    if time < state.anchor:
        return IndicatorResult(ZERO, IndicatorStatus.INVALID_INPUT, time)

    if not state.anchored:
        logger.debug("anchor %s reached at %s", state.anchor, time)
        state.anchored = True

    volume = _as_decimal(bar_field(bar, "volume"))
    tp = price(bar)
    state.sum_price_volume += tp * volume
    state.sum_volume += volume

    if state.sum_volume == ZERO:
        close = _as_decimal(bar_field(bar, "close"))
        return IndicatorResult(close, IndicatorStatus.MATH_ERROR, time)
    return IndicatorResult(
        state.sum_price_volume / state.sum_volume, IndicatorStatus.SUCCESS, time
    )


def _as_epoch(value: Any) -> float:
    """Epoch seconds from a number, datetime, Timestamp or ISO string.

    Naive datetimes are taken as UTC.
    """
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return float(value)
    import pandas as pd          # lazy – pandas not required at module load
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.timestamp()


# ---------------------------------------------------------------------------
# Registry entry points
# ---------------------------------------------------------------------------

def _avwap_init(params: Dict[str, Any]) -> AVWAPState:
    anchor = params.get("anchor")
    if anchor is None:
        raise ValueError("avwap requires an 'anchor' parameter")
    resolve_price(_param(params, "price", "ohlc4"))   # fail on a bad selector at init
    return AVWAPState(anchor=_as_epoch(anchor))


def _avwap_update(
    state: AVWAPState, bar: Dict[str, float], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], AVWAPState]:
    price = resolve_price(_param(params, "price", "ohlc4"))
    time = _as_epoch(bar_time(bar)) if bar is not None else None
    result = _avwap_accumulate(state, bar, time, price)
    return [float(result.value) if result.ok else None], state


def _avwap_output_names(params: Dict[str, Any]) -> List[str]:
    price = _param(params, "price", "ohlc4")
    label = getattr(price, "__name__", None) if callable(price) else price
    if label == "<lambda>":
        label = None
    return [f"AVWAP_{str(label or 'custom').upper()}"]


def _avwap_seed(inputs: Dict[str, Any], params: Dict[str, Any]) -> AVWAPState:
    return replay_seed("avwap", inputs, params)


STATEFUL_REGISTRY["avwap"] = StatefulIndicator(
    kind="avwap",
    inputs=("open", "high", "low", "close", "volume", "timestamp"),
    init=_avwap_init,
    update=_avwap_update,
    output_names=_avwap_output_names,
)
SEED_REGISTRY["avwap"] = _avwap_seed


# ---------------------------------------------------------------------------
# Object interface
# ---------------------------------------------------------------------------

def _default_name(anchor: Any) -> str:
    if isinstance(anchor, datetime):
        return f"AVWAP_{anchor:%Y%m%d%H%M%S}"
    return f"AVWAP_{anchor}"


class AnchoredVWAP:
    """Anchored VWAP over trade bars ending at or after ``anchor``.

    ``update`` returns an :class:`IndicatorResult` for every call:

    * ``INVALID_INPUT`` (value 0) for a missing bar or one ending before
      the anchor.  Nothing is accumulated.
    * ``MATH_ERROR`` while every anchored bar so far had zero volume.  The
      value is that bar's close and must not be read as a VWAP.
    * ``SUCCESS`` with ``sum(price * volume) / sum(volume)`` otherwise.

    ``price`` picks the per-bar representative price: a callable taking
    the bar, or one of ``"ohlc4"`` (default), ``"hlc3"``, ``"hl2"``,
    ``"close"``.

    The indicator is ready once anchored volume is positive.  Rejected
    updates still count toward ``samples``.
    """

    warm_up_period = 1

    def __init__(self, anchor: Any, name: Optional[str] = None, price: Any = None):
        self._anchor = anchor
        self._price = resolve_price(price)
        self.name = name or _default_name(anchor)
        self._state = AVWAPState(anchor=anchor)
        self.current = IndicatorResult(ZERO)

    @property
    def anchor(self) -> Any:
        return self._anchor

    @property
    def samples(self) -> int:
        return self._state.samples

    @property
    def sum_volume(self) -> Decimal:
        return self._state.sum_volume

    @property
    def sum_price_volume(self) -> Decimal:
        return self._state.sum_price_volume

    @property
    def is_ready(self) -> bool:
        return self._state.sum_volume > ZERO

    def update(self, bar: Any) -> IndicatorResult:
        time = bar_time(bar) if bar is not None else None
        result = _avwap_accumulate(self._state, bar, time, self._price)
        if result.ok:
            self.current = result
        return result

    __call__ = update

    def reset(self) -> None:
        logger.debug("%s reset after %d samples", self.name, self._state.samples)
        self._state = AVWAPState(anchor=self._anchor)
        self.current = IndicatorResult(ZERO)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, anchor={self._anchor!r}, "
            f"value={self.current.value}, ready={self.is_ready})"
        )
