# -*- coding: utf-8 -*-
"""Shared fixtures for the anchored VWAP tests."""
from datetime import datetime, timedelta, timezone
from typing import Any, NamedTuple

import pytest


ANCHOR = datetime(2024, 5, 10, 9, 30, 0, tzinfo=timezone.utc)


class TradeBar(NamedTuple):
    """Attribute-style bar, as an upstream feed would hand one over."""
    end_time: Any
    open: Any
    high: Any
    low: Any
    close: Any
    volume: Any


def bar(minutes, o, h, l, c, v, anchor=ANCHOR):
    return TradeBar(anchor + timedelta(minutes=minutes), o, h, l, c, v)


@pytest.fixture
def anchor():
    return ANCHOR


@pytest.fixture
def series_bars():
    """Three bars after the anchor (prices as strings for exact decimals)."""
    return [
        bar(1, "10", "11", "9", "10.5", 100),
        bar(2, "11", "12", "10", "11.5", 150),
        bar(3, "12", "13", "11", "12.5", 200),
    ]
