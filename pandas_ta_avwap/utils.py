# -*- coding: utf-8 -*-
from typing import Any, Optional

from pandas import Series, Timestamp

__all__ = [
    "v_offset",
    "v_series",
    "v_timestamp",
]


def v_offset(x: Any) -> int:
    """Offset. Default: 0"""
    return int(x) if isinstance(x, int) else 0


def v_series(series: Any, length: Optional[int] = None) -> Optional[Series]:
    """Returns the Series if it is a Series with at least 'length' rows,
    otherwise None."""
    if series is not None and isinstance(series, Series):
        min_length = length if isinstance(length, int) and length > 0 else 1
        return series if series.size >= min_length else None
    return None


def v_timestamp(x: Any, tz: Any = None) -> Timestamp:
    """Timestamp aligned to 'tz' so it compares against an index in 'tz'.
    Naive values are read as UTC."""
    ts = Timestamp(x)
    if tz is None:
        if ts.tzinfo is not None:
            ts = ts.tz_convert("UTC").tz_localize(None)
        return ts
    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    return ts.tz_convert(tz)
