# -*- coding: utf-8 -*-
from .avwap import avwap

__all__ = [
    "avwap",
]
