# -*- coding: utf-8 -*-
from importlib.metadata import version
version = version("pandas_ta_avwap")

from pandas_ta_avwap.utils import *
from pandas_ta_avwap.utils import __all__ as utils_all
from pandas_ta_avwap.stateful import *
from pandas_ta_avwap.stateful import __all__ as stateful_all

# Flat Structure. Supports ta.avwap() or ta.volume.avwap()
from pandas_ta_avwap.volume import *
from pandas_ta_avwap.volume import __all__ as volume_all

__all__ = [
    "version",
]

__all__ += utils_all + volume_all + stateful_all
