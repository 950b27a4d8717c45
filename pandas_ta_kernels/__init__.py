# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version as _version

try:
    version = _version("pandas-ta-kernels")
except PackageNotFoundError:
    version = "0.0.0"

from pandas_ta_kernels.maps import Category
from pandas_ta_kernels.config import Config, config_context, get_config, set_config
from pandas_ta_kernels.errors import *
from pandas_ta_kernels.errors import __all__ as errors_all

# Flat Structure. Supports ta.ema() or ta.overlap.ema()
from pandas_ta_kernels.candle import *
from pandas_ta_kernels.momentum import *
from pandas_ta_kernels.overlap import *
from pandas_ta_kernels.statistics import *
from pandas_ta_kernels.trend import *
from pandas_ta_kernels.volatility import *
from pandas_ta_kernels.volume import *
from pandas_ta_kernels.candle import __all__ as candle_all
from pandas_ta_kernels.momentum import __all__ as momentum_all
from pandas_ta_kernels.overlap import __all__ as overlap_all
from pandas_ta_kernels.statistics import __all__ as statistics_all
from pandas_ta_kernels.trend import __all__ as trend_all
from pandas_ta_kernels.volatility import __all__ as volatility_all
from pandas_ta_kernels.volume import __all__ as volume_all

# Streaming layer: registries, seeding and DataFrame helpers
from pandas_ta_kernels import stateful

__all__ = [
    "Category",
    "Config",
    "config_context",
    "get_config",
    "set_config",
    "stateful",
    "version",
]

__all__ += (
    errors_all
    + candle_all
    + momentum_all
    + overlap_all
    + statistics_all
    + trend_all
    + volatility_all
    + volume_all
)
