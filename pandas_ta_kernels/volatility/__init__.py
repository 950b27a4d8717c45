# -*- coding: utf-8 -*-
from .adr import adr, adr_inc, lookback as adr_lookback
from .trange import lookback as trange_lookback, trange, trange_inc

__all__ = [
    "adr",
    "adr_inc",
    "adr_lookback",
    "trange",
    "trange_inc",
    "trange_lookback",
]
