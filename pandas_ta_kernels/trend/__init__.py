# -*- coding: utf-8 -*-
from .dx import DXOutput, dx, dx_inc, lookback as dx_lookback
from .minus_dm import lookback as minus_dm_lookback, minus_dm, minus_dm_inc
from .plus_dm import lookback as plus_dm_lookback, plus_dm, plus_dm_inc

__all__ = [
    "dx",
    "dx_inc",
    "dx_lookback",
    "DXOutput",
    "minus_dm",
    "minus_dm_inc",
    "minus_dm_lookback",
    "plus_dm",
    "plus_dm_inc",
    "plus_dm_lookback",
]
