# -*- coding: utf-8 -*-
from .mom import lookback as mom_lookback, mom, mom_inc
from .roc import lookback as roc_lookback, roc, roc_inc
from .rocp import lookback as rocp_lookback, rocp, rocp_inc

__all__ = [
    "mom",
    "mom_inc",
    "mom_lookback",
    "roc",
    "roc_inc",
    "roc_lookback",
    "rocp",
    "rocp_inc",
    "rocp_lookback",
]
