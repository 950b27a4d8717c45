# -*- coding: utf-8 -*-
from .correl import CORRELOutput, correl, correl_inc, lookback as correl_lookback
from .stddev import STDDEVOutput, lookback as stddev_lookback, stddev, stddev_inc
from .var import VAROutput, lookback as var_lookback, var, var_inc

__all__ = [
    "correl",
    "correl_inc",
    "correl_lookback",
    "CORRELOutput",
    "stddev",
    "stddev_inc",
    "stddev_lookback",
    "STDDEVOutput",
    "var",
    "var_inc",
    "var_lookback",
    "VAROutput",
]
