# -*- coding: utf-8 -*-
from .ema import ema, ema_inc, lookback as ema_lookback
from .sma import lookback as sma_lookback, sma, sma_inc
from .wma import WMAOutput, lookback as wma_lookback, wma, wma_inc

__all__ = [
    "ema",
    "ema_inc",
    "ema_lookback",
    "sma",
    "sma_inc",
    "sma_lookback",
    "wma",
    "wma_inc",
    "wma_lookback",
    "WMAOutput",
]
