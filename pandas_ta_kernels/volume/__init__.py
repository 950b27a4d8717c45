# -*- coding: utf-8 -*-
from .ad import ad, ad_inc, lookback as ad_lookback
from .adosc import ADOSCOutput, adosc, adosc_inc, lookback as adosc_lookback
from .obv import lookback as obv_lookback, obv, obv_inc

__all__ = [
    "ad",
    "ad_inc",
    "ad_lookback",
    "adosc",
    "adosc_inc",
    "adosc_lookback",
    "ADOSCOutput",
    "obv",
    "obv_inc",
    "obv_lookback",
]
