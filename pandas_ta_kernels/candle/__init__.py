# -*- coding: utf-8 -*-
from .cdl_dragonfly_doji import (
    cdl_dragonfly_doji,
    cdl_dragonfly_doji_inc,
    lookback as cdl_dragonfly_doji_lookback,
)
from .ha import HAOutput, ha, ha_inc, lookback as ha_lookback

__all__ = [
    "cdl_dragonfly_doji",
    "cdl_dragonfly_doji_inc",
    "cdl_dragonfly_doji_lookback",
    "ha",
    "ha_inc",
    "ha_lookback",
    "HAOutput",
]
