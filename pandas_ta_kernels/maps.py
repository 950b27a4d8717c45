# -*- coding: utf-8 -*-
from typing import Dict, List

# Indicator kinds by category.  Every kind exports ``<kind>``,
# ``<kind>_inc`` and ``<kind>_lookback`` at the package root.
Category: Dict[str, List[str]] = {
    "candle": ["cdl_dragonfly_doji", "ha"],
    "momentum": ["mom", "roc", "rocp"],
    "overlap": ["ema", "sma", "wma"],
    "statistics": ["correl", "stddev", "var"],
    "trend": ["dx", "minus_dm", "plus_dm"],
    "volatility": ["adr", "trange"],
    "volume": ["ad", "adosc", "obv"],
}
