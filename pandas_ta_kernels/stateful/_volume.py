# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- volume indicators."""
from __future__ import annotations

from typing import Any, Dict, List

from pandas_ta_kernels.volume.ad import ad, ad_inc
from pandas_ta_kernels.volume.adosc import ADOSCOutput, adosc, adosc_inc
from pandas_ta_kernels.volume.obv import obv, obv_inc

from ._base import _as_int, _param, register_window

_HLCV = ("high", "low", "close", "volume")


# ===========================================================================
# AD  -- cumulative from 0, one bar of window
# ===========================================================================

register_window(
    "ad",
    inputs=_HLCV,
    size=lambda params: 1,
    first=lambda cols, params: float(ad(*cols)[-1]),
    step=lambda state, row, params: ad_inc(*row, state.last),
    values=lambda last: [last],
    output_names=lambda params: ["AD"],
    batch=lambda cols, params: [ad(*cols)],
)


# ===========================================================================
# OBV  -- starts at volume[0]; the window keeps the previous close
# ===========================================================================

register_window(
    "obv",
    inputs=("close", "volume"),
    size=lambda params: 1,
    first=lambda cols, params: float(obv(*cols)[-1]),
    step=lambda state, row, params: obv_inc(
        row[0], state.window[-1][0], row[1], state.last
    ),
    values=lambda last: [last],
    output_names=lambda params: ["OBV"],
    batch=lambda cols, params: [obv(*cols)],
)


# ===========================================================================
# ADOSC  -- composite: A/D line + fast and slow EMA of it
# ===========================================================================
# Defaults: fast=3, slow=10.  State: (adosc, ad, fast_ema, slow_ema); the
# window only spans the slow EMA's warm-up.

def _fast_slow(params: Dict[str, Any]):
    fast = _as_int(_param(params, "fast", 3), 3)
    slow = _as_int(_param(params, "slow", 10), 10)
    return fast, slow


def _adosc_first(cols: List, params: Dict[str, Any]) -> ADOSCOutput:
    result = adosc(*cols, *_fast_slow(params))
    return ADOSCOutput(*(float(out[-1]) for out in result))


def _adosc_step(state, row, params) -> ADOSCOutput:
    last = state.last
    return adosc_inc(
        *row, last.ad, last.fast_ema, last.slow_ema, *_fast_slow(params)
    )


register_window(
    "adosc",
    inputs=_HLCV,
    size=lambda params: _fast_slow(params)[1],
    first=_adosc_first,
    step=_adosc_step,
    values=lambda last: [last.adosc],
    output_names=lambda params: ["ADOSC_{}_{}".format(*_fast_slow(params))],
    batch=lambda cols, params: [adosc(*cols, *_fast_slow(params)).adosc],
)
