# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- candle indicators."""
from __future__ import annotations

from typing import Any, Dict

from pandas_ta_kernels.candle.cdl_dragonfly_doji import (
    cdl_dragonfly_doji, cdl_dragonfly_doji_inc,
)
from pandas_ta_kernels.candle.ha import HAOutput, ha, ha_inc

from ._base import _as_float, _param, register_window

_OHLC = ("open", "high", "low", "close")


# ===========================================================================
# HA  -- Heikin-Ashi
# ===========================================================================
# State: the previous HA candle.  A one-bar window reproduces the batch
# first-bar convention ha_open = (open + close) / 2.

register_window(
    "ha",
    inputs=_OHLC,
    size=lambda params: 1,
    first=lambda cols, params: HAOutput(*(float(out[-1]) for out in ha(*cols))),
    step=lambda state, row, params: ha_inc(*row, state.last.open, state.last.close),
    values=list,
    output_names=lambda params: ["HA_open", "HA_high", "HA_low", "HA_close"],
    batch=lambda cols, params: list(ha(*cols)),
)


# ===========================================================================
# CDL_DRAGONFLYDOJI  -- single bar, default body_percent = 5
# ===========================================================================

def _body_percent(params: Dict[str, Any]) -> float:
    return _as_float(_param(params, "body_percent", 5.0), 5.0)


def _bp_label(params: Dict[str, Any]) -> str:
    return f"{_body_percent(params):g}"


register_window(
    "cdl_dragonfly_doji",
    inputs=_OHLC,
    size=lambda params: 1,
    first=lambda cols, params: float(
        cdl_dragonfly_doji(*cols, _body_percent(params))[-1]
    ),
    step=lambda state, row, params: cdl_dragonfly_doji_inc(
        *row, _body_percent(params)
    ),
    values=lambda last: [last],
    output_names=lambda params: [f"CDL_DRAGONFLYDOJI_{_bp_label(params)}"],
    batch=lambda cols, params: [cdl_dragonfly_doji(*cols, _body_percent(params))],
)
