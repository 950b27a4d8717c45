# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- overlap indicators.

Each section registers one kind through ``register_window``:
  size   -- bars held in the window (lookback + 1)
  first  -- batch kernel state at the last index of the given columns
  step   -- one ``*_inc`` call for the incoming bar
  values -- visible outputs from the kernel state
"""
from __future__ import annotations

from typing import Any, Dict, List

from pandas_ta_kernels.overlap.ema import ema, ema_inc
from pandas_ta_kernels.overlap.sma import sma, sma_inc
from pandas_ta_kernels.overlap.wma import WMAOutput, wma, wma_inc

from ._base import _as_float, _length, _param, register_window


def _k(params: Dict[str, Any]):
    k = _param(params, "k", None)
    return None if k is None else _as_float(k, 0.0)


# ===========================================================================
# SMA
# ===========================================================================
# Default length = 10.  State: last SMA + window of `length` closes; the
# oldest close is the one leaving the window on the next bar.

register_window(
    "sma",
    inputs=("close",),
    size=lambda params: _length(params, 10),
    first=lambda cols, params: float(sma(cols[0], _length(params, 10))[-1]),
    step=lambda state, row, params: sma_inc(
        row[0], state.window[0][0], state.last, _length(params, 10)
    ),
    values=lambda last: [last],
    output_names=lambda params: [f"SMA_{_length(params, 10)}"],
    batch=lambda cols, params: [sma(cols[0], _length(params, 10))],
)


# ===========================================================================
# EMA
# ===========================================================================
# Default length = 10, SMA seed.  Optional ``k`` overrides 2 / (length + 1).
# The window only matters during warm-up.

register_window(
    "ema",
    inputs=("close",),
    size=lambda params: _length(params, 10),
    first=lambda cols, params: float(
        ema(cols[0], _length(params, 10), _k(params))[-1]
    ),
    step=lambda state, row, params: ema_inc(
        row[0], state.last, _length(params, 10), _k(params)
    ),
    values=lambda last: [last],
    output_names=lambda params: [f"EMA_{_length(params, 10)}"],
    batch=lambda cols, params: [ema(cols[0], _length(params, 10), _k(params))],
)


# ===========================================================================
# WMA
# ===========================================================================
# Default length = 10.  State: (wma, weighted_sum, period_sum).

def _wma_first(cols: List, params: Dict[str, Any]) -> WMAOutput:
    result = wma(cols[0], _length(params, 10))
    return WMAOutput(*(float(out[-1]) for out in result))


register_window(
    "wma",
    inputs=("close",),
    size=lambda params: _length(params, 10),
    first=_wma_first,
    step=lambda state, row, params: wma_inc(
        row[0], state.window[0][0],
        state.last.weighted_sum, state.last.period_sum, _length(params, 10),
    ),
    values=lambda last: [last.wma],
    output_names=lambda params: [f"WMA_{_length(params, 10)}"],
    batch=lambda cols, params: [wma(cols[0], _length(params, 10)).wma],
)
