# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- volatility indicators."""
from __future__ import annotations

from pandas_ta_kernels.volatility.adr import adr, adr_inc
from pandas_ta_kernels.volatility.trange import trange, trange_inc

from ._base import _length, register_window


# ===========================================================================
# TRANGE  -- needs the previous close, so two bars of window
# ===========================================================================

register_window(
    "trange",
    inputs=("high", "low", "close"),
    size=lambda params: 2,
    first=lambda cols, params: float(trange(*cols)[-1]),
    step=lambda state, row, params: trange_inc(row[0], row[1], state.window[-1][2]),
    values=lambda last: [last],
    output_names=lambda params: ["TRANGE"],
    batch=lambda cols, params: [trange(*cols)],
)


# ===========================================================================
# ADR  -- SMA of high - low.  Default length = 14.
# ===========================================================================

def _adr_step(state, row, params) -> float:
    old_high, old_low = state.window[0]
    return adr_inc(row[0], row[1], old_high, old_low, state.last, _length(params, 14))


register_window(
    "adr",
    inputs=("high", "low"),
    size=lambda params: _length(params, 14),
    first=lambda cols, params: float(adr(*cols, _length(params, 14))[-1]),
    step=_adr_step,
    values=lambda last: [last],
    output_names=lambda params: [f"ADR_{_length(params, 14)}"],
    batch=lambda cols, params: [adr(*cols, _length(params, 14))],
)
