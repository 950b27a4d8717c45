# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- trend indicators (directional movement)."""
from __future__ import annotations

from typing import Any, Dict, List

from pandas_ta_kernels.trend.dx import DXOutput, dx, dx_inc
from pandas_ta_kernels.trend.minus_dm import minus_dm, minus_dm_inc
from pandas_ta_kernels.trend.plus_dm import plus_dm, plus_dm_inc

from ._base import _length, register_window


# ===========================================================================
# PLUS_DM / MINUS_DM  -- Wilder smoothed.  Default length = 14.
# ===========================================================================
# The newest bar in the window is the previous high/low of the next step.

def _register_dm(kind: str, kernel, kernel_inc, label: str) -> None:
    def step(state, row, params) -> float:
        prev_high, prev_low = state.window[-1]
        return kernel_inc(
            row[0], prev_high, row[1], prev_low, state.last, _length(params, 14)
        )

    register_window(
        kind,
        inputs=("high", "low"),
        size=lambda params: _length(params, 14),
        first=lambda cols, params: float(kernel(*cols, _length(params, 14))[-1]),
        step=step,
        values=lambda last: [last],
        output_names=lambda params: [f"{label}_{_length(params, 14)}"],
        batch=lambda cols, params: [kernel(*cols, _length(params, 14))],
    )


_register_dm("plus_dm", plus_dm, plus_dm_inc, "DMP")
_register_dm("minus_dm", minus_dm, minus_dm_inc, "DMN")


# ===========================================================================
# DX  -- composite: smoothed +DM, -DM and TR.  Default length = 14.
# ===========================================================================

def _dx_first(cols: List, params: Dict[str, Any]) -> DXOutput:
    result = dx(*cols, _length(params, 14))
    return DXOutput(*(float(out[-1]) for out in result))


def _dx_step(state, row, params) -> DXOutput:
    prev_high, prev_low, prev_close = state.window[-1]
    last = state.last
    return dx_inc(
        row[0], row[1], prev_high, prev_low, prev_close,
        last.smoothed_plus_dm, last.smoothed_minus_dm, last.smoothed_tr,
        _length(params, 14),
    )


register_window(
    "dx",
    inputs=("high", "low", "close"),
    size=lambda params: _length(params, 14) + 1,
    first=_dx_first,
    step=_dx_step,
    values=lambda last: [last.dx],
    output_names=lambda params: [f"DX_{_length(params, 14)}"],
    batch=lambda cols, params: [dx(*cols, _length(params, 14)).dx],
)
