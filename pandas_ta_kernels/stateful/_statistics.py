# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- statistics (running-sum kernels)."""
from __future__ import annotations

from typing import Any, Dict, List

from pandas_ta_kernels.statistics.correl import CORRELOutput, correl, correl_inc
from pandas_ta_kernels.statistics.stddev import STDDEVOutput, stddev, stddev_inc
from pandas_ta_kernels.statistics.var import VAROutput, var, var_inc

from ._base import _as_float, _length, _param, register_window


def _last_row(result, output_type):
    return output_type(*(float(out[-1]) for out in result))


# ===========================================================================
# CORREL  -- inputs "x" and "y".  Default length = 30.
# ===========================================================================

def _correl_step(state, row, params) -> CORRELOutput:
    old_x, old_y = state.window[0]
    return correl_inc(row[0], row[1], old_x, old_y, *state.last[1:], _length(params, 30))


register_window(
    "correl",
    inputs=("x", "y"),
    size=lambda params: _length(params, 30),
    first=lambda cols, params: _last_row(
        correl(*cols, _length(params, 30)), CORRELOutput
    ),
    step=_correl_step,
    values=lambda last: [last.correl],
    output_names=lambda params: [f"CORREL_{_length(params, 30)}"],
    batch=lambda cols, params: [correl(*cols, _length(params, 30)).correl],
)


# ===========================================================================
# VAR / STDEV  -- population.  Default length = 5, nbdev = 1.
# ===========================================================================

def _nbdev(params: Dict[str, Any]) -> float:
    return _as_float(_param(params, "nbdev", 1.0), 1.0)


register_window(
    "var",
    inputs=("close",),
    size=lambda params: _length(params, 5),
    first=lambda cols, params: _last_row(var(cols[0], _length(params, 5)), VAROutput),
    step=lambda state, row, params: var_inc(
        row[0], state.window[0][0],
        state.last.period_sum, state.last.period_sum_sq, _length(params, 5),
    ),
    values=lambda last: [last.var],
    output_names=lambda params: [f"VAR_{_length(params, 5)}"],
    batch=lambda cols, params: [var(cols[0], _length(params, 5)).var],
)


def _stddev_first(cols: List, params: Dict[str, Any]) -> STDDEVOutput:
    return _last_row(
        stddev(cols[0], _length(params, 5), _nbdev(params)), STDDEVOutput
    )


register_window(
    "stddev",
    inputs=("close",),
    size=lambda params: _length(params, 5),
    first=_stddev_first,
    step=lambda state, row, params: stddev_inc(
        row[0], state.window[0][0],
        state.last.period_sum, state.last.period_sum_sq,
        _length(params, 5), _nbdev(params),
    ),
    values=lambda last: [last.stddev],
    output_names=lambda params: [f"STDEV_{_length(params, 5)}"],
    batch=lambda cols, params: [
        stddev(cols[0], _length(params, 5), _nbdev(params)).stddev
    ],
)
