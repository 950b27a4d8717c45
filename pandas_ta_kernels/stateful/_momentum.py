# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful -- momentum indicators.

MOM, ROC and ROCP only need the close ``length`` bars ago, so the window
holds ``length + 1`` closes and the kernel state is just the last value.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from pandas_ta_kernels.momentum.mom import mom, mom_inc
from pandas_ta_kernels.momentum.roc import roc, roc_inc
from pandas_ta_kernels.momentum.rocp import rocp, rocp_inc

from ._base import _length, register_window


def _register_difference(
    kind: str, kernel: Callable, kernel_inc: Callable, label: str,
) -> None:
    def length(params: Dict[str, Any]) -> int:
        return _length(params, 10)

    register_window(
        kind,
        inputs=("close",),
        size=lambda params: length(params) + 1,
        first=lambda cols, params: float(kernel(cols[0], length(params))[-1]),
        step=lambda state, row, params: kernel_inc(
            row[0], state.window[-length(params)][0]
        ),
        values=lambda last: [last],
        output_names=lambda params: [f"{label}_{length(params)}"],
        batch=lambda cols, params: [kernel(cols[0], length(params))],
    )


# Defaults: length = 10
_register_difference("mom", mom, mom_inc, "MOM")
_register_difference("roc", roc, roc_inc, "ROC")
_register_difference("rocp", rocp, rocp_inc, "ROCP")
