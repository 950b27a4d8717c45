# -*- coding: utf-8 -*-
from math import fma
from typing import Any, NamedTuple

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


class VAROutput(NamedTuple):
    var: Any
    period_sum: Any
    period_sum_sq: Any


def lookback(period: Int) -> int:
    """VAR lookback: ```period - 1```."""
    return v_period(period) - 1


def variance(period_sum: float, period_sum_sq: float, period: int) -> float:
    """Population variance from the window sums, clamped at 0."""
    mean = period_sum / period
    value = period_sum_sq / period - mean * mean
    return value if value > 0.0 else 0.0


def var_step(
    x: float, old_x: float, prev_sum: float, prev_sum_sq: float, period: int,
):
    period_sum = prev_sum - old_x + x
    period_sum_sq = fma(x, x, fma(-old_x, old_x, prev_sum_sq))
    return variance(period_sum, period_sum_sq, period), period_sum, period_sum_sq


def var(
    close: ArrayLike, period: Int = 5,
    output_var: Array = None,
    output_sum: Array = None,
    output_sum_sq: Array = None,
    *, config: Config = None,
) -> VAROutput:
    """Variance (VAR)

    Population variance over a sliding window, from a running sum and a
    running sum of squares.  The sum of squares is updated with fused
    multiply-adds to limit cancellation.

    Calculation:
        Default Inputs:
            period=5
        VAR = sum_sq / period - (sum / period) ** 2

    Parameters:
        close (ArrayLike): ```close``` series
        period (int): Window length (>= 2). Default: ```5```

    Returns:
        (VAROutput): var, period_sum, period_sum_sq arrays, valid from
        index ```period - 1```
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), outputs = v_batch(
        (close,), (output_var, output_sum, output_sum_sq), _lookback, config
    )
    out_var, out_sum, out_sum_sq = outputs

    values = np_close.tolist()
    period_sum = 0.0
    period_sum_sq = 0.0
    for x in values[:period]:
        period_sum += x
        period_sum_sq = fma(x, x, period_sum_sq)
    out_var[_lookback] = variance(period_sum, period_sum_sq, period)
    out_sum[_lookback] = period_sum
    out_sum_sq[_lookback] = period_sum_sq

    for i in range(period, len(values)):
        value, period_sum, period_sum_sq = var_step(
            values[i], values[i - period], period_sum, period_sum_sq, period
        )
        out_var[i] = value
        out_sum[i] = period_sum
        out_sum_sq[i] = period_sum_sq

    v_fill(config, _lookback, *outputs)
    return VAROutput(*outputs)


def var_inc(
    value: float, old_value: float, prev_sum: float, prev_sum_sq: float,
    period: Int = 5,
    *, config: Config = None,
) -> VAROutput:
    """Next variance with the updated window sums."""
    config = resolve(config)
    period = v_period(period)
    v_scalars(config, value, old_value, prev_sum, prev_sum_sq)
    return VAROutput(*var_step(
        float(value), float(old_value), float(prev_sum), float(prev_sum_sq), period
    ))
