# -*- coding: utf-8 -*-
"""Pearson correlation over a sliding window.

State is five running sums.  Squares and cross products are updated with
fused multiply-adds, ```fma(new, new, fma(-old, old, sum_sq))```, which
keeps the subtract-then-add cancellation error to one rounding.
"""
from math import fma, nan, sqrt
from typing import Any, NamedTuple

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


class CORRELOutput(NamedTuple):
    correl: Any
    sum_0: Any
    sum_1: Any
    sum_0_sq: Any
    sum_1_sq: Any
    sum_01: Any


def lookback(period: Int) -> int:
    """CORREL lookback: ```period - 1```."""
    return v_period(period) - 1


def pearson(
    sum_0: float, sum_1: float,
    sum_0_sq: float, sum_1_sq: float, sum_01: float, period: int,
) -> float:
    """Correlation from the window sums; NaN when either side is flat."""
    n = float(period)
    numerator = fma(n, sum_01, -(sum_0 * sum_1))
    spread_0 = fma(n, sum_0_sq, -(sum_0 * sum_0))
    spread_1 = fma(n, sum_1_sq, -(sum_1 * sum_1))
    if spread_0 <= 0.0 or spread_1 <= 0.0:
        return nan
    return numerator / sqrt(spread_0 * spread_1)


def correl_step(
    new_0: float, new_1: float, old_0: float, old_1: float,
    sum_0: float, sum_1: float,
    sum_0_sq: float, sum_1_sq: float, sum_01: float,
    period: int,
):
    sum_0 = sum_0 - old_0 + new_0
    sum_1 = sum_1 - old_1 + new_1
    sum_0_sq = fma(new_0, new_0, fma(-old_0, old_0, sum_0_sq))
    sum_1_sq = fma(new_1, new_1, fma(-old_1, old_1, sum_1_sq))
    sum_01 = fma(new_0, new_1, fma(-old_0, old_1, sum_01))
    value = pearson(sum_0, sum_1, sum_0_sq, sum_1_sq, sum_01, period)
    return value, sum_0, sum_1, sum_0_sq, sum_1_sq, sum_01


def correl(
    series_0: ArrayLike, series_1: ArrayLike, period: Int = 30,
    output_correl: Array = None,
    output_sum_0: Array = None,
    output_sum_1: Array = None,
    output_sum_0_sq: Array = None,
    output_sum_1_sq: Array = None,
    output_sum_01: Array = None,
    *, config: Config = None,
) -> CORRELOutput:
    """Pearson's Correlation Coefficient (CORREL)

    Linear correlation of two series over ```period``` samples, from +1
    (move together) to -1 (move opposite).  A window where either series
    is constant has no defined correlation and yields NaN.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/c/correlationcoefficient.asp)

    Calculation:
        Default Inputs:
            period=30
        num = n * S01 - S0 * S1
        den = sqrt((n * S00 - S0 ** 2) * (n * S11 - S1 ** 2))
        CORREL = num / den

    Parameters:
        series_0 (ArrayLike): First series
        series_1 (ArrayLike): Second series
        period (int): Window length (>= 2). Default: ```30```

    Returns:
        (CORRELOutput): correl and the five running sums, each valid from
        index ```period - 1```
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_0, np_1), outputs = v_batch(
        (series_0, series_1),
        (output_correl, output_sum_0, output_sum_1,
         output_sum_0_sq, output_sum_1_sq, output_sum_01),
        _lookback, config,
    )

    xs, ys = np_0.tolist(), np_1.tolist()
    sums = [0.0, 0.0, 0.0, 0.0, 0.0]
    for x, y in zip(xs[:period], ys[:period]):
        sums[0] += x
        sums[1] += y
        sums[2] = fma(x, x, sums[2])
        sums[3] = fma(y, y, sums[3])
        sums[4] = fma(x, y, sums[4])
    row = (pearson(*sums, period), *sums)
    for out, value in zip(outputs, row):
        out[_lookback] = value

    for i in range(period, len(xs)):
        row = correl_step(
            xs[i], ys[i], xs[i - period], ys[i - period], *row[1:], period
        )
        for out, value in zip(outputs, row):
            out[i] = value

    v_fill(config, _lookback, *outputs)
    return CORRELOutput(*outputs)


def correl_inc(
    new_0: float, new_1: float, old_0: float, old_1: float,
    prev_sum_0: float, prev_sum_1: float,
    prev_sum_0_sq: float, prev_sum_1_sq: float, prev_sum_01: float,
    period: Int = 30,
    *, config: Config = None,
) -> CORRELOutput:
    """Next correlation and the five updated sums."""
    config = resolve(config)
    period = v_period(period)
    args = (
        new_0, new_1, old_0, old_1,
        prev_sum_0, prev_sum_1, prev_sum_0_sq, prev_sum_1_sq, prev_sum_01,
    )
    v_scalars(config, *args)
    return CORRELOutput(*correl_step(*(float(a) for a in args), period))
