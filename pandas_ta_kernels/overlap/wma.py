# -*- coding: utf-8 -*-
from typing import Any, NamedTuple

from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


class WMAOutput(NamedTuple):
    wma: Any
    weighted_sum: Any
    period_sum: Any


def lookback(period: Int) -> int:
    """WMA lookback: ```period - 1```."""
    return v_period(period) - 1


# Sliding a window one step lowers every weight by one, which subtracts
# the plain window sum once; the newest sample enters with weight period.
@njit(cache=True)
def nb_wma_inc(x, old_x, prev_weighted_sum, prev_sum, period):
    weighted_sum = prev_weighted_sum - prev_sum + period * x
    period_sum = prev_sum - old_x + x
    return weighted_sum / (period * (period + 1) / 2.0), weighted_sum, period_sum


@njit(cache=True)
def nb_wma(np_x, period, out_wma, out_weighted_sum, out_sum):
    m = np_x.size
    weighted_sum = 0.0
    period_sum = 0.0
    for i in range(period):
        weighted_sum += np_x[i] * (i + 1)
        period_sum += np_x[i]

    lb = period - 1
    out_wma[lb] = weighted_sum / (period * (period + 1) / 2.0)
    out_weighted_sum[lb] = weighted_sum
    out_sum[lb] = period_sum

    for i in range(period, m):
        value, weighted_sum, period_sum = nb_wma_inc(
            np_x[i], np_x[i - period], weighted_sum, period_sum, period
        )
        out_wma[i] = value
        out_weighted_sum[i] = weighted_sum
        out_sum[i] = period_sum


def wma(
    close: ArrayLike, period: Int,
    output_wma: Array = None,
    output_weighted_sum: Array = None,
    output_sum: Array = None,
    *, config: Config = None,
) -> WMAOutput:
    """Weighted Moving Average (WMA)

    Linearly weighted mean, the newest sample weighted ```period``` and the
    oldest weighted 1.  Rather than re-weighting the window every step the
    kernel carries the weighted sum and the plain sum, both returned so a
    stream can continue from any index.

    Sources:
        * [tradingtechnologies](https://library.tradingtechnologies.com/trade/chrt-ti-weighted-moving-average.html)

    Parameters:
        close (ArrayLike): ```close``` series
        period (int): Window length (>= 2)

    Returns:
        (WMAOutput): wma, weighted_sum, period_sum arrays
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), outputs = v_batch(
        (close,), (output_wma, output_weighted_sum, output_sum), _lookback, config
    )

    nb_wma(np_close, period, *outputs)
    v_fill(config, _lookback, *outputs)
    return WMAOutput(*outputs)


def wma_inc(
    value: float, old_value: float,
    prev_weighted_sum: float, prev_sum: float, period: Int,
    *, config: Config = None,
) -> WMAOutput:
    """Next WMA with its updated weighted sum and window sum."""
    config = resolve(config)
    period = v_period(period)
    v_scalars(config, value, old_value, prev_weighted_sum, prev_sum)
    return WMAOutput(*(float(v) for v in nb_wma_inc(
        value, old_value, prev_weighted_sum, prev_sum, period
    )))
