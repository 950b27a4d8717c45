# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


def lookback(period: Int) -> int:
    """SMA lookback: ```period - 1```.  Requires ```period >= 2```."""
    return v_period(period) - 1


@njit(cache=True)
def nb_sma(np_x, period, out):
    m = np_x.size
    total = 0.0
    for i in range(period):
        total += np_x[i]
    out[period - 1] = total / period

    for i in range(period, m):
        total = total + np_x[i] - np_x[i - period]
        out[i] = total / period


@njit(cache=True)
def nb_sma_inc(x, old_x, prev_sma, period):
    return prev_sma + (x - old_x) / period


def sma(
    close: ArrayLike, period: Int, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Simple Moving Average (SMA)

    The arithmetic mean of the last ```period``` samples.  The window sum is
    seeded once and then slid forward, so each step costs O(1).

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:moving_averages)

    Parameters:
        close (ArrayLike): ```close``` series
        period (int): Window length (>= 2)
        output (ndarray): Optional buffer of the input length, written in place

    Returns:
        (ndarray): SMA, valid from index ```period - 1```
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), (output,) = v_batch((close,), (output,), _lookback, config)

    nb_sma(np_close, period, output)
    v_fill(config, _lookback, output)
    return output


def sma_inc(
    value: float, old_value: float, prev_sma: float, period: Int,
    *, config: Config = None,
) -> float:
    """Next SMA from the previous one.

    ```sma = prev_sma + (value - old_value) / period``` where ```old_value```
    is the sample leaving the window.
    """
    config = resolve(config)
    period = v_period(period)
    v_scalars(config, value, old_value, prev_sma)
    return float(nb_sma_inc(value, old_value, prev_sma, period))
