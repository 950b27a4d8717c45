# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import (
    v_batch, v_bounded, v_fill, v_period, v_scalars,
)


def _alpha(period: int, k: float = None) -> float:
    if k is None:
        return 2.0 / (period + 1.0)
    return v_bounded(k, "k", 0.0, 1.0)


def lookback(period: Int, k: float = None) -> int:
    """EMA lookback: ```period - 1```.

    Also rejects a custom smoothing factor outside ```(0, 1]```.
    """
    period = v_period(period)
    _alpha(period, k)
    return period - 1


@njit(cache=True)
def nb_ema_inc(x, prev_ema, k):
    return x * k + prev_ema * (1.0 - k)


@njit(cache=True)
def nb_ema(np_x, period, k, out):
    m = np_x.size
    total = 0.0
    for i in range(period):
        total += np_x[i]
    prev = total / period
    out[period - 1] = prev

    for i in range(period, m):
        prev = nb_ema_inc(np_x[i], prev, k)
        out[i] = prev


def ema(
    close: ArrayLike, period: Int, k: float = None, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Exponential Moving Average (EMA)

    The first value is the SMA of the first ```period``` samples (TA-Lib
    seed); afterwards only the previous EMA is carried forward.

    Sources:
        * [investopedia](https://www.investopedia.com/ask/answers/122314/what-exponential-moving-average-ema-formula-and-how-ema-calculated.asp)

    Calculation:
        Default Inputs:
            k = 2 / (period + 1)
        EMA[period - 1] = SMA(close[:period])
        EMA[i] = close[i] * k + EMA[i - 1] * (1 - k)

    Parameters:
        close (ArrayLike): ```close``` series
        period (int): Seed window (>= 2)
        k (float): Smoothing factor in ```(0, 1]```. Default: ```None```
        output (ndarray): Optional buffer of the input length

    Returns:
        (ndarray): EMA, valid from index ```period - 1```
    """
    config = resolve(config)
    _lookback = lookback(period, k)
    (np_close,), (output,) = v_batch((close,), (output,), _lookback, config)

    nb_ema(np_close, period, _alpha(period, k), output)
    v_fill(config, _lookback, output)
    return output


def ema_inc(
    value: float, prev_ema: float, period: Int, k: float = None,
    *, config: Config = None,
) -> float:
    """Next EMA: needs only the previous smoothed value."""
    config = resolve(config)
    period = v_period(period)
    alpha = _alpha(period, k)
    v_scalars(config, value, prev_ema)
    return float(nb_ema_inc(value, prev_ema, alpha))
