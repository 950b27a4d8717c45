# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


def lookback(period: Int) -> int:
    """ROC lookback: ```period```."""
    return v_period(period, minimum=1)


@njit(cache=True)
def nb_roc_inc(x, old_x):
    if old_x == 0.0:
        return 0.0
    return (x - old_x) / old_x * 100.0


@njit(cache=True)
def nb_roc(np_x, period, out):
    for i in range(period, np_x.size):
        out[i] = nb_roc_inc(np_x[i], np_x[i - period])


def roc(
    close: ArrayLike, period: Int, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Rate of Change (ROC)

    Percentage change over ```period``` bars.

    Calculation:
        ROC = 100 * (close - close[period ago]) / close[period ago]
        A zero base price yields 0.

    Returns:
        (ndarray): ROC, valid from index ```period```
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), (output,) = v_batch((close,), (output,), _lookback, config)

    nb_roc(np_close, _lookback, output)
    v_fill(config, _lookback, output)
    return output


def roc_inc(value: float, old_value: float, *, config: Config = None) -> float:
    config = resolve(config)
    v_scalars(config, value, old_value)
    return float(nb_roc_inc(value, old_value))
