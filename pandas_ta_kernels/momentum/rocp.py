# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


def lookback(period: Int) -> int:
    """ROCP lookback: ```period```."""
    return v_period(period, minimum=1)


@njit(cache=True)
def nb_rocp_inc(x, old_x):
    if old_x == 0.0:
        return 0.0
    return (x - old_x) / old_x


@njit(cache=True)
def nb_rocp(np_x, period, out):
    for i in range(period, np_x.size):
        out[i] = nb_rocp_inc(np_x[i], np_x[i - period])


def rocp(
    close: ArrayLike, period: Int, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Rate of Change Percentage (ROCP)

    Same as ROC without the 100 scale: ```(close - prev) / prev```.
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), (output,) = v_batch((close,), (output,), _lookback, config)

    nb_rocp(np_close, _lookback, output)
    v_fill(config, _lookback, output)
    return output


def rocp_inc(value: float, old_value: float, *, config: Config = None) -> float:
    """Next ROCP from the current sample and the one ```period``` bars ago."""
    config = resolve(config)
    v_scalars(config, value, old_value)
    return float(nb_rocp_inc(value, old_value))
