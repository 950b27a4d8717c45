# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


def lookback(period: Int) -> int:
    """MOM lookback: ```period```.  Requires ```period >= 1```."""
    return v_period(period, minimum=1)


@njit(cache=True)
def nb_mom_inc(x, old_x):
    return x - old_x


@njit(cache=True)
def nb_mom(np_x, period, out):
    for i in range(period, np_x.size):
        out[i] = nb_mom_inc(np_x[i], np_x[i - period])


def mom(
    close: ArrayLike, period: Int, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Momentum (MOM)

    Difference between the current sample and the sample ```period```
    bars ago.

    Parameters:
        close (ArrayLike): ```close``` series
        period (int): Distance in bars (>= 1)

    Returns:
        (ndarray): MOM, valid from index ```period```
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_close,), (output,) = v_batch((close,), (output,), _lookback, config)

    nb_mom(np_close, _lookback, output)
    v_fill(config, _lookback, output)
    return output


def mom_inc(value: float, old_value: float, *, config: Config = None) -> float:
    config = resolve(config)
    v_scalars(config, value, old_value)
    return float(nb_mom_inc(value, old_value))
