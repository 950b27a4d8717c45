# -*- coding: utf-8 -*-
from numba import njit
from numpy import zeros

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.trend._dm import (
    nb_directional_movement, nb_wilder_smooth, nb_wilder_sum,
)
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars


def lookback(period: Int) -> int:
    """PLUS_DM lookback: ```period - 1```."""
    return v_period(period) - 1


@njit(cache=True)
def nb_plus_dm(np_high, np_low, period, out):
    dm = zeros(np_high.size)
    for i in range(1, np_high.size):
        dm[i] = nb_directional_movement(
            np_high[i], np_high[i - 1], np_low[i], np_low[i - 1]
        )[0]
    nb_wilder_sum(dm, period, out)


def plus_dm(
    high: ArrayLike, low: ArrayLike, period: Int = 14, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Plus Directional Movement (PLUS_DM)

    Wilder-smoothed up-moves.  The first value is the plain sum of the
    first ```period - 1``` movements, then
    ```dm = prev - prev / period + up_move```.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/d/directionalindicator.asp)

    Returns:
        (ndarray): PLUS_DM, valid from index ```period - 1```
    """
    config = resolve(config)
    _lookback = lookback(period)
    arrays, (output,) = v_batch((high, low), (output,), _lookback, config)

    nb_plus_dm(*arrays, period, output)
    v_fill(config, _lookback, output)
    return output


def plus_dm_inc(
    high: float, prev_high: float, low: float, prev_low: float,
    prev_plus_dm: float, period: Int = 14,
    *, config: Config = None,
) -> float:
    config = resolve(config)
    period = v_period(period)
    v_scalars(config, high, prev_high, low, prev_low, prev_plus_dm)
    plus, _ = nb_directional_movement(high, prev_high, low, prev_low)
    return float(nb_wilder_smooth(prev_plus_dm, plus, period))
