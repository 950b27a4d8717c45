# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_scalars


def lookback() -> int:
    return 0


@njit(cache=True)
def nb_obv_inc(close, prev_close, volume, prev_obv):
    if close > prev_close:
        return prev_obv + volume
    if close < prev_close:
        return prev_obv - volume
    return prev_obv


@njit(cache=True)
def nb_obv(np_close, np_volume, out):
    value = np_volume[0]
    out[0] = value
    for i in range(1, np_close.size):
        value = nb_obv_inc(np_close[i], np_close[i - 1], np_volume[i], value)
        out[i] = value


def obv(
    close: ArrayLike, volume: ArrayLike, output: Array = None,
    *, config: Config = None,
) -> Array:
    """On Balance Volume (OBV)

    Running total of volume signed by the direction of the close.  The
    first value is the first volume (TA-Lib convention).

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:on_balance_volume_obv)

    Returns:
        (ndarray): OBV, every index valid
    """
    config = resolve(config)
    arrays, (output,) = v_batch((close, volume), (output,), lookback(), config)
    nb_obv(*arrays, output)
    return output


def obv_inc(
    close: float, prev_close: float, volume: float, prev_obv: float,
    *, config: Config = None,
) -> float:
    config = resolve(config)
    v_scalars(config, close, prev_close, volume, prev_obv)
    return float(nb_obv_inc(close, prev_close, volume, prev_obv))
