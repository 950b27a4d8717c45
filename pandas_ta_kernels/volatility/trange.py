# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_fill, v_scalars


def lookback() -> int:
    """TRANGE lookback: 1, the first bar has no previous close."""
    return 1


@njit(cache=True)
def nb_true_range(high, low, prev_close):
    hl = high - low
    hc = abs(high - prev_close)
    lc = abs(low - prev_close)
    return max(hl, max(hc, lc))


@njit(cache=True)
def nb_trange(np_high, np_low, np_close, out):
    for i in range(1, np_high.size):
        out[i] = nb_true_range(np_high[i], np_low[i], np_close[i - 1])


def trange(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, output: Array = None,
    *, config: Config = None,
) -> Array:
    """True Range (TRANGE)

    The bar's range extended to any gap from the previous close.

    Calculation:
        TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Returns:
        (ndarray): TRANGE, valid from index 1
    """
    config = resolve(config)
    _lookback = lookback()
    arrays, (output,) = v_batch((high, low, close), (output,), _lookback, config)

    nb_trange(*arrays, output)
    v_fill(config, _lookback, output)
    return output


def trange_inc(
    high: float, low: float, prev_close: float, *, config: Config = None,
) -> float:
    config = resolve(config)
    v_scalars(config, high, low, prev_close)
    return float(nb_true_range(high, low, prev_close))
