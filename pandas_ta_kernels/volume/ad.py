# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_scalars


def lookback() -> int:
    """A/D needs no history: every index is valid."""
    return 0


# Money Flow Multiplier: where the close sits inside the bar's range,
# -1 at the low, +1 at the high.  A flat bar contributes nothing.
@njit(cache=True)
def nb_mfm(high, low, close):
    hl_range = high - low
    if hl_range == 0.0:
        return 0.0
    return ((close - low) - (high - close)) / hl_range


@njit(cache=True)
def nb_ad_inc(high, low, close, volume, prev_ad):
    return nb_mfm(high, low, close) * volume + prev_ad


@njit(cache=True)
def nb_ad(np_high, np_low, np_close, np_volume, out):
    value = 0.0
    for i in range(np_high.size):
        value = nb_ad_inc(np_high[i], np_low[i], np_close[i], np_volume[i], value)
        out[i] = value


def ad(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, volume: ArrayLike,
    output: Array = None,
    *, config: Config = None,
) -> Array:
    """Accumulation/Distribution (AD)

    Cumulative money flow volume, starting from zero.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:accumulation_distribution_line)

    Calculation:
        MFM = ((close - low) - (high - close)) / (high - low)
        MFM = 0 if high == low
        AD[i] = AD[i - 1] + MFM * volume

    Parameters:
        high (ArrayLike): ```high``` series
        low (ArrayLike): ```low``` series
        close (ArrayLike): ```close``` series
        volume (ArrayLike): ```volume``` series

    Returns:
        (ndarray): AD, every index valid
    """
    config = resolve(config)
    arrays, (output,) = v_batch(
        (high, low, close, volume), (output,), lookback(), config
    )
    nb_ad(*arrays, output)
    return output


def ad_inc(
    high: float, low: float, close: float, volume: float, prev_ad: float,
    *, config: Config = None,
) -> float:
    """Next A/D value: ```prev_ad + MFM * volume```."""
    config = resolve(config)
    v_scalars(config, high, low, close, volume, prev_ad)
    return float(nb_ad_inc(high, low, close, volume, prev_ad))
