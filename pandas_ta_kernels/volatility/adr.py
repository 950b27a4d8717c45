# -*- coding: utf-8 -*-
from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.overlap.sma import lookback as sma_lookback, sma, sma_inc
from pandas_ta_kernels.utils import v_batch, v_scalars


def lookback(period: Int) -> int:
    """ADR lookback: the SMA's, ```period - 1```."""
    return sma_lookback(period)


def adr(
    high: ArrayLike, low: ArrayLike, period: Int = 14, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Average Daily Range (ADR)

    SMA of the high-low range of each bar.

    Parameters:
        high (ArrayLike): ```high``` series
        low (ArrayLike): ```low``` series
        period (int): SMA window. Default: ```14```

    Returns:
        (ndarray): ADR, valid from index ```period - 1```
    """
    config = resolve(config)
    (np_high, np_low), (output,) = v_batch(
        (high, low), (output,), lookback(period), config
    )
    return sma(np_high - np_low, period, output, config=config)


def adr_inc(
    high: float, low: float, old_high: float, old_low: float,
    prev_adr: float, period: Int = 14,
    *, config: Config = None,
) -> float:
    """Next ADR: the SMA update with the ranges entering and leaving."""
    config = resolve(config)
    lookback(period)
    v_scalars(config, high, low, old_high, old_low)
    return sma_inc(high - low, old_high - old_low, prev_adr, period, config=config)
