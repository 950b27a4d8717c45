# -*- coding: utf-8 -*-
from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, IntFloat
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_bounded, v_scalars


def lookback(body_percent: IntFloat = 5.0) -> int:
    """Single-bar pattern: 0.  ```body_percent``` must be in (0, 100]."""
    v_bounded(body_percent, "body_percent", 0.0, 100.0)
    return 0


@njit(cache=True)
def nb_dragonfly_doji_inc(open_, high, low, close, body_percent):
    hl_range = high - low
    if hl_range <= 0.0:
        return 0.0
    threshold = hl_range * body_percent / 100.0
    body = abs(close - open_)
    upper_shadow = high - max(open_, close)
    lower_shadow = min(open_, close) - low
    if body <= threshold and upper_shadow <= threshold \
            and lower_shadow > threshold:
        return 100.0
    return 0.0


@njit(cache=True)
def nb_dragonfly_doji(np_open, np_high, np_low, np_close, body_percent, out):
    for i in range(np_open.size):
        out[i] = nb_dragonfly_doji_inc(
            np_open[i], np_high[i], np_low[i], np_close[i], body_percent
        )


def cdl_dragonfly_doji(
    open_: ArrayLike, high: ArrayLike, low: ArrayLike, close: ArrayLike,
    body_percent: IntFloat = 5.0, output: Array = None,
    *, config: Config = None,
) -> Array:
    """Dragonfly Doji (CDL_DRAGONFLYDOJI)

    A doji whose open and close sit at the top of the bar with a long lower
    shadow.  Body and upper shadow must both be within ```body_percent```
    of the bar's range; the lower shadow must exceed it.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/d/dragonfly-doji.asp)

    Parameters:
        body_percent (float): Body/shadow tolerance as a percentage of the
            high-low range, in (0, 100]. Default: ```5.0```

    Returns:
        (ndarray): 100.0 where the pattern is present, 0.0 otherwise.  Flat
        bars never match.
    """
    config = resolve(config)
    body_percent_ = v_bounded(body_percent, "body_percent", 0.0, 100.0)
    arrays, (output,) = v_batch(
        (open_, high, low, close), (output,), lookback(body_percent), config
    )
    nb_dragonfly_doji(*arrays, body_percent_, output)
    return output


def cdl_dragonfly_doji_inc(
    open_: float, high: float, low: float, close: float,
    body_percent: IntFloat = 5.0,
    *, config: Config = None,
) -> float:
    config = resolve(config)
    body_percent = v_bounded(body_percent, "body_percent", 0.0, 100.0)
    v_scalars(config, open_, high, low, close)
    return float(nb_dragonfly_doji_inc(open_, high, low, close, body_percent))
