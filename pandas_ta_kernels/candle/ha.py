# -*- coding: utf-8 -*-
from typing import Any, NamedTuple

from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.utils import v_batch, v_scalars


class HAOutput(NamedTuple):
    open: Any
    high: Any
    low: Any
    close: Any


def lookback() -> int:
    return 0


@njit(cache=True)
def nb_ha_inc(open_, high, low, close, prev_ha_open, prev_ha_close):
    ha_open = 0.5 * (prev_ha_open + prev_ha_close)
    ha_close = 0.25 * (open_ + high + low + close)
    ha_high = max(high, max(ha_open, ha_close))
    ha_low = min(low, min(ha_open, ha_close))
    return ha_open, ha_high, ha_low, ha_close


@njit(cache=True)
def nb_ha(np_open, np_high, np_low, np_close, out_o, out_h, out_l, out_c):
    # first bar: ha_open = (open + close) / 2
    o, h, l, c = np_open[0], np_high[0], np_low[0], np_close[0]
    out_o[0] = 0.5 * (o + c)
    out_c[0] = 0.25 * (o + h + l + c)
    out_h[0] = max(h, max(out_o[0], out_c[0]))
    out_l[0] = min(l, min(out_o[0], out_c[0]))

    for i in range(1, np_open.size):
        o, h, l, c = nb_ha_inc(
            np_open[i], np_high[i], np_low[i], np_close[i],
            out_o[i - 1], out_c[i - 1],
        )
        out_o[i] = o
        out_h[i] = h
        out_l[i] = l
        out_c[i] = c


def ha(
    open_: ArrayLike, high: ArrayLike, low: ArrayLike, close: ArrayLike,
    output_open: Array = None,
    output_high: Array = None,
    output_low: Array = None,
    output_close: Array = None,
    *, config: Config = None,
) -> HAOutput:
    """Heikin Ashi Candles (HA)

    The Heikin-Ashi technique averages price data to create a Japanese
    candlestick chart that filters market noise. Each candle depends on the
    previous HA candle, so the whole series is a recurrence over
    ```(ha_open, ha_close)```.

    Sources:
        * [investopedia](https://www.investopedia.com/terms/h/heikinashi.asp)

    Calculation:
        HA_CLOSE = 0.25 * (open + high + low + close)
        HA_OPEN[0] = 0.5 * (open[0] + close[0])
        HA_OPEN = 0.5 * (prev HA_OPEN + prev HA_CLOSE)
        HA_HIGH = max(high, HA_OPEN, HA_CLOSE)
        HA_LOW = min(low, HA_OPEN, HA_CLOSE)

    Parameters:
        open_ (ArrayLike): ```open``` series
        high (ArrayLike): ```high``` series
        low (ArrayLike): ```low``` series
        close (ArrayLike): ```close``` series

    Returns:
        (HAOutput): open, high, low, close arrays, every index valid
    """
    config = resolve(config)
    arrays, outputs = v_batch(
        (open_, high, low, close),
        (output_open, output_high, output_low, output_close),
        lookback(), config,
    )
    nb_ha(*arrays, *outputs)
    return HAOutput(*outputs)


def ha_inc(
    open_: float, high: float, low: float, close: float,
    prev_ha_open: float, prev_ha_close: float,
    *, config: Config = None,
) -> HAOutput:
    """Next Heikin-Ashi candle from the previous HA open and close."""
    config = resolve(config)
    v_scalars(config, open_, high, low, close, prev_ha_open, prev_ha_close)
    return HAOutput(*(float(v) for v in nb_ha_inc(
        open_, high, low, close, prev_ha_open, prev_ha_close
    )))
