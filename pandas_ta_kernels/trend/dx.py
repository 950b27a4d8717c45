# -*- coding: utf-8 -*-
from typing import Any, NamedTuple

from numba import njit

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.trend._dm import nb_wilder_smooth, nb_wilder_sum
from pandas_ta_kernels.trend.minus_dm import minus_dm, minus_dm_inc
from pandas_ta_kernels.trend.plus_dm import plus_dm, plus_dm_inc
from pandas_ta_kernels.utils import v_batch, v_fill, v_period, v_scalars
from pandas_ta_kernels.volatility.trange import trange, trange_inc


class DXOutput(NamedTuple):
    dx: Any
    smoothed_plus_dm: Any
    smoothed_minus_dm: Any
    smoothed_tr: Any


def lookback(period: Int) -> int:
    """DX lookback: ```period```.

    The smoothed movements are seeded at ```period - 1``` and need one
    Wilder step before the first DX.
    """
    return v_period(period)


@njit(cache=True)
def nb_dx_value(smoothed_plus_dm, smoothed_minus_dm, smoothed_tr):
    if smoothed_tr == 0.0:
        return 0.0
    plus_di = 100.0 * smoothed_plus_dm / smoothed_tr
    minus_di = 100.0 * smoothed_minus_dm / smoothed_tr
    di_sum = plus_di + minus_di
    if di_sum == 0.0:
        return 0.0
    return 100.0 * abs(plus_di - minus_di) / di_sum


@njit(cache=True)
def nb_dx(out_plus, out_minus, out_tr, start, out_dx):
    for i in range(start, out_dx.size):
        out_dx[i] = nb_dx_value(out_plus[i], out_minus[i], out_tr[i])


def dx(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, period: Int = 14,
    output_dx: Array = None,
    output_smoothed_plus_dm: Array = None,
    output_smoothed_minus_dm: Array = None,
    output_smoothed_tr: Array = None,
    *, config: Config = None,
) -> DXOutput:
    """Directional Movement Index (DX)

    Spread of the directional indicators relative to their sum, built from
    PLUS_DM, MINUS_DM and a Wilder-smoothed True Range.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:average_directional_index_adx)

    Calculation:
        Default Inputs:
            period=14
        +DI = 100 * PLUS_DM / TR_s
        -DI = 100 * MINUS_DM / TR_s
        DX = 100 * abs(+DI - -DI) / (+DI + -DI)
        DX = 0 when TR_s or the DI sum is zero

    Parameters:
        high (ArrayLike): ```high``` series
        low (ArrayLike): ```low``` series
        close (ArrayLike): ```close``` series
        period (int): Smoothing period (>= 2). Default: ```14```

    Returns:
        (DXOutput): dx (valid from ```period```) and the three smoothed
        series (valid from ```period - 1```)
    """
    config = resolve(config)
    _lookback = lookback(period)
    (np_high, np_low, np_close), outputs = v_batch(
        (high, low, close),
        (output_dx, output_smoothed_plus_dm, output_smoothed_minus_dm, output_smoothed_tr),
        _lookback, config,
    )
    out_dx, out_plus, out_minus, out_tr = outputs

    plus_dm(np_high, np_low, period, out_plus, config=config)
    minus_dm(np_high, np_low, period, out_minus, config=config)
    true_range = trange(np_high, np_low, np_close, config=config)
    nb_wilder_sum(true_range, period, out_tr)
    v_fill(config, period - 1, out_tr)

    nb_dx(out_plus, out_minus, out_tr, _lookback, out_dx)
    v_fill(config, _lookback, out_dx)
    return DXOutput(out_dx, out_plus, out_minus, out_tr)


def dx_inc(
    high: float, low: float,
    prev_high: float, prev_low: float, prev_close: float,
    prev_smoothed_plus_dm: float,
    prev_smoothed_minus_dm: float,
    prev_smoothed_tr: float,
    period: Int = 14,
    *, config: Config = None,
) -> DXOutput:
    """Next DX together with the three updated smoothed sums."""
    config = resolve(config)
    period = v_period(period)
    v_scalars(config, prev_smoothed_tr)

    smoothed_plus = plus_dm_inc(
        high, prev_high, low, prev_low, prev_smoothed_plus_dm, period, config=config
    )
    smoothed_minus = minus_dm_inc(
        high, prev_high, low, prev_low, prev_smoothed_minus_dm, period, config=config
    )
    smoothed_tr = float(nb_wilder_smooth(
        prev_smoothed_tr, trange_inc(high, low, prev_close, config=config), period
    ))
    value = float(nb_dx_value(smoothed_plus, smoothed_minus, smoothed_tr))
    return DXOutput(value, smoothed_plus, smoothed_minus, smoothed_tr)
