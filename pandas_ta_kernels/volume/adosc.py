# -*- coding: utf-8 -*-
from typing import Any, NamedTuple

from pandas_ta_kernels._typing import Array, ArrayLike, Int
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.errors import InvalidParameterError
from pandas_ta_kernels.overlap.ema import ema, ema_inc, lookback as ema_lookback
from pandas_ta_kernels.utils import v_batch, v_fill, v_period
from pandas_ta_kernels.volume.ad import ad, ad_inc


class ADOSCOutput(NamedTuple):
    adosc: Any
    ad: Any
    fast_ema: Any
    slow_ema: Any


def lookback(fast: Int, slow: Int) -> int:
    """ADOSC lookback: the slow EMA's lookback, ```slow - 1```.

    The fast EMA becomes valid earlier; its early values are simply not
    used.  Requires ```2 <= fast < slow```.
    """
    fast = v_period(fast, "fast")
    slow = v_period(slow, "slow")
    if fast >= slow:
        raise InvalidParameterError(f"fast ({fast}) must be < slow ({slow})")
    return ema_lookback(slow)


def adosc(
    high: ArrayLike, low: ArrayLike, close: ArrayLike, volume: ArrayLike,
    fast: Int = 3, slow: Int = 10,
    output_adosc: Array = None,
    output_ad: Array = None,
    output_fast_ema: Array = None,
    output_slow_ema: Array = None,
    *, config: Config = None,
) -> ADOSCOutput:
    """Chaikin A/D Oscillator (ADOSC)

    The difference of a fast and a slow EMA of the Accumulation/Distribution
    line.  The A/D line and both EMAs are returned as well: together they
    are the state an incremental update continues from.

    Sources:
        * [stockcharts](https://school.stockcharts.com/doku.php?id=technical_indicators:chaikin_oscillator)

    Calculation:
        Default Inputs:
            fast=3, slow=10
        AD = Accumulation/Distribution
        ADOSC = EMA(AD, fast) - EMA(AD, slow)

    Parameters:
        high (ArrayLike): ```high``` series
        low (ArrayLike): ```low``` series
        close (ArrayLike): ```close``` series
        volume (ArrayLike): ```volume``` series
        fast (int): Fast EMA period. Default: ```3```
        slow (int): Slow EMA period. Default: ```10```

    Returns:
        (ADOSCOutput): adosc, ad, fast_ema, slow_ema arrays.  ```adosc``` is
        valid from ```slow - 1```, ```fast_ema``` from ```fast - 1```.
    """
    config = resolve(config)
    _lookback = lookback(fast, slow)
    arrays, outputs = v_batch(
        (high, low, close, volume),
        (output_adosc, output_ad, output_fast_ema, output_slow_ema),
        _lookback, config,
    )
    out_adosc, out_ad, out_fast, out_slow = outputs

    ad(*arrays, output=out_ad, config=config)
    ema(out_ad, fast, output=out_fast, config=config)
    ema(out_ad, slow, output=out_slow, config=config)

    out_adosc[_lookback:] = out_fast[_lookback:] - out_slow[_lookback:]
    v_fill(config, _lookback, out_adosc)
    return ADOSCOutput(out_adosc, out_ad, out_fast, out_slow)


def adosc_inc(
    high: float, low: float, close: float, volume: float,
    prev_ad: float, prev_fast_ema: float, prev_slow_ema: float,
    fast: Int = 3, slow: Int = 10,
    *, config: Config = None,
) -> ADOSCOutput:
    """Next ADOSC from the previous A/D value and both previous EMAs."""
    config = resolve(config)
    lookback(fast, slow)

    value_ad = ad_inc(high, low, close, volume, prev_ad, config=config)
    fast_ema = ema_inc(value_ad, prev_fast_ema, fast, config=config)
    slow_ema = ema_inc(value_ad, prev_slow_ema, slow, config=config)
    return ADOSCOutput(fast_ema - slow_ema, value_ad, fast_ema, slow_ema)
