# -*- coding: utf-8 -*-
from typing import Any, NamedTuple

from numpy import sqrt, zeros

from pandas_ta_kernels._typing import Array, ArrayLike, Int, IntFloat
from pandas_ta_kernels.config import Config, resolve
from pandas_ta_kernels.statistics.var import lookback as var_lookback, var, var_inc
from pandas_ta_kernels.utils import v_batch, v_bounded, v_fill


class STDDEVOutput(NamedTuple):
    stddev: Any
    period_sum: Any
    period_sum_sq: Any


def lookback(period: Int, nbdev: IntFloat = 1.0) -> int:
    """STDDEV lookback: VAR's, ```period - 1```.  ```nbdev``` must be > 0."""
    v_bounded(nbdev, "nbdev", 0.0)
    return var_lookback(period)


def stddev(
    close: ArrayLike, period: Int = 5, nbdev: IntFloat = 1.0,
    output_stddev: Array = None,
    output_sum: Array = None,
    output_sum_sq: Array = None,
    *, config: Config = None,
) -> STDDEVOutput:
    """Standard Deviation (STDDEV)

    ```nbdev * sqrt(VAR)``` over the same window sums as VAR.

    Returns:
        (STDDEVOutput): stddev, period_sum, period_sum_sq arrays
    """
    config = resolve(config)
    _lookback = lookback(period, nbdev)
    (np_close,), outputs = v_batch(
        (close,), (output_stddev, output_sum, output_sum_sq), _lookback, config
    )
    out_stddev, out_sum, out_sum_sq = outputs

    out_var = zeros(np_close.size, dtype=config.dtype)
    var(np_close, period, out_var, out_sum, out_sum_sq, config=config)
    out_stddev[_lookback:] = sqrt(out_var[_lookback:]) * float(nbdev)
    v_fill(config, _lookback, out_stddev)
    return STDDEVOutput(*outputs)


def stddev_inc(
    value: float, old_value: float, prev_sum: float, prev_sum_sq: float,
    period: Int = 5, nbdev: IntFloat = 1.0,
    *, config: Config = None,
) -> STDDEVOutput:
    config = resolve(config)
    lookback(period, nbdev)
    result = var_inc(value, old_value, prev_sum, prev_sum_sq, period, config=config)
    return STDDEVOutput(
        float(sqrt(result.var)) * float(nbdev),
        result.period_sum,
        result.period_sum_sq,
    )
