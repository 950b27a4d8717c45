# -*- coding: utf-8 -*-
import math

import numpy as np
import pytest

from pandas_ta_kernels import (
    InvalidParameterError,
    correl,
    correl_inc,
    correl_lookback,
    stddev,
    stddev_inc,
    stddev_lookback,
    var,
    var_inc,
    var_lookback,
)

X = [1.0, 2.0, 3.0, 4.0, 5.0]


def test_lookbacks():
    assert correl_lookback(30) == 29
    assert var_lookback(5) == 4
    assert stddev_lookback(5, 2.0) == 4
    with pytest.raises(InvalidParameterError):
        stddev_lookback(5, 0.0)
    with pytest.raises(InvalidParameterError):
        stddev_lookback(5, float("inf"))
    with pytest.raises(InvalidParameterError):
        stddev_lookback(5, float("nan"))


def test_correl_perfect_positive():
    out = correl(X, [2.0, 4.0, 6.0, 8.0, 10.0], 3).correl
    assert np.isnan(out[:2]).all()
    np.testing.assert_allclose(out[2:], 1.0, rtol=1e-12)


def test_correl_perfect_negative():
    out = correl(X, [9.0, 8.0, 7.0, 6.0, 5.0], 3).correl
    np.testing.assert_allclose(out[2:], -1.0, rtol=1e-12)


def test_correl_constant_series_is_nan():
    out = correl([3.0] * 5, [2.0, 4.0, 6.0, 8.0, 10.0], 3).correl
    assert np.isnan(out).all()


def test_correl_matches_numpy(ohlcv):
    x, y = ohlcv["close"].to_numpy(), ohlcv["volume"].to_numpy()
    period = 20
    out = correl(x, y, period).correl
    for i in (period - 1, 57, x.size - 1):
        window = slice(i - period + 1, i + 1)
        expected = np.corrcoef(x[window], y[window])[0, 1]
        assert out[i] == pytest.approx(expected, rel=1e-8, abs=1e-9)


def test_correl_incremental_matches_batch(ohlcv):
    x, y = ohlcv["open"].to_numpy(), ohlcv["close"].to_numpy()
    period = 30
    result = correl(x, y, period)
    sums = [s[period - 1] for s in result[1:]]
    for i in range(period, x.size):
        value, *sums = correl_inc(
            x[i], y[i], x[i - period], y[i - period], *sums, period
        )
        assert value == pytest.approx(result.correl[i], rel=1e-9)


def test_var_population():
    result = var(X, 5)
    assert np.isnan(result.var[:4]).all()
    assert result.var[4] == pytest.approx(2.0)
    assert result.period_sum[4] == pytest.approx(15.0)
    assert result.period_sum_sq[4] == pytest.approx(55.0)


def test_var_constant_is_zero_not_negative():
    out = var([0.1] * 10, 4).var
    assert (out[3:] >= 0.0).all()
    np.testing.assert_allclose(out[3:], 0.0, atol=1e-15)
    assert (var([3.0] * 6, 3).var[2:] == 0.0).all()


def test_var_incremental_matches_batch(btc_close):
    period = 5
    result = var(btc_close, period)
    total, total_sq = result.period_sum[period - 1], result.period_sum_sq[period - 1]
    for i in range(period, btc_close.size):
        value, total, total_sq = var_inc(
            btc_close[i], btc_close[i - period], total, total_sq, period
        )
        assert value == pytest.approx(result.var[i], rel=1e-9, abs=1e-9)


def test_stddev_is_scaled_sqrt_var(ohlcv):
    close = ohlcv["close"].to_numpy()
    result = stddev(close, 10, 2.0)
    expected = 2.0 * np.sqrt(var(close, 10).var)
    np.testing.assert_allclose(result.stddev, expected, rtol=1e-12, equal_nan=True)


def test_stddev_incremental_matches_batch(ohlcv):
    close = ohlcv["close"].to_numpy()
    period = 10
    result = stddev(close, period)
    total, total_sq = result.period_sum[period - 1], result.period_sum_sq[period - 1]
    for i in range(period, close.size):
        value, total, total_sq = stddev_inc(
            close[i], close[i - period], total, total_sq, period
        )
        assert value == pytest.approx(result.stddev[i], rel=1e-9)
        assert math.isfinite(value)
