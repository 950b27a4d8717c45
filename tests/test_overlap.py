# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    InvalidParameterError,
    ema,
    ema_inc,
    ema_lookback,
    sma,
    sma_inc,
    sma_lookback,
    wma,
    wma_inc,
    wma_lookback,
)

BTC_SMA_14 = [
    35203.53571428572, 35194.55, 35181.67857142857, 35168.00714285715,
    35156.821428571435, 35148.78571428572, 35132.357142857145, 35113.55,
    35092.17142857143, 35078.05714285715, 35067.85, 35061.05714285715,
    35052.81428571429,
]


def test_lookbacks():
    assert sma_lookback(14) == 13
    assert ema_lookback(10) == 9
    assert wma_lookback(2) == 1
    with pytest.raises(InvalidParameterError):
        sma_lookback(1)
    with pytest.raises(InvalidParameterError):
        ema_lookback(10, k=1.5)
    with pytest.raises(InvalidParameterError):
        ema_lookback(10, k=0.0)


def test_sma_five_samples_period_three():
    out = sma([1.0, 2.0, 4.0, 8.0, 16.0], 3)
    assert np.isnan(out[:2]).all()
    np.testing.assert_allclose(out[2:], [7.0 / 3.0, 14.0 / 3.0, 28.0 / 3.0], rtol=1e-12)


def test_sma_reference(btc_close):
    out = sma(btc_close, 14)
    assert np.isnan(out[:13]).all()
    np.testing.assert_allclose(out[13:26], BTC_SMA_14, rtol=1e-9)


def test_sma_incremental_matches_batch(btc_close):
    out = sma(btc_close, 14)
    prev = out[13]
    for i in range(14, btc_close.size):
        prev = sma_inc(btc_close[i], btc_close[i - 14], prev, 14)
        assert prev == pytest.approx(out[i], rel=1e-9)


def test_ema_seed_and_recurrence():
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    out = ema(x, 3)
    k = 2.0 / 4.0
    assert out[2] == pytest.approx(2.0)
    assert out[3] == pytest.approx(4.0 * k + 2.0 * (1 - k))
    assert out[4] == pytest.approx(5.0 * k + out[3] * (1 - k))


def test_ema_custom_k(ohlcv):
    close = ohlcv["close"].to_numpy()
    out = ema(close, 10, k=0.3)
    prev = out[9]
    for i in range(10, close.size):
        prev = ema_inc(close[i], prev, 10, k=0.3)
        assert prev == pytest.approx(out[i], rel=1e-9)


def test_ema_incremental_matches_batch(btc_close):
    out = ema(btc_close, 10)
    prev = out[9]
    for i in range(10, btc_close.size):
        prev = ema_inc(btc_close[i], prev, 10)
        assert prev == pytest.approx(out[i], rel=1e-9)


def test_wma_values():
    result = wma([1.0, 2.0, 3.0, 4.0], 3)
    assert np.isnan(result.wma[:2]).all()
    assert result.wma[2] == pytest.approx(14.0 / 6.0)
    assert result.wma[3] == pytest.approx(20.0 / 6.0)
    assert result.weighted_sum[3] == pytest.approx(20.0)
    assert result.period_sum[3] == pytest.approx(9.0)


def test_wma_incremental_matches_batch(ohlcv):
    close = ohlcv["close"].to_numpy()
    period = 7
    result = wma(close, period)
    ws, total = result.weighted_sum[period - 1], result.period_sum[period - 1]
    for i in range(period, close.size):
        value, ws, total = wma_inc(close[i], close[i - period], ws, total, period)
        assert value == pytest.approx(result.wma[i], rel=1e-9)
        assert total == pytest.approx(result.period_sum[i], rel=1e-9)
