# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    dx,
    dx_inc,
    dx_lookback,
    minus_dm,
    minus_dm_inc,
    minus_dm_lookback,
    plus_dm,
    plus_dm_inc,
    plus_dm_lookback,
)

HIGH = [10.0, 12.0, 11.0, 13.0]
LOW = [9.0, 10.0, 8.0, 9.0]
CLOSE = [9.5, 11.0, 9.0, 12.0]


def test_lookbacks():
    assert plus_dm_lookback(14) == 13
    assert minus_dm_lookback(14) == 13
    assert dx_lookback(14) == 14


def test_directional_movement_by_hand():
    plus = plus_dm(HIGH, LOW, 3)
    minus = minus_dm(HIGH, LOW, 3)
    assert np.isnan(plus[:2]).all() and np.isnan(minus[:2]).all()
    # raw +DM: 2, 0, 2    raw -DM: 0, 2, 0
    np.testing.assert_allclose(plus[2:], [2.0, 2.0 - 2.0 / 3.0 + 2.0])
    np.testing.assert_allclose(minus[2:], [2.0, 2.0 - 2.0 / 3.0])


def test_dx_by_hand():
    result = dx(HIGH, LOW, CLOSE, 3)
    assert np.isnan(result.dx[:3]).all()
    assert result.dx[3] == pytest.approx(300.0 / 7.0)
    # TR: 2.5, 3, 4
    assert result.smoothed_tr[2] == pytest.approx(5.5)
    assert result.smoothed_tr[3] == pytest.approx(5.5 - 5.5 / 3.0 + 4.0)


def test_dx_flat_market_is_zero():
    flat = [5.0] * 6
    assert (dx(flat, flat, flat, 2).dx[2:] == 0.0).all()
    assert dx_inc(5.0, 5.0, 5.0, 5.0, 5.0, 0.0, 0.0, 0.0, 2).dx == 0.0


def test_dm_incremental_matches_batch(ohlcv):
    high, low = ohlcv["high"].to_numpy(), ohlcv["low"].to_numpy()
    period = 14
    plus, minus = plus_dm(high, low, period), minus_dm(high, low, period)
    prev_plus, prev_minus = plus[period - 1], minus[period - 1]
    for i in range(period, high.size):
        prev_plus = plus_dm_inc(high[i], high[i - 1], low[i], low[i - 1], prev_plus, period)
        prev_minus = minus_dm_inc(high[i], high[i - 1], low[i], low[i - 1], prev_minus, period)
        assert prev_plus == pytest.approx(plus[i], rel=1e-9, abs=1e-12)
        assert prev_minus == pytest.approx(minus[i], rel=1e-9, abs=1e-12)


def test_dx_incremental_matches_batch(ohlcv):
    high, low, close = (ohlcv[k].to_numpy() for k in ("high", "low", "close"))
    period = 14
    result = dx(high, low, close, period)
    state = (
        result.smoothed_plus_dm[period],
        result.smoothed_minus_dm[period],
        result.smoothed_tr[period],
    )
    for i in range(period + 1, high.size):
        value, *state = dx_inc(
            high[i], low[i], high[i - 1], low[i - 1], close[i - 1], *state, period
        )
        assert value == pytest.approx(result.dx[i], rel=1e-9, abs=1e-9)
