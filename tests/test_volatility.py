# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    adr,
    adr_inc,
    adr_lookback,
    sma,
    trange,
    trange_inc,
    trange_lookback,
)


def test_lookbacks():
    assert trange_lookback() == 1
    assert adr_lookback(14) == 13


def test_trange_values():
    high = [10.0, 12.0, 11.0]
    low = [8.0, 11.0, 7.0]
    close = [9.0, 11.0, 8.0]
    out = trange(high, low, close)
    assert np.isnan(out[0])
    # gap up from 9: max(1, 3, 2); then plain range 4
    np.testing.assert_allclose(out[1:], [3.0, 4.0])
    assert trange_inc(12.0, 11.0, 9.0) == 3.0


def test_adr_is_sma_of_range(ohlcv):
    high, low = ohlcv["high"].to_numpy(), ohlcv["low"].to_numpy()
    np.testing.assert_allclose(adr(high, low, 14), sma(high - low, 14), rtol=1e-12)


def test_adr_incremental_matches_batch(ohlcv):
    high, low = ohlcv["high"].to_numpy(), ohlcv["low"].to_numpy()
    period = 14
    out = adr(high, low, period)
    prev = out[period - 1]
    for i in range(period, high.size):
        prev = adr_inc(high[i], low[i], high[i - period], low[i - period], prev, period)
        assert prev == pytest.approx(out[i], rel=1e-9)


def test_trange_incremental_matches_batch(btc_hlcv):
    high, low, close, _ = btc_hlcv
    out = trange(high, low, close)
    for i in range(1, high.size):
        assert trange_inc(high[i], low[i], close[i - 1]) == pytest.approx(out[i])
