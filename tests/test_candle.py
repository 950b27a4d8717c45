# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    InvalidParameterError,
    cdl_dragonfly_doji,
    cdl_dragonfly_doji_inc,
    cdl_dragonfly_doji_lookback,
    ha,
    ha_inc,
    ha_lookback,
)


def test_lookbacks():
    assert ha_lookback() == 0
    assert cdl_dragonfly_doji_lookback(100.0) == 0
    for bad in (0.0, -1.0, 100.5):
        with pytest.raises(InvalidParameterError):
            cdl_dragonfly_doji_lookback(bad)


def test_ha_by_hand():
    result = ha([10.0, 11.0], [12.0, 13.0], [9.0, 10.0], [11.0, 12.0])
    np.testing.assert_allclose(result.open, [10.5, 10.5])
    np.testing.assert_allclose(result.close, [10.5, 11.5])
    np.testing.assert_allclose(result.high, [12.0, 13.0])
    np.testing.assert_allclose(result.low, [9.0, 10.0])


def test_ha_incremental_matches_batch(ohlcv):
    cols = [ohlcv[k].to_numpy() for k in ("open", "high", "low", "close")]
    result = ha(*cols)
    prev_open, prev_close = result.open[0], result.close[0]
    for i in range(1, len(ohlcv)):
        candle = ha_inc(*(c[i] for c in cols), prev_open, prev_close)
        assert list(candle) == pytest.approx([r[i] for r in result], rel=1e-12)
        prev_open, prev_close = candle.open, candle.close


def test_dragonfly_doji():
    open_ = [10.0, 10.0, 5.0, 10.0]
    high = [10.05, 12.0, 5.0, 10.0]
    low = [8.0, 8.0, 5.0, 8.0]
    close = [10.0, 10.0, 5.0, 9.5]
    # match, long upper shadow, flat bar, body too large
    out = cdl_dragonfly_doji(open_, high, low, close)
    np.testing.assert_array_equal(out, [100.0, 0.0, 0.0, 0.0])
    # a wider tolerance accepts the large body
    assert cdl_dragonfly_doji_inc(10.0, 10.0, 8.0, 9.5, body_percent=30.0) == 100.0


def test_dragonfly_doji_incremental_matches_batch(ohlcv):
    cols = [ohlcv[k].to_numpy() for k in ("open", "high", "low", "close")]
    out = cdl_dragonfly_doji(*cols, 20.0)
    for i in range(len(ohlcv)):
        assert cdl_dragonfly_doji_inc(*(c[i] for c in cols), 20.0) == out[i]
