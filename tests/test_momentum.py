# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    InvalidParameterError,
    mom,
    mom_inc,
    mom_lookback,
    roc,
    roc_inc,
    roc_lookback,
    rocp,
    rocp_inc,
    rocp_lookback,
)


def test_lookbacks():
    assert mom_lookback(1) == 1
    assert roc_lookback(10) == 10
    assert rocp_lookback(5) == 5
    with pytest.raises(InvalidParameterError):
        mom_lookback(0)


def test_values():
    x = [10.0, 11.0, 12.0, 9.0]
    np.testing.assert_allclose(mom(x, 2)[2:], [2.0, -2.0])
    np.testing.assert_allclose(roc(x, 2)[2:], [20.0, -2.0 / 11.0 * 100.0])
    np.testing.assert_allclose(rocp(x, 2)[2:], [0.2, -2.0 / 11.0])
    assert np.isnan(roc(x, 2)[:2]).all()


def test_zero_base_is_zero():
    x = [0.0, 5.0, 6.0]
    assert roc(x, 1)[1] == 0.0
    assert rocp(x, 1)[1] == 0.0
    assert roc_inc(5.0, 0.0) == 0.0
    assert rocp_inc(5.0, 0.0) == 0.0


@pytest.mark.parametrize("kernel, kernel_inc", [
    (mom, mom_inc), (roc, roc_inc), (rocp, rocp_inc),
])
def test_incremental_matches_batch(btc_close, kernel, kernel_inc):
    period = 10
    out = kernel(btc_close, period)
    for i in range(period, btc_close.size):
        value = kernel_inc(btc_close[i], btc_close[i - period])
        assert value == pytest.approx(out[i], rel=1e-9, abs=1e-12)
