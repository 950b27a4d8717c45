# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest

from pandas_ta_kernels.config import Config

# BTC-USDT 1m bars
BTC_CLOSE = [
    35216.1, 35221.4, 35190.7, 35170.0, 35181.5, 35254.6, 35202.8, 35251.9, 35197.6, 35184.7,
    35175.1, 35229.9, 35212.5, 35160.7, 35090.3, 35041.2, 34999.3, 35013.4, 35069.0, 35024.6,
    34939.5, 34952.6, 35000.0, 35041.8, 35080.0, 35114.5, 35097.2, 35092.0, 35073.2, 35139.3,
    35092.0, 35126.7, 35106.3, 35124.8, 35170.1, 35215.3, 35154.0, 35216.3, 35211.8,
]

BTC_HIGH = [
    35266.0, 35247.5, 35235.7, 35190.8, 35182.0, 35258.0, 35262.9, 35281.5, 35256.0, 35210.0,
    35185.4, 35230.0, 35241.0, 35218.1, 35212.6, 35128.9, 35047.7, 35019.5, 35078.8, 35085.0,
    35034.1, 34984.4, 35010.8, 35047.1, 35091.4,
]

BTC_LOW = [
    35216.1, 35206.5, 35180.0, 35130.7, 35153.6, 35174.7, 35202.6, 35203.5, 35175.0, 35166.0,
    35170.9, 35154.1, 35186.0, 35143.9, 35080.1, 35021.1, 34950.1, 34966.0, 35012.3, 35022.2,
    34931.6, 34911.0, 34952.5, 34977.9, 35039.0,
]

BTC_VOLUME = [
    1055.365, 756.488, 682.152, 1197.747, 425.97, 859.638, 741.925, 888.477, 1043.333, 467.901,
    387.47, 566.099, 672.296, 834.915, 1854.024, 3670.795, 3761.198, 1605.442, 1726.574,
    934.713, 2199.061, 2349.823, 837.218, 1000.638, 1218.202,
]


@pytest.fixture
def btc_close():
    return np.array(BTC_CLOSE)


@pytest.fixture
def btc_hlcv():
    n = len(BTC_HIGH)
    return (
        np.array(BTC_HIGH),
        np.array(BTC_LOW),
        np.array(BTC_CLOSE[:n]),
        np.array(BTC_VOLUME),
    )


@pytest.fixture
def ohlcv():
    """200 bars of a seeded random walk with consistent OHLC."""
    rng = np.random.default_rng(7)
    n = 200
    close = 100.0 + np.cumsum(rng.normal(0.0, 1.0, n))
    open_ = np.concatenate(([close[0]], close[:-1])) + rng.normal(0.0, 0.2, n)
    high = np.maximum(open_, close) + rng.uniform(0.0, 1.0, n)
    low = np.minimum(open_, close) - rng.uniform(0.0, 1.0, n)
    volume = rng.uniform(100.0, 1000.0, n)
    return pd.DataFrame(
        {"open": open_, "high": high, "low": low, "close": close, "volume": volume},
        index=pd.date_range("2024-01-01", periods=n, freq="min"),
    )


@pytest.fixture
def no_fill():
    return Config(fill_invalid_with_nan=False)
