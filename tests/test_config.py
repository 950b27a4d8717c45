# -*- coding: utf-8 -*-
import numpy as np
import pytest

from pandas_ta_kernels import (
    Config,
    InvalidParameterError,
    config_context,
    get_config,
    set_config,
    sma,
)


def test_defaults():
    cfg = Config()
    assert cfg.check_structure and cfg.check_nan and cfg.fill_invalid_with_nan
    assert cfg.dtype is np.float64


def test_dtype_normalized():
    assert Config(dtype="float32").dtype is np.float32
    assert Config(dtype=np.dtype("float64")).dtype is np.float64


@pytest.mark.parametrize("dtype", [np.int32, np.float16, "complex128"])
def test_unsupported_dtype(dtype):
    with pytest.raises(InvalidParameterError):
        Config(dtype=dtype)


def test_frozen():
    with pytest.raises(AttributeError):
        Config().check_nan = False


def test_set_config_replaces_default():
    previous = get_config()
    try:
        cfg = set_config(fill_invalid_with_nan=False)
        assert get_config() is cfg
        assert (sma([1.0, 2.0, 3.0], 2)[:1] == 0.0).all()
    finally:
        set_config(**vars(previous))
    assert get_config() == previous


def test_config_context_restores():
    previous = get_config()
    with pytest.raises(RuntimeError):
        with config_context(dtype=np.float32) as cfg:
            assert get_config() is cfg
            assert sma([1.0, 2.0, 3.0], 2).dtype == np.float32
            raise RuntimeError("boom")
    assert get_config() is previous


def test_per_call_config_overrides_default():
    with config_context(check_nan=True):
        out = sma([1.0, float("nan"), 3.0], 2, config=Config(check_nan=False))
    assert np.isnan(out[1])
