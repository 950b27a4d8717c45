# -*- coding: utf-8 -*-
"""Runtime configuration for the kernels.

Validation tiers and the pre-lookback fill policy are orthogonal flags so
one build serves both strict and "trust the caller" hot paths.

check_structure
    Empty input, length mismatch and insufficient data checks.  When
    disabled the caller guarantees well-formed arrays; a malformed call
    then has undefined results (the numba loops do not bounds-check).
check_nan
    Scan inputs (batch) or every scalar argument including the previous
    state (incremental) for NaN.  When disabled a NaN simply propagates
    through the recurrence.
fill_invalid_with_nan
    Write NaN to indices before the lookback of every output array.  When
    disabled those indices keep the caller's buffer contents; buffers the
    kernel allocates itself start as zeros.
dtype
    The single floating type of every series, resolved once here.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional

import numpy as np

from pandas_ta_kernels.errors import InvalidParameterError

SUPPORTED_DTYPES = (np.float32, np.float64)


@dataclass(frozen=True)
class Config:
    check_structure: bool = True
    check_nan: bool = True
    fill_invalid_with_nan: bool = True
    dtype: Any = np.float64

    def __post_init__(self):
        dtype = np.dtype(self.dtype).type
        if dtype not in SUPPORTED_DTYPES:
            raise InvalidParameterError(
                f"dtype must be float32 or float64, got {self.dtype!r}"
            )
        object.__setattr__(self, "dtype", dtype)


_default = Config()


def get_config() -> Config:
    """Current default configuration."""
    return _default


def set_config(**changes: Any) -> Config:
    """Replace fields of the default configuration.  Returns the new one."""
    global _default
    _default = replace(_default, **changes)
    return _default


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:
    """Temporarily change the default configuration.

    >>> with config_context(check_nan=False):
    ...     sma(prices, 14)
    """
    global _default
    previous = _default
    _default = replace(previous, **changes)
    try:
        yield _default
    finally:
        _default = previous


def resolve(config: Optional[Config]) -> Config:
    return _default if config is None else config


__all__ = ["Config", "get_config", "set_config", "config_context"]
