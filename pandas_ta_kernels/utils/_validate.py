# -*- coding: utf-8 -*-
"""Shared precondition checks.

Every batch kernel funnels its arrays through ``v_batch`` before the first
output store, so a failed call never leaves a partial write behind.  Check
order is fixed: parameters (by the caller's ``lookback``), empty input,
length mismatch, insufficient data, NaN.
"""
from __future__ import annotations

import math
import os
import warnings
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy import nan
from pandas import Series

from pandas_ta_kernels._typing import Array, ArrayLike, Int, IntFloat
from pandas_ta_kernels.config import Config
from pandas_ta_kernels.errors import (
    InsufficientDataError,
    InvalidDataError,
    InvalidParameterError,
    LengthMismatchError,
    NaNDetectedError,
)

# Warnings point at the first frame outside the package, however deep the
# kernel call chain.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def v_period(value: Int, name: str = "period", minimum: int = 2) -> int:
    """Period-like parameter: an integer >= ``minimum``."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an int, got {value!r}")
    if value < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}, got {value}")
    return int(value)


def v_bounded(
    value: IntFloat, name: str, low: float, high: float = math.inf,
) -> float:
    """Finite float parameter in the half-open interval ``(low, high]``."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or not low < value <= high:
        raise InvalidParameterError(
            f"{name} must be a finite number in ({low}, {high}], got {value}"
        )
    return value


def v_series(x: ArrayLike, dtype) -> Array:
    """Coerce *x* to a 1-D array of the configured float type."""
    if isinstance(x, Series):
        x = x.to_numpy()
    source = getattr(x, "dtype", None)
    arr = np.asarray(x, dtype=dtype)
    if arr.ndim != 1:
        raise InvalidDataError(f"expected a 1-D series, got {arr.ndim} dimensions")
    if source is not None and source.kind == "f" and source.itemsize > arr.dtype.itemsize:
        warnings.warn(
            f"input of dtype {source} downcast to {arr.dtype}",
            UserWarning,
            skip_file_prefixes=(_PACKAGE_DIR,),
        )
    return arr


def v_output(out: Optional[Array], name: str) -> Optional[Array]:
    if out is None:
        return None
    if not isinstance(out, np.ndarray) or out.dtype.kind != "f":
        raise TypeError(f"{name} must be a floating numpy array")
    return out


def v_batch(
    inputs: Sequence[ArrayLike],
    outputs: Sequence[Optional[Array]],
    lookback: int,
    config: Config,
) -> Tuple[List[Array], List[Array]]:
    """Validate a batch call and allocate missing outputs.

    Returns the coerced inputs and the output buffers, the caller's own
    buffers where given, fresh zeroed ones otherwise.
    """
    arrays = [v_series(x, config.dtype) for x in inputs]
    outputs = [v_output(o, f"output[{i}]") for i, o in enumerate(outputs)]
    n = arrays[0].size

    if config.check_structure:
        if any(a.size == 0 for a in arrays):
            raise InvalidDataError()
        if any(a.size != n for a in arrays) \
                or any(o is not None and o.shape != (n,) for o in outputs):
            raise LengthMismatchError()
        if n <= lookback:
            raise InsufficientDataError(
                f"{n} samples do not exceed the lookback of {lookback}"
            )

    if config.check_nan:
        for a in arrays:
            if np.isnan(a).any():
                raise NaNDetectedError()

    # An output buffer aliasing an input would be read after being written.
    arrays = [
        a.copy() if any(o is not None and np.shares_memory(a, o) for o in outputs) else a
        for a in arrays
    ]
    buffers = [np.zeros(n, dtype=config.dtype) if o is None else o for o in outputs]
    return arrays, buffers


def v_fill(config: Config, lookback: int, *outputs: Array) -> None:
    """Apply the pre-lookback policy to *outputs*."""
    if config.fill_invalid_with_nan and lookback > 0:
        for out in outputs:
            out[:lookback] = nan


def v_scalars(config: Config, *values: float) -> None:
    """NaN check for the scalar arguments of an incremental call."""
    if config.check_nan:
        for value in values:
            if math.isnan(value):
                raise NaNDetectedError()


__all__ = [
    "v_batch",
    "v_bounded",
    "v_fill",
    "v_output",
    "v_period",
    "v_scalars",
    "v_series",
]
