# -*- coding: utf-8 -*-
"""pandas-ta-kernels stateful - shared base: window state, helpers, registries.

All category modules (``_overlap``, ``_momentum``, ...) import from here
and populate the registries at load time.
"""
from __future__ import annotations

import math
import warnings
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
from pandas import DataFrame

from pandas_ta_kernels.errors import InvalidParameterError

NAN = float("nan")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_nan(x: Any) -> bool:
    """True when *x* is None or a float NaN."""
    return x is None or (isinstance(x, (float, np.floating)) and math.isnan(x))


def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing -> default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float(default)


def _length(params: Dict[str, Any], default: int) -> int:
    return _as_int(_param(params, "length", default), default)


# ---------------------------------------------------------------------------
# Shared state
# ---------------------------------------------------------------------------

@dataclass
class WindowState:
    """Raw-bar window plus the last kernel result.

    ``window`` holds the newest ``size`` bars as tuples in input order,
    enough for the batch kernel to produce its first valid value and for
    the ``*_inc`` kernels to find the sample leaving the window.
    ``last`` stays None during warm-up; afterwards it is whatever the
    kernel returned for the previous bar (a float or an output tuple).
    """
    size: int
    window: deque = field(default_factory=deque)
    last: Any = None


def window_make(size: int) -> WindowState:
    return WindowState(size=size, window=deque(maxlen=size))


def window_columns(rows: Sequence[Tuple[float, ...]]) -> List[np.ndarray]:
    """Transpose bar tuples into one float array per input."""
    return [np.array(column, dtype=np.float64) for column in zip(*rows)]


# ---------------------------------------------------------------------------
# Indicator descriptor & registries  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator."""
    kind:         str
    inputs:       Tuple[str, ...]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[float]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]
    batch:        Callable[[List[np.ndarray], Dict[str, Any]], List[np.ndarray]]


# Populated by category modules at import time.
STATEFUL_REGISTRY: Dict[str, StatefulIndicator] = {}
SEED_REGISTRY:     Dict[str, Callable] = {}   # kind -> seed_fn(inputs, params) -> State


def register_window(
    kind: str,
    inputs: Tuple[str, ...],
    size: Callable[[Dict[str, Any]], int],
    first: Callable[[List[np.ndarray], Dict[str, Any]], Any],
    step: Callable[[WindowState, Tuple[float, ...], Dict[str, Any]], Any],
    values: Callable[[Any], List[float]],
    output_names: Callable[[Dict[str, Any]], List[str]],
    batch: Callable[[List[np.ndarray], Dict[str, Any]], List[np.ndarray]],
) -> StatefulIndicator:
    """Register a kind built on ``WindowState``.

    *first* runs the batch kernel over full columns and returns the kernel
    state at the last index; it serves both the end of warm-up (columns =
    window) and seeding (columns = history).  *step* calls the ``*_inc``
    kernel with the new bar before that bar enters the window.
    """

    def init(params: Dict[str, Any]) -> WindowState:
        return window_make(size(params))

    def update(
        state: WindowState, bar: Dict[str, float], params: Dict[str, Any]
    ) -> Tuple[List[Optional[float]], WindowState]:
        row = tuple(bar[k] for k in inputs)
        if state.last is None:
            state.window.append(row)
            if len(state.window) < state.size:
                return [None] * len(output_names(params)), state
            state.last = first(window_columns(state.window), params)
        else:
            state.last = step(state, row, params)
            state.window.append(row)
        return values(state.last), state

    def seed(series: Dict[str, Any], params: Dict[str, Any]) -> WindowState:
        """Kernel state at the last bar of *series*, plus its raw tail."""
        columns = [np.asarray(series[k], dtype=np.float64) for k in inputs]
        state = init(params)
        if columns[0].size < state.size or any(np.isnan(c).any() for c in columns):
            return replay_seed(kind, series, params)
        state.last = first(columns, params)
        state.window.extend(zip(*(c[-state.size:].tolist() for c in columns)))
        return state

    indicator = StatefulIndicator(
        kind=kind,
        inputs=inputs,
        init=init,
        update=update,
        output_names=output_names,
        batch=batch,
    )
    STATEFUL_REGISTRY[kind] = indicator
    SEED_REGISTRY[kind] = seed
    return indicator


def _lookup(kind: str) -> StatefulIndicator:
    indicator = STATEFUL_REGISTRY.get(kind)
    if indicator is None:
        raise ValueError(f"Indicator '{kind}' not found in STATEFUL_REGISTRY")
    return indicator


# ---------------------------------------------------------------------------
# Driving helpers
# ---------------------------------------------------------------------------

def replay_seed(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Generic seed: replay the stateful update over historical series.

    *inputs* maps input names to ``pd.Series`` or arrays.  Bars with a NaN
    in any input are skipped.  Returns the final *State*.
    """
    indicator = _lookup(kind)
    state = indicator.init(params)
    columns = [np.asarray(inputs[k], dtype=np.float64) for k in indicator.inputs]
    for row in zip(*columns):
        if any(math.isnan(v) for v in row):
            continue
        bar = dict(zip(indicator.inputs, (float(v) for v in row)))
        _, state = indicator.update(state, bar, params)
    return state


def seed_state(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Seed from the batch kernel when registered, else replay."""
    seed = SEED_REGISTRY.get(kind)
    if seed is None:
        return replay_seed(kind, inputs, params)
    return seed(inputs, params)


def stream_update(
    kind: str, state: Any, bar: Dict[str, float], params: Dict[str, Any],
) -> Tuple[List[Optional[float]], Any]:
    """Advance *state* by one bar.

    A bar with a missing or NaN input is skipped with a warning: the state
    is returned unchanged and every output is None.
    """
    indicator = _lookup(kind)
    if any(_is_nan(bar.get(k)) for k in indicator.inputs):
        warnings.warn(
            f"[!] {kind}: skipping bar with NaN input", UserWarning, stacklevel=2,
        )
        return [None] * len(indicator.output_names(params)), state
    return indicator.update(state, bar, params)


def batch_frame(kind: str, df: DataFrame, **params: Any) -> DataFrame:
    """Run the batch kernel over *df*'s input columns.

    Columns are named like pandas-ta (``SMA_10``, ``ADOSC_3_10``) and honour
    ``prefix``, ``suffix``, ``delimiter`` and ``col_names``.
    """
    indicator = _lookup(kind)
    missing = [k for k in indicator.inputs if k not in df.columns]
    if missing:
        raise KeyError(f"[X] {kind}: missing input columns {missing}")

    columns = [df[k].to_numpy(dtype=np.float64) for k in indicator.inputs]
    outputs = indicator.batch(columns, params)
    names, error = resolve_output_names(indicator.output_names(params), params)
    if error is not None:
        raise InvalidParameterError(error)
    return DataFrame(dict(zip(names, outputs)), index=df.index)


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

STATEFUL_SPEC_EXCLUDES = frozenset({
    "kind", "prefix", "suffix", "delimiter", "col_names", "state_key",
})


def build_state_key(kind: str, spec: Dict[str, Any]) -> str:
    """Deterministic cache-key from *kind* + non-meta params."""
    parts = sorted(
        ((k, v) for k, v in spec.items() if k not in STATEFUL_SPEC_EXCLUDES),
        key=lambda x: x[0],
    )
    payload = "|".join(f"{k}={repr(v)}" for k, v in parts)
    return f"{kind}|{payload}" if payload else kind


def resolve_output_names(
        base_names: List[str], spec: Dict[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *spec*."""
    names = list(base_names)
    delimiter = spec.get("delimiter", "_")
    prefix = spec.get("prefix") or ""
    suffix = spec.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = spec.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None


def stateful_supported_kinds() -> List[str]:
    """Return sorted list of supported indicator kinds."""
    return sorted(STATEFUL_REGISTRY.keys())
