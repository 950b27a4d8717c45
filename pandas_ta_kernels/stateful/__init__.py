# -*- coding: utf-8 -*-
"""pandas-ta-kernels.stateful - streaming / stateful indicator package.

Category modules populate STATEFUL_REGISTRY and SEED_REGISTRY at import
time.  This package re-exports them plus the shared base API.
"""
from __future__ import annotations

from ._base import (
    NAN,
    WindowState,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    SEED_REGISTRY,
    STATEFUL_SPEC_EXCLUDES,
    batch_frame,
    build_state_key,
    register_window,
    replay_seed,
    resolve_output_names,
    seed_state,
    stateful_supported_kinds,
    stream_update,
    window_make,
)

# ---------------------------------------------------------------------------
# Category modules - each populates the shared registries on import
# ---------------------------------------------------------------------------
from . import _candle       # noqa: F401  ha, cdl_dragonfly_doji
from . import _momentum     # noqa: F401  mom, roc, rocp
from . import _overlap      # noqa: F401  sma, ema, wma
from . import _statistics   # noqa: F401  correl, var, stddev
from . import _trend        # noqa: F401  plus_dm, minus_dm, dx
from . import _volatility   # noqa: F401  trange, adr
from . import _volume       # noqa: F401  ad, obv, adosc

__all__ = [
    "NAN",
    "WindowState",
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "SEED_REGISTRY",
    "batch_frame",
    "build_state_key",
    "register_window",
    "replay_seed",
    "resolve_output_names",
    "seed_state",
    "stateful_supported_kinds",
    "stream_update",
    "window_make",
]
