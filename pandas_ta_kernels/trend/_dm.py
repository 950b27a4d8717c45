# -*- coding: utf-8 -*-
"""Directional movement and Wilder smoothing, shared by the DM family."""
from numba import njit


# Only the larger of the up-move and the down-move counts, and only when
# it is positive.  Returns (plus_dm, minus_dm).
@njit(cache=True)
def nb_directional_movement(high, prev_high, low, prev_low):
    up = high - prev_high
    down = prev_low - low
    plus = up if up > down and up > 0.0 else 0.0
    minus = down if down > up and down > 0.0 else 0.0
    return plus, minus


@njit(cache=True)
def nb_wilder_smooth(prev, value, period):
    return prev - prev / period + value


# Seeds with the raw sum of values[1:period] at index period - 1, then
# Wilder-smooths.  values[0] is never read.
@njit(cache=True)
def nb_wilder_sum(values, period, out):
    total = 0.0
    for i in range(1, period):
        total += values[i]
    out[period - 1] = total
    for i in range(period, values.size):
        total = nb_wilder_smooth(total, values[i], period)
        out[i] = total
