# -*- coding: utf-8 -*-
"""Error taxonomy shared by every kernel.

All errors derive from ``ValueError`` so callers that already guard
indicator calls with ``except ValueError`` keep working.  ``kind`` names
the failure class independently of the Python type.
"""
from __future__ import annotations


class TAError(ValueError):
    """Base class for every kernel error."""
    kind = "TAError"

    def __init__(self, message: str = None):
        super().__init__(message or self.__class__.__doc__.strip())


class InvalidDataError(TAError):
    """Input series is empty or not one-dimensional."""
    kind = "InvalidData"


class LengthMismatchError(TAError):
    """Arrays that must share a length do not."""
    kind = "LengthMismatch"


class InsufficientDataError(TAError):
    """Input length does not exceed the resolved lookback."""
    kind = "InsufficientData"


class InvalidParameterError(TAError):
    """Parameter outside its valid domain."""
    kind = "InvalidParameter"


class NaNDetectedError(TAError):
    """NaN found where the configuration forbids it."""
    kind = "NaNDetected"


__all__ = [
    "TAError",
    "InvalidDataError",
    "LengthMismatchError",
    "InsufficientDataError",
    "InvalidParameterError",
    "NaNDetectedError",
]
