"""Exceptions raised by the simulation engine.

All of these describe a malformed circuit or query. None are transient, so
callers should surface them rather than retry.
"""

from __future__ import annotations

__all__ = ["QuantumError", "InvalidParameterError", "UnsupportedGateError", "QubitIndexError"]


class QuantumError(Exception):
    """Base class for simulator errors."""


class InvalidParameterError(QuantumError, ValueError):
    """A gate or simulator argument is missing or malformed."""


class UnsupportedGateError(QuantumError, ValueError):
    """The gate identifier (or measurement basis) is outside the supported set."""


class QubitIndexError(QuantumError, IndexError):
    def __init__(self, index: object):
        super().__init__(f"Qubit index {index} out of range")
        self.index = index
