"""
Error taxonomy for erasure recovery.

Nothing here is retried. A DivisionError means the caller picked bad
parameters (usually the scale factor); an InvariantViolation means the
domain arithmetic itself is broken.
"""


class RecoveryError(Exception):
    """Base class for every error raised by fftrecover."""


class DivisionError(RecoveryError, ZeroDivisionError):
    """Divisor is zero, not invertible, or the quotient is not exact."""


class InvariantViolation(RecoveryError, AssertionError):
    """A division result failed the q * b == a self-check."""


class UnrecoverableErasure(RecoveryError, ValueError):
    """Too many samples were lost to reconstruct the data."""
