"""Exceptions raised when an interval cannot be constructed."""


class IntervalError(ValueError):
    """Base class for interval validation errors."""


class InvalidOrder(IntervalError):
    """Raised when an interval's start lies after its end."""


class MixedDomain(IntervalError, TypeError):
    """Raised when bounds or operands belong to different domains."""
