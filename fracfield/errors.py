"""Exceptions raised by fraction field arithmetic."""
from __future__ import annotations


class FractionFieldError(ArithmeticError):
    """Base class for all errors raised by :mod:`fracfield`."""


class DivisionByZero(FractionFieldError, ZeroDivisionError):
    """A zero denominator, inverse of zero or division by zero."""


class IncompatibleParent(FractionFieldError, ValueError):
    """Operands belong to different fraction fields."""


class CoercionFailure(FractionFieldError, TypeError):
    """A value cannot be mapped into the expected base domain."""


class NotASquare(FractionFieldError, ValueError):
    """A square root was requested for a non-square."""


class UnsupportedOperation(FractionFieldError, NotImplementedError):
    """The operation is not defined for the value or the base domain."""


class InexactDivision(FractionFieldError):
    """Exact division in the base domain left a remainder."""


__all__ = [
    "FractionFieldError",
    "DivisionByZero",
    "IncompatibleParent",
    "CoercionFailure",
    "NotASquare",
    "UnsupportedOperation",
    "InexactDivision",
]
