"""Base domains over which fraction fields are built.

A base domain is an integral domain with exact division and a greatest common
divisor. Elements implement the ring operations as Python operators
(``+``, ``-``, ``*``, unary ``-``, ``**`` with a non-negative ``int`` and
``==``); everything else lives on the domain object, a :class:`Ring`.
"""
from __future__ import annotations

import abc
import copy
import math
import numbers
from fractions import Fraction
from typing import Any, Tuple

import numpy as np

from .errors import (
    CoercionFailure,
    DivisionByZero,
    InexactDivision,
    NotASquare,
    UnsupportedOperation,
)


class Ring(abc.ABC):
    """Capabilities a base domain must provide to the fraction engine."""

    characteristic = 0
    is_exact = True

    # ------------------------------------------------------------------
    # Construction
    @abc.abstractmethod
    def zero(self) -> Any:
        """Return the additive identity."""

    @abc.abstractmethod
    def one(self) -> Any:
        """Return the multiplicative identity."""

    @abc.abstractmethod
    def __call__(self, value: Any) -> Any:
        """Coerce *value* into this domain or raise :class:`CoercionFailure`."""

    @abc.abstractmethod
    def contains(self, value: Any) -> bool:
        """Return ``True`` when *value* is already an element of this domain."""

    # ------------------------------------------------------------------
    # Predicates
    def is_zero(self, a: Any) -> bool:
        return a == self.zero()

    def is_one(self, a: Any) -> bool:
        return a == self.one()

    def isequal(self, a: Any, b: Any) -> bool:
        """Exact equality; differs from ``==`` only for inexact domains."""
        return a == b

    # ------------------------------------------------------------------
    # Division and gcd
    @abc.abstractmethod
    def divexact(self, a: Any, b: Any) -> Any:
        """Return ``a / b``, raising :class:`InexactDivision` on a remainder."""

    @abc.abstractmethod
    def gcd(self, a: Any, b: Any) -> Any:
        """Return a greatest common divisor; ``gcd(0, 0)`` is zero."""

    @abc.abstractmethod
    def canonical_unit(self, a: Any) -> Any:
        """Return the unit *u* making ``a / u`` canonical; one for zero."""

    # ------------------------------------------------------------------
    # Storage
    def copy(self, a: Any) -> Any:
        return copy.deepcopy(a)

    def hash_element(self, a: Any) -> int:
        return hash(a)

    # ------------------------------------------------------------------
    # Optional capabilities
    def is_square(self, a: Any) -> bool:
        raise UnsupportedOperation(f"{self!r} does not implement is_square")

    def sqrt(self, a: Any) -> Any:
        raise UnsupportedOperation(f"{self!r} does not implement sqrt")

    def remove(self, a: Any, p: Any) -> Tuple[int, Any]:
        """Return ``(k, b)`` with ``a == p**k * b`` and *p* not dividing *b*."""
        raise UnsupportedOperation(f"{self!r} does not implement remove")

    def valuation(self, a: Any, p: Any) -> int:
        return self.remove(a, p)[0]


class IntegerRing(Ring):
    """The integers, represented by Python ``int``."""

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, IntegerRing)

    def __hash__(self) -> int:
        return hash(IntegerRing)

    def __repr__(self) -> str:
        return "Integer Ring"

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def contains(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def __call__(self, value: Any) -> int:
        if isinstance(value, bool):
            raise CoercionFailure("cannot coerce bool into the integers")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, np.generic):  # NumPy scalars
            return self(value.item())
        if isinstance(value, Fraction):
            if value.denominator != 1:
                raise CoercionFailure(f"{value} is not an integer")
            return value.numerator
        if isinstance(value, numbers.Real):
            as_float = float(value)
            if not as_float.is_integer():
                raise CoercionFailure(f"{value!r} is not an integer")
            return int(as_float)
        raise CoercionFailure(f"Cannot interpret {type(value)!r} as an integer")

    def is_zero(self, a: int) -> bool:
        return a == 0

    def is_one(self, a: int) -> bool:
        return a == 1

    def divexact(self, a: int, b: int) -> int:
        if b == 0:
            raise DivisionByZero("integer division by zero")
        q, r = divmod(a, b)
        if r:
            raise InexactDivision(f"{b} does not divide {a}")
        return q

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def canonical_unit(self, a: int) -> int:
        return -1 if a < 0 else 1

    def copy(self, a: int) -> int:
        return a

    def is_square(self, a: int) -> bool:
        if a < 0:
            return False
        root = math.isqrt(a)
        return root * root == a

    def sqrt(self, a: int) -> int:
        if a >= 0:
            root = math.isqrt(a)
            if root * root == a:
                return root
        raise NotASquare(f"{a} is not a square integer")

    def remove(self, a: int, p: int) -> Tuple[int, int]:
        p = self(p)
        if p in (0, 1, -1):
            raise UnsupportedOperation(f"cannot remove the factor {p}")
        if a == 0:
            raise UnsupportedOperation("cannot remove a factor from zero")
        k = 0
        q, r = divmod(a, p)
        while r == 0:
            a, k = q, k + 1
            q, r = divmod(a, p)
        return k, a


ZZ = IntegerRing()


__all__ = ["Ring", "IntegerRing", "ZZ"]
