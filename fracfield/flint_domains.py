"""Univariate polynomials over Q as a base ring, backed by python-flint.

This module is the only place :mod:`flint` is imported.
"""
from __future__ import annotations

import math
import numbers
from fractions import Fraction
from typing import Any, Optional, Tuple

import numpy as np
from flint import fmpq, fmpq_poly, fmpz

from .domains import Ring
from .errors import (
    CoercionFailure,
    DivisionByZero,
    InexactDivision,
    NotASquare,
    UnsupportedOperation,
)
from .fraction import Frac


class PolynomialRing(Ring):
    """The ring ``Q[x]`` with elements of type :class:`flint.fmpq_poly`."""

    def __init__(self, var: str = "x") -> None:
        self.var = var

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, PolynomialRing) and other.var == self.var

    def __hash__(self) -> int:
        return hash((PolynomialRing, self.var))

    def __repr__(self) -> str:
        return f"Univariate Polynomial Ring in {self.var} over Rational Field"

    def gen(self) -> fmpq_poly:
        return fmpq_poly([0, 1])

    def zero(self) -> fmpq_poly:
        return fmpq_poly([])

    def one(self) -> fmpq_poly:
        return fmpq_poly([1])

    # ------------------------------------------------------------------
    # Coercion
    def _coefficient(self, value: Any) -> fmpq:
        if isinstance(value, bool):
            raise CoercionFailure("cannot coerce bool into a polynomial ring")
        if isinstance(value, fmpq):
            return value
        if isinstance(value, fmpz):
            return fmpq(value)
        if isinstance(value, numbers.Integral):
            return fmpq(int(value))
        if isinstance(value, np.generic):
            return self._coefficient(value.item())
        if isinstance(value, Fraction):
            return fmpq(value.numerator, value.denominator)
        if isinstance(value, numbers.Real):
            exact = Fraction(float(value))
            return fmpq(exact.numerator, exact.denominator)
        raise CoercionFailure(f"Cannot interpret {type(value)!r} as a rational coefficient")

    def contains(self, value: Any) -> bool:
        return isinstance(value, fmpq_poly)

    def __call__(self, value: Any) -> fmpq_poly:
        if isinstance(value, fmpq_poly):
            return value
        if isinstance(value, (list, tuple)):
            return fmpq_poly([self._coefficient(c) for c in value])
        return fmpq_poly([self._coefficient(value)])

    # ------------------------------------------------------------------
    # Ring operations
    def is_zero(self, a: fmpq_poly) -> bool:
        return a.degree() < 0

    def is_one(self, a: fmpq_poly) -> bool:
        return a.degree() == 0 and a[0] == 1

    def divexact(self, a: fmpq_poly, b: fmpq_poly) -> fmpq_poly:
        if self.is_zero(b):
            raise DivisionByZero("polynomial division by zero")
        if not self.is_zero(a % b):
            raise InexactDivision(f"{b} does not divide {a}")
        return a // b

    def gcd(self, a: fmpq_poly, b: fmpq_poly) -> fmpq_poly:
        return a.gcd(b)

    def canonical_unit(self, a: fmpq_poly) -> fmpq_poly:
        if self.is_zero(a):
            return self.one()
        return fmpq_poly([a[a.degree()]])

    def copy(self, a: fmpq_poly) -> fmpq_poly:
        return fmpq_poly(a.coeffs())

    def hash_element(self, a: fmpq_poly) -> int:
        if a.degree() < 0:
            return hash(0)
        if a.degree() == 0:
            # Constants hash like the equal Python number.
            c = a[0]
            return hash(Fraction(int(c.p), int(c.q)))
        return hash(tuple((int(c.p), int(c.q)) for c in a.coeffs()))

    # ------------------------------------------------------------------
    # Square roots and valuations
    def _sqrt_or_none(self, a: fmpq_poly) -> Optional[fmpq_poly]:
        deg = a.degree()
        if deg < 0:
            return self.zero()
        if deg % 2:
            return None
        lead = _rational_sqrt(a[deg])
        if lead is None:
            return None
        m = deg // 2
        root = [fmpq(0)] * (m + 1)
        root[m] = lead
        # Solve for the coefficients of the root from the top down.
        for k in range(1, m + 1):
            acc = a[deg - k]
            for i in range(m - k + 1, m):
                j = 2 * m - k - i
                if m - k < j <= m:
                    acc -= root[i] * root[j]
            root[m - k] = acc / (2 * lead)
        candidate = fmpq_poly(root)
        if candidate * candidate != a:
            return None
        return candidate

    def is_square(self, a: fmpq_poly) -> bool:
        return self._sqrt_or_none(a) is not None

    def sqrt(self, a: fmpq_poly) -> fmpq_poly:
        root = self._sqrt_or_none(a)
        if root is None:
            raise NotASquare(f"{a} is not a square in {self!r}")
        return root

    def remove(self, a: fmpq_poly, p: Any) -> Tuple[int, fmpq_poly]:
        p = self(p)
        if p.degree() < 1:
            raise UnsupportedOperation(f"cannot remove the unit {p}")
        if self.is_zero(a):
            raise UnsupportedOperation("cannot remove a factor from zero")
        k = 0
        while self.is_zero(a % p):
            a = a // p
            k += 1
        return k, a


def _rational_sqrt(c: fmpq) -> Optional[fmpq]:
    p, q = int(c.p), int(c.q)
    if p < 0:
        return None
    rp, rq = math.isqrt(p), math.isqrt(q)
    if rp * rp != p or rq * rq != q:
        return None
    return fmpq(rp, rq)


# ----------------------------------------------------------------------
# Rational functions
def _check_polynomial_field(f: Frac) -> PolynomialRing:
    R = f.base_ring
    if not isinstance(R, PolynomialRing):
        raise UnsupportedOperation(f"{f.parent!r} is not a field of rational functions")
    return R


def evaluate(f: Frac, value: Any) -> fmpq:
    """Return the rational function *f* evaluated at the rational *value*."""
    R = _check_polynomial_field(f)
    point = R._coefficient(value)
    den = f.denominator()(point)
    if den == 0:
        raise DivisionByZero(f"denominator of {f} vanishes at {point}")
    return f.numerator()(point) / den


def derivative(f: Frac) -> Frac:
    """Return ``(n'd - nd') / d**2`` in lowest terms."""
    _check_polynomial_field(f)
    n = f.numerator()
    d = f.denominator()
    return f.parent.lowest_terms(n.derivative() * d - n * d.derivative(), d * d)


__all__ = ["PolynomialRing", "evaluate", "derivative"]
