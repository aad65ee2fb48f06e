"""Combination kernels for fraction arithmetic.

Every kernel takes the base domain ``R`` and the stored (not canonicalised)
components of its operands and returns the ``(numerator, denominator)`` pair of
the result. Both :class:`~fracfield.fraction.Frac` operators and the
accumulator operations in :mod:`fracfield.accumulate` are thin wrappers around
these functions, so pure and in-place results agree exactly.

Instead of cross-multiplying and reducing afterwards, the kernels special-case
equal and unit denominators and cancel common factors before multiplying, so
that intermediate values stay close to the size of the reduced result.
"""
from __future__ import annotations

import operator
from typing import Any, Callable, Tuple

from .domains import Ring

Pair = Tuple[Any, Any]


def combine(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any, op: Callable[[Any, Any], Any]) -> Pair:
    """Return ``n1/d1 op n2/d2`` where *op* is ``operator.add`` or ``operator.sub``."""
    if d1 == d2:
        rnum = op(n1, n2)
        if R.is_one(d1):
            return rnum, R.copy(d1)
        gd = R.gcd(rnum, d1)
        if R.is_one(gd):
            return rnum, R.copy(d1)
        return R.divexact(rnum, gd), R.divexact(d1, gd)
    if R.is_one(d1):
        return op(n1 * d2, n2), R.copy(d2)
    if R.is_one(d2):
        return op(n1, n2 * d1), R.copy(d1)
    gd = R.gcd(d1, d2)
    if R.is_one(gd):
        return op(n1 * d2, n2 * d1), d1 * d2
    # d1 = gd*q1 and d2 = gd*q2; only gcd(rnum, gd) can still cancel.
    q1 = R.divexact(d1, gd)
    q2 = R.divexact(d2, gd)
    rnum = op(q2 * n1, q1 * n2)
    t = R.gcd(rnum, gd)
    if R.is_one(t):
        return rnum, q2 * d1
    return R.divexact(rnum, t), R.divexact(d1, t) * q2


def add(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> Pair:
    return combine(R, n1, d1, n2, d2, operator.add)


def sub(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> Pair:
    return combine(R, n1, d1, n2, d2, operator.sub)


def _cancel(R: Ring, a: Any, b: Any) -> Pair:
    """Divide *a* and *b* by their gcd, skipping the division when it is one."""
    g = R.gcd(a, b)
    if R.is_one(g):
        return a, b
    return R.divexact(a, g), R.divexact(b, g)


def mul(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> Pair:
    """Return ``n1/d1 * n2/d2`` using cross-cancellation."""
    if d1 == d2:
        return n1 * n2, d1 * d2
    if R.is_one(d1):
        n1, d = _cancel(R, n1, d2)
        return n1 * n2, R.copy(d) if d is d2 else d
    if R.is_one(d2):
        n2, d = _cancel(R, n2, d1)
        return n2 * n1, R.copy(d) if d is d1 else d
    n1, d2 = _cancel(R, n1, d2)
    n2, d1 = _cancel(R, n2, d1)
    return n1 * n2, d1 * d2


def div(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> Pair:
    """Return ``(n1/d1) / (n2/d2)``; the caller guarantees ``n2`` is non-zero.

    The structure mirrors :func:`mul` with the pairs ``(n1, n2)`` and
    ``(d1, d2)`` cancelled instead of ``(n1, d2)`` and ``(n2, d1)``.
    """
    if d1 == n2:
        return n1 * d2, d1 * n2
    if R.is_one(d1):
        n1, d = _cancel(R, n1, n2)
        return n1 * d2, R.copy(d) if d is n2 else d
    if R.is_one(n2):
        d2, d = _cancel(R, d2, d1)
        return d2 * n1, R.copy(d) if d is d1 else d
    n1, n2 = _cancel(R, n1, n2)
    d2, d1 = _cancel(R, d2, d1)
    return n1 * d2, d1 * n2


def mul_scalar(R: Ring, n: Any, d: Any, c: Any) -> Pair:
    """Return ``n/d * c`` for a base-domain element *c*."""
    g = R.gcd(d, c)
    return n * R.divexact(c, g), R.divexact(d, g)


def div_scalar(R: Ring, n: Any, d: Any, c: Any) -> Pair:
    """Return ``(n/d) / c`` for a non-zero base-domain element *c*."""
    g = R.gcd(n, c)
    return R.divexact(n, g), d * R.divexact(c, g)


def scalar_div(R: Ring, c: Any, n: Any, d: Any) -> Pair:
    """Return ``c / (n/d)`` for a non-zero fraction ``n/d``."""
    g = R.gcd(n, c)
    return d * R.divexact(c, g), R.divexact(n, g)


def gcd(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> Pair:
    """Return ``gcd(n1, n2) / (d1/gcd(d1, d2) * d2)`` with unit-normalised parts.

    For ``a/b`` and ``c/d`` this is ``gcd(ad, bc)/bd`` in lowest terms, a
    convention that downstream callers rely on.
    """
    gbd = R.gcd(d1, d2)
    n = R.gcd(n1, n2)
    d = R.divexact(d1, gbd) * d2
    n = R.divexact(n, R.canonical_unit(n))
    d = R.divexact(d, R.canonical_unit(d))
    return n, d


def canonical(R: Ring, n: Any, d: Any) -> Pair:
    """Return the lowest-terms pair with a canonical denominator."""
    if not R.is_one(d):
        n, d = _cancel(R, n, d)
    u = R.canonical_unit(d)
    if R.is_one(u):
        return n, d
    return R.divexact(n, u), R.divexact(d, u)


def equal(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> bool:
    """Arithmetic equality, tried from the cheapest check to the dearest."""
    if d1 == d2 and n1 == n2:
        return True
    cn1, cd1 = canonical(R, n1, d1)
    cn2, cd2 = canonical(R, n2, d2)
    if cd1 == cd2 and cn1 == cn2:
        return True
    return n1 * d2 == d1 * n2


def equal_element(R: Ring, n: Any, d: Any, c: Any) -> bool:
    """Arithmetic equality of ``n/d`` with the base-domain element *c*."""
    if R.is_one(d) and n == c:
        return True
    cn, cd = canonical(R, n, d)
    if R.is_one(cd) and cn == c:
        return True
    return n == d * c


def isequal(R: Ring, n1: Any, d1: Any, n2: Any, d2: Any) -> bool:
    """Exact equality of the cross products, without canonicalising."""
    return R.isequal(n1 * d2, d1 * n2)


__all__ = [
    "add",
    "sub",
    "combine",
    "mul",
    "div",
    "mul_scalar",
    "div_scalar",
    "scalar_div",
    "gcd",
    "canonical",
    "equal",
    "equal_element",
    "isequal",
]
