"""In-place accumulator operations on fractions.

These overwrite the components of an existing :class:`~fracfield.fraction.Frac`
instead of allocating a new one, which matters in inner loops such as matrix
products over a fraction field. The destination is the only argument that is
mutated. All operand components are read before the destination is written,
so the destination may be the same object as an operand.

Results are computed by the same kernels as the operators and are identical
to them.
"""
from __future__ import annotations

from . import engine
from .fraction import Frac


def _check(c: Frac, *operands: Frac) -> None:
    for operand in operands:
        c._check_parent(operand)


def zero_out(c: Frac) -> Frac:
    """Set *c* to ``0/1`` and return it."""
    R = c.base_ring
    c._num = R.zero()
    if not R.is_one(c._den):
        c._den = R.one()
    return c


def copy_into(c: Frac, a: Frac) -> Frac:
    """Store a copy of the components of *a* in *c* and return *c*."""
    _check(c, a)
    if c is not a:
        R = c.base_ring
        c._num, c._den = R.copy(a._num), R.copy(a._den)
    return c


def mul_into(c: Frac, a: Frac, b: Frac) -> Frac:
    """Store ``a * b`` in *c* and return *c*."""
    _check(c, a, b)
    c._num, c._den = engine.mul(c.base_ring, a._num, a._den, b._num, b._den)
    return c


def add_into(c: Frac, a: Frac, b: Frac) -> Frac:
    """Store ``a + b`` in *c* and return *c*."""
    _check(c, a, b)
    c._num, c._den = engine.add(c.base_ring, a._num, a._den, b._num, b._den)
    return c


def sub_into(c: Frac, a: Frac, b: Frac) -> Frac:
    """Store ``a - b`` in *c* and return *c*."""
    _check(c, a, b)
    c._num, c._den = engine.sub(c.base_ring, a._num, a._den, b._num, b._den)
    return c


def add_assign(a: Frac, b: Frac) -> Frac:
    """Add *b* to *a* in place and return *a*."""
    return add_into(a, a, b)


__all__ = ["zero_out", "copy_into", "mul_into", "add_into", "sub_into", "add_assign"]
