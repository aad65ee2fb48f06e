"""Fraction field parents and the cache that shares them."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .domains import Ring
from .errors import CoercionFailure, DivisionByZero
from .fraction import Frac

LOG = logging.getLogger(__name__)


class FractionField:
    """The field of fractions of an integral domain.

    Calling the field constructs elements::

        >>> Q = FractionField(ZZ)
        >>> Q(6, 4).numerator(), Q(6, 4).denominator()
        (3, 2)

    Two fields are the same parent iff their base rings are equal.
    """

    __slots__ = ("_base_ring",)

    def __init__(self, base_ring: Ring) -> None:
        if not isinstance(base_ring, Ring):
            raise CoercionFailure(f"{base_ring!r} is not a base ring")
        self._base_ring = base_ring

    @property
    def base_ring(self) -> Ring:
        return self._base_ring

    @property
    def characteristic(self) -> int:
        return self._base_ring.characteristic

    @property
    def is_exact(self) -> bool:
        return self._base_ring.is_exact

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FractionField):
            return NotImplemented
        return self._base_ring == other._base_ring

    def __hash__(self) -> int:
        return hash((FractionField, self._base_ring))

    def __repr__(self) -> str:
        return f"Fraction field of {self._base_ring!r}"

    # ------------------------------------------------------------------
    # Element construction
    def _element(self, value: Any) -> Any:
        R = self._base_ring
        if R.contains(value):
            # The new fraction owns its components.
            return R.copy(value)
        return R(value)

    def __call__(self, numerator: Any = None, denominator: Any = None) -> Frac:
        R = self._base_ring
        if numerator is None:
            if denominator is not None:
                raise CoercionFailure("a denominator requires a numerator")
            return Frac(self, R.zero(), R.one())
        if isinstance(numerator, Frac):
            if denominator is not None:
                return self(numerator) / self(denominator)
            if numerator.parent != self:
                raise CoercionFailure(f"Could not coerce {numerator!r} into {self!r}")
            return numerator
        num = self._element(numerator)
        if denominator is None:
            return Frac(self, num, R.one())
        den = self._element(denominator)
        if R.is_zero(den):
            raise DivisionByZero("denominator must be non-zero")
        return Frac(self, num, den)

    def lowest_terms(self, numerator: Any, denominator: Any) -> Frac:
        """Return ``numerator / denominator`` with their gcd divided out."""
        value = self(numerator, denominator)
        R = self._base_ring
        g = R.gcd(value._num, value._den)
        if not R.is_one(g):
            value._num = R.divexact(value._num, g)
            value._den = R.divexact(value._den, g)
        return value

    def zero(self) -> Frac:
        return self()

    def one(self) -> Frac:
        return Frac(self, self._base_ring.one(), self._base_ring.one())


class FieldCache:
    """Host-owned mapping from base rings to their fraction fields.

    Entries live as long as the cache; there is no eviction.
    """

    def __init__(self) -> None:
        self._fields: Dict[Ring, FractionField] = {}

    def get(self, base_ring: Ring) -> FractionField:
        field = self._fields.get(base_ring)
        if field is None:
            LOG.debug("Creating cached fraction field over %r", base_ring)
            field = FractionField(base_ring)
            self._fields[base_ring] = field
        else:
            LOG.debug("Reusing cached fraction field over %r", base_ring)
        return field

    def __contains__(self, base_ring: Any) -> bool:
        return base_ring in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def clear(self) -> None:
        self._fields.clear()


SHARED_CACHE = FieldCache()


def fraction_field(
    base_ring: Ring,
    cached: bool = False,
    *,
    cache: Optional[FieldCache] = None,
) -> FractionField:
    """Return the fraction field of *base_ring*.

    With ``cached=True`` the field is taken from *cache*, or from the
    process-wide :data:`SHARED_CACHE` when no cache is given, so repeated
    calls return the same parent object. Passing *cache* implies caching.
    """
    if cache is not None:
        return cache.get(base_ring)
    if cached:
        return SHARED_CACHE.get(base_ring)
    return FractionField(base_ring)


__all__ = ["FractionField", "FieldCache", "SHARED_CACHE", "fraction_field"]
