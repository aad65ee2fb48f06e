"""Elements of a fraction field with NumPy interoperability."""
from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any, Callable, Tuple

import numpy as np

from . import engine
from .domains import Ring
from .errors import (
    CoercionFailure,
    DivisionByZero,
    IncompatibleParent,
    UnsupportedOperation,
)

if TYPE_CHECKING:  # pragma: no cover - imports for annotations only
    from .field import FractionField


class Frac:
    """A fraction ``numerator / denominator`` over the base ring of its parent.

    The stored pair is not necessarily in lowest terms. Use
    :meth:`numerator` and :meth:`denominator` with ``canonical=True`` (the
    default) to obtain the reduced representative, or ``canonical=False`` to
    read the stored components.

    Instances are mutable only through the accumulator functions in
    :mod:`fracfield.accumulate`; do not mutate a fraction used as a dict key.
    """

    __slots__ = ("_num", "_den", "_parent")
    __array_priority__ = 1000.0  # Prefer Frac semantics in NumPy expressions.

    def __init__(self, parent: "FractionField", numerator: Any, denominator: Any) -> None:
        # Validation happens in FractionField.__call__; this is the raw constructor.
        self._parent = parent
        self._num = numerator
        self._den = denominator

    # ------------------------------------------------------------------
    # Properties and accessors
    @property
    def parent(self) -> "FractionField":
        return self._parent

    @property
    def base_ring(self) -> Ring:
        return self._parent.base_ring

    def numerator(self, canonical: bool = True) -> Any:
        """Return the numerator, reduced and unit-normalised if *canonical*."""
        if canonical:
            return engine.canonical(self.base_ring, self._num, self._den)[0]
        return self._num

    def denominator(self, canonical: bool = True) -> Any:
        """Return the denominator, reduced and unit-normalised if *canonical*."""
        if canonical:
            return engine.canonical(self.base_ring, self._num, self._den)[1]
        return self._den

    def is_zero(self) -> bool:
        return self.base_ring.is_zero(self._num)

    def is_one(self) -> bool:
        return self._num == self._den

    def is_unit(self) -> bool:
        return not self.is_zero()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def copy(self) -> "Frac":
        R = self.base_ring
        return Frac(self._parent, R.copy(self._num), R.copy(self._den))

    def __copy__(self) -> "Frac":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Frac":
        return self.copy()

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Frac({self._num!r}, {self._den!r})"

    def __str__(self) -> str:
        n, d = engine.canonical(self.base_ring, self._num, self._den)
        if self.base_ring.is_one(d):
            return str(n)
        return f"{_wrap(n)}/{_wrap(d)}"

    # ------------------------------------------------------------------
    # Internal helpers
    def _check_parent(self, other: "Frac") -> None:
        if self._parent is not other._parent and self._parent != other._parent:
            raise IncompatibleParent(
                f"Incompatible rings in fraction field operation: "
                f"{self._parent!r} and {other._parent!r}"
            )

    def _new(self, pair: Tuple[Any, Any]) -> "Frac":
        return Frac(self._parent, pair[0], pair[1])

    def _binary_operation(
        self,
        other: Any,
        frac_op: Callable[["Frac", "Frac"], Any],
        element_op: Callable[["Frac", Any], Any],
    ) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: self._binary_operation(x, frac_op, element_op),
                otypes=[object],
            )
            return vectorised(other)
        if isinstance(other, Frac):
            self._check_parent(other)
            return frac_op(self, other)
        try:
            element = self.base_ring(other)
        except CoercionFailure:
            return NotImplemented
        return element_op(self, element)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError("Unsupported exponent type")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise ValueError("Exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        R = self.base_ring

        def _add(a: "Frac", b: "Frac") -> "Frac":
            return a._new(engine.add(R, a._num, a._den, b._num, b._den))

        def _add_element(a: "Frac", c: Any) -> "Frac":
            return Frac(a._parent, a._num + a._den * c, R.copy(a._den))

        return self._binary_operation(other, _add, _add_element)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        R = self.base_ring

        def _sub(a: "Frac", b: "Frac") -> "Frac":
            return a._new(engine.sub(R, a._num, a._den, b._num, b._den))

        def _sub_element(a: "Frac", c: Any) -> "Frac":
            return Frac(a._parent, a._num - a._den * c, R.copy(a._den))

        return self._binary_operation(other, _sub, _sub_element)

    def __rsub__(self, other: Any) -> Any:
        R = self.base_ring

        def _rsub_element(a: "Frac", c: Any) -> "Frac":
            return Frac(a._parent, c * a._den - a._num, R.copy(a._den))

        return self._binary_operation(other, lambda a, b: b - a, _rsub_element)

    def __mul__(self, other: Any) -> Any:
        R = self.base_ring

        def _mul(a: "Frac", b: "Frac") -> "Frac":
            return a._new(engine.mul(R, a._num, a._den, b._num, b._den))

        def _mul_element(a: "Frac", c: Any) -> "Frac":
            return a._new(engine.mul_scalar(R, a._num, a._den, c))

        return self._binary_operation(other, _mul, _mul_element)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        R = self.base_ring

        def _truediv(a: "Frac", b: "Frac") -> "Frac":
            if b.is_zero():
                raise DivisionByZero("division by zero")
            return a._new(engine.div(R, a._num, a._den, b._num, b._den))

        def _truediv_element(a: "Frac", c: Any) -> "Frac":
            if R.is_zero(c):
                raise DivisionByZero("division by zero")
            return a._new(engine.div_scalar(R, a._num, a._den, c))

        return self._binary_operation(other, _truediv, _truediv_element)

    def __rtruediv__(self, other: Any) -> Any:
        R = self.base_ring

        def _rtruediv_element(a: "Frac", c: Any) -> "Frac":
            if a.is_zero():
                raise DivisionByZero("division by zero")
            return a._new(engine.scalar_div(R, c, a._num, a._den))

        return self._binary_operation(other, lambda a, b: b / a, _rtruediv_element)

    def divexact(self, other: Any) -> Any:
        """Alias of ``self / other``; division in a field is always exact."""
        return self / other

    def divides(self, other: "Frac") -> Tuple[bool, "Frac"]:
        """Return ``(flag, q)`` with ``self == q * other`` when *flag* is set."""
        self._check_parent(other)
        if self.is_zero():
            return True, self._parent.zero()
        if other.is_zero():
            return False, self._parent.zero()
        return True, self / other

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        power = self._coerce_power(exponent)
        base = self
        if power < 0:
            base = self.inv()
            power = -power
        return Frac(self._parent, base.numerator() ** power, base.denominator() ** power)

    def __neg__(self) -> "Frac":
        return Frac(self._parent, -self._num, self.base_ring.copy(self._den))

    def __pos__(self) -> "Frac":  # pragma: no cover - trivial
        return self

    def inv(self) -> "Frac":
        """Return the multiplicative inverse by swapping the components."""
        if self.is_zero():
            raise DivisionByZero("cannot invert zero")
        R = self.base_ring
        return Frac(self._parent, R.copy(self._den), R.copy(self._num))

    def __invert__(self) -> "Frac":
        return self.inv()

    # ------------------------------------------------------------------
    # Comparisons
    def __eq__(self, other: Any) -> bool:
        R = self.base_ring
        if isinstance(other, Frac):
            if self._parent is not other._parent and self._parent != other._parent:
                return False
            return engine.equal(R, self._num, self._den, other._num, other._den)
        try:
            element = R(other)
        except CoercionFailure:
            return False
        return engine.equal_element(R, self._num, self._den, element)

    def isequal(self, other: "Frac") -> bool:
        """Return ``True`` only if the cross products agree exactly.

        Unlike ``==`` no canonicalisation takes place, so for base rings with
        inexact elements (e.g. truncated power series) only representatives
        that match precisely compare equal.
        """
        if not isinstance(other, Frac) or self._parent != other._parent:
            return False
        return engine.isequal(self.base_ring, self._num, self._den, other._num, other._den)

    def __hash__(self) -> int:
        # Hash the canonical pair so equal fractions hash alike.
        R = self.base_ring
        n, d = engine.canonical(R, self._num, self._den)
        if R.is_one(d):
            return R.hash_element(n)
        return hash((R.hash_element(n), R.hash_element(d)))

    # ------------------------------------------------------------------
    # GCD, valuation and square roots
    def gcd(self, other: "Frac") -> "Frac":
        """Return ``gcd(ad, bc)/bd`` in lowest terms for ``a/b`` and ``c/d``."""
        self._check_parent(other)
        return self._new(engine.gcd(self.base_ring, self._num, self._den, other._num, other._den))

    def remove(self, p: Any) -> Tuple[int, "Frac"]:
        """Return ``(k, x)`` with ``self == p**k * x`` and *x* of valuation zero at *p*."""
        if self.is_zero():
            raise UnsupportedOperation("remove is not implemented for zero")
        R = self.base_ring
        p = R(p)
        v, d = R.remove(self._den, p)
        w, n = R.remove(self._num, p)
        return w - v, Frac(self._parent, R.copy(n), R.copy(d))

    def valuation(self, p: Any) -> int:
        """Return the valuation of this fraction at *p*."""
        return self.remove(p)[0]

    def is_square(self) -> bool:
        R = self.base_ring
        n, d = engine.canonical(R, self._num, self._den)
        return R.is_square(n) and R.is_square(d)

    def sqrt(self) -> "Frac":
        """Return a square root, raising :class:`NotASquare` if there is none."""
        R = self.base_ring
        n, d = engine.canonical(R, self._num, self._den)
        return Frac(self._parent, R.sqrt(n), R.sqrt(d))


def _wrap(value: Any) -> str:
    text = str(value)
    if any(ch in text for ch in " */"):
        return f"({text})"
    return text


__all__ = ["Frac"]
