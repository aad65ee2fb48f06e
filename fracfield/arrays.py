"""NumPy object arrays of fractions and accumulator-based products."""
from __future__ import annotations

import itertools
import logging
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np

from .accumulate import add_assign, copy_into, mul_into, zero_out
from .field import FractionField
from .fraction import Frac

LOG = logging.getLogger(__name__)

Shape = Union[int, Tuple[int, ...]]


def as_fraction_array(values: Any, field: FractionField, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` with ``dtype=object`` of elements of *field*.

    ``values`` can be an existing NumPy array or (nested) lists and tuples of
    anything *field* can coerce. When ``copy`` is ``False`` and ``values`` is
    already an object array of fractions in *field*, it is returned unchanged.
    """
    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype != object:
            array = array.astype(object, copy=False)
        if all(isinstance(item, Frac) and item.parent == field for item in array.flat):
            return array
        vectorised = np.vectorize(lambda item: field(item), otypes=[object])
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        if values and all(isinstance(item, (list, tuple, np.ndarray)) for item in values):
            rows = [as_fraction_array(item, field, copy=copy) for item in values]
            if any(row.shape != rows[0].shape for row in rows):
                raise ValueError("nested sequences must have a uniform shape")
            array = np.empty((len(rows),) + rows[0].shape, dtype=object)
            for index, row in enumerate(rows):
                array[index] = row
            return array
        # Fill element by element so NumPy never iterates into base-ring elements.
        array = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            array[index] = field(item)
        return array

    return as_fraction_array(list(values), field, copy=copy)


def zeros(shape: Shape, field: FractionField) -> np.ndarray:
    """Return an array of the given shape filled with distinct zero fractions."""
    if isinstance(shape, int):
        shape = (shape,)
    if any(extent < 0 for extent in shape):
        raise ValueError("shape must be non-negative")
    array = np.empty(shape, dtype=object)
    for index in np.ndindex(*shape):
        array[index] = field.zero()
    return array


def zeros_like(values: Any, field: Optional[FractionField] = None) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""
    if field is None:
        field = _infer_field(np.asarray(values, dtype=object).flat)
    array = as_fraction_array(values, field)
    return zeros(array.shape, field)


def _infer_field(items: Any) -> FractionField:
    for item in items:
        if isinstance(item, Frac):
            return item.parent
    raise ValueError("cannot infer the fraction field; pass field= explicitly")


def dot(u: Sequence[Frac], v: Sequence[Frac], *, field: Optional[FractionField] = None) -> Frac:
    """Return the inner product of two vectors of fractions."""
    u = np.asarray(u, dtype=object)
    v = np.asarray(v, dtype=object)
    if u.ndim != 1 or u.shape != v.shape:
        raise ValueError(f"dot requires vectors of equal length, got {u.shape} and {v.shape}")
    if field is None:
        field = _infer_field(u.flat)
    acc = field.zero()
    tmp = field.zero()
    for x, y in zip(u, v):
        add_assign(acc, mul_into(tmp, x, y))
    return acc


def matmul(
    a: Any,
    b: Any,
    *,
    out: Optional[np.ndarray] = None,
    field: Optional[FractionField] = None,
) -> np.ndarray:
    """Return the matrix product of two 2-D object arrays of fractions.

    Every entry is accumulated in place. When *out* is given its fractions are
    reset with :func:`zero_out` and reused as accumulators. If *out* shares
    fractions with *a* or *b* (e.g. ``out=a``) the product is accumulated in
    fresh fractions and copied into *out* afterwards. The fractions in *out*
    must be distinct objects.
    """
    a = np.asarray(a, dtype=object)
    b = np.asarray(b, dtype=object)
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[0]:
        raise ValueError(f"shapes {a.shape} and {b.shape} are not aligned")
    if field is None:
        field = _infer_field(a.flat) if a.size else _infer_field(b.flat)
    rows, inner = a.shape
    cols = b.shape[1]
    LOG.debug("Accumulating %dx%d by %dx%d product", rows, inner, inner, cols)
    if out is None:
        out = zeros((rows, cols), field)
        target = out
    else:
        target = _accumulator_for(out, (rows, cols), a, b, field)
    tmp = field.zero()
    for i in range(rows):
        for j in range(cols):
            acc = zero_out(target[i, j])
            for k in range(inner):
                add_assign(acc, mul_into(tmp, a[i, k], b[k, j]))
    if target is not out:
        for index in np.ndindex(rows, cols):
            copy_into(out[index], target[index])
    return out


def _accumulator_for(
    out: np.ndarray,
    shape: Tuple[int, int],
    a: np.ndarray,
    b: np.ndarray,
    field: FractionField,
) -> np.ndarray:
    """Return *out*, or a fresh array when *out* overlaps an operand."""
    if out.shape != shape:
        raise ValueError(f"out has shape {out.shape}, expected {shape}")
    slots = {id(item) for item in out.flat}
    if len(slots) != out.size:
        raise ValueError("out must not hold the same fraction in more than one slot")
    if any(id(item) in slots for item in itertools.chain(a.flat, b.flat)):
        LOG.debug("out overlaps an operand; accumulating into a fresh array")
        return zeros(shape, field)
    return out


__all__ = ["as_fraction_array", "zeros", "zeros_like", "dot", "matmul"]
