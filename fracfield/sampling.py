"""Random elements of fraction fields."""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

import numpy as np

from .field import FractionField
from .fraction import Frac

LOG = logging.getLogger(__name__)

DEFAULT_SAMPLE_BOUND = 10

Sampler = Callable[[np.random.Generator], Any]
RandomState = Union[None, int, np.random.Generator]


def integer_sampler(bound: int = DEFAULT_SAMPLE_BOUND) -> Sampler:
    """Return a sampler drawing integers uniformly from ``[-bound, bound]``."""
    if bound < 1:
        raise ValueError("bound must be positive")

    def _draw(rng: np.random.Generator) -> int:
        return int(rng.integers(-bound, bound, endpoint=True))

    return _draw


def polynomial_sampler(degree: int, bound: int = DEFAULT_SAMPLE_BOUND) -> Sampler:
    """Return a sampler of integer coefficient lists of length ``degree + 1``."""
    if degree < 0:
        raise ValueError("degree must be non-negative")
    draw_coefficient = integer_sampler(bound)

    def _draw(rng: np.random.Generator) -> list:
        return [draw_coefficient(rng) for _ in range(degree + 1)]

    return _draw


def random_fraction(
    field: FractionField,
    sampler: Optional[Sampler] = None,
    rng: RandomState = None,
) -> Frac:
    """Return a random element of *field*.

    Numerator and denominator are drawn independently with *sampler* and
    coerced into the base ring; the denominator is redrawn until it is
    non-zero. *rng* is a :class:`numpy.random.Generator` or a seed.
    """
    if sampler is None:
        sampler = integer_sampler()
    rng = np.random.default_rng(rng)
    R = field.base_ring
    numerator = R(sampler(rng))
    denominator = R(sampler(rng))
    while R.is_zero(denominator):
        LOG.debug("Redrawing zero denominator for %r", field)
        denominator = R(sampler(rng))
    return field(numerator, denominator)


__all__ = [
    "DEFAULT_SAMPLE_BOUND",
    "integer_sampler",
    "polynomial_sampler",
    "random_fraction",
]
