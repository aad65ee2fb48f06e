"""Generic fraction fields over integral domains."""

from .accumulate import add_assign, add_into, copy_into, mul_into, sub_into, zero_out
from .arrays import as_fraction_array, dot, matmul, zeros, zeros_like
from .domains import ZZ, IntegerRing, Ring
from .errors import (
    CoercionFailure,
    DivisionByZero,
    FractionFieldError,
    IncompatibleParent,
    InexactDivision,
    NotASquare,
    UnsupportedOperation,
)
from .field import SHARED_CACHE, FieldCache, FractionField, fraction_field
from .fraction import Frac
from .sampling import random_fraction

__all__ = [
    "Frac",
    "FractionField",
    "FieldCache",
    "SHARED_CACHE",
    "fraction_field",
    "Ring",
    "IntegerRing",
    "ZZ",
    "zero_out",
    "copy_into",
    "mul_into",
    "add_into",
    "sub_into",
    "add_assign",
    "as_fraction_array",
    "zeros",
    "zeros_like",
    "dot",
    "matmul",
    "random_fraction",
    "FractionFieldError",
    "DivisionByZero",
    "IncompatibleParent",
    "CoercionFailure",
    "NotASquare",
    "UnsupportedOperation",
    "InexactDivision",
]
