import unittest
from fractions import Fraction

import numpy as np

from fracfield import (
    ZZ,
    CoercionFailure,
    DivisionByZero,
    FractionField,
    InexactDivision,
    IntegerRing,
    NotASquare,
    Ring,
    UnsupportedOperation,
)


class BareIntegers(Ring):
    """Bare domain that only supplies the mandatory capabilities."""

    def zero(self):
        return 0

    def one(self):
        return 1

    def __call__(self, value):
        return ZZ(value)

    def contains(self, value):
        return ZZ.contains(value)

    def divexact(self, a, b):
        return ZZ.divexact(a, b)

    def gcd(self, a, b):
        return ZZ.gcd(a, b)

    def canonical_unit(self, a):
        return ZZ.canonical_unit(a)


class IntegerRingTests(unittest.TestCase):
    def test_identity(self):
        self.assertEqual(IntegerRing(), ZZ)
        self.assertEqual(hash(IntegerRing()), hash(ZZ))
        self.assertEqual(repr(ZZ), "Integer Ring")
        self.assertEqual(ZZ.characteristic, 0)
        self.assertTrue(ZZ.is_exact)

    def test_coercion(self):
        self.assertEqual(ZZ(7), 7)
        self.assertEqual(ZZ(np.int32(-4)), -4)
        self.assertEqual(ZZ(Fraction(6, 1)), 6)
        self.assertEqual(ZZ(3.0), 3)
        for bad in (True, 2.5, Fraction(1, 3), "4", None):
            with self.assertRaises(CoercionFailure):
                ZZ(bad)
        with self.assertRaises(TypeError):
            ZZ([1])

    def test_contains(self):
        self.assertTrue(ZZ.contains(5))
        self.assertFalse(ZZ.contains(False))
        self.assertFalse(ZZ.contains(5.0))

    def test_divexact(self):
        self.assertEqual(ZZ.divexact(12, -4), -3)
        with self.assertRaises(InexactDivision):
            ZZ.divexact(12, 5)
        with self.assertRaises(DivisionByZero):
            ZZ.divexact(12, 0)

    def test_gcd_and_canonical_unit(self):
        self.assertEqual(ZZ.gcd(12, -18), 6)
        self.assertEqual(ZZ.gcd(0, 0), 0)
        self.assertEqual(ZZ.canonical_unit(-5), -1)
        self.assertEqual(ZZ.canonical_unit(0), 1)

    def test_squares(self):
        self.assertTrue(ZZ.is_square(0))
        self.assertTrue(ZZ.is_square(49))
        self.assertFalse(ZZ.is_square(50))
        self.assertFalse(ZZ.is_square(-4))
        self.assertEqual(ZZ.sqrt(144), 12)
        with self.assertRaises(NotASquare):
            ZZ.sqrt(-9)

    def test_remove(self):
        self.assertEqual(ZZ.remove(48, 2), (4, 3))
        self.assertEqual(ZZ.remove(-27, 3), (3, -1))
        self.assertEqual(ZZ.remove(10, 3), (0, 10))
        self.assertEqual(ZZ.valuation(40, 2), 3)
        for p in (0, 1, -1):
            with self.assertRaises(UnsupportedOperation):
                ZZ.remove(10, p)
        with self.assertRaises(UnsupportedOperation):
            ZZ.remove(0, 2)


class RingDefaultsTests(unittest.TestCase):
    def setUp(self):
        self.R = BareIntegers()

    def test_default_predicates(self):
        self.assertTrue(self.R.is_zero(0))
        self.assertTrue(self.R.is_one(1))
        self.assertTrue(self.R.isequal(3, 3))
        self.assertEqual(self.R.copy(5), 5)
        self.assertEqual(self.R.hash_element(5), hash(5))

    def test_optional_capabilities_are_unsupported(self):
        with self.assertRaises(UnsupportedOperation):
            self.R.is_square(4)
        with self.assertRaises(UnsupportedOperation):
            self.R.sqrt(4)
        with self.assertRaises(UnsupportedOperation):
            self.R.remove(4, 2)
        with self.assertRaises(NotImplementedError):
            self.R.valuation(4, 2)

    def test_fraction_operations_surface_missing_capabilities(self):
        F = FractionField(self.R)
        self.assertEqual(F(1, 2) + F(1, 3), F(5, 6))
        with self.assertRaises(UnsupportedOperation):
            F(4, 9).sqrt()
        with self.assertRaises(UnsupportedOperation):
            F(4, 9).remove(2)

    def test_abstract_ring_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            Ring()


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
