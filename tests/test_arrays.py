import unittest

import numpy as np

from fracfield import (
    ZZ,
    Frac,
    FractionField,
    as_fraction_array,
    dot,
    matmul,
    zeros,
    zeros_like,
)


class FractionArrayTests(unittest.TestCase):
    def setUp(self):
        self.Q = FractionField(ZZ)

    def test_as_fraction_array_from_lists(self):
        Q = self.Q
        vector = as_fraction_array([1, 2, Q(1, 3)], Q)
        self.assertEqual(vector.dtype, object)
        self.assertEqual(vector.shape, (3,))
        self.assertTrue(all(isinstance(item, Frac) for item in vector))
        self.assertEqual(vector.tolist(), [Q(1), Q(2), Q(1, 3)])

        matrix = as_fraction_array([[1, 2], [3, 4]], Q)
        self.assertEqual(matrix.shape, (2, 2))
        self.assertEqual(matrix[1, 0], Q(3))

        with self.assertRaises(ValueError):
            as_fraction_array([[1, 2], [3]], Q)

    def test_as_fraction_array_from_ndarray(self):
        Q = self.Q
        converted = as_fraction_array(np.arange(4).reshape(2, 2), Q)
        self.assertEqual(converted.dtype, object)
        self.assertEqual(converted.tolist(), [[Q(0), Q(1)], [Q(2), Q(3)]])

        existing = np.array([Q(1, 2), Q(1, 3)], dtype=object)
        self.assertIs(as_fraction_array(existing, Q, copy=False), existing)
        self.assertIsNot(as_fraction_array(existing, Q), existing)

    def test_zeros_are_distinct(self):
        Q = self.Q
        array = zeros((2, 3), Q)
        self.assertEqual(array.shape, (2, 3))
        self.assertTrue(all(item == Q() for item in array.flat))
        self.assertIsNot(array[0, 0], array[0, 1])
        self.assertEqual(zeros(2, Q).shape, (2,))
        with self.assertRaises(ValueError):
            zeros((-1,), Q)

    def test_zeros_like(self):
        Q = self.Q
        values = [[Q(1, 2), Q(1, 3)], [Q(1, 4), Q(1, 5)]]
        like = zeros_like(values)
        self.assertEqual(like.shape, (2, 2))
        self.assertTrue(all(item.is_zero() for item in like.flat))
        self.assertEqual(zeros_like([1, 2, 3], Q).shape, (3,))
        with self.assertRaises(ValueError):
            zeros_like([1, 2, 3])

    def test_dot(self):
        Q = self.Q
        u = as_fraction_array([Q(1, 2), Q(1, 3), Q(1, 6)], Q)
        v = as_fraction_array([2, 3, 6], Q)
        self.assertEqual(dot(u, v), Q(3))
        self.assertEqual(dot(u, u), Q(7, 18))
        with self.assertRaises(ValueError):
            dot(u, v[:2])

    def test_matmul(self):
        Q = self.Q
        a = as_fraction_array([[Q(1, 2), Q(1, 3)], [Q(1, 4), Q(1, 5)]], Q)
        identity = as_fraction_array([[1, 0], [0, 1]], Q)
        self.assertEqual(matmul(a, identity).tolist(), a.tolist())

        b = as_fraction_array([[2, 0], [0, 3]], Q)
        product = matmul(a, b)
        self.assertEqual(product.tolist(), [[Q(1), Q(1)], [Q(1, 2), Q(3, 5)]])

        inverse = as_fraction_array([[12, -20], [-15, 30]], Q)
        self.assertEqual(matmul(a, inverse).tolist(), identity.tolist())

    def test_matmul_reuses_out(self):
        Q = self.Q
        a = as_fraction_array([[1, 2], [3, 4]], Q)
        out = zeros((2, 2), Q)
        slots = list(out.flat)
        with self.assertLogs("fracfield.arrays", level="DEBUG") as logs:
            result = matmul(a, a, out=out)
        self.assertIs(result, out)
        self.assertTrue(all(x is y for x, y in zip(result.flat, slots)))
        self.assertEqual(result.tolist(), [[Q(7), Q(10)], [Q(15), Q(22)]])
        self.assertIn("2x2 by 2x2", logs.output[0])

        matmul(a, zeros((2, 2), Q), out=out)
        self.assertTrue(all(item.is_zero() for item in out.flat))

    def test_matmul_into_an_operand(self):
        Q = self.Q
        a = as_fraction_array([[Q(1, 2), Q(1, 3)], [Q(1, 5), Q(1, 7)]], Q)
        b = as_fraction_array([[1, 2], [3, 4]], Q)
        expected = matmul(a, b).tolist()
        self.assertEqual(expected, [[Q(3, 2), Q(7, 3)], [Q(22, 35), Q(34, 35)]])

        slots = list(a.flat)
        with self.assertLogs("fracfield.arrays", level="DEBUG") as logs:
            result = matmul(a, b, out=a)
        self.assertIs(result, a)
        self.assertTrue(all(x is y for x, y in zip(a.flat, slots)))
        self.assertEqual(a.tolist(), expected)
        self.assertTrue(any("overlaps" in line for line in logs.output))

        c = as_fraction_array([[1, 2], [3, 4]], Q)
        matmul(c, c, out=c)
        self.assertEqual(c.tolist(), [[Q(7), Q(10)], [Q(15), Q(22)]])

    def test_matmul_rejects_repeated_out_slots(self):
        Q = self.Q
        a = as_fraction_array([[1, 2], [3, 4]], Q)
        out = np.empty((2, 2), dtype=object)
        shared = Q()
        out.fill(shared)
        with self.assertRaises(ValueError):
            matmul(a, a, out=out)
        self.assertTrue(shared.is_zero())

    def test_matmul_shape_errors(self):
        Q = self.Q
        a = zeros((2, 3), Q)
        with self.assertRaises(ValueError):
            matmul(a, a)
        with self.assertRaises(ValueError):
            matmul(a, zeros((3, 2), Q), out=zeros((3, 3), Q))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
