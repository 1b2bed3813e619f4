import math
import unittest

import numpy as np

from src.neurosim.domain._errors import ShapeError
from src.neurosim.infrastructure.tensor._tensor import Tensor


class TestTensorZeros(unittest.TestCase):
    def test_zeros(self):
        t = Tensor.zeros((3, 2))
        self.assertEqual(t.shape, (3, 2))
        self.assertTrue(np.all(t.to_numpy() == 0.0))


class TestTensorRand(unittest.TestCase):
    def test_values_in_unit_interval(self):
        t = Tensor.rand((50, 40), rng=np.random.default_rng(0))
        arr = t.to_numpy()
        self.assertEqual(arr.dtype, np.float32)
        self.assertTrue(np.all(arr >= 0.0))
        self.assertTrue(np.all(arr < 1.0))

    def test_same_seed_same_values(self):
        a = Tensor.rand((4, 4), rng=np.random.default_rng(7))
        b = Tensor.rand((4, 4), rng=np.random.default_rng(7))
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

    def test_requires_explicit_generator(self):
        with self.assertRaises(TypeError):
            Tensor.rand((2, 2), rng=None)
        with self.assertRaises(TypeError):
            Tensor.rand((2, 2), rng=42)

    def test_rejects_invalid_shape(self):
        with self.assertRaises(ShapeError):
            Tensor.rand((0, 2), rng=np.random.default_rng(0))


class TestTensorXavierUniform(unittest.TestCase):
    def test_shape_and_bound(self):
        fan_in, fan_out = 3, 4
        w = Tensor.xavier_uniform(fan_in, fan_out, rng=np.random.default_rng(1))
        self.assertEqual(w.shape, (3, 4))

        bound = np.float32(math.sqrt(6.0 / (fan_in + fan_out)))
        arr = w.to_numpy()
        self.assertTrue(np.all(arr >= -bound))
        self.assertTrue(np.all(arr < bound))

    def test_values_are_spread_across_range(self):
        w = Tensor.xavier_uniform(100, 100, rng=np.random.default_rng(2))
        bound = math.sqrt(6.0 / 200.0)
        arr = w.to_numpy()
        self.assertLess(arr.min(), -0.5 * bound)
        self.assertGreater(arr.max(), 0.5 * bound)

    def test_same_seed_same_values(self):
        a = Tensor.xavier_uniform(5, 3, rng=np.random.default_rng(11))
        b = Tensor.xavier_uniform(5, 3, rng=np.random.default_rng(11))
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

    def test_different_seeds_differ(self):
        a = Tensor.xavier_uniform(5, 3, rng=np.random.default_rng(11))
        b = Tensor.xavier_uniform(5, 3, rng=np.random.default_rng(12))
        self.assertFalse(np.array_equal(a.to_numpy(), b.to_numpy()))

    def test_requires_explicit_generator(self):
        with self.assertRaises(TypeError):
            Tensor.xavier_uniform(2, 2, rng=None)

    def test_rejects_non_positive_fans(self):
        with self.assertRaises(ShapeError):
            Tensor.xavier_uniform(0, 2, rng=np.random.default_rng(0))


if __name__ == "__main__":
    unittest.main()
