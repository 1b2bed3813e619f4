import math
import unittest

import numpy as np

from src.neurosim.domain.utils._weight_initialization import (
    _calculate_fan_in_and_fan_out,
)
from src.neurosim.infrastructure.tensor._tensor import Tensor
from src.neurosim.infrastructure.utils.weight_initializer import WeightInitializer


class TestFanInFanOut(unittest.TestCase):
    def test_rank_two(self):
        self.assertEqual(_calculate_fan_in_and_fan_out((3, 4)), (3, 4))

    def test_other_ranks_raise(self):
        with self.assertRaises(ValueError):
            _calculate_fan_in_and_fan_out((3,))
        with self.assertRaises(ValueError):
            _calculate_fan_in_and_fan_out((2, 3, 4))


class TestWeightInitializerRegistry(unittest.TestCase):
    def test_builtins_are_registered(self):
        names = WeightInitializer.available()
        for name in ("zeros", "uniform", "xavier_uniform"):
            self.assertIn(name, names)
        self.assertEqual(list(names), sorted(names))

    def test_unknown_name_raises(self):
        with self.assertRaises(ValueError) as cm:
            WeightInitializer("kaiming")
        self.assertIn("xavier_uniform", str(cm.exception))

    def test_duplicate_registration_raises(self):
        with self.assertRaises(ValueError):
            WeightInitializer.register_initializer("zeros")(lambda shape, *, rng: None)

    def test_empty_name_raises(self):
        with self.assertRaises(ValueError):
            WeightInitializer.register_initializer("")

    def test_register_custom_initializer(self):
        name = "test_ones"

        @WeightInitializer.register_initializer(name)
        def ones(shape, *, rng=None):
            return Tensor(shape, np.ones(shape))

        try:
            self.assertIs(WeightInitializer.get(name), ones)
            t = WeightInitializer(name)((2, 2))
            self.assertEqual(t.to_list(), [1.0, 1.0, 1.0, 1.0])

            @WeightInitializer.register_initializer(name, overwrite=True)
            def twos(shape, *, rng=None):
                return Tensor(shape, np.full(shape, 2.0))

            self.assertEqual(WeightInitializer(name)((1,)).to_list(), [2.0])
        finally:
            WeightInitializer.INITIALIZERS.pop(name, None)


class TestBuiltinInitializers(unittest.TestCase):
    def test_zeros_ignores_rng(self):
        t = WeightInitializer("zeros")((3,))
        self.assertEqual(t.shape, (3,))
        self.assertEqual(t.to_list(), [0.0, 0.0, 0.0])

    def test_uniform_uses_generator(self):
        a = WeightInitializer("uniform")((2, 3), rng=np.random.default_rng(5))
        b = Tensor.rand((2, 3), rng=np.random.default_rng(5))
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

    def test_uniform_requires_generator(self):
        with self.assertRaises(TypeError):
            WeightInitializer("uniform")((2, 3))

    def test_xavier_matches_tensor_factory(self):
        a = WeightInitializer("xavier_uniform")((4, 2), rng=np.random.default_rng(9))
        b = Tensor.xavier_uniform(4, 2, rng=np.random.default_rng(9))
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())

        bound = math.sqrt(6.0 / 6.0)
        self.assertTrue(np.all(np.abs(a.to_numpy()) <= bound))

    def test_xavier_requires_rank_two_shape(self):
        with self.assertRaises(ValueError):
            WeightInitializer("xavier_uniform")((4,), rng=np.random.default_rng(0))


if __name__ == "__main__":
    unittest.main()
