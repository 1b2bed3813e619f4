import math
import unittest

import numpy as np

from src.neurosim.domain._errors import MissingDependencyError, ShapeError
from src.neurosim.infrastructure.ops._linear import Linear
from src.neurosim.infrastructure.tensor._tensor import Tensor


def _fixed_linear(op_id="l0"):
    weight = Tensor((2, 2), [0.1, 0.3, 0.2, 0.4])
    bias = Tensor((2,), [0.5, 0.6])
    return Linear(op_id, 2, 2, weight=weight, bias=bias)


class TestLinearForward(unittest.TestCase):
    def test_affine_transform_with_known_values(self):
        op = _fixed_linear()
        out = op.compute({"input": Tensor((1, 2), [1.0, 2.0])})
        self.assertEqual(set(out), {"output"})

        y = out["output"]
        self.assertEqual(y.shape, (1, 2))
        self.assertAlmostEqual(y[0], 1.0, places=5)
        self.assertAlmostEqual(y[1], 1.7, places=5)

    def test_batch_input(self):
        op = _fixed_linear()
        x = Tensor((3, 2), [1, 2, 0, 0, -1, 1])
        y = op.compute({"input": x})["output"].to_numpy()

        w = np.array([[0.1, 0.3], [0.2, 0.4]], dtype=np.float32)
        b = np.array([0.5, 0.6], dtype=np.float32)
        np.testing.assert_allclose(y, x.to_numpy() @ w + b, rtol=1e-6, atol=1e-6)

    def test_input_is_not_modified(self):
        op = _fixed_linear()
        x = Tensor((1, 2), [1.0, 2.0])
        op.compute({"input": x})
        self.assertEqual(x.to_list(), [1.0, 2.0])

    def test_rank_one_input_raises(self):
        op = _fixed_linear()
        with self.assertRaises(ShapeError):
            op.compute({"input": Tensor((2,), [1.0, 2.0])})

    def test_wrong_feature_count_raises(self):
        op = _fixed_linear()
        with self.assertRaises(ShapeError):
            op.compute({"input": Tensor((1, 3))})

    def test_missing_input_port_raises(self):
        op = _fixed_linear()
        with self.assertRaises(MissingDependencyError) as cm:
            op.compute({})
        self.assertEqual(cm.exception.op_id, "l0")
        self.assertEqual(cm.exception.port, "input")


class TestLinearParameters(unittest.TestCase):
    def test_default_initialization(self):
        op = Linear("l0", 3, 4, rng=np.random.default_rng(0))
        weight = op.parameters["weight"]
        bias = op.parameters["bias"]
        self.assertEqual(weight.shape, (3, 4))
        self.assertEqual(bias.shape, (4,))
        self.assertEqual(bias.to_list(), [0.0] * 4)

        bound = math.sqrt(6.0 / 7.0)
        self.assertTrue(np.all(np.abs(weight.to_numpy()) <= bound))

    def test_same_seed_same_parameters(self):
        a = Linear("a", 5, 3, rng=np.random.default_rng(21))
        b = Linear("b", 5, 3, rng=np.random.default_rng(21))
        np.testing.assert_array_equal(
            a.parameters["weight"].to_numpy(), b.parameters["weight"].to_numpy()
        )

    def test_custom_initializers(self):
        op = Linear(
            "l0", 2, 3, rng=np.random.default_rng(0),
            weight_init="zeros", bias_init="uniform",
        )
        self.assertEqual(op.parameters["weight"].to_list(), [0.0] * 6)
        bias = op.parameters["bias"].to_numpy()
        self.assertTrue(np.all((bias >= 0.0) & (bias < 1.0)))

    def test_generator_required_for_generated_parameters(self):
        with self.assertRaises(ValueError):
            Linear("l0", 2, 2)
        with self.assertRaises(ValueError):
            Linear("l0", 2, 2, weight=Tensor((2, 2)))

    def test_explicit_parameters_are_cloned(self):
        weight = Tensor((2, 2), [0.1, 0.3, 0.2, 0.4])
        bias = Tensor((2,), [0.5, 0.6])
        op = Linear("l0", 2, 2, weight=weight, bias=bias)

        weight[0] = 99.0
        bias[0] = 99.0
        self.assertAlmostEqual(op.parameters["weight"][0], 0.1, places=6)
        self.assertAlmostEqual(op.parameters["bias"][0], 0.5, places=6)

    def test_explicit_parameters_may_be_views(self):
        weight = Tensor((4,), [0.1, 0.3, 0.2, 0.4]).reshape(2, 2)
        op = Linear("l0", 2, 2, weight=weight, bias=Tensor((2,)))
        self.assertIsInstance(op.parameters["weight"], Tensor)
        self.assertEqual(op.parameters["weight"].shape, (2, 2))

    def test_parameter_shape_mismatch_raises(self):
        with self.assertRaises(ShapeError):
            Linear("l0", 2, 2, weight=Tensor((2, 3)), bias=Tensor((2,)))
        with self.assertRaises(ShapeError):
            Linear("l0", 2, 2, weight=Tensor((2, 2)), bias=Tensor((1, 2)))

    def test_non_positive_features_raise(self):
        with self.assertRaises(ValueError):
            Linear("l0", 0, 2, rng=np.random.default_rng(0))
        with self.assertRaises(ValueError):
            Linear("l0", 2, -1, rng=np.random.default_rng(0))


class TestLinearDescriptors(unittest.TestCase):
    def test_static_descriptors(self):
        self.assertEqual(Linear.op_type, "Linear")
        self.assertEqual(Linear.input_names, ("input",))
        self.assertEqual(Linear.output_names, ("output",))

    def test_describe(self):
        self.assertEqual(_fixed_linear().describe(), "Linear(2 → 2)")

    def test_name_defaults_to_id(self):
        self.assertEqual(_fixed_linear("dense").name, "dense")
        op = Linear("l0", 1, 1, rng=np.random.default_rng(0), name="Output")
        self.assertEqual(op.name, "Output")


if __name__ == "__main__":
    unittest.main()
