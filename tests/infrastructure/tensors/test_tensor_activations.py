import unittest

import numpy as np

from src.neurosim.domain._errors import UnsupportedError
from src.neurosim.infrastructure.tensor._tensor import Tensor


class TestReluSigmoidTanh(unittest.TestCase):
    def setUp(self):
        self.x = Tensor((2, 3), [-2.0, -0.5, 0.0, 0.5, 1.0, 3.0])

    def test_relu(self):
        out = Tensor.relu(self.x)
        self.assertEqual(out.shape, (2, 3))
        self.assertEqual(out.to_list(), [0.0, 0.0, 0.0, 0.5, 1.0, 3.0])

    def test_sigmoid(self):
        out = Tensor.sigmoid(self.x)
        expected = 1.0 / (1.0 + np.exp(-self.x.to_numpy().astype(np.float64)))
        np.testing.assert_allclose(out.to_numpy(), expected, rtol=1e-6)
        self.assertEqual(out.dtype, np.float32)

    def test_sigmoid_of_zero_is_half(self):
        self.assertEqual(Tensor.sigmoid(Tensor((1,), [0.0]))[0], 0.5)

    def test_sigmoid_saturates_without_overflow(self):
        x = Tensor((2,), [-1000.0, 1000.0])
        with np.errstate(over="raise", invalid="raise"):
            out = Tensor.sigmoid(x)
        self.assertAlmostEqual(out[0], 0.0, places=7)
        self.assertAlmostEqual(out[1], 1.0, places=7)

    def test_tanh(self):
        out = Tensor.tanh(self.x)
        np.testing.assert_allclose(out.to_numpy(), np.tanh(self.x.to_numpy()), rtol=1e-6)

    def test_operand_is_not_modified(self):
        before = self.x.to_list()
        Tensor.relu(self.x)
        Tensor.sigmoid(self.x)
        Tensor.tanh(self.x)
        self.assertEqual(self.x.to_list(), before)


class TestScalarPrimitives(unittest.TestCase):
    def test_scalar_results_stay_rank_zero(self):
        x = Tensor((), [-3.0])
        for out in (Tensor.relu(x), Tensor.sigmoid(x), Tensor.tanh(x)):
            self.assertEqual(out.shape, ())
            self.assertEqual(out.to_numpy().shape, ())

    def test_scalar_relu_then_add(self):
        out = Tensor.add(Tensor.relu(Tensor((), [3.0])), Tensor((), [1.5]))
        self.assertEqual(out.shape, ())
        self.assertEqual(out.to_numpy().shape, ())
        self.assertEqual(out[0], 4.5)
        self.assertEqual(str(out), "Tensor[] [4.5000]")


class TestSoftmax(unittest.TestCase):
    def test_rank_one_sums_to_one(self):
        out = Tensor.softmax(Tensor((3,), [1.0, 2.0, 3.0]))
        self.assertAlmostEqual(sum(out.to_list()), 1.0, places=6)
        e = np.exp([1.0, 2.0, 3.0])
        np.testing.assert_allclose(out.to_list(), e / e.sum(), rtol=1e-6)

    def test_rank_two_normalizes_each_row(self):
        x = Tensor((2, 3), [1.0, 2.0, 3.0, 0.0, 0.0, 0.0])
        out = Tensor.softmax(x).to_numpy()
        np.testing.assert_allclose(out.sum(axis=1), [1.0, 1.0], atol=1e-6)
        np.testing.assert_allclose(out[1], [1 / 3, 1 / 3, 1 / 3], atol=1e-6)

    def test_large_inputs_do_not_overflow(self):
        x = Tensor((3,), [1000.0, 1001.0, 1002.0])
        with np.errstate(over="raise", invalid="raise"):
            out = Tensor.softmax(x)
        self.assertTrue(np.all(np.isfinite(out.to_numpy())))
        self.assertAlmostEqual(sum(out.to_list()), 1.0, places=6)

    def test_invariant_to_constant_shift(self):
        small = Tensor.softmax(Tensor((3,), [1.0, 2.0, 3.0]))
        large = Tensor.softmax(Tensor((3,), [1000.0, 1001.0, 1002.0]))
        np.testing.assert_allclose(small.to_numpy(), large.to_numpy(), atol=1e-6)

    def test_preserves_order(self):
        out = Tensor.softmax(Tensor((4,), [0.3, -1.0, 2.0, 0.0])).to_list()
        self.assertEqual(int(np.argmax(out)), 2)
        self.assertEqual(int(np.argmin(out)), 1)

    def test_rank_three_is_unsupported(self):
        with self.assertRaises(UnsupportedError) as cm:
            Tensor.softmax(Tensor((2, 2, 2)))
        self.assertEqual(cm.exception.rank, 3)

    def test_scalar_is_unsupported(self):
        with self.assertRaises(UnsupportedError):
            Tensor.softmax(Tensor((), [1.0]))


if __name__ == "__main__":
    unittest.main()
