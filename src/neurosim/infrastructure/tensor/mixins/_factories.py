"""
Tensor factory mixin.

This module defines `TensorFactoriesMixin`, which provides the classmethod
constructors of `Tensor`: zero-filled tensors, uniform random tensors,
Xavier/Glorot uniform weight matrices, and conversions from NumPy arrays and
nested Python sequences.

Randomness
----------
Random factories require an explicit `numpy.random.Generator`. There is no
fallback to a shared global generator: the same generator seed and the same
call sequence always produce the same values.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from ....domain._errors import ShapeError
from .._shape import ShapeLike, normalize_shape
from ._storage import DTYPE


def _require_generator(rng: Any, op: str) -> np.random.Generator:
    """Validate that `rng` is an explicit NumPy generator."""
    if not isinstance(rng, np.random.Generator):
        raise TypeError(
            f"{op} requires an explicit numpy.random.Generator, got {type(rng).__name__}"
        )
    return rng


class TensorFactoriesMixin:
    """
    Classmethod constructors for `Tensor`.

    The concrete class must provide `__init__(shape, data=None)` and the
    `_adopt(array)` classmethod.
    """

    @classmethod
    def zeros(cls, shape: ShapeLike):
        """
        Create a zero-filled tensor.

        Parameters
        ----------
        shape : int | Sequence[int]
            Tensor shape.

        Returns
        -------
        Tensor
            A new zero-filled tensor.
        """
        return cls(shape)

    @classmethod
    def rand(cls, shape: ShapeLike, *, rng: np.random.Generator):
        """
        Create a tensor of uniform random values in [0, 1).

        Parameters
        ----------
        shape : int | Sequence[int]
            Tensor shape.
        rng : numpy.random.Generator
            Source of randomness.

        Returns
        -------
        Tensor
            A new tensor with values drawn from U[0, 1).
        """
        shape = normalize_shape(shape, op="rand")
        rng = _require_generator(rng, "rand")
        return cls._adopt(rng.random(shape, dtype=DTYPE))

    @classmethod
    def xavier_uniform(cls, fan_in: int, fan_out: int, *, rng: np.random.Generator):
        """
        Create a `(fan_in, fan_out)` weight matrix with Xavier/Glorot uniform init.

        Values are drawn uniformly from `[-bound, bound)` where

            bound = sqrt(6 / (fan_in + fan_out))

        Parameters
        ----------
        fan_in : int
            Number of input features (rows).
        fan_out : int
            Number of output features (columns).
        rng : numpy.random.Generator
            Source of randomness.

        Returns
        -------
        Tensor
            A new rank-2 tensor.
        """
        shape = normalize_shape((fan_in, fan_out), op="xavier_uniform")
        rng = _require_generator(rng, "xavier_uniform")

        bound = math.sqrt(6.0 / float(shape[0] + shape[1]))
        w = (rng.random(shape) * 2.0 * bound - bound).astype(DTYPE)

        # float32 rounding may land exactly on the (excluded) upper bound
        upper = np.nextafter(DTYPE(bound), DTYPE(0.0))
        return cls._adopt(np.minimum(w, upper))

    @classmethod
    def from_numpy(cls, arr: np.ndarray):
        """
        Create a tensor holding a copy of `arr` (cast to float32).

        Raises
        ------
        ShapeError
            If `arr` has a zero-sized dimension.
        """
        arr = np.asarray(arr)
        return cls(arr.shape, arr)

    @classmethod
    def from_array_1d(cls, values: Sequence[float]):
        """Create a rank-1 tensor from a flat sequence of values."""
        arr = np.asarray(values, dtype=DTYPE)
        if arr.ndim != 1:
            raise ShapeError("from_array_1d", f"expected a flat sequence, got shape {arr.shape}", (arr.shape,))
        return cls(arr.shape, arr)

    @classmethod
    def from_array_2d(cls, rows: Sequence[Sequence[float]]):
        """Create a rank-2 tensor from a sequence of equally long rows."""
        try:
            arr = np.asarray(rows, dtype=DTYPE)
        except ValueError as e:
            raise ShapeError("from_array_2d", "rows must all have the same length") from e
        if arr.ndim != 2:
            raise ShapeError("from_array_2d", f"expected rows of values, got shape {arr.shape}", (arr.shape,))
        return cls(arr.shape, arr)
