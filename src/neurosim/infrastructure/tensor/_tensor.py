"""
Concrete Tensor implementation (NumPy backend).

This module provides the owning `Tensor` value type of NeuroSim. A tensor has
a shape (a tuple of positive ints, `()` for scalars) and float32 storage held
in a NumPy array. The invariant `length == product(shape)` is checked on
every construction path that accepts explicit data.

Tensors are immutable by convention: every primitive returns a freshly
allocated tensor and leaves its operands untouched. Element setters exist
for callers that assemble tensors by hand, but no part of the compute core
ever writes into a tensor it did not just allocate.

The single exception to "fresh storage" is `reshape`, which returns a
read-only `TensorView` over the same storage (see `_tensor_view`).
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import ShapeError
from ...domain._tensor import ITensor
from ._shape import ShapeLike, format_shape, normalize_shape, shape_to_length
from .mixins import (
    DTYPE,
    TensorArithmeticMixin,
    TensorFactoriesMixin,
    TensorMemoryMixin,
    TensorStorageMixin,
    TensorUnaryMixin,
)


class Tensor(
    TensorStorageMixin,
    TensorFactoriesMixin,
    TensorArithmeticMixin,
    TensorUnaryMixin,
    TensorMemoryMixin,
    ITensor,
):
    """
    Owning n-dimensional float32 tensor.

    Parameters
    ----------
    shape : int | Sequence[int]
        Tensor shape.
    data : array-like, optional
        Element values, flat or already shaped. They are copied. If omitted
        the tensor is zero-filled.

    Raises
    ------
    ShapeError
        If a dimension is not a positive integer, or if the number of values
        in `data` differs from `product(shape)`.
    """

    def __init__(self, shape: ShapeLike, data: Optional[Any] = None) -> None:
        shape = normalize_shape(shape)
        n = shape_to_length(shape)

        if data is None:
            arr = np.zeros(shape, dtype=DTYPE)
        else:
            try:
                flat = np.array(data, dtype=DTYPE).reshape(-1)
            except ValueError as e:
                raise ShapeError(
                    "tensor", "data must be a flat or regularly nested sequence", (shape,)
                ) from e
            if flat.size != n:
                raise ShapeError(
                    "tensor",
                    f"data length {flat.size} doesn't match shape {format_shape(shape)} = {n}",
                    (shape,),
                )
            arr = flat.reshape(shape)

        self._shape = shape
        self._data = arr

    @classmethod
    def _adopt(cls, arr: np.ndarray) -> "Tensor":
        """
        Wrap a freshly computed array without copying it again.

        Internal constructor for primitives. The caller guarantees that
        nobody else holds a reference to `arr`.
        """
        obj = cls.__new__(cls)  # bypass __init__
        # asarray keeps 0-d results (and NumPy scalars) rank 0
        obj._data = np.asarray(arr, dtype=DTYPE, order="C")
        obj._shape = tuple(int(d) for d in obj._data.shape)
        return obj

    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape}, dtype={self._data.dtype})"

    def __setitem__(self, index: int, value: float) -> None:
        """Set the element at flat position `index`."""
        self.data[index] = value

    def set_2d(self, row: int, col: int, value: float) -> None:
        """
        Set the element at `[row, col]` of a rank-2 tensor.

        Raises
        ------
        ShapeError
            If the tensor is not rank 2.
        """
        if self.rank != 2:
            raise ShapeError("set_2d", f"requires a rank-2 tensor, got {self._shape}", (self._shape,))
        self._data[row, col] = value
