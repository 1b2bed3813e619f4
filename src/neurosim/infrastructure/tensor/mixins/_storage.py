"""
Read-side storage mixin shared by `Tensor` and `TensorView`.

Both concrete tensor types keep their elements in a C-contiguous NumPy
array `_data` shaped as `_shape`. This mixin exposes the read API on top of
that storage: shape queries, flat and 2-D element access, NumPy interop and
the bounded textual rendering.
"""

from __future__ import annotations

import numpy as np

from ....domain._errors import ShapeError
from .._display import render_tensor

DTYPE = np.float32
"""Element dtype of every NeuroSim tensor."""


class TensorStorageMixin:
    """
    Read accessors over `_shape` / `_data`.

    Notes
    -----
    `data` is a flat view over the storage, not a copy. For owning tensors
    this means writes through `data` are visible in the tensor; for views it
    is read-only.
    """

    _shape: tuple[int, ...]
    _data: np.ndarray

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        return self._shape

    @property
    def length(self) -> int:
        """Total number of elements."""
        return int(self._data.size)

    @property
    def rank(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    @property
    def dtype(self) -> np.dtype:
        """Element dtype (always float32)."""
        return self._data.dtype

    @property
    def data(self) -> np.ndarray:
        """
        Return the flat element storage.

        Returns
        -------
        np.ndarray
            A 1-D view of length `length` over the tensor's storage.
        """
        return self._data.reshape(-1)

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> float:
        """Return the element at flat position `index`."""
        return float(self.data[index])

    def get_2d(self, row: int, col: int) -> float:
        """
        Return the element at `[row, col]` of a rank-2 tensor.

        Raises
        ------
        ShapeError
            If the tensor is not rank 2.
        """
        if self.rank != 2:
            raise ShapeError("get_2d", f"requires a rank-2 tensor, got {self._shape}", (self._shape,))
        return float(self._data[row, col])

    def to_numpy(self) -> np.ndarray:
        """
        Return the storage shaped as `shape`.

        Returns
        -------
        np.ndarray
            The backing array itself (not a copy).
        """
        return self._data

    def to_list(self) -> list[float]:
        """Return the elements as a flat list of Python floats."""
        return [float(v) for v in self.data]

    def __str__(self) -> str:
        return render_tensor(self._shape, self.data)
