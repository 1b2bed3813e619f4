"""
Copy, transpose and reshape primitives.

`clone` and `transpose_2d` allocate new storage. `reshape` is the one
primitive that does not: it returns a `TensorView` aliasing the original
storage. The view is read-only, so the alias can observe later writes to
its base but can never be used to modify it.
"""

from __future__ import annotations

from ....domain._errors import ShapeError
from ....domain._tensor import ITensor
from .._tensor_view import TensorView


class TensorMemoryMixin:
    """
    Storage-level primitives for `Tensor`.
    """

    def clone(self):
        """
        Return a deep copy of this tensor.

        Returns
        -------
        Tensor
            A tensor with the same shape and values and its own storage.
        """
        return type(self)._adopt(self._data.copy())

    @classmethod
    def transpose_2d(cls, a: ITensor):
        """
        Transpose a rank-2 tensor `(m, n) -> (n, m)`.

        Raises
        ------
        ShapeError
            If `a` is not rank 2.
        """
        if a.rank != 2:
            raise ShapeError(
                "transpose_2d", f"requires a rank-2 tensor, got {a.shape}", (a.shape,)
            )
        return cls._adopt(a.to_numpy().T.copy())

    def reshape(self, *new_shape) -> TensorView:
        """
        Return a read-only view of this tensor with a different shape.

        Accepts either `reshape(2, 3)` or `reshape((2, 3))`.

        Returns
        -------
        TensorView
            A view sharing this tensor's storage.

        Raises
        ------
        ShapeError
            If the new shape holds a different number of elements.
        """
        return TensorView(self, new_shape)
