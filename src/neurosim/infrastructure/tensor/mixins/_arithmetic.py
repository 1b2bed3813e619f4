"""
Binary arithmetic primitives: matrix multiply and (broadcasting) addition.

Broadcasting is narrow. `add` only supports:

- equal shapes (elementwise), and
- a rank-2 `(m, n)` left operand with a bias of shape `(n,)` or `(1, n)`,
  which is added to every row.

Every other pairing is rejected with `ShapeError` rather than falling back
to NumPy's general broadcasting rules.
"""

from __future__ import annotations

import numpy as np

from ....domain._errors import ShapeError
from ....domain._tensor import ITensor


class TensorArithmeticMixin:
    """
    Binary primitives for `Tensor`.

    Operands may be any `ITensor` (owning tensors or views); results are
    always freshly allocated tensors of the concrete class.
    """

    @classmethod
    def matmul(cls, a: ITensor, b: ITensor):
        """
        Matrix multiply `(m, k) x (k, n) -> (m, n)`.

        Parameters
        ----------
        a : ITensor
            Left operand, rank 2.
        b : ITensor
            Right operand, rank 2.

        Returns
        -------
        Tensor
            `C` with `C[i][j] = sum_p a[i][p] * b[p][j]`.

        Raises
        ------
        ShapeError
            If either operand is not rank 2 or the inner dimensions differ.
        """
        if a.rank != 2 or b.rank != 2:
            raise ShapeError(
                "matmul",
                f"requires rank-2 operands, got {a.shape} and {b.shape}",
                (a.shape, b.shape),
            )
        if a.shape[1] != b.shape[0]:
            raise ShapeError(
                "matmul",
                f"inner dimensions differ: {a.shape} x {b.shape}",
                (a.shape, b.shape),
            )
        return cls._adopt(np.matmul(a.to_numpy(), b.to_numpy()))

    @classmethod
    def add(cls, a: ITensor, b: ITensor):
        """
        Elementwise addition with row-wise bias broadcasting.

        Parameters
        ----------
        a : ITensor
            Left operand.
        b : ITensor
            Right operand: same shape as `a`, or a bias of shape `(n,)` /
            `(1, n)` when `a` is `(m, n)`.

        Returns
        -------
        Tensor
            A new tensor with the shape of `a`.

        Raises
        ------
        ShapeError
            If the shapes cannot be combined.
        """
        if a.shape == b.shape:
            return cls._adopt(np.add(a.to_numpy(), b.to_numpy()))

        if a.rank == 2:
            n = a.shape[1]
            row_bias = (b.rank == 1 and b.shape[0] == n) or (
                b.rank == 2 and b.shape[0] == 1 and b.shape[1] == n
            )
            if row_bias:
                return cls._adopt(a.to_numpy() + b.to_numpy().reshape(1, n))

        raise ShapeError(
            "add",
            f"cannot broadcast shapes {a.shape} and {b.shape}",
            (a.shape, b.shape),
        )

    def __matmul__(self, other: ITensor):
        return type(self).matmul(self, other)

    def __add__(self, other: ITensor):
        return type(self).add(self, other)
