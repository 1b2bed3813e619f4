"""
Elementwise activation primitives and softmax.
"""

from __future__ import annotations

import numpy as np

from ....domain._errors import UnsupportedError
from ....domain._tensor import ITensor


class TensorUnaryMixin:
    """
    Activation primitives for `Tensor`.

    All primitives are pure: the operand is never modified and the result is
    a new tensor with the operand's shape.
    """

    @classmethod
    def relu(cls, a: ITensor):
        """Return `max(0, x)` elementwise."""
        return cls._adopt(np.maximum(a.to_numpy(), 0.0).astype(a.dtype, copy=False))

    @classmethod
    def sigmoid(cls, a: ITensor):
        """
        Return `1 / (1 + exp(-x))` elementwise.

        Negative inputs use the algebraically equivalent `exp(x) / (1 + exp(x))`
        so that large-magnitude values never overflow.
        """
        x = a.to_numpy()
        out = np.empty_like(x)
        pos = x >= 0
        out[pos] = 1.0 / (1.0 + np.exp(-x[pos]))
        ex = np.exp(x[~pos])
        out[~pos] = ex / (1.0 + ex)
        return cls._adopt(out)

    @classmethod
    def tanh(cls, a: ITensor):
        """Return `tanh(x)` elementwise."""
        return cls._adopt(np.tanh(a.to_numpy()))

    @classmethod
    def softmax(cls, a: ITensor):
        """
        Softmax along the last axis.

        Rank-1 tensors are normalized as a whole, rank-2 tensors row by row.
        The per-row maximum is subtracted before exponentiating, so the result
        is invariant to constant shifts and does not overflow for large inputs.

        Raises
        ------
        UnsupportedError
            If the tensor is neither rank 1 nor rank 2.
        """
        if a.rank not in (1, 2):
            raise UnsupportedError(
                "softmax",
                f"supports rank-1 and rank-2 tensors only, got shape {a.shape}",
                rank=a.rank,
            )
        x = a.to_numpy()
        e = np.exp(x - np.max(x, axis=-1, keepdims=True))
        return cls._adopt(e / np.sum(e, axis=-1, keepdims=True))
