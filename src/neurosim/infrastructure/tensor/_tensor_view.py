"""
Non-owning, read-only tensor views.

`TensorView` is what `Tensor.reshape` returns. It shares the storage of the
tensor it was created from instead of copying it, which makes reshaping free
but means the view observes every later write to its base.

To keep that aliasing from leaking into places that must own their data
(execution traces in particular), the view is a distinct type:

- its storage is flagged read-only, so element assignment raises
  `ValueError`;
- every primitive accepts it as an operand and returns an owning `Tensor`;
- `clone()` returns an owning `Tensor` with fresh storage.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ...domain._errors import ShapeError
from ...domain._tensor import ITensor
from ._shape import normalize_shape, shape_to_length, format_shape
from .mixins._storage import TensorStorageMixin


def _unpack_shape(new_shape: Sequence) -> Union[int, Sequence[int]]:
    if len(new_shape) == 1 and not isinstance(new_shape[0], (int, np.integer)):
        return new_shape[0]
    return new_shape


class TensorView(TensorStorageMixin, ITensor):
    """
    Read-only reshaped view over another tensor's storage.

    Parameters
    ----------
    base : Tensor | TensorView
        The tensor whose storage is aliased. Views of views always refer to
        the original owning tensor.
    new_shape : Sequence
        Target shape, either as separate ints or as a single sequence.

    Raises
    ------
    ShapeError
        If `new_shape` holds a different number of elements than `base`.
    """

    def __init__(self, base, new_shape: Sequence) -> None:
        shape = normalize_shape(_unpack_shape(new_shape), op="reshape")
        if shape_to_length(shape) != base.length:
            raise ShapeError(
                "reshape",
                f"length mismatch: {base.length} elements cannot take shape {format_shape(shape)}",
                (base.shape, shape),
            )
        root = base.base if isinstance(base, TensorView) else base

        view = base.to_numpy().reshape(shape)
        view.flags.writeable = False

        self._base = root
        self._shape = shape
        self._data = view

    @property
    def base(self):
        """The owning tensor whose storage this view aliases."""
        return self._base

    def __repr__(self) -> str:
        return f"TensorView(shape={self._shape}, base_shape={self._base.shape})"

    def clone(self):
        """
        Return an owning copy of the viewed values.

        Returns
        -------
        Tensor
            A tensor with this view's shape and its own storage.
        """
        return type(self._base)._adopt(self._data.copy())

    def reshape(self, *new_shape) -> "TensorView":
        """Return another view of the same storage with a different shape."""
        return TensorView(self, new_shape)
