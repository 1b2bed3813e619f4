"""
Shape normalization helpers shared by `Tensor` and `TensorView`.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from ...domain._errors import ShapeError

ShapeLike = Union[int, Sequence[int]]


def normalize_shape(shape: ShapeLike, *, op: str = "tensor") -> tuple[int, ...]:
    """
    Convert a shape-like value into a tuple of positive Python ints.

    Parameters
    ----------
    shape : int | Sequence[int]
        A single dimension or a sequence of dimensions. `()` denotes a
        scalar.
    op : str, optional
        Name reported in the error when validation fails.

    Returns
    -------
    tuple[int, ...]
        The normalized shape.

    Raises
    ------
    ShapeError
        If any dimension is not a positive integer.
    """
    if isinstance(shape, (int, np.integer)) and not isinstance(shape, bool):
        dims: tuple = (shape,)
    else:
        dims = tuple(shape)

    for d in dims:
        if isinstance(d, bool) or not isinstance(d, (int, np.integer)) or d <= 0:
            raise ShapeError(
                op, f"dimensions must be positive integers, got {dims!r}", (dims,)
            )
    return tuple(int(d) for d in dims)


def shape_to_length(shape: Sequence[int]) -> int:
    """Return the number of elements described by `shape` (1 for scalars)."""
    n = 1
    for d in shape:
        n *= int(d)
    return n


def format_shape(shape: Sequence[int]) -> str:
    """Render a shape as `[d0,d1,...]`."""
    return "[" + ",".join(str(int(d)) for d in shape) + "]"
