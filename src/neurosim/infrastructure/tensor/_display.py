"""
Bounded textual rendering of tensors.

The format is an external contract relied upon by inspection tooling and
must be reproduced exactly:

    Tensor[2,2] [0.1000, 0.3000, 0.2000, 0.4000]

Every value uses four decimals. When the tensor holds more than
`DISPLAY_THRESHOLD` elements, only the first `DISPLAY_HEAD` and the last
`DISPLAY_TAIL` values are rendered, joined by `" ... "`:

    Tensor[5,5] [0.0000, 1.0000, 2.0000, 3.0000, 4.0000 ... 22.0000, 23.0000, 24.0000]
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from ._shape import format_shape

DISPLAY_THRESHOLD = 20
DISPLAY_HEAD = 5
DISPLAY_TAIL = 3


def _join(values: Iterable[float]) -> str:
    return ", ".join(f"{float(v):.4f}" for v in values)


def render_tensor(shape: Sequence[int], flat: np.ndarray) -> str:
    """
    Render a tensor's shape and flat values using the bounded format.

    Parameters
    ----------
    shape : Sequence[int]
        Tensor shape.
    flat : np.ndarray
        Flat (1-D) element storage.

    Returns
    -------
    str
        The rendered string.
    """
    prefix = f"Tensor{format_shape(shape)}"
    if flat.size <= DISPLAY_THRESHOLD:
        return f"{prefix} [{_join(flat)}]"
    head = _join(flat[:DISPLAY_HEAD])
    tail = _join(flat[flat.size - DISPLAY_TAIL :])
    return f"{prefix} [{head} ... {tail}]"
