"""
Tensor value types.

Exports
-------
- Tensor:
    Owning float32 tensor with the numeric primitives.
- TensorView:
    Read-only, storage-aliasing result of `Tensor.reshape`.
"""

from ._tensor import Tensor
from ._tensor_view import TensorView
from ._display import render_tensor

__all__ = [
    Tensor.__name__,
    TensorView.__name__,
    render_tensor.__name__,
]
