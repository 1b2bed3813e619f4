"""
Tensor mixins.

`Tensor` is assembled from focused mixins, one per concern:

- `TensorStorageMixin`    : shape queries, element access, rendering
- `TensorFactoriesMixin`  : zeros / rand / xavier_uniform / from_* constructors
- `TensorArithmeticMixin` : matmul and broadcasting add
- `TensorUnaryMixin`      : relu / sigmoid / tanh / softmax
- `TensorMemoryMixin`     : clone / transpose_2d / reshape
"""

from ._storage import DTYPE, TensorStorageMixin
from ._factories import TensorFactoriesMixin
from ._arithmetic import TensorArithmeticMixin
from ._unary import TensorUnaryMixin
from ._memory import TensorMemoryMixin

__all__ = [
    "DTYPE",
    TensorStorageMixin.__name__,
    TensorFactoriesMixin.__name__,
    TensorArithmeticMixin.__name__,
    TensorUnaryMixin.__name__,
    TensorMemoryMixin.__name__,
]
