"""
Built-in weight initializers.

Registered names
----------------
- ``zeros``:
    Zero-filled tensor of the requested shape. `rng` is ignored.
- ``uniform``:
    Values drawn from ``U[0, 1)``.
- ``xavier_uniform``:
    Xavier/Glorot uniform for a ``(fan_in, fan_out)`` weight matrix, using
    ``U[-sqrt(6/(fan_in+fan_out)), +sqrt(6/(fan_in+fan_out)))``.
"""

from ._base import WeightInitializer
from ...tensor._tensor import Tensor
from ....domain.utils._weight_initialization import _calculate_fan_in_and_fan_out


@WeightInitializer.register_initializer("zeros")
def zeros(shape, *, rng=None) -> Tensor:
    """Return a zero-filled tensor."""
    return Tensor.zeros(shape)


@WeightInitializer.register_initializer("uniform")
def uniform(shape, *, rng) -> Tensor:
    """Return a tensor of values drawn uniformly from [0, 1)."""
    return Tensor.rand(shape, rng=rng)


@WeightInitializer.register_initializer("xavier_uniform")
def xavier_uniform(shape, *, rng) -> Tensor:
    """
    Apply Xavier (Glorot) uniform initialization.

    Parameters
    ----------
    shape:
        Rank-2 weight shape ``(fan_in, fan_out)``.
    rng:
        Explicit `numpy.random.Generator`.

    Returns
    -------
    Tensor
        A new weight tensor.
    """
    fan_in, fan_out = _calculate_fan_in_and_fan_out(tuple(shape))
    return Tensor.xavier_uniform(fan_in, fan_out, rng=rng)
