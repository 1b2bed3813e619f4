"""
Built-in graph operations.

The set of operation kinds is closed: `BUILTIN_OPERATIONS` enumerates every
variant shipped with NeuroSim. New kinds are added as new `Operation`
subclasses, never through runtime registration.
"""

from ._base import Operation
from ._linear import Linear
from ._activations import ReLU, Sigmoid, Tanh, Softmax
from ._add import Add

BUILTIN_OPERATIONS = (Linear, ReLU, Sigmoid, Tanh, Softmax, Add)
"""Every built-in operation class, in declaration order."""

__all__ = [
    Operation.__name__,
    Linear.__name__,
    ReLU.__name__,
    Sigmoid.__name__,
    Tanh.__name__,
    Softmax.__name__,
    Add.__name__,
    "BUILTIN_OPERATIONS",
]
