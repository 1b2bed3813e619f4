"""
Weight initialization public API.

Importing this package registers the built-in initializers (``zeros``,
``uniform``, ``xavier_uniform``) into the `WeightInitializer` registry as an
import side effect.

Exports
-------
- WeightInitializer:
    The registry-backed initializer dispatcher.
"""

from ._builtin import *
from ._base import WeightInitializer

__all__ = [
    WeightInitializer.__name__,
]
