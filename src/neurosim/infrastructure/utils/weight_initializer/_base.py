"""
Weight initializer registry and dispatch utilities.

This module defines the concrete `WeightInitializer` used by parameterised
operations to create their parameter tensors from a registered strategy
(e.g. Xavier uniform for weights, zeros for biases).

Design
------
- Initializers are registered by string name via a decorator-based registry.
- Each initializer is a callable `(shape, *, rng) -> Tensor` that allocates
  and returns a new tensor.
- The dispatcher resolves an initializer by name at construction time and
  invokes it via `__call__`.

Usage example
-------------
Registering an initializer:

    @WeightInitializer.register_initializer("ones")
    def ones(shape, *, rng) -> Tensor:
        ...

Applying an initializer:

    init = WeightInitializer("xavier_uniform")
    weight = init((in_features, out_features), rng=rng)

Notes
-----
- Registration keys must be unique unless explicitly overwritten.
- Deterministic initializers (e.g. zeros) accept and ignore `rng`.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, TypeVar

from ....domain.utils._weight_initialization import _WeightInitializer
from ...tensor._tensor import Tensor

T = TypeVar("T", bound=Callable[..., Tensor])


class WeightInitializer(_WeightInitializer):
    """
    Registry-backed weight initializer dispatcher.

    Usage
    -----
    Register:
        @WeightInitializer.register_initializer("xavier_uniform")
        def xavier_uniform(shape, *, rng) -> Tensor: ...

    Dispatch:
        init = WeightInitializer("xavier_uniform")
        init((4, 2), rng=rng)
    """

    INITIALIZERS: ClassVar[Dict[str, Callable[..., Tensor]]] = {}

    def __init__(self, initializer_name: str) -> None:
        try:
            self._initializer: Callable[..., Tensor] = self.INITIALIZERS[
                initializer_name
            ]
        except KeyError as e:
            available = ", ".join(sorted(self.INITIALIZERS)) or "<none>"
            raise ValueError(
                f"Unsupported initializer name: {initializer_name!r}. "
                f"Available: {available}"
            ) from e
        self.name = initializer_name

    @classmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register a weight initializer under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the initializer later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Initializer name must be a non-empty string")

        def decorator(func: T) -> T:
            if not overwrite and name in cls.INITIALIZERS:
                raise ValueError(f"Initializer already registered: {name!r}")
            cls.INITIALIZERS[name] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered initializer names (sorted)."""
        return tuple(sorted(cls.INITIALIZERS))

    @classmethod
    def get(cls, name: str) -> Callable[..., Tensor]:
        """Get a registered initializer callable by name."""
        return cls.INITIALIZERS[name]

    def __call__(self, shape: Any, *, rng: Any = None) -> Tensor:
        return self._initializer(shape, rng=rng)
