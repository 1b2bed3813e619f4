"""
Abstract interfaces and utilities for weight initialization.

This module defines the abstract base class for weight initializers used
by parameterised operations, along with the shared helper that derives
fan-in and fan-out values from a weight shape.

The concrete implementation and registry logic live in the infrastructure
layer. This module exists in the domain layer to define contracts and shared
mathematical utilities without binding to any specific backend.
"""

from typing import Callable, Dict, TypeVar
from abc import ABC

from .._tensor import ITensor


T = TypeVar("T", bound=Callable[..., ITensor])


class _WeightInitializer(ABC):
    """
    Abstract base class for weight initializer dispatchers.

    Design notes
    ------------
    - Initializers are identified by string names.
    - Each initializer is a callable `(shape, *, rng) -> ITensor` that
      allocates and returns a new tensor. Randomness is always drawn from the
      explicit generator handed in by the caller.
    """

    INITIALIZERS: Dict[str, Callable] = {}

    def __init__(self, initializer_name: str) -> None:
        """
        Construct a weight initializer dispatcher.

        Parameters
        ----------
        initializer_name:
            The string key identifying a registered initializer.
        """
        ...

    @classmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Register a weight initializer under a given name.

        Parameters
        ----------
        name:
            Name used to identify the initializer.
        overwrite:
            Whether to allow overwriting an existing registration.

        Returns
        -------
        Callable
            A decorator that registers the initializer function.
        """
        ...

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return the names of all registered initializers."""
        ...


def _calculate_fan_in_and_fan_out(shape: tuple[int, ...]) -> tuple[int, int]:
    """
    Compute fan-in and fan-out for a weight shape.

    Weights are laid out `(fan_in, fan_out)` so that `y = x @ W` maps
    `(batch, fan_in)` inputs to `(batch, fan_out)` outputs.

    Parameters
    ----------
    shape:
        Weight shape. Must be rank 2.

    Returns
    -------
    tuple[int, int]
        `(fan_in, fan_out)`.

    Raises
    ------
    ValueError
        If `shape` is not rank 2.
    """
    if len(shape) != 2:
        raise ValueError(
            f"fan-in/fan-out require a rank-2 weight shape, got {tuple(shape)}"
        )
    return int(shape[0]), int(shape[1])
