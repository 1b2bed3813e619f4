"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects using
structural typing. Both the owning `Tensor` and the non-owning `TensorView`
produced by `reshape` satisfy it, which lets the primitives, the operations
and the executor accept either without caring which one they were handed.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is an n-dimensional array of floating-point values with a
    shape and flat backing storage. The invariant
    `length == product(shape)` holds for every valid instance.

    Notes
    -----
    - The protocol is read-oriented. Mutation is an implementation detail
      of owning tensors and is never required by the compute core.
    - `clone()` must always return an owning tensor whose storage is not
      shared with any other tensor.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        ...

    @property
    def length(self) -> int:
        """
        Return the total number of elements.

        Returns
        -------
        int
            Product of the shape's dimensions.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of dimensions.

        Returns
        -------
        int
            `len(shape)`.
        """
        ...

    @property
    def data(self) -> Any:
        """
        Return the flat storage (a backend-native 1-D array).

        Returns
        -------
        Any
            Flat array over the tensor's elements.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Return the storage shaped as `shape`.

        Returns
        -------
        Any
            Backend-native array (e.g. `np.ndarray`).
        """
        ...

    def clone(self) -> "ITensor":
        """
        Return a deep copy of this tensor.

        Returns
        -------
        ITensor
            An owning tensor with identical shape and values.
        """
        ...
