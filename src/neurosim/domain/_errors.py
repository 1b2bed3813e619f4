"""
Compute-core exceptions for NeuroSim.

This module defines the custom errors raised by the tensor primitives, the
graph container and the executor. Every error derives from `NeuroSimError`
so that a surrounding layer can catch the whole family at once, and also
from the closest built-in exception (`ValueError`, `RuntimeError`, ...) so
that generic handlers keep working.

All errors are synchronous and non-recoverable within the core: they
propagate directly to the caller of the triggering operation (`add_op`,
`connect`, `topological_order`, `run`). Converting them into user-facing
messages is the responsibility of the caller.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NeuroSimError(Exception):
    """
    Base class of every error raised by the NeuroSim compute core.
    """


class ShapeError(NeuroSimError, ValueError):
    """
    Raised when tensor shapes are incompatible with the requested operation.

    Typical causes are a data length that does not match the product of the
    shape, a MatMul rank/dimension mismatch, an Add pairing that cannot be
    broadcast, a Transpose2D on a non-rank-2 tensor, or a Reshape that
    changes the number of elements.

    Attributes
    ----------
    op : str
        Name of the primitive that rejected its operands (e.g. "matmul").
    shapes : tuple[tuple[int, ...], ...]
        The offending shapes, in operand order.
    """

    def __init__(
        self,
        op: str,
        message: str,
        shapes: Sequence[Sequence[int]] = (),
    ) -> None:
        """
        Initialize the ShapeError.

        Parameters
        ----------
        op : str
            Name of the primitive or construction path that failed.
        message : str
            Human-readable explanation of the mismatch.
        shapes : Sequence[Sequence[int]], optional
            Shapes of the operands involved.
        """
        super().__init__(f"{op}: {message}")
        self.op = op
        self.shapes = tuple(tuple(s) for s in shapes)


class UnsupportedError(NeuroSimError, NotImplementedError):
    """
    Raised when a primitive is asked to handle an input it does not support.

    Softmax, for example, is only defined for rank-1 and rank-2 tensors.

    Attributes
    ----------
    op : str
        The primitive that was attempted.
    rank : Optional[int]
        Rank of the rejected operand, when relevant.
    """

    def __init__(self, op: str, message: str, *, rank: Optional[int] = None) -> None:
        super().__init__(f"{op}: {message}")
        self.op = op
        self.rank = rank


class DuplicateIdError(NeuroSimError, ValueError):
    """
    Raised when an operation is added to a graph that already holds its id.

    Attributes
    ----------
    op_id : str
        The colliding operation id.
    """

    def __init__(self, op_id: str) -> None:
        super().__init__(f"Duplicate op id: {op_id!r}")
        self.op_id = op_id


class UnknownOpError(NeuroSimError, KeyError):
    """
    Raised when a graph is asked about an operation id it does not contain.

    Attributes
    ----------
    op_id : str
        The id that could not be found.
    """

    def __init__(self, op_id: str) -> None:
        super().__init__(op_id)
        self.op_id = op_id

    def __str__(self) -> str:
        return f"Unknown op id: {self.op_id!r}"


class CycleError(NeuroSimError, RuntimeError):
    """
    Raised when a graph's operations cannot be ordered topologically.

    Kahn's algorithm terminates with fewer scheduled operations than there
    are registered operations exactly when the wiring contains a cycle.

    Attributes
    ----------
    unresolved : tuple[str, ...]
        Ids of the operations that could not be scheduled, in graph
        insertion order.
    """

    def __init__(self, unresolved: Sequence[str]) -> None:
        self.unresolved = tuple(unresolved)
        super().__init__(
            "Graph contains a cycle; unschedulable ops: "
            + ", ".join(repr(i) for i in self.unresolved)
        )


class MissingDependencyError(NeuroSimError, RuntimeError):
    """
    Raised when an operation's declared input cannot be resolved.

    Given a correct topological order this is unreachable for well-wired
    graphs. It still surfaces for input ports that were never wired, for
    wiring that points at an id which is neither registered nor the
    reserved external input, and for producers that did not emit the
    requested output port.

    Attributes
    ----------
    op_id : str
        Id of the operation whose input could not be resolved.
    port : str
        Name of the unresolved input port.
    source : Optional[str]
        The `"<op_id>:<port>"` key that was looked up, or None if the port
        was not wired at all.
    """

    def __init__(self, op_id: str, port: str, source: Optional[str] = None) -> None:
        if source is None:
            message = f"Op {op_id!r} input port {port!r} is not wired."
        else:
            message = (
                f"Op {op_id!r} input port {port!r} references {source!r} "
                "which is not yet computed."
            )
        super().__init__(message)
        self.op_id = op_id
        self.port = port
        self.source = source
