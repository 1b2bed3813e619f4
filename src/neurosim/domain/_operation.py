"""
Operation (graph node) interface definitions.

This module defines the domain-level contract for a unit of computation in a
NeuroSim graph, together with the port reference type used to wire
operations together.

An operation reads named input ports and its owned parameters and produces
named output ports. It carries no hidden state beyond its parameters, so a
graph of operations can be executed any number of times (and from several
independent callers) as long as no operation mutates a tensor in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, runtime_checkable

from ._tensor import ITensor

GRAPH_INPUT = "graph_input"
"""Reserved producer id of the graph's virtual external input."""

GRAPH_INPUT_PORT = "output"
"""Name of the single output port of the virtual external input."""


@dataclass(frozen=True)
class PortRef:
    """
    Immutable reference to a producer's output port.

    A `PortRef` is a non-owning back-reference: it names the producer by id
    and never holds the producing operation itself.

    Attributes
    ----------
    op_id : str
        Id of the producing operation, or `GRAPH_INPUT` for the graph's
        external input.
    port : str
        Name of the producer's output port.
    """

    op_id: str
    port: str

    @property
    def is_graph_input(self) -> bool:
        """Return True if this reference points at the external input."""
        return self.op_id == GRAPH_INPUT

    def __str__(self) -> str:
        return f"{self.op_id}:{self.port}"


GRAPH_INPUT_REF = PortRef(GRAPH_INPUT, GRAPH_INPUT_PORT)
"""Port reference of the graph's external input."""


@runtime_checkable
class IOperation(Protocol):
    """
    Domain-level operation interface.

    The capability set is small: `compute`, `describe` and the
    static descriptors `op_type`, `input_names` and `output_names`. Graphs
    and executors only ever talk to operations through this surface.

    Notes
    -----
    - `compute` must return freshly allocated tensors and must never mutate
      the tensors it is given.
    - `output_names` is ordered; its first entry is the port the executor
      reports as the graph output when the operation is scheduled last.
    """

    @property
    def op_id(self) -> str:
        """Unique id of the operation within its graph."""
        ...

    @property
    def name(self) -> str:
        """Display label (defaults to the id)."""
        ...

    @property
    def op_type(self) -> str:
        """Fixed tag identifying the variant (e.g. "Linear", "ReLU")."""
        ...

    @property
    def input_names(self) -> tuple[str, ...]:
        """Names of the input ports the operation declares."""
        ...

    @property
    def output_names(self) -> tuple[str, ...]:
        """Names of the output ports, in order."""
        ...

    @property
    def input_ports(self) -> Mapping[str, PortRef]:
        """Current wiring: input-port name to producer reference."""
        ...

    @property
    def parameters(self) -> Mapping[str, ITensor]:
        """Tensors owned by the operation (weights, biases, ...)."""
        ...

    def compute(self, inputs: Mapping[str, ITensor]) -> dict[str, ITensor]:
        """
        Run the operation on resolved input tensors.

        Parameters
        ----------
        inputs : Mapping[str, ITensor]
            Input-port name to tensor.

        Returns
        -------
        dict[str, ITensor]
            Output-port name to freshly allocated tensor.
        """
        ...

    def describe(self) -> str:
        """Return a short human-readable summary used by execution traces."""
        ...
