"""
Operation base class.

`Operation` is the abstract base of every built-in graph node. It implements
the bookkeeping shared by all variants (id, display name, input wiring,
parameter storage) and leaves `compute` to the concrete classes.

Each variant declares three class-level descriptors:

- `op_type`      : fixed tag (e.g. "Linear"),
- `input_names`  : the input ports the variant reads,
- `output_names` : the output ports it produces, in order.

Wiring
------
`input_ports` is exposed read-only. Ports are wired through
`Graph.connect`, which keeps the graph's cached topological order in sync
with the wiring.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping, Optional

from ...domain._errors import MissingDependencyError
from ...domain._operation import IOperation, PortRef
from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor


class Operation(IOperation, ABC):
    """
    Abstract base class for graph operations.

    Parameters
    ----------
    op_id : str
        Unique id of the operation within its graph.
    name : Optional[str], optional
        Display label. Defaults to `op_id`.

    Raises
    ------
    ValueError
        If `op_id` is empty.
    """

    op_type: ClassVar[str] = ""
    input_names: ClassVar[tuple[str, ...]] = ("input",)
    output_names: ClassVar[tuple[str, ...]] = ("output",)

    def __init__(self, op_id: str, name: Optional[str] = None) -> None:
        if not isinstance(op_id, str) or not op_id:
            raise ValueError("op_id must be a non-empty string")
        self._op_id = op_id
        self._name = name if name is not None else op_id
        self._input_ports: Dict[str, PortRef] = {}
        self._parameters: Dict[str, Tensor] = {}
        # Set by Graph.add_op; an operation belongs to at most one graph
        self._owner: Optional[weakref.ref] = None

    @property
    def op_id(self) -> str:
        """Unique id of the operation."""
        return self._op_id

    @property
    def name(self) -> str:
        """Display label of the operation."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def input_ports(self) -> Mapping[str, PortRef]:
        """Read-only wiring: input-port name to producer reference."""
        return MappingProxyType(self._input_ports)

    @property
    def parameters(self) -> Dict[str, Tensor]:
        """Tensors owned by this operation, keyed by parameter name."""
        return self._parameters

    def _wire_input(self, port: str, source: PortRef) -> None:
        # Called by Graph.connect only, so that the graph can invalidate
        # its cached order.
        self._input_ports[port] = source

    def _require_inputs(self, inputs: Mapping[str, ITensor]) -> None:
        for port in self.input_names:
            if port not in inputs:
                raise MissingDependencyError(self._op_id, port)

    @abstractmethod
    def compute(self, inputs: Mapping[str, ITensor]) -> Dict[str, Tensor]:
        """
        Execute the operation on resolved input tensors.

        Parameters
        ----------
        inputs : Mapping[str, ITensor]
            Input-port name to tensor. Must contain every name in
            `input_names`.

        Returns
        -------
        dict[str, Tensor]
            Output-port name to freshly allocated tensor.

        Raises
        ------
        MissingDependencyError
            If a declared input port is absent from `inputs`.
        """
        ...

    def describe(self) -> str:
        """Return a short summary for execution traces."""
        return f"{self.op_type} ({self.name})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(op_id={self._op_id!r}, name={self.name!r})"
