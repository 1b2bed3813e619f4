"""
Computation graph container and deterministic topological scheduling.

A `Graph` owns an ordered list of uniquely-identified operations and the
port-to-port wiring between them. Arbitrary DAG topologies are supported:
chains, branches and merges (e.g. residual `Add` nodes).

Scheduling
----------
`topological_order()` runs Kahn's algorithm:

1. Count, for every registered operation, the incoming edges whose source is
   a *registered* operation. Edges from the virtual external input
   (`GRAPH_INPUT`) are not counted.
2. Seed a FIFO queue with every zero in-degree operation, in insertion order.
3. Pop operations in FIFO order; for each downstream consumer (enumerated in
   insertion order) decrement its in-degree and enqueue it when it reaches
   zero.
4. If fewer operations were scheduled than are registered, the wiring has a
   cycle and `CycleError` is raised.

Every collection involved is ordered, so the result only depends on the
insertion order and the wiring. This keeps trace ordering and any layout
derived from it reproducible.

Caching
-------
The order is cached as an immutable tuple and recomputed only after the next
structural mutation (`add_op` or `connect`).
"""

from __future__ import annotations

import logging
import weakref
from collections import deque
from typing import Dict, Iterator, List, Optional

from ...domain._errors import CycleError, DuplicateIdError, UnknownOpError
from ...domain._operation import GRAPH_INPUT, GRAPH_INPUT_PORT, PortRef
from ..ops._base import Operation

logger = logging.getLogger("neurosim.infrastructure.graph")


class Graph:
    """
    Directed acyclic graph of operations.

    Notes
    -----
    - `nodes` lists operations in insertion order.
    - A graph is assembled (`add_op`, `connect`) and then only queried. It is
      never mutated while an executor is running it.
    """

    def __init__(self) -> None:
        self._nodes: List[Operation] = []
        self._node_map: Dict[str, Operation] = {}
        self._topo_order: Optional[tuple[Operation, ...]] = None

    @property
    def nodes(self) -> tuple[Operation, ...]:
        """All operations in insertion order."""
        return tuple(self._nodes)

    @property
    def is_cached(self) -> bool:
        """True if the topological order is cached and still valid."""
        return self._topo_order is not None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Operation]:
        return iter(tuple(self._nodes))

    def __contains__(self, op_id: object) -> bool:
        return op_id in self._node_map

    def _invalidate(self) -> None:
        self._topo_order = None

    def add_op(self, op: Operation) -> Operation:
        """
        Register an operation.

        Parameters
        ----------
        op : Operation
            The operation to add. Its input wiring is stored on the
            operation itself, so an operation can belong to one graph only.

        Returns
        -------
        Operation
            `op`, for chaining.

        Raises
        ------
        DuplicateIdError
            If an operation with the same id is already registered.
        ValueError
            If the operation was already added to another graph.
        """
        if op.op_id in self._node_map or op.op_id == GRAPH_INPUT:
            raise DuplicateIdError(op.op_id)
        owner = op._owner() if op._owner is not None else None
        if owner is not None and owner is not self:
            raise ValueError(f"Op {op.op_id!r} already belongs to another graph")
        op._owner = weakref.ref(self)
        self._node_map[op.op_id] = op
        self._nodes.append(op)
        self._invalidate()
        return op

    def get_op(self, op_id: str) -> Operation:
        """
        Return the operation registered under `op_id`.

        Raises
        ------
        UnknownOpError
            If no such operation is registered.
        """
        try:
            return self._node_map[op_id]
        except KeyError:
            raise UnknownOpError(op_id) from None

    def connect(
        self,
        source_op_id: str,
        source_port: str,
        target_op_id: str,
        target_port: str,
    ) -> None:
        """
        Wire `target.target_port` to `source.source_port`.

        The source may be `GRAPH_INPUT` (the virtual external input) or an
        operation that has not been added yet. A source that is still
        missing when the graph runs is reported by the executor as a
        `MissingDependencyError`.

        Raises
        ------
        UnknownOpError
            If the target operation is not registered.
        """
        target = self.get_op(target_op_id)
        target._wire_input(target_port, PortRef(source_op_id, source_port))
        self._invalidate()

    def connect_input(self, target_op_id: str, target_port: str = "input") -> None:
        """Wire `target.target_port` to the graph's external input."""
        self.connect(GRAPH_INPUT, GRAPH_INPUT_PORT, target_op_id, target_port)

    def topological_order(self) -> tuple[Operation, ...]:
        """
        Return the operations in deterministic topological execution order.

        Returns
        -------
        tuple[Operation, ...]
            Every registered operation, each after all of its producers.

        Raises
        ------
        CycleError
            If the wiring contains a cycle.
        """
        if self._topo_order is not None:
            return self._topo_order

        in_degree: Dict[str, int] = {op.op_id: 0 for op in self._nodes}
        downstream: Dict[str, List[str]] = {op.op_id: [] for op in self._nodes}

        for op in self._nodes:
            for source in op.input_ports.values():
                # GRAPH_INPUT and not-yet-registered producers are not nodes
                if source.op_id not in self._node_map:
                    continue
                downstream[source.op_id].append(op.op_id)
                in_degree[op.op_id] += 1

        queue = deque(op_id for op_id, deg in in_degree.items() if deg == 0)

        order: List[Operation] = []
        while queue:
            op_id = queue.popleft()
            order.append(self._node_map[op_id])
            for consumer in downstream[op_id]:
                in_degree[consumer] -= 1
                if in_degree[consumer] == 0:
                    queue.append(consumer)

        if len(order) != len(self._nodes):
            raise CycleError(op_id for op_id, deg in in_degree.items() if deg > 0)

        self._topo_order = tuple(order)
        logger.debug(
            "Topological order: %s", ", ".join(op.op_id for op in self._topo_order)
        )
        return self._topo_order

    @classmethod
    def sequential(cls, *ops: Operation) -> "Graph":
        """
        Build a chain graph `ops[0] -> ops[1] -> ... -> ops[n-1]`.

        The first operation's ``input`` port reads the external input; every
        following operation's ``input`` port reads the previous operation's
        ``output`` port. Equivalent to the matching `add_op` / `connect`
        calls.

        Raises
        ------
        DuplicateIdError
            If two operations share an id.
        """
        graph = cls()
        previous: Optional[Operation] = None
        for op in ops:
            graph.add_op(op)
            if previous is None:
                graph.connect_input(op.op_id, "input")
            else:
                graph.connect(previous.op_id, "output", op.op_id, "input")
            previous = op
        return graph
