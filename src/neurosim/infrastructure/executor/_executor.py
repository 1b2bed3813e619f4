"""
Topologically-sorted graph executor.

Runs a `Graph` forward exactly once on an input tensor and records a
`Trace` holding every intermediate value.

The run is a single linear, synchronous pass:

1. Seed a fresh `ValueStore` with a clone of the input under the external
   input reference (`GRAPH_INPUT:output`).
2. Ask the graph for its topological order.
3. For each operation, resolve every declared input port from the store,
   call `compute`, store each produced output under `(op_id, port)` and
   record a `TraceStep` with clones of the inputs, outputs and current
   parameters.
4. The trace output is a clone of the first declared output of the last
   scheduled operation (unset for an empty graph).

Any error aborts the run and propagates to the caller; no partial trace is
returned.

Set the `TRACE` flag (see `_flags`) to log every step's rendered tensors,
and `DUMP` to log the execution order before running.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ...domain._errors import MissingDependencyError
from ...domain._operation import GRAPH_INPUT_REF, PortRef
from ...domain._tensor import ITensor
from .. import _flags
from ..graph._graph import Graph
from ..ops._base import Operation
from ._trace import Trace, TraceStep
from ._value_store import ValueStore

logger = logging.getLogger("neurosim.infrastructure.executor")


def _resolve_inputs(op: Operation, store: ValueStore) -> Dict[str, ITensor]:
    """Look up every declared and wired input port of `op`."""
    resolved: Dict[str, ITensor] = {}
    for port in op.input_names:
        if port not in op.input_ports:
            raise MissingDependencyError(op.op_id, port)
    for port, source in op.input_ports.items():
        resolved[port] = store.get(source, op_id=op.op_id, port=port)
    return resolved


class Executor:
    """
    Forward-pass executor producing clone-isolated traces.

    Parameters
    ----------
    flags : int, optional
        Bitmask of `_flags.TRACE` / `_flags.DUMP`. Defaults to the value of
        the `NEUROSIM_FLAGS` environment variable at import time.

    Notes
    -----
    An executor holds no per-run state, so one instance may be used for any
    number of runs.
    """

    def __init__(self, *, flags: int = _flags.defaults) -> None:
        self.flags = flags

    def run(self, graph: Graph, x: ITensor) -> Trace:
        """
        Execute `graph` on `x` and return the trace.

        Parameters
        ----------
        graph : Graph
            The graph to run. It must not be mutated during the call.
        x : ITensor
            Input tensor (e.g. a single sample or a batch).

        Returns
        -------
        Trace
            Every step's inputs, outputs and parameters, plus the overall
            input and output.

        Raises
        ------
        CycleError
            If the graph is not acyclic.
        MissingDependencyError
            If an input port cannot be resolved.
        ShapeError, UnsupportedError
            If an operation rejects its inputs.
        """
        store = ValueStore()
        store.put(GRAPH_INPUT_REF, x.clone())

        order = graph.topological_order()
        if self.flags & _flags.DUMP:
            logger.info(
                "Execution order: %s", " -> ".join(op.op_id for op in order)
            )

        steps = []
        for index, op in enumerate(order):
            inputs = _resolve_inputs(op, store)
            logger.debug("Step %d: running %s (%s)", index, op.op_id, op.op_type)

            outputs = op.compute(inputs)
            for port, value in outputs.items():
                store.put(PortRef(op.op_id, port), value)

            step = TraceStep(
                index=index,
                op_id=op.op_id,
                op_name=op.name,
                op_type=op.op_type,
                description=op.describe(),
                inputs=inputs,
                outputs=outputs,
                parameters=op.parameters,
            )
            steps.append(step)

            if self.flags & _flags.TRACE:
                logger.info("%s", step.summary())

        output: Optional[ITensor] = None
        if order:
            last = order[-1]
            output = store.get(
                PortRef(last.op_id, last.output_names[0]),
                op_id=last.op_id,
                port=last.output_names[0],
            )

        return Trace(x, tuple(steps), output)


def run(graph: Graph, x: ITensor, *, flags: int = _flags.defaults) -> Trace:
    """Execute `graph` on `x` with a one-off `Executor`."""
    return Executor(flags=flags).run(graph, x)
