"""
Execution trace records.

A `Trace` is the ordered, clone-isolated record of one forward pass: one
`TraceStep` per executed operation plus copies of the overall input and
output.

Isolation contract
------------------
- The executor clones every tensor before recording it, so a step never
  shares storage with live computation state (including the storage-aliasing
  views produced by `reshape`, and parameters mutated after the run).
- Accessors hand out fresh clones on every call. Mutating a tensor obtained
  from a step therefore never alters the recorded step.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor


def _snapshot(tensors: Mapping[str, ITensor]) -> dict[str, Tensor]:
    return {name: t.clone() for name, t in tensors.items()}


class TraceStep:
    """
    Immutable record of one executed operation.

    Parameters
    ----------
    index : int
        0-based position of the step in the trace.
    op_id, op_name, op_type : str
        Identity of the executed operation.
    description : str
        The operation's `describe()` output.
    inputs, outputs, parameters : Mapping[str, ITensor]
        Resolved inputs, produced outputs and parameter values. They are
        cloned on construction.
    """

    __slots__ = (
        "_index",
        "_op_id",
        "_op_name",
        "_op_type",
        "_description",
        "_inputs",
        "_outputs",
        "_parameters",
    )

    def __init__(
        self,
        index: int,
        op_id: str,
        op_name: str,
        op_type: str,
        description: str,
        inputs: Mapping[str, ITensor],
        outputs: Mapping[str, ITensor],
        parameters: Mapping[str, ITensor],
    ) -> None:
        self._index = index
        self._op_id = op_id
        self._op_name = op_name
        self._op_type = op_type
        self._description = description
        self._inputs = _snapshot(inputs)
        self._outputs = _snapshot(outputs)
        self._parameters = _snapshot(parameters)

    @property
    def index(self) -> int:
        return self._index

    @property
    def op_id(self) -> str:
        return self._op_id

    @property
    def op_name(self) -> str:
        return self._op_name

    @property
    def op_type(self) -> str:
        return self._op_type

    @property
    def description(self) -> str:
        return self._description

    @property
    def inputs(self) -> dict[str, Tensor]:
        """Input tensors consumed by the step (port name to fresh clone)."""
        return _snapshot(self._inputs)

    @property
    def outputs(self) -> dict[str, Tensor]:
        """Output tensors produced by the step (port name to fresh clone)."""
        return _snapshot(self._outputs)

    @property
    def parameters(self) -> dict[str, Tensor]:
        """Parameter values at the time of the step (name to fresh clone)."""
        return _snapshot(self._parameters)

    @property
    def output(self) -> Optional[Tensor]:
        """Clone of the first recorded output, or None if there is none."""
        for t in self._outputs.values():
            return t.clone()
        return None

    def summary(self) -> str:
        """
        Render the step as text using the bounded tensor format.

        Returns
        -------
        str
            A header line followed by one line per input, output and
            parameter.
        """
        lines = [f"#{self._index} {self._op_id} [{self._op_type}] {self._description}"]
        for label, tensors in (
            ("in", self._inputs),
            ("out", self._outputs),
            ("param", self._parameters),
        ):
            for name, t in tensors.items():
                lines.append(f"  {label} {name}: {t}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TraceStep(index={self._index}, op_id={self._op_id!r}, "
            f"op_type={self._op_type!r})"
        )


class Trace:
    """
    Complete execution trace of a single forward pass.

    Parameters
    ----------
    input : ITensor
        The graph input (cloned).
    steps : tuple[TraceStep, ...]
        Recorded steps, ordered by index.
    output : Optional[ITensor]
        The graph output (cloned), or None for an empty graph.
    """

    __slots__ = ("_input", "_steps", "_output")

    def __init__(
        self,
        input: ITensor,
        steps: tuple[TraceStep, ...] = (),
        output: Optional[ITensor] = None,
    ) -> None:
        self._input = input.clone()
        self._steps = tuple(steps)
        self._output = output.clone() if output is not None else None

    @property
    def steps(self) -> tuple[TraceStep, ...]:
        return self._steps

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def input(self) -> Tensor:
        """Clone of the graph input."""
        return self._input.clone()

    @property
    def output(self) -> Optional[Tensor]:
        """Clone of the graph output, or None if the graph was empty."""
        return self._output.clone() if self._output is not None else None

    def step_for(self, op_id: str) -> TraceStep:
        """
        Return the step that executed `op_id`.

        Raises
        ------
        KeyError
            If no step executed that operation.
        """
        for step in self._steps:
            if step.op_id == op_id:
                return step
        raise KeyError(op_id)

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"Trace(step_count={len(self._steps)})"
