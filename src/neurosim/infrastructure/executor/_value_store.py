"""
Per-run value store.

Maps `(op_id, port)` references to the tensors produced during one
execution. Every `Executor.run` call builds its own store, which is what
allows a single graph to be executed by several independent callers.
"""

from dataclasses import dataclass, field

from ...domain._errors import MissingDependencyError
from ...domain._operation import PortRef
from ...domain._tensor import ITensor


@dataclass(frozen=True)
class ValueStore:
    """
    The executor's running store of produced tensors.

    Attributes
    ----------
    values : dict[PortRef, ITensor]
        Produced tensors keyed by producer port reference.
    """

    values: dict[PortRef, ITensor] = field(default_factory=dict)

    def put(self, ref: PortRef, value: ITensor) -> None:
        """Store the tensor produced at `ref`."""
        self.values[ref] = value

    def get(self, ref: PortRef, *, op_id: str, port: str) -> ITensor:
        """
        Resolve the tensor an input port is wired to.

        Parameters
        ----------
        ref : PortRef
            The producer reference the port is wired to.
        op_id : str
            Id of the consuming operation (for error reporting).
        port : str
            Name of the consuming input port (for error reporting).

        Returns
        -------
        ITensor
            The stored tensor.

        Raises
        ------
        MissingDependencyError
            If nothing was stored under `ref`.
        """
        try:
            return self.values[ref]
        except KeyError:
            raise MissingDependencyError(op_id, port, str(ref)) from None

    def __contains__(self, ref: object) -> bool:
        return ref in self.values
