"""
Forward-pass execution and trace recording.

Exports
-------
- Executor / run:
    Run a graph once and return its `Trace`.
- Trace / TraceStep:
    Clone-isolated execution records.
- ValueStore:
    The per-run store of produced tensors.
"""

from ._value_store import ValueStore
from ._trace import Trace, TraceStep
from ._executor import Executor, run

__all__ = [
    ValueStore.__name__,
    Trace.__name__,
    TraceStep.__name__,
    Executor.__name__,
    run.__name__,
]
