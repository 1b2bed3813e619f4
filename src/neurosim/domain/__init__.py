"""
Domain layer of NeuroSim: protocols, port references and error types.

Nothing in this package depends on a numerical backend.
"""

from ._errors import (
    NeuroSimError,
    ShapeError,
    UnsupportedError,
    DuplicateIdError,
    UnknownOpError,
    CycleError,
    MissingDependencyError,
)
from ._tensor import ITensor
from ._operation import GRAPH_INPUT, GRAPH_INPUT_PORT, GRAPH_INPUT_REF, IOperation, PortRef

__all__ = [
    NeuroSimError.__name__,
    ShapeError.__name__,
    UnsupportedError.__name__,
    DuplicateIdError.__name__,
    UnknownOpError.__name__,
    CycleError.__name__,
    MissingDependencyError.__name__,
    ITensor.__name__,
    IOperation.__name__,
    PortRef.__name__,
    "GRAPH_INPUT",
    "GRAPH_INPUT_PORT",
    "GRAPH_INPUT_REF",
]
