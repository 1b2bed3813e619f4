"""
NeuroSim: forward-pass simulation of small neural-network computation graphs
with fully replayable execution traces.

Typical use:

    import numpy as np
    from neurosim import Executor, Tensor, build_mlp

    graph = build_mlp([3, 4, 2], rng=np.random.default_rng(42))
    trace = Executor().run(graph, Tensor((1, 3), [0.5, -0.3, 0.8]))
    for step in trace.steps:
        print(step.summary())
"""

from .domain import (
    GRAPH_INPUT,
    GRAPH_INPUT_REF,
    CycleError,
    DuplicateIdError,
    MissingDependencyError,
    NeuroSimError,
    PortRef,
    ShapeError,
    UnknownOpError,
    UnsupportedError,
)
from .infrastructure.tensor import Tensor, TensorView
from .infrastructure.ops import (
    BUILTIN_OPERATIONS,
    Add,
    Linear,
    Operation,
    ReLU,
    Sigmoid,
    Softmax,
    Tanh,
)
from .infrastructure.graph import Graph
from .infrastructure.executor import Executor, Trace, TraceStep, run
from .infrastructure.builders import Activation, build_mlp

__version__ = "1.0.0"
