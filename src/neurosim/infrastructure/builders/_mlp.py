"""
Multi-layer perceptron graph builder.

Turns a list of layer sizes into a chain graph of `Linear` operations, each
followed by an activation:

    build_mlp([784, 128, 64, 10], rng=rng)

produces

    linear_0 -> act_0 -> linear_1 -> act_1 -> linear_2 -> act_2

with ReLU on the hidden layers and Softmax on the output layer by default.
`Activation.NONE` omits the activation after a layer.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from ..graph._graph import Graph
from ..ops import Linear, Operation, ReLU, Sigmoid, Softmax, Tanh


class Activation(Enum):
    """Activation applied after a Linear layer."""

    NONE = "none"
    RELU = "relu"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    SOFTMAX = "softmax"


_ACTIVATIONS = {
    Activation.RELU: ReLU,
    Activation.SIGMOID: Sigmoid,
    Activation.TANH: Tanh,
    Activation.SOFTMAX: Softmax,
}


def _create_activation(activation: Activation, op_id: str) -> Optional[Operation]:
    if activation is Activation.NONE:
        return None
    return _ACTIVATIONS[activation](op_id, op_id)


def build_mlp(
    layer_sizes: Sequence[int],
    *,
    rng: np.random.Generator,
    hidden_activation: Activation = Activation.RELU,
    output_activation: Activation = Activation.SOFTMAX,
) -> Graph:
    """
    Build a sequential MLP graph.

    Parameters
    ----------
    layer_sizes : Sequence[int]
        Neurons per layer, including the input layer, e.g. ``[784, 128, 10]``.
    rng : numpy.random.Generator
        Generator used to initialize every Linear weight, in layer order.
    hidden_activation : Activation, optional
        Activation after each hidden layer. Defaults to ReLU.
    output_activation : Activation, optional
        Activation after the output layer. Defaults to Softmax.

    Returns
    -------
    Graph
        The assembled chain graph.

    Raises
    ------
    ValueError
        If fewer than two layer sizes are given.
    """
    if len(layer_sizes) < 2:
        raise ValueError("Need at least input + output layer sizes")

    ops: List[Operation] = []
    last = len(layer_sizes) - 2
    for i in range(len(layer_sizes) - 1):
        fan_in, fan_out = int(layer_sizes[i]), int(layer_sizes[i + 1])
        ops.append(
            Linear(
                f"linear_{i}",
                fan_in,
                fan_out,
                rng=rng,
                name=f"Linear {i} ({fan_in}→{fan_out})",
            )
        )

        activation = output_activation if i == last else hidden_activation
        act = _create_activation(activation, f"act_{i}")
        if act is not None:
            ops.append(act)

    return Graph.sequential(*ops)
