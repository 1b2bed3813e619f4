"""
Parameter-free activation operations.

Each activation reads the single input port ``input``, applies the matching
`Tensor` primitive and writes the single output port ``output``.
"""

from __future__ import annotations

from typing import Callable, ClassVar, Dict, Mapping

from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor
from ._base import Operation


class _ElementwiseActivation(Operation):
    """
    Shared implementation of single-input activations.

    Subclasses set `op_type` and `_primitive`, the `Tensor` classmethod
    applied to the input.
    """

    _primitive: ClassVar[Callable[[ITensor], Tensor]]

    def compute(self, inputs: Mapping[str, ITensor]) -> Dict[str, Tensor]:
        self._require_inputs(inputs)
        return {"output": self._primitive(inputs["input"])}


class ReLU(_ElementwiseActivation):
    """
    ReLU activation: `max(0, x)` elementwise.
    """

    op_type = "ReLU"
    _primitive = staticmethod(Tensor.relu)


class Sigmoid(_ElementwiseActivation):
    """
    Sigmoid activation: `1 / (1 + exp(-x))` elementwise.
    """

    op_type = "Sigmoid"
    _primitive = staticmethod(Tensor.sigmoid)


class Tanh(_ElementwiseActivation):
    """
    Tanh activation.
    """

    op_type = "Tanh"
    _primitive = staticmethod(Tensor.tanh)


class Softmax(_ElementwiseActivation):
    """
    Softmax along the last axis (rank-1 or rank-2 inputs).
    """

    op_type = "Softmax"
    _primitive = staticmethod(Tensor.softmax)
