"""
Elementwise addition of two tensors, for residual / skip connections.
"""

from __future__ import annotations

from typing import Dict, Mapping

from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor
from ._base import Operation


class Add(Operation):
    """
    Residual addition: ``output = a + b``.

    Input ports
    -----------
    a, b : tensors of equal shape (the bias broadcast of `Tensor.add` also
        applies, but residual connections normally join equal shapes).
    """

    op_type = "Add"
    input_names = ("a", "b")
    output_names = ("output",)

    def compute(self, inputs: Mapping[str, ITensor]) -> Dict[str, Tensor]:
        self._require_inputs(inputs)
        return {"output": Tensor.add(inputs["a"], inputs["b"])}
