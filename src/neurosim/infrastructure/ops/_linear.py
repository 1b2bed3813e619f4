"""
Linear (fully-connected) operation.

Computes an affine projection of rank-2, batch-major inputs:

    output = input @ weight + bias

Shape conventions
-----------------
- input  : (batch, in_features)
- weight : (in_features, out_features)
- bias   : (out_features,)
- output : (batch, out_features)

Parameter initialization
------------------------
Parameters are created once, at construction, through the
`WeightInitializer` registry (Xavier/Glorot uniform for the weight, zeros
for the bias by default) using the explicit generator passed by the caller.
Explicit `weight` / `bias` tensors may be supplied instead; they are
validated and cloned so the operation owns its parameters.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import numpy as np

from ...domain._errors import ShapeError
from ...domain._tensor import ITensor
from ..tensor._tensor import Tensor
from ..utils.weight_initializer import WeightInitializer
from ._base import Operation


class Linear(Operation):
    """
    Fully-connected operation: `output = input @ weight + bias`.

    Parameters
    ----------
    op_id : str
        Unique id of the operation.
    in_features : int
        Number of input features per example.
    out_features : int
        Number of output features per example.
    rng : Optional[numpy.random.Generator], optional
        Generator used to initialize parameters. Required unless both
        `weight` and `bias` are given.
    name : Optional[str], optional
        Display label. Defaults to `op_id`.
    weight : Optional[ITensor], optional
        Explicit weight of shape `(in_features, out_features)`.
    bias : Optional[ITensor], optional
        Explicit bias of shape `(out_features,)`.
    weight_init : str, optional
        Registered initializer name for the weight. Defaults to
        ``"xavier_uniform"``.
    bias_init : str, optional
        Registered initializer name for the bias. Defaults to ``"zeros"``.

    Raises
    ------
    ValueError
        If a feature count is not positive, or if a parameter must be
        generated and no `rng` was given.
    ShapeError
        If an explicit `weight` or `bias` has the wrong shape.
    """

    op_type = "Linear"
    input_names = ("input",)
    output_names = ("output",)

    def __init__(
        self,
        op_id: str,
        in_features: int,
        out_features: int,
        *,
        rng: Optional[np.random.Generator] = None,
        name: Optional[str] = None,
        weight: Optional[ITensor] = None,
        bias: Optional[ITensor] = None,
        weight_init: str = "xavier_uniform",
        bias_init: str = "zeros",
    ) -> None:
        super().__init__(op_id, name)
        if in_features <= 0 or out_features <= 0:
            raise ValueError("in_features and out_features must be positive integers")

        self.in_features = int(in_features)
        self.out_features = int(out_features)

        if (weight is None or bias is None) and rng is None:
            raise ValueError(
                f"Linear {op_id!r} needs an explicit random generator to "
                "initialize its parameters"
            )

        self._parameters["weight"] = self._init_parameter(
            "weight", weight, (self.in_features, self.out_features), weight_init, rng
        )
        self._parameters["bias"] = self._init_parameter(
            "bias", bias, (self.out_features,), bias_init, rng
        )

    def _init_parameter(
        self,
        param: str,
        given: Optional[ITensor],
        shape: tuple[int, ...],
        initializer: str,
        rng: Optional[np.random.Generator],
    ) -> Tensor:
        if given is None:
            return WeightInitializer(initializer)(shape, rng=rng)
        if tuple(given.shape) != shape:
            raise ShapeError(
                "linear",
                f"{param} of {self.op_id!r} must have shape {shape}, got {tuple(given.shape)}",
                (shape, given.shape),
            )
        return given.clone()

    def compute(self, inputs: Mapping[str, ITensor]) -> Dict[str, Tensor]:
        """
        Apply the affine transform to a rank-2 input.

        Raises
        ------
        ShapeError
            If the input is not `(batch, in_features)`.
        """
        self._require_inputs(inputs)
        x = inputs["input"]
        z = Tensor.matmul(x, self._parameters["weight"])
        return {"output": Tensor.add(z, self._parameters["bias"])}

    def describe(self) -> str:
        return f"Linear({self.in_features} → {self.out_features})"
