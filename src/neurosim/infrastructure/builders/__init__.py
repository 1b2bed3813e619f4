"""Convenience graph builders."""

from ._mlp import Activation, build_mlp

__all__ = [
    Activation.__name__,
    build_mlp.__name__,
]
