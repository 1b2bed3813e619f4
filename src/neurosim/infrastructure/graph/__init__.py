"""Graph container."""

from ._graph import Graph

__all__ = [
    Graph.__name__,
]
