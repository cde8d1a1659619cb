"""
Error taxonomy for the weighted-graph engine.

All errors are raised synchronously at the call that caused them and are
never retried or swallowed inside the engine.
"""

from typing import Any


class GraphError(ValueError):
    """Base class for graph usage errors."""


class DuplicateVertexError(GraphError):
    """Raised by add_vertex when the vertex is already in the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex {vertex!r} is already present.")
        self.vertex = vertex


class InvalidWeightError(GraphError):
    """Raised when an edge weight is negative or not an integer."""

    def __init__(self, weight: Any) -> None:
        super().__init__(f"Invalid weight {weight!r}: weights must be a non-negative integer.")
        self.weight = weight


class UnknownVertexError(GraphError, KeyError):
    """Raised when an operation names a vertex that is not in the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex {vertex!r} is not present.")
        self.vertex = vertex

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnreachableEndError(GraphError):
    """
    Raised by Dijkstra when no finite-cost path leads from start to end.
    """

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(f"No path from {start!r} to {end!r}.")
        self.start = start
        self.end = end
