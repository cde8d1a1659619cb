"""
Read-only directed, weighted graph abstraction.

Vertices are any hashable values compared by equality.
Edges are directed: u -> v with a non-negative integer weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Mapping, TypeVar

V = TypeVar("V")


class Graph(ABC, Generic[V]):
    """Directed, weighted graph as seen by traversal engines."""

    @abstractmethod
    def vertices(self) -> Iterable[V]:
        """Return all vertices in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, vertex: V) -> Mapping[V, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: dict[V, int] in edge insertion order.
        """
        raise NotImplementedError
