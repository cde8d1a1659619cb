"""
Algorithm interfaces for shortest-path computation.

Keeps the Dijkstra selection loop separate from graph storage and from the
observer wiring in WeightedGraph.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, TypeVar
import math

from graph import Graph

V = TypeVar("V")

FinishedCallback = Callable[[V, float], None]


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.

    Every vertex of the graph is finished exactly once. Reachable vertices
    finish in order of increasing cost, ties going to the vertex inserted
    first; unreachable vertices finish afterwards in insertion order with
    cost math.inf.
    """

    @abstractmethod
    def shortest_paths(
        self,
        graph: Graph[V],
        source: V,
        on_finished: Optional[FinishedCallback] = None,
    ) -> tuple[Dict[V, float], Dict[V, Optional[V]]]:
        """
        Compute shortest-path costs plus the predecessor of each vertex.

        on_finished is called with (vertex, cost) as each vertex joins the
        finished set.

        Returns:
            (cost, pred) where cost maps every vertex to its path cost
            (math.inf if unreachable) and pred maps it to its parent on the
            least-cost path. pred[source] is source; unreachable vertices
            map to None.
        """
        raise NotImplementedError

    def shortest_path_costs(self, graph: Graph[V], source: V) -> Dict[V, float]:
        """
        Compute only the cost map for the vertices reachable from source.
        """
        cost, _ = self.shortest_paths(graph, source)
        return {v: c for v, c in cost.items() if not math.isinf(c)}
