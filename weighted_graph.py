"""
Concrete directed, weighted graph with observable traversals.

Implements the Graph interface with an insertion-ordered adjacency mapping
and runs BFS, DFS and Dijkstra over it, notifying registered observers as
each algorithm progresses.
"""

from collections import deque
from numbers import Integral
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, TypeVar
import logging
import math

from algorithms import DijkstraEngine
from dijkstra_engine import BruteForceDijkstraEngine
from errors import (
    DuplicateVertexError,
    InvalidWeightError,
    UnknownVertexError,
    UnreachableEndError,
)
from graph import Graph
from observers import GraphAlgorithmObserver

V = TypeVar("V")

logger = logging.getLogger(__name__)


class WeightedGraph(Graph[V]):
    """
    Directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    The graph never stores duplicate vertices and every weight is a
    non-negative integer. Vertices and edges cannot be removed once added.
    """

    def __init__(self, dijkstra_engine: Optional[DijkstraEngine] = None) -> None:
        self._adj: Dict[V, Dict[V, int]] = {}
        self._observers: List[GraphAlgorithmObserver[V]] = []
        self._dijkstra_engine = dijkstra_engine or BruteForceDijkstraEngine()

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex with no outgoing edges.

        Raises DuplicateVertexError if the vertex is already present.
        """
        if vertex in self._adj:
            raise DuplicateVertexError(vertex)
        self._adj[vertex] = {}

    def add_edge(self, src: V, dst: V, weight: int) -> None:
        """
        Add or overwrite the directed edge src -> dst.

        Both endpoints must already be vertices; they are never added
        implicitly. Raises InvalidWeightError (checked first) for a weight
        that is not a non-negative integer and UnknownVertexError for a
        missing endpoint.
        """
        if isinstance(weight, bool) or not isinstance(weight, Integral) or weight < 0:
            raise InvalidWeightError(weight)
        self._require(src)
        self._require(dst)
        self._adj[src][dst] = weight

    def add_observer(self, observer: GraphAlgorithmObserver[V]) -> None:
        """Register an observer; observers are notified in registration order."""
        self._observers.append(observer)

    # --- Queries -------------------------------------------------------------

    def contains_vertex(self, vertex: V) -> bool:
        return vertex in self._adj

    def get_weight(self, src: V, dst: V) -> Optional[int]:
        """
        Weight of the edge src -> dst, or None if there is no such edge.

        Raises UnknownVertexError if either vertex is not in the graph.
        """
        self._require(src)
        self._require(dst)
        return self._adj[src].get(dst)

    def edge_count(self) -> int:
        return sum(len(out) for out in self._adj.values())

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adj)

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Iterable[V]:
        return self._adj.keys()

    def neighbors(self, vertex: V) -> Dict[V, int]:
        self._require(vertex)
        return dict(self._adj[vertex])  # defensive copy

    # --- Traversals ----------------------------------------------------------

    def do_bfs(self, start: V, end: V) -> List[V]:
        """
        Breadth-first search from start, stopping when end is dequeued.

        Observers receive on_bfs_begun, then on_visit for each vertex as it
        is visited, then on_search_over exactly once. end itself is never
        visited: the search stops as soon as it leaves the queue.

        Returns the visited vertices in visit order.
        """
        self._require(start)
        self._require(end)
        self._notify(lambda o: o.on_bfs_begun())
        return self._search(start, end, lifo=False)

    def do_dfs(self, start: V, end: V) -> List[V]:
        """
        Depth-first search from start, stopping when end is popped.

        Same protocol as do_bfs with on_dfs_begun. Neighbours are pushed in
        edge insertion order, so the most recently added neighbour is
        explored first.
        """
        self._require(start)
        self._require(end)
        self._notify(lambda o: o.on_dfs_begun())
        return self._search(start, end, lifo=True)

    def do_dijkstra(self, start: V, end: V) -> List[V]:
        """
        Run Dijkstra's algorithm from start over the whole graph.

        Observers receive on_dijkstra_begun, then on_vertex_finished for
        every vertex as it joins the finished set, then on_dijkstra_over with
        the least-cost path from start to end.

        Returns the path (start first, end last). Raises UnreachableEndError
        after every vertex has finished if end has no finite-cost path.
        """
        self._require(start)
        self._require(end)
        self._notify(lambda o: o.on_dijkstra_begun())
        logger.debug("Dijkstra from %r to %r over %d vertices", start, end, len(self._adj))

        cost, pred = self._dijkstra_engine.shortest_paths(
            self,
            start,
            on_finished=lambda v, c: self._notify(lambda o: o.on_vertex_finished(v, c)),
        )

        if math.isinf(cost[end]):
            logger.debug("Dijkstra end %r unreachable from %r", end, start)
            raise UnreachableEndError(start, end)

        path = [end]
        current = end
        while current != start:
            current = pred[current]
            path.append(current)
        path.reverse()

        self._notify(lambda o: o.on_dijkstra_over(list(path)))
        return path

    def shortest_path_costs(self, start: V) -> Dict[V, float]:
        """
        Costs from start to every reachable vertex, without notifying observers.
        """
        self._require(start)
        return self._dijkstra_engine.shortest_path_costs(self, start)

    # --- Internal helpers ----------------------------------------------------

    def _require(self, vertex: V) -> None:
        if vertex not in self._adj:
            raise UnknownVertexError(vertex)

    def _notify(self, event: Callable[[GraphAlgorithmObserver[V]], None]) -> None:
        for observer in self._observers:
            event(observer)

    def _search(self, start: V, end: V, lifo: bool) -> List[V]:
        label = "DFS" if lifo else "BFS"

        visited: Set[V] = set()
        order: List[V] = []
        frontier = deque([start])

        while frontier:
            current = frontier.pop() if lifo else frontier.popleft()
            if current == end:
                logger.debug("%s reached %r after %d visits", label, end, len(order))
                break
            if current in visited:
                continue

            self._notify(lambda o: o.on_visit(current))
            visited.add(current)
            order.append(current)
            for neighbor in self._adj[current]:
                if neighbor not in visited:
                    frontier.append(neighbor)
        else:
            logger.debug("%s exhausted without reaching %r", label, end)

        self._notify(lambda o: o.on_search_over())
        return order
