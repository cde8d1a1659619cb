"""
DijkstraEngine implementations.

BruteForceDijkstraEngine scans every unfinished vertex to pick the next one
to finish. HeapDijkstraEngine uses Python's heapq keyed on
(cost, insertion index), which finishes vertices in exactly the same order.
"""

from typing import Dict, List, Optional, Set, Tuple, TypeVar
import heapq
import math

from algorithms import DijkstraEngine, FinishedCallback
from graph import Graph

V = TypeVar("V")


def _initial_state(
    order: List[V], source: V
) -> tuple[Dict[V, float], Dict[V, Optional[V]]]:
    cost: Dict[V, float] = {v: math.inf for v in order}
    pred: Dict[V, Optional[V]] = {v: None for v in order}
    cost[source] = 0
    pred[source] = source
    return cost, pred


class BruteForceDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra with linear minimum selection.

    Complexity:
        O(V^2 + E). Fine for maze-sized graphs.
    """

    def shortest_paths(
        self,
        graph: Graph[V],
        source: V,
        on_finished: Optional[FinishedCallback] = None,
    ) -> tuple[Dict[V, float], Dict[V, Optional[V]]]:
        order = list(graph.vertices())
        cost, pred = _initial_state(order, source)
        finished: Set[V] = set()

        while len(finished) < len(order):
            # First strict minimum in insertion order wins ties.
            current: Optional[V] = None
            for v in order:
                if v in finished:
                    continue
                if current is None or cost[v] < cost[current]:
                    current = v

            finished.add(current)
            if on_finished is not None:
                on_finished(current, cost[current])

            base = cost[current]
            for v, w in graph.neighbors(current).items():
                if v in finished:
                    continue
                alt = base + w
                if alt < cost[v]:
                    cost[v] = alt
                    pred[v] = current

        return cost, pred


class HeapDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log V) over the vertices reachable from the source, plus a
        linear pass to finish the unreachable ones.
    """

    def shortest_paths(
        self,
        graph: Graph[V],
        source: V,
        on_finished: Optional[FinishedCallback] = None,
    ) -> tuple[Dict[V, float], Dict[V, Optional[V]]]:
        order = list(graph.vertices())
        index = {v: i for i, v in enumerate(order)}
        cost, pred = _initial_state(order, source)
        finished: Set[V] = set()

        # (cost, insertion index, vertex); the index keeps vertices from
        # ever being compared and reproduces the brute-force tie-break.
        pq: List[Tuple[float, int, V]] = [(0, index[source], source)]

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if u in finished or d_u != cost[u]:
                continue

            finished.add(u)
            if on_finished is not None:
                on_finished(u, d_u)

            for v, w in graph.neighbors(u).items():
                if v in finished:
                    continue
                alt = d_u + w
                if alt < cost[v]:
                    cost[v] = alt
                    pred[v] = u
                    heapq.heappush(pq, (alt, index[v], v))

        for v in order:
            if v not in finished:
                finished.add(v)
                if on_finished is not None:
                    on_finished(v, cost[v])

        return cost, pred
