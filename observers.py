"""
Observer contract for graph traversals.

WeightedGraph calls into these callbacks synchronously while BFS, DFS and
Dijkstra run. Visualizers and loggers implement the subset they care about;
every callback on the base class is a no-op.
"""

from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar
import logging
import time

V = TypeVar("V")


class GraphAlgorithmObserver(Generic[V]):
    """
    Receives traversal milestones from a WeightedGraph.

    Return values are ignored by the graph.
    """

    def on_bfs_begun(self) -> None:
        """Called once before a breadth-first search starts."""

    def on_dfs_begun(self) -> None:
        """Called once before a depth-first search starts."""

    def on_dijkstra_begun(self) -> None:
        """Called once before Dijkstra's algorithm starts."""

    def on_visit(self, vertex: V) -> None:
        """Called just after BFS/DFS visits a vertex."""

    def on_vertex_finished(self, vertex: V, cost: float) -> None:
        """
        Called when Dijkstra adds a vertex to the finished set.

        cost is math.inf for vertices unreachable from the start.
        """

    def on_search_over(self) -> None:
        """Called exactly once when BFS/DFS terminates."""

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        """Called with the least-cost path, start first and end last."""


Event = Tuple[Any, ...]


class RecordingObserver(GraphAlgorithmObserver[V]):
    """
    Records every notification as an (event_name, *args) tuple.

    Useful for replaying a traversal after the fact and for asserting the
    exact notification order in tests.
    """

    def __init__(self) -> None:
        self.events: List[Event] = []

    def on_bfs_begun(self) -> None:
        self.events.append(("bfs_begun",))

    def on_dfs_begun(self) -> None:
        self.events.append(("dfs_begun",))

    def on_dijkstra_begun(self) -> None:
        self.events.append(("dijkstra_begun",))

    def on_visit(self, vertex: V) -> None:
        self.events.append(("visit", vertex))

    def on_vertex_finished(self, vertex: V, cost: float) -> None:
        self.events.append(("finished", vertex, cost))

    def on_search_over(self) -> None:
        self.events.append(("search_over",))

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        self.events.append(("dijkstra_over", list(path)))

    # --- Convenience views ---------------------------------------------------

    def visited(self) -> List[V]:
        """Vertices passed to on_visit, in order."""
        return [e[1] for e in self.events if e[0] == "visit"]

    def finished(self) -> List[Tuple[V, float]]:
        """(vertex, cost) pairs passed to on_vertex_finished, in order."""
        return [(e[1], e[2]) for e in self.events if e[0] == "finished"]

    def names(self) -> List[str]:
        return [e[0] for e in self.events]

    def clear(self) -> None:
        self.events.clear()


class LoggingObserver(GraphAlgorithmObserver[V]):
    """Writes every traversal event to a logger."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def on_bfs_begun(self) -> None:
        self._logger.log(self._level, "BFS begun")

    def on_dfs_begun(self) -> None:
        self._logger.log(self._level, "DFS begun")

    def on_dijkstra_begun(self) -> None:
        self._logger.log(self._level, "Dijkstra begun")

    def on_visit(self, vertex: V) -> None:
        self._logger.log(self._level, "visit %s", vertex)

    def on_vertex_finished(self, vertex: V, cost: float) -> None:
        self._logger.log(self._level, "finished %s cost=%s", vertex, cost)

    def on_search_over(self) -> None:
        self._logger.log(self._level, "search over")

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        self._logger.log(
            self._level, "Dijkstra over: %s", " -> ".join(str(v) for v in path)
        )


class PacedObserver(GraphAlgorithmObserver[V]):
    """
    Forwards events to another observer and waits after each step.

    The graph has no notion of playback speed; an animated visualizer wraps
    itself in a PacedObserver so the traversal blocks between steps.
    """

    def __init__(
        self,
        inner: GraphAlgorithmObserver[V],
        delay_sec: float,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_sec < 0:
            raise ValueError("delay_sec must be non-negative")
        self.inner = inner
        self.delay_sec = float(delay_sec)
        self._sleep = sleep

    def _pause(self) -> None:
        if self.delay_sec > 0:
            self._sleep(self.delay_sec)

    def on_bfs_begun(self) -> None:
        self.inner.on_bfs_begun()

    def on_dfs_begun(self) -> None:
        self.inner.on_dfs_begun()

    def on_dijkstra_begun(self) -> None:
        self.inner.on_dijkstra_begun()

    def on_visit(self, vertex: V) -> None:
        self.inner.on_visit(vertex)
        self._pause()

    def on_vertex_finished(self, vertex: V, cost: float) -> None:
        self.inner.on_vertex_finished(vertex, cost)
        self._pause()

    def on_search_over(self) -> None:
        self.inner.on_search_over()

    def on_dijkstra_over(self, path: Sequence[V]) -> None:
        self.inner.on_dijkstra_over(path)
