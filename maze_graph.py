"""
Build a WeightedGraph of junctures from a maze.
"""

from typing import Optional
import logging

from algorithms import DijkstraEngine
from juncture import Juncture
from maze import Maze
from weighted_graph import WeightedGraph

logger = logging.getLogger(__name__)

# (is_wall, weight, neighbour) accessors for each direction.
_DIRECTIONS = (
    (lambda m, j: m.is_wall_above(j), lambda m, j: m.weight_above(j), Juncture.above),
    (lambda m, j: m.is_wall_below(j), lambda m, j: m.weight_below(j), Juncture.below),
    (lambda m, j: m.is_wall_to_left(j), lambda m, j: m.weight_to_left(j), Juncture.left),
    (lambda m, j: m.is_wall_to_right(j), lambda m, j: m.weight_to_right(j), Juncture.right),
)


def build_maze_graph(
    maze: Maze, dijkstra_engine: Optional[DijkstraEngine] = None
) -> WeightedGraph[Juncture]:
    """
    Convert a maze into a graph of junctures.

    Every juncture becomes a vertex. For every pair of adjacent junctures A
    and B not separated by a wall, two edges are added (A -> B and B -> A),
    both carrying the weight the maze reports for that opening from A.

    The maze's wall predicates are trusted to keep neighbours in bounds; the
    builder does no bounds checking of its own.
    """
    graph: WeightedGraph[Juncture] = WeightedGraph(dijkstra_engine)

    # Rows are y, columns are x.
    for y in range(maze.height()):
        for x in range(maze.width()):
            juncture = Juncture(x, y)
            if not graph.contains_vertex(juncture):
                graph.add_vertex(juncture)

            for is_wall, weight_of, step in _DIRECTIONS:
                if is_wall(maze, juncture):
                    continue
                neighbor = step(juncture)
                if not graph.contains_vertex(neighbor):
                    graph.add_vertex(neighbor)
                weight = weight_of(maze, juncture)
                graph.add_edge(juncture, neighbor, weight)
                graph.add_edge(neighbor, juncture, weight)

    logger.debug(
        "Built maze graph %dx%d: %d vertices, %d edges",
        maze.width(),
        maze.height(),
        len(graph),
        graph.edge_count(),
    )
    return graph
