"""
Maze query interface and a grid-backed implementation.

A maze is a rectangular grid of junctures with (0, 0) in the upper left
corner. Walls sit between adjacent junctures and around the border; every
opening between two junctures carries a non-negative traversal weight.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from errors import InvalidWeightError
from juncture import Juncture


class Maze(ABC):
    """Read-only view of a maze consumed by build_maze_graph."""

    @abstractmethod
    def width(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def height(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def is_wall_above(self, j: Juncture) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_wall_below(self, j: Juncture) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_wall_to_left(self, j: Juncture) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_wall_to_right(self, j: Juncture) -> bool:
        raise NotImplementedError

    @abstractmethod
    def weight_above(self, j: Juncture) -> int:
        raise NotImplementedError

    @abstractmethod
    def weight_below(self, j: Juncture) -> int:
        raise NotImplementedError

    @abstractmethod
    def weight_to_left(self, j: Juncture) -> int:
        raise NotImplementedError

    @abstractmethod
    def weight_to_right(self, j: Juncture) -> int:
        raise NotImplementedError


class GridMaze(Maze):
    """
    Maze backed by numpy wall and weight arrays.

    Layout:
        h_walls[y, x] is the wall above juncture (x, y); shape (H + 1, W).
        v_walls[y, x] is the wall to the left of juncture (x, y); shape (H, W + 1).
        h_weights / v_weights hold the weight of the matching opening.

    Border walls are always closed, so no opening ever leads outside the grid.
    A new GridMaze starts with every wall closed.
    """

    def __init__(self, width: int, height: int, default_weight: int = 1) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Maze width and height must be positive.")
        if default_weight < 0:
            raise InvalidWeightError(default_weight)
        self._width = int(width)
        self._height = int(height)
        self.h_walls = np.ones((height + 1, width), dtype=bool)
        self.v_walls = np.ones((height, width + 1), dtype=bool)
        self.h_weights = np.full((height + 1, width), default_weight, dtype=np.int64)
        self.v_weights = np.full((height, width + 1), default_weight, dtype=np.int64)

    # --- Factories -----------------------------------------------------------

    @classmethod
    def open_grid(cls, width: int, height: int, weight: int = 1) -> "GridMaze":
        """Maze with no interior walls; every opening carries weight."""
        maze = cls(width, height, default_weight=weight)
        maze.h_walls[1:height, :] = False
        maze.v_walls[:, 1:width] = False
        return maze

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        seed: Optional[int] = None,
        max_weight: int = 1,
    ) -> "GridMaze":
        """
        Carve a perfect maze (exactly one route between any two junctures)
        by randomized depth-first search.

        Opening weights are drawn uniformly from [1, max_weight]. The same
        seed always yields the same maze.
        """
        if max_weight < 1:
            raise ValueError("max_weight must be at least 1.")
        rng = np.random.default_rng(seed)
        maze = cls(width, height)

        seen = np.zeros((height, width), dtype=bool)
        start = Juncture(0, 0)
        seen[start.y, start.x] = True
        stack: List[Juncture] = [start]

        while stack:
            current = stack[-1]
            candidates = [
                n
                for n in (current.above(), current.below(), current.left(), current.right())
                if maze.in_bounds(n) and not seen[n.y, n.x]
            ]
            if not candidates:
                stack.pop()
                continue
            nxt = candidates[int(rng.integers(len(candidates)))]
            weight = int(rng.integers(1, max_weight + 1))
            maze.open_wall(current, nxt, weight)
            seen[nxt.y, nxt.x] = True
            stack.append(nxt)

        return maze

    # --- Mutation ------------------------------------------------------------

    def open_wall(self, a: Juncture, b: Juncture, weight: Optional[int] = None) -> None:
        """
        Remove the wall between adjacent junctures a and b.

        weight replaces the opening's weight when given.
        """
        if weight is not None and weight < 0:
            raise InvalidWeightError(weight)
        walls, weights, row, col = self._slot(a, b)
        walls[row, col] = False
        if weight is not None:
            weights[row, col] = weight

    def close_wall(self, a: Juncture, b: Juncture) -> None:
        walls, _, row, col = self._slot(a, b)
        walls[row, col] = True

    # --- Maze interface ------------------------------------------------------

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def in_bounds(self, j: Juncture) -> bool:
        return 0 <= j.x < self._width and 0 <= j.y < self._height

    def is_wall_above(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self.h_walls[j.y, j.x])

    def is_wall_below(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self.h_walls[j.y + 1, j.x])

    def is_wall_to_left(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self.v_walls[j.y, j.x])

    def is_wall_to_right(self, j: Juncture) -> bool:
        self._check(j)
        return bool(self.v_walls[j.y, j.x + 1])

    def weight_above(self, j: Juncture) -> int:
        self._check(j)
        return int(self.h_weights[j.y, j.x])

    def weight_below(self, j: Juncture) -> int:
        self._check(j)
        return int(self.h_weights[j.y + 1, j.x])

    def weight_to_left(self, j: Juncture) -> int:
        self._check(j)
        return int(self.v_weights[j.y, j.x])

    def weight_to_right(self, j: Juncture) -> int:
        self._check(j)
        return int(self.v_weights[j.y, j.x + 1])

    # --- Internal helpers ----------------------------------------------------

    def _check(self, j: Juncture) -> None:
        if not self.in_bounds(j):
            raise ValueError(f"Juncture {j} is outside the {self._width}x{self._height} maze.")

    def _slot(self, a: Juncture, b: Juncture) -> tuple[np.ndarray, np.ndarray, int, int]:
        self._check(a)
        self._check(b)
        dx, dy = b.x - a.x, b.y - a.y
        if (dx, dy) == (0, -1):
            return self.h_walls, self.h_weights, a.y, a.x
        if (dx, dy) == (0, 1):
            return self.h_walls, self.h_weights, b.y, b.x
        if (dx, dy) == (-1, 0):
            return self.v_walls, self.v_weights, a.y, a.x
        if (dx, dy) == (1, 0):
            return self.v_walls, self.v_weights, b.y, b.x
        raise ValueError(f"Junctures {a} and {b} are not adjacent.")

    def __repr__(self) -> str:
        return f"GridMaze(width={self._width}, height={self._height})"
