"""
Juncture value type for maze graphs.

A juncture is one cell of a rectangular maze, identified by its (x, y)
coordinates with (0, 0) in the upper left corner.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Juncture:
    """Immutable grid coordinate used as a graph vertex."""

    x: int
    y: int

    def above(self) -> "Juncture":
        return Juncture(self.x, self.y - 1)

    def below(self) -> "Juncture":
        return Juncture(self.x, self.y + 1)

    def left(self) -> "Juncture":
        return Juncture(self.x - 1, self.y)

    def right(self) -> "Juncture":
        return Juncture(self.x + 1, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
