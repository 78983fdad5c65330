"""Grid cells with neighbor links, shared walls and solver colors."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .base import RandomSource


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


class CellColor(IntEnum):
    """Solver-visible state of a cell. Values only ever increase during a solve."""

    UNVISITED = 0
    VISITED = 1
    EXAMINED = 2


class MazeCell:
    """One square of the maze.

    Neighbor slots are indexed by :class:`Direction` and hold ``None`` on the
    border. Walls start up on every side; a wall between two neighbors is
    stored on both cells and always changes on both at once.
    """

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col
        self._neighbors: List[Optional[MazeCell]] = [None, None, None, None]
        self._walls: List[bool] = [True, True, True, True]
        self._linked = False
        self.color = CellColor.UNVISITED

    def __repr__(self) -> str:
        return f"MazeCell(row={self.row}, col={self.col}, color={self.color.name})"

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    # ------------------------------------------------------------------
    # Neighbors

    def set_neighbors(
        self,
        north: Optional[MazeCell],
        east: Optional[MazeCell],
        south: Optional[MazeCell],
        west: Optional[MazeCell],
    ) -> None:
        if self._linked:
            raise RuntimeError(f"Neighbors of {self!r} are already set")
        self._neighbors = [north, east, south, west]
        self._linked = True

    def neighbor(self, direction: Direction) -> Optional[MazeCell]:
        return self._neighbors[direction]

    def get_neighbors(self) -> List[MazeCell]:
        """Present neighbors in north, east, south, west order."""

        return [cell for cell in self._neighbors if cell is not None]

    def get_random_neighbor(self, rng: "RandomSource") -> Optional[MazeCell]:
        neighbors = self.get_neighbors()
        if not neighbors:
            return None
        return neighbors[rng.next_int(len(neighbors))]

    def _direction_of(self, other: MazeCell) -> Direction:
        for direction in Direction:
            if self._neighbors[direction] is other:
                return direction
        raise ValueError(f"{other!r} is not a neighbor of {self!r}")

    # ------------------------------------------------------------------
    # Walls

    def has_wall(self, other: MazeCell) -> bool:
        return self._walls[self._direction_of(other)]

    def has_wall_on(self, direction: Direction) -> bool:
        # Border sides keep their wall forever
        if self._neighbors[direction] is None:
            return True
        return self._walls[direction]

    def knock_down_wall(self, other: MazeCell) -> None:
        direction = self._direction_of(other)
        if not self._walls[direction]:
            raise ValueError(f"No wall between {self!r} and {other!r}")
        self._walls[direction] = False
        other._walls[direction.opposite] = False

    # ------------------------------------------------------------------
    # Colors

    def visit(self) -> None:
        if self.color is CellColor.EXAMINED:
            raise ValueError(f"Cannot visit {self!r}: it is already examined")
        self.color = CellColor.VISITED

    def examine(self) -> None:
        self.color = CellColor.EXAMINED

    def visited(self) -> bool:
        return self.color is not CellColor.UNVISITED

    def reset(self) -> None:
        self.color = CellColor.UNVISITED


__all__ = ["Direction", "CellColor", "MazeCell"]
