"""Rectangular maze with Kruskal generation and step-by-step solvers."""

from __future__ import annotations

import sys
import time
from collections import deque
from contextlib import contextmanager
from enum import Enum
from typing import Deque, Iterator, List, Optional, Tuple, Union

import numpy as np

from .base import PythonRandomSource, RandomSource, Viewer
from .cell import Direction, MazeCell
from .disjoint_set import DisjointSet

WALL = 1
PATH = 0


class SolveMethod(Enum):
    RANDOM = "random"
    DFS = "dfs"
    BFS = "bfs"

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]

    @classmethod
    def parse(cls, name: str) -> Optional["SolveMethod"]:
        """Translate an external method name, returning None for unknown names."""

        try:
            return cls(name)
        except ValueError:
            return None


_METHOD_LABELS = {
    SolveMethod.RANDOM: "Random",
    SolveMethod.DFS: "DFS",
    SolveMethod.BFS: "BFS",
}


@contextmanager
def _report_time(label: str) -> Iterator[None]:
    started = time.perf_counter()
    yield
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    print(f"{label} time used: {elapsed_ms}", file=sys.stderr)


class Maze:
    """A ``rows x cols`` grid of :class:`MazeCell` objects.

    The maze owns its cells (stored row-major), the random source and an
    optional viewer. ``generate_maze`` carves a perfect maze; ``solve_maze``
    runs one of the traversal strategies and reports each step to the viewer.

    Solvers walk the full grid graph and ignore walls unless the maze is built
    with ``respect_walls=True``; the only place that decides whether a step is
    allowed is :meth:`can_step`.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        rng: Optional[RandomSource] = None,
        seed: Optional[int] = None,
        viewer: Optional[Viewer] = None,
        respect_walls: bool = False,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"rows and cols must be at least 1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self.rng = rng if rng is not None else PythonRandomSource(seed)
        self.viewer = viewer
        self.respect_walls = respect_walls
        self.start_cell: Optional[MazeCell] = None
        self.end_cell: Optional[MazeCell] = None
        self.generated = False

        self.cells: List[MazeCell] = [MazeCell(r, c) for r in range(rows) for c in range(cols)]
        for cell in self.cells:
            r, c = cell.row, cell.col
            cell.set_neighbors(
                self.get_cell(r - 1, c) if r > 0 else None,
                self.get_cell(r, c + 1) if c < cols - 1 else None,
                self.get_cell(r + 1, c) if r < rows - 1 else None,
                self.get_cell(r, c - 1) if c > 0 else None,
            )

    def __iter__(self) -> Iterator[MazeCell]:
        return iter(self.cells)

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, cols={self.cols}, generated={self.generated})"

    def get_cell(self, row: int, col: int) -> MazeCell:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.rows}x{self.cols} maze")
        return self.cells[row * self.cols + col]

    def visualize(self, cell: MazeCell) -> None:
        """Show ``cell`` as the current cell. Does nothing without a viewer."""

        if self.viewer is None:
            return
        self.viewer.visualize(cell)

    # ------------------------------------------------------------------
    # Generation

    def generate_maze(self) -> None:
        """Carve a perfect maze with randomized Kruskal and set start/end cells."""

        if self.generated:
            raise RuntimeError("generate_maze() may only be called once per maze")
        self._make_kruskal_maze()
        self.generated = True
        self.start_cell = self.get_cell(0, 0)
        self.end_cell = self.get_cell(self.rows - 1, self.cols - 1)

    def _make_kruskal_maze(self) -> None:
        disjoint_set = DisjointSet()
        disjoint_set.make_set(self.cells)
        target = len(self.cells) - 1
        knocked_down = 0
        while knocked_down < target:
            current = self.get_cell(self.rng.next_int(self.rows), self.rng.next_int(self.cols))
            neighbor = current.get_random_neighbor(self.rng)
            if neighbor is None or not current.has_wall(neighbor):
                continue
            current_root = disjoint_set.find(current)
            neighbor_root = disjoint_set.find(neighbor)
            if current_root is neighbor_root:
                continue
            disjoint_set.union(current_root, neighbor_root)
            current.knock_down_wall(neighbor)
            knocked_down += 1

    def passages(self) -> List[Tuple[MazeCell, MazeCell]]:
        """Pairs of adjacent cells whose shared wall has been knocked down."""

        result: List[Tuple[MazeCell, MazeCell]] = []
        for cell in self.cells:
            for direction in (Direction.EAST, Direction.SOUTH):
                if not cell.has_wall_on(direction):
                    result.append((cell, cell.neighbor(direction)))
        return result

    def to_grid(self) -> np.ndarray:
        """Block representation: ``(2*rows+1, 2*cols+1)`` array of WALL/PATH."""

        grid = np.full((2 * self.rows + 1, 2 * self.cols + 1), WALL, dtype=np.uint8)
        for cell in self.cells:
            r, c = 2 * cell.row + 1, 2 * cell.col + 1
            grid[r, c] = PATH
            if not cell.has_wall_on(Direction.EAST):
                grid[r, c + 1] = PATH
            if not cell.has_wall_on(Direction.SOUTH):
                grid[r + 1, c] = PATH
        return grid

    # ------------------------------------------------------------------
    # Solving

    def can_step(self, current: MazeCell, neighbor: MazeCell) -> bool:
        return not self.respect_walls or not current.has_wall(neighbor)

    def _solver_neighbors(self, cell: MazeCell) -> List[MazeCell]:
        return [neighbor for neighbor in cell.get_neighbors() if self.can_step(cell, neighbor)]

    def reset_colors(self) -> None:
        for cell in self.cells:
            cell.reset()

    def solve_maze(self, method: Union[str, SolveMethod]) -> None:
        """Solve with ``"dfs"``, ``"bfs"`` or ``"random"``.

        Unknown method names are ignored.
        """

        if not isinstance(method, SolveMethod):
            method = SolveMethod.parse(method)
            if method is None:
                return
        if method is SolveMethod.RANDOM:
            self.solve_random_maze()
        elif method is SolveMethod.DFS:
            self.solve_dfs_maze()
        else:
            self.solve_bfs_maze()

    def _require_endpoints(self) -> Tuple[MazeCell, MazeCell]:
        if self.start_cell is None or self.end_cell is None:
            raise RuntimeError("Maze has no start/end cell; call generate_maze() first")
        return self.start_cell, self.end_cell

    def solve_random_maze(self) -> None:
        """Wander to a random neighbor until the end cell is reached.

        Cells are examined as they are left, without being visited first.
        This can take a very long time on large mazes.
        """

        start, end = self._require_endpoints()
        with _report_time(SolveMethod.RANDOM.label):
            current = start
            while current is not end:
                self.visualize(current)
                neighbors = self._solver_neighbors(current)
                if not neighbors:
                    raise RuntimeError(f"Random walk is stuck at {current!r}: no open neighbor")
                next_cell = neighbors[self.rng.next_int(len(neighbors))]
                current.examine()
                current = next_cell
            self.visualize(current)

    def solve_dfs_maze(self) -> None:
        """Depth-first search over every cell in row-major order.

        Uses an explicit stack of (cell, pending neighbors) frames; the visit
        and examine order is the same as the recursive formulation.
        """

        _, end = self._require_endpoints()
        with _report_time(SolveMethod.DFS.label):
            for root in self.cells:
                if not root.visited():
                    self._dfs_visit(root)
            self.visualize(end)

    def _dfs_visit(self, root: MazeCell) -> None:
        root.visit()
        stack = [(root, iter(self._solver_neighbors(root)))]
        while stack:
            cell, pending = stack[-1]
            for neighbor in pending:
                if not neighbor.visited():
                    neighbor.visit()
                    self.visualize(neighbor)
                    stack.append((neighbor, iter(self._solver_neighbors(neighbor))))
                    break
            else:
                cell.examine()
                stack.pop()

    def solve_bfs_maze(self) -> None:
        """Breadth-first search from the start cell.

        The whole component is explored; reaching the end cell does not stop
        the search.
        """

        start, end = self._require_endpoints()
        with _report_time(SolveMethod.BFS.label):
            start.visit()
            queue: Deque[MazeCell] = deque([start])
            while queue:
                current = queue.popleft()
                for neighbor in self._solver_neighbors(current):
                    if not neighbor.visited():
                        neighbor.visit()
                        self.visualize(neighbor)
                        queue.append(neighbor)
                current.examine()
            self.visualize(end)


__all__ = ["Maze", "SolveMethod", "WALL", "PATH"]
