"""Pillow rendering of maze solves as animation frames."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PIL import Image, ImageDraw

from .base import Viewer
from .cell import CellColor, MazeCell
from .maze import PATH, Maze, SolveMethod

PathLike = Union[str, Path]

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
VISITED_COLOR = (120, 170, 230)
EXAMINED_COLOR = (170, 170, 170)
START_COLOR = (220, 30, 30)
GOAL_COLOR = (40, 180, 80)
CURRENT_COLOR = (240, 200, 20)

CELL_COLORS = {
    CellColor.UNVISITED: PATH_COLOR,
    CellColor.VISITED: VISITED_COLOR,
    CellColor.EXAMINED: EXAMINED_COLOR,
}


def render_maze(
    maze: Maze,
    *,
    cell_size: int = 16,
    current: Optional[MazeCell] = None,
) -> Image.Image:
    """Draw the maze's block grid with cells tinted by their solver color."""

    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    grid = maze.to_grid()
    height, width = grid.shape
    canvas = Image.new("RGB", (width * cell_size, height * cell_size), WALL_COLOR)
    draw = ImageDraw.Draw(canvas)

    for r in range(height):
        for c in range(width):
            if grid[r, c] == PATH:
                _draw_block(draw, (r, c), cell_size, PATH_COLOR)

    for cell in maze:
        fill = CELL_COLORS[cell.color]
        if cell is maze.start_cell:
            fill = START_COLOR
        elif cell is maze.end_cell:
            fill = GOAL_COLOR
        if cell is current:
            fill = CURRENT_COLOR
        _draw_block(draw, (2 * cell.row + 1, 2 * cell.col + 1), cell_size, fill)
    return canvas


def _draw_block(
    draw: ImageDraw.ImageDraw,
    block: Tuple[int, int],
    cell_size: int,
    color: Tuple[int, int, int],
) -> None:
    r, c = block
    left = c * cell_size
    top = r * cell_size
    draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)


class FrameRecorder(Viewer):
    """Viewer that renders a frame for every ``every``-th step of a solve."""

    def __init__(self, maze: Maze, *, cell_size: int = 16, every: int = 1) -> None:
        if every < 1:
            raise ValueError("every must be at least 1")
        self.maze = maze
        self.cell_size = cell_size
        self.every = every
        self.calls = 0
        self.frames: List[Image.Image] = []
        self._last: Optional[Tuple[int, int]] = None

    def visualize(self, current_cell: MazeCell) -> None:
        self.calls += 1
        self._last = current_cell.position
        if (self.calls - 1) % self.every == 0:
            self.frames.append(render_maze(self.maze, cell_size=self.cell_size, current=current_cell))

    def finish(self) -> None:
        """Make sure the last visualized step has a frame."""

        if self._last is not None and (self.calls - 1) % self.every != 0:
            self.frames.append(render_maze(self.maze, cell_size=self.cell_size, current=self.maze.get_cell(*self._last)))

    def save_animation(self, path: PathLike, *, duration: int = 40) -> Path:
        if not self.frames:
            raise RuntimeError("No frames recorded; solve the maze first")
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        first, *rest = self.frames
        first.save(target, save_all=True, append_images=rest, duration=duration, loop=0)
        return target


__all__ = ["render_maze", "FrameRecorder"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze and animate a solve")
    parser.add_argument("rows", type=int)
    parser.add_argument("cols", type=int)
    parser.add_argument("--method", choices=[m.value for m in SolveMethod], default=SolveMethod.DFS.value)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--respect-walls",
        action="store_true",
        help="Only step through knocked-down walls (solvers walk the full grid by default)",
    )
    parser.add_argument("--animation", type=Path, default=None, help="Write an animated GIF here")
    parser.add_argument("--cell-size", type=int, default=16)
    parser.add_argument("--every", type=int, default=1, help="Keep one frame every N steps")
    parser.add_argument("--duration", type=int, default=40, help="Milliseconds per frame")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    maze = Maze(args.rows, args.cols, seed=args.seed, respect_walls=args.respect_walls)
    recorder = None
    if args.animation is not None:
        recorder = FrameRecorder(maze, cell_size=args.cell_size, every=args.every)
        maze.viewer = recorder
    maze.generate_maze()
    maze.solve_maze(args.method)
    if recorder is not None:
        recorder.finish()
        path = recorder.save_animation(args.animation, duration=args.duration)
        print(f"Wrote {len(recorder.frames)} frames to {path}")


if __name__ == "__main__":
    main()
