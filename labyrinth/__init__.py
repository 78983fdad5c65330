"""Maze generation and step-by-step solving toolkit."""

__all__ = [
    "RandomSource",
    "PythonRandomSource",
    "SequenceRandomSource",
    "Viewer",
    "DisjointSet",
    "Direction",
    "CellColor",
    "MazeCell",
    "Maze",
    "SolveMethod",
    "FrameRecorder",
    "render_maze",
]

from .base import RandomSource, PythonRandomSource, SequenceRandomSource, Viewer
from .disjoint_set import DisjointSet
from .cell import Direction, CellColor, MazeCell
from .maze import Maze, SolveMethod
from .render import FrameRecorder, render_maze
