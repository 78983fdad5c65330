"""Abstract interfaces for randomness and visualization."""

from __future__ import annotations

import itertools
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .cell import MazeCell


class RandomSource(ABC):
    """Uniform integer sampling used by maze generation and the random walk."""

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``."""


class PythonRandomSource(RandomSource):
    """Random source backed by :class:`random.Random`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)


class SequenceRandomSource(RandomSource):
    """Replay a fixed sequence of draws, cycling once it is exhausted."""

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("SequenceRandomSource needs at least one value")
        self._values = itertools.cycle(values)
        self.draws = 0

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        value = next(self._values)
        if not 0 <= value < bound:
            raise ValueError(f"Scripted value {value} is outside [0, {bound})")
        self.draws += 1
        return value


class Viewer(ABC):
    """Receives one notification per solver step."""

    @abstractmethod
    def visualize(self, current_cell: "MazeCell") -> None:
        """Repaint the maze with ``current_cell`` highlighted."""


__all__ = [
    "RandomSource",
    "PythonRandomSource",
    "SequenceRandomSource",
    "Viewer",
]
