"""Union-find over hashable elements (maze cells during generation)."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet:
    """Partition of elements into classes with path compression and union by rank."""

    def __init__(self) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        self._num_sets = 0

    def make_set(self, elements: Iterable[T]) -> None:
        """Put every element of ``elements`` into its own singleton class."""

        for element in elements:
            if element in self._parent:
                continue
            self._parent[element] = element
            self._rank[element] = 0
            self._num_sets += 1

    def find(self, element: T) -> T:
        """Return the representative of the class containing ``element``."""

        if element not in self._parent:
            raise KeyError(f"Unknown element: {element!r}")
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: T, b: T) -> bool:
        """Merge the classes of ``a`` and ``b``.

        Returns False (and changes nothing) when they already share a class.
        """

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        self._num_sets -= 1
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    @property
    def num_sets(self) -> int:
        """Number of disjoint classes currently tracked."""

        return self._num_sets

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent


__all__ = ["DisjointSet"]
