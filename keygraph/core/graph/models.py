"""Data models for graph operations."""

from __future__ import annotations

from dataclasses import dataclass, field

UNREACHED = -1


@dataclass
class BfsResult:
    """Distances and parent pointers from a single BFS run.

    Both lists are indexed by node position in the graph. The source is its
    own parent; unreached nodes have distance UNREACHED and parent None.
    The result is a snapshot: it goes stale if the graph is mutated later.
    """

    source: int
    distances: list[int] = field(default_factory=list)
    parents: list[int | None] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.distances)

    def covers(self, index: int) -> bool:
        """Whether ``index`` is inside this result."""
        return 0 <= index < len(self.distances)

    def is_reached(self, index: int) -> bool:
        return self.covers(index) and self.distances[index] != UNREACHED

    @property
    def reached(self) -> list[int]:
        """Positions of every reached node, source included."""
        return [i for i, d in enumerate(self.distances) if d != UNREACHED]

    def __repr__(self) -> str:
        return f"BfsResult(source={self.source}, reached={len(self.reached)}/{len(self)})"
