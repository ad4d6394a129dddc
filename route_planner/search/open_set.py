"""Frontier containers for the grid search.

Both containers hand back the node with the lowest ``f = g + h``. Among nodes
sharing that ``f`` the one inserted last comes out first.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Callable, Dict, List, Tuple


@dataclass(frozen=True, slots=True)
class FrontierNode:
    """A discovered cell waiting to be expanded."""

    x: int
    y: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)


class OpenSet(ABC):
    """Insert / extract-best interface. Does not deduplicate cells."""

    @abstractmethod
    def insert(self, node: FrontierNode) -> None:
        ...

    @abstractmethod
    def extract_best(self) -> FrontierNode:
        """Remove and return the best node; ``IndexError`` when empty."""

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __bool__(self) -> bool:
        return len(self) > 0


class SortedOpenSet(OpenSet):
    """List re-sorted by descending ``f`` on every extraction, popped from the tail."""

    def __init__(self) -> None:
        self._nodes: List[FrontierNode] = []

    def insert(self, node: FrontierNode) -> None:
        self._nodes.append(node)

    def extract_best(self) -> FrontierNode:
        if not self._nodes:
            raise IndexError("extract_best from an empty open set")
        # Stable sort keeps equal-f nodes in insertion order, so the tail is
        # the most recent of the cheapest group.
        self._nodes.sort(key=lambda n: n.f, reverse=True)
        return self._nodes.pop()

    def clear(self) -> None:
        self._nodes.clear()

    def __len__(self) -> int:
        return len(self._nodes)


class HeapOpenSet(OpenSet):
    """Binary heap keyed by ``(f, -insertion_sequence)``."""

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, FrontierNode]] = []
        self._seq = count()

    def insert(self, node: FrontierNode) -> None:
        heappush(self._heap, (node.f, -next(self._seq), node))

    def extract_best(self) -> FrontierNode:
        if not self._heap:
            raise IndexError("extract_best from an empty open set")
        return heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)


OPEN_SET_KINDS: Dict[str, Callable[[], OpenSet]] = {
    "heap": HeapOpenSet,
    "sorted": SortedOpenSet,
}


def make_open_set(kind: str = "heap") -> OpenSet:
    """Return a new empty open set of the given ``kind``."""

    try:
        factory = OPEN_SET_KINDS[kind]
    except KeyError:
        raise ValueError(
            f"unknown open set kind {kind!r}; expected one of {sorted(OPEN_SET_KINDS)}"
        ) from None
    return factory()


__all__ = [
    "FrontierNode",
    "HeapOpenSet",
    "OPEN_SET_KINDS",
    "OpenSet",
    "SortedOpenSet",
    "make_open_set",
]
