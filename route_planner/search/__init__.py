"""search package."""

from .astar import GridSearch, SearchResult, SearchStatus, search
from .heuristic import heuristic
from .open_set import FrontierNode, HeapOpenSet, OpenSet, SortedOpenSet, make_open_set

__all__ = [
    "FrontierNode",
    "GridSearch",
    "HeapOpenSet",
    "OpenSet",
    "SearchResult",
    "SearchStatus",
    "SortedOpenSet",
    "heuristic",
    "make_open_set",
    "search",
]
