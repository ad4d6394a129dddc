"""Run several independent searches on worker threads.

Each start/goal pair is handled as one unit of work; the search driver copies
the grid, so workers never share mutable search state.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.grid import Coord, Grid
from ..search.astar import SearchResult, search


logger = logging.getLogger(__name__)


def search_many(
    grid: Grid,
    pairs: Sequence[Tuple[Coord, Coord]],
    max_workers: int = 4,
    open_set_kind: str = "heap",
) -> List[SearchResult]:
    """Search every ``(start, goal)`` pair and return results in input order.

    The first exception raised by a worker is re-raised here after all
    workers have stopped.
    """

    if max_workers <= 0:
        raise ValueError("max_workers must be positive")
    if not pairs:
        return []

    jobs: "queue.Queue[Tuple[int, Coord, Coord]]" = queue.Queue()
    for index, (start, goal) in enumerate(pairs):
        jobs.put((index, start, goal))

    results: Dict[int, SearchResult] = {}
    errors: List[BaseException] = []
    lock = threading.Lock()

    def _worker() -> None:
        while True:
            try:
                index, start, goal = jobs.get_nowait()
            except queue.Empty:
                return
            try:
                result = search(grid, start, goal, open_set_kind)
            except Exception as exc:
                logger.error("Search %d from %s to %s failed: %s", index, start, goal, exc)
                with lock:
                    errors.append(exc)
                continue
            with lock:
                results[index] = result

    threads = [
        threading.Thread(target=_worker, daemon=True, name=f"SearchWorker-{i}")
        for i in range(min(max_workers, len(pairs)))
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    if errors:
        raise errors[0]
    logger.info("Completed %d searches on %d workers", len(results), len(threads))
    return [results[i] for i in range(len(pairs))]


__all__ = ["search_many"]
