"""
Path enumeration.

Breadth-first worklist search over the snapshot that collects every
simple path from ego to alter up to a depth bound. Parent edges are walked
both ways (``parent`` going up, ``child`` going down); spouse and partner
edges are walked across.
"""
from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Callable, Iterator, List, Optional, Tuple

from .config import SETTINGS
from .graph import KinshipGraph
from .logging import get_logger
from .models import Path, StepKind

logger = get_logger(__name__)


def iter_paths(
    graph: KinshipGraph,
    ego: int,
    alter: int,
    max_depth: Optional[int] = None,
    extend: Optional[Callable[[Tuple[StepKind, ...]], bool]] = None,
) -> Iterator[Path]:
    """
    Yield simple paths ego -> alter with at most ``max_depth`` steps, in
    non-decreasing length.

    ``extend`` is consulted, with the steps of a partial path, before that
    partial path is queued; returning False drops it and everything that
    would grow out of it. It is called lazily, so it may depend on what
    the consumer has seen so far.
    """
    depth = SETTINGS.max_depth if max_depth is None else max_depth
    if depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {depth}")
    if ego == alter:
        return

    # (current slot, slots so far, steps so far, visited set)
    worklist = deque([(ego, (ego,), (), frozenset((ego,)))])
    while worklist:
        current, slots, steps, visited = worklist.popleft()
        for neighbor, step in graph.neighbors(current):
            if neighbor in visited:
                continue
            if neighbor == alter:
                yield Path(slots + (neighbor,), steps + (step,))
                continue
            if len(steps) + 1 >= depth:
                continue
            grown = steps + (step,)
            if extend is not None and not extend(grown):
                continue
            worklist.append((neighbor, slots + (neighbor,), grown, visited | {neighbor}))


def find_paths(
    graph: KinshipGraph,
    ego: int,
    alter: int,
    max_depth: Optional[int] = None,
    max_paths: Optional[int] = None,
) -> List[Path]:
    """
    The first ``max_paths`` simple paths ego -> alter, shortest first.
    ``ego == alter`` yields no paths; callers treat that as Self before
    searching.
    """
    limit = SETTINGS.max_paths if max_paths is None else max_paths
    found = list(islice(iter_paths(graph, ego, alter, max_depth), limit))
    if len(found) >= limit:
        logger.warning("paths.limit_reached", limit=limit,
                       ego=graph.member_id(ego), alter=graph.member_id(alter))
    return found
