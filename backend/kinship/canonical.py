"""Pick one authoritative path when several connect the same pair."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .classifier import Classification, classify, lowest_rank
from .config import SETTINGS
from .graph import KinshipGraph
from .logging import get_logger
from .models import Path
from .paths import iter_paths

logger = get_logger(__name__)


def canonical_key(path: Path, classification: Classification):
    # category rank, then length, then tokens, then member slots
    return (classification.category.rank, len(path), path.tokens, path.slots)


def choose(paths: Iterable[Path]) -> Optional[Tuple[Path, Classification]]:
    """Lowest canonical key wins; independent of enumeration order."""
    best = None
    best_key = None
    for path in paths:
        classification = classify(path.steps)
        key = canonical_key(path, classification)
        if best_key is None or key < best_key:
            best, best_key = (path, classification), key
    return best


def find_canonical(
    graph: KinshipGraph,
    ego: int,
    alter: int,
    max_depth: Optional[int] = None,
    max_paths: Optional[int] = None,
) -> Optional[Tuple[Path, Classification]]:
    """
    Search ego -> alter and return the canonical path, or None.

    Paths are scored as they arrive. After ``max_paths`` of them only
    partial paths that could still beat the best key are extended, so the
    cap bounds the search without changing the winner.
    """
    limit = SETTINGS.max_paths if max_paths is None else max_paths
    best = None
    best_key = None
    seen = 0

    def extend(steps) -> bool:
        if seen < limit or best_key is None:
            return True
        rank = lowest_rank(steps)
        # completions are at least one step longer than ``steps``
        return rank < best_key[0] or (rank == best_key[0] and len(steps) < best_key[1])

    for path in iter_paths(graph, ego, alter, max_depth, extend):
        seen += 1
        if seen == limit:
            logger.warning("paths.limit_reached", limit=limit,
                           ego=graph.member_id(ego), alter=graph.member_id(alter))
        classification = classify(path.steps)
        key = canonical_key(path, classification)
        if best_key is None or key < best_key:
            best, best_key = (path, classification), key
    return best
