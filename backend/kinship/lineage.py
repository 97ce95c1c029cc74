"""
Lineage distances and sibling detection.

Sibling tiers are decided from the members' parent sets rather than from
any single path; everything deeper uses the up/down counts of the path.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

import networkx as nx

from .graph import KinshipGraph

FULL_SIBLING = "full"
HALF_SIBLING = "half"


@dataclass(frozen=True)
class LineageDistances:
    """Parent steps climbed (``up``) and descended (``down``)."""

    up: int
    down: int

    @property
    def min_dist(self) -> int:
        return min(self.up, self.down)

    @property
    def removal(self) -> int:
        return abs(self.up - self.down)

    @property
    def degree(self) -> int:
        """Cousin degree; only meaningful in the cousin tier."""
        return self.min_dist - 1

    @property
    def tier(self) -> str:
        if self.min_dist == 0:
            return "vertical"
        if self.min_dist == 1:
            if self.up == self.down:
                return "sibling"
            # up > down: alter hangs off an ancestor's line
            return "pibling" if self.up > self.down else "nibling"
        return "cousin"


def shared_parents(graph: KinshipGraph, a: int, b: int) -> FrozenSet[int]:
    return graph.parents(a) & graph.parents(b)


def sibling_kind(graph: KinshipGraph, a: int, b: int):
    """``"full"``, ``"half"`` or None when the two share no parent."""
    count = len(shared_parents(graph, a, b))
    if count >= 2:
        return FULL_SIBLING
    if count == 1:
        return HALF_SIBLING
    return None


def ancestors(graph: KinshipGraph, slot: int) -> FrozenSet[int]:
    # nx.ancestors is a plain traversal, so cyclic parent data cannot hang it
    found = nx.ancestors(graph.lineage, slot)
    found.discard(slot)
    return frozenset(found)


def common_ancestors(graph: KinshipGraph, a: int, b: int) -> FrozenSet[int]:
    return (ancestors(graph, a) | {a}) & (ancestors(graph, b) | {b})


def nearest_common_ancestors(graph: KinshipGraph, a: int, b: int) -> FrozenSet[int]:
    """Common ancestors with no descendant that is also a common ancestor."""
    common = common_ancestors(graph, a, b)
    nearest = set()
    for slot in common:
        below = nx.descendants(graph.lineage, slot)
        below.discard(slot)
        if not below & common:
            nearest.add(slot)
    return frozenset(nearest)
