"""
Kinship term inference.

Snapshot -> paths -> classification -> canonical path -> label.
"""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .canonical import find_canonical
from .config import SETTINGS, ResolverSettings
from .graph import KinshipGraph, build_graph
from .labels import compose, modifiers_for
from .lineage import nearest_common_ancestors, sibling_kind
from .logging import get_logger
from .models import Category, KinshipResult
from .store import RelationshipStore

logger = get_logger(__name__)


def resolve_kinship(
    graph: KinshipGraph,
    ego_id: str,
    alter_id: str,
    max_depth: Optional[int] = None,
    max_paths: Optional[int] = None,
) -> KinshipResult:
    """
    Resolve the kinship term of ``alter_id`` as seen from ``ego_id``.

    Never raises for data problems: members missing from the snapshot or
    without a path inside the depth bound are Unrelated.
    """
    if max_depth is not None and max_depth < 1:
        raise ValueError(f"max_depth must be at least 1, got {max_depth}")
    if ego_id == alter_id:
        return KinshipResult.self_result()
    if not (graph.has_member(ego_id) and graph.has_member(alter_id)):
        return KinshipResult.unrelated()

    ego, alter = graph.slot(ego_id), graph.slot(alter_id)
    chosen = find_canonical(graph, ego, alter, max_depth, max_paths)
    if chosen is None:
        logger.debug("kinship.unrelated", ego=ego_id, alter=alter_id, scope=graph.scope)
        return KinshipResult.unrelated()

    path, classification = chosen
    distances = classification.distances
    sibling = None
    if classification.category is Category.BLOOD and distances.tier == "sibling":
        sibling = sibling_kind(graph, ego, alter)

    gender = graph.gender(alter)
    label, base, degree, removal = compose(classification.category, distances, gender, sibling)
    result = KinshipResult(
        label=label,
        category=classification.category,
        base_term=base,
        degree=degree,
        removal=removal,
        modifiers=modifiers_for(classification.category, sibling),
        gender=gender,
        up=distances.up if distances else 0,
        down=distances.down if distances else 0,
        steps=len(path),
        path=path.steps,
    )
    logger.debug("kinship.resolved", ego=ego_id, alter=alter_id, scope=graph.scope,
                 label=label, category=classification.category.value,
                 path=path.describe())
    return result


class ResolverSession:
    """
    One snapshot reused for a batch of lookups, e.g. labelling a roster.
    Build a new session per request so edits are always visible.
    """

    def __init__(self, graph: KinshipGraph, settings: ResolverSettings = SETTINGS):
        self.graph = graph
        self.settings = settings

    def resolve(self, ego_id: str, alter_id: str) -> KinshipResult:
        return resolve_kinship(self.graph, ego_id, alter_id,
                               self.settings.max_depth, self.settings.max_paths)

    def label(self, ego_id: str, alter_id: str) -> str:
        return self.resolve(ego_id, alter_id).label

    def relationship_map(
        self, ego_id: str, members: Optional[Iterable[str]] = None
    ) -> Dict[str, Tuple[str, int]]:
        """``{member: (label, steps)}`` for every related member other than ego."""
        candidates = self.graph.members if members is None else members
        roster = {}
        for member in candidates:
            if member == ego_id:
                continue
            result = self.resolve(ego_id, member)
            if result.is_related:
                roster[member] = (result.label, result.steps)
        return roster

    def common_ancestors(self, a_id: str, b_id: str) -> Tuple[str, ...]:
        """Member ids of the nearest common ancestors, sorted."""
        if not (self.graph.has_member(a_id) and self.graph.has_member(b_id)):
            return ()
        slots = nearest_common_ancestors(self.graph, self.graph.slot(a_id), self.graph.slot(b_id))
        return tuple(sorted(self.graph.member_id(s) for s in slots))


class KinshipResolver:
    """Store-backed entry point. Every call reads a fresh snapshot."""

    def __init__(self, store: RelationshipStore, settings: ResolverSettings = SETTINGS):
        self.store = store
        self.settings = settings

    def session(self, scope: Optional[str]) -> ResolverSession:
        return ResolverSession(build_graph(self.store, scope), self.settings)

    def resolve(self, scope: Optional[str], ego_id: str, alter_id: str) -> KinshipResult:
        if ego_id == alter_id:
            return KinshipResult.self_result()
        return self.session(scope).resolve(ego_id, alter_id)

    def label(self, scope: Optional[str], ego_id: str, alter_id: str) -> str:
        return self.resolve(scope, ego_id, alter_id).label
