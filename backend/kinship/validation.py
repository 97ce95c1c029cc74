"""
Which direct relations may be recorded between two members.

Used by relationship creation: the pair's current kinship decides which
relation types are still offered.
"""
from __future__ import annotations

from typing import FrozenSet

from .errors import RelationshipValidationError
from .graph import KinshipGraph
from .inference import resolve_kinship
from .lineage import ancestors
from .models import Category, RelationType


def _directly_linked(graph: KinshipGraph, a: int, b: int) -> bool:
    return (
        graph.lineage.has_edge(a, b)
        or graph.lineage.has_edge(b, a)
        or graph.unions.has_edge(a, b)
    )


def _why_not(graph: KinshipGraph, a_id: str, b_id: str, relation: RelationType):
    """Reason ``relation`` (a -> b) is not allowed, or None."""
    if a_id == b_id:
        return "a member cannot be related to themselves"
    if not (graph.has_member(a_id) and graph.has_member(b_id)):
        # a member with no edges yet can take any relation
        return None

    a, b = graph.slot(a_id), graph.slot(b_id)
    if _directly_linked(graph, a, b):
        return "members are already directly related"
    if relation is RelationType.PARENT:
        if b in ancestors(graph, a):
            return "would make a member their own ancestor"
        return None
    if resolve_kinship(graph, a_id, b_id).category is Category.BLOOD:
        return "members are blood relatives"
    return None


def allowed_relation_types(graph: KinshipGraph, a_id: str, b_id: str) -> FrozenSet[RelationType]:
    """Relation types that may be created; PARENT means ``a_id`` becomes parent of ``b_id``."""
    return frozenset(r for r in RelationType if _why_not(graph, a_id, b_id, r) is None)


def validate_relation(graph: KinshipGraph, a_id: str, b_id: str, relation: object) -> RelationType:
    relation = RelationType.parse(relation)
    reason = _why_not(graph, a_id, b_id, relation)
    if reason is not None:
        raise RelationshipValidationError(reason, a_id, b_id, relation.value)
    return relation
