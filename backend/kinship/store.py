"""
Relationship store boundary.

The resolver only reads from a store; creating and removing edges belongs
to the relationship-management side of the application.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol

from .models import Gender, RelationshipEdge, RelationType


class RelationshipStore(Protocol):
    def list_edges(self, scope: Optional[str]) -> Iterable[RelationshipEdge]:
        ...

    def get_gender(self, member_id: str) -> Gender:
        ...


class InMemoryRelationshipStore:
    """Dict-backed store, one edge list per scope."""

    def __init__(self):
        self._edges: Dict[str, List[RelationshipEdge]] = {}
        self._genders: Dict[str, Gender] = {}

    def list_edges(self, scope: Optional[str]) -> List[RelationshipEdge]:
        if scope is None:
            return []
        return list(self._edges.get(scope, []))

    def get_gender(self, member_id: str) -> Gender:
        return self._genders.get(member_id, Gender.UNSPECIFIED)

    def set_gender(self, member_id: str, gender: object) -> None:
        self._genders[member_id] = Gender.parse(gender)

    def add_edge(self, scope: str, member_a: str, member_b: str, relation: object) -> RelationshipEdge:
        edge = RelationshipEdge(member_a, member_b, RelationType.parse(relation), scope)
        self._edges.setdefault(scope, []).append(edge)
        return edge

    def add_parent(self, scope: str, parent: str, child: str) -> RelationshipEdge:
        return self.add_edge(scope, parent, child, RelationType.PARENT)

    def remove_edge(self, scope: str, member_a: str, member_b: str, relation: object) -> bool:
        """Remove an edge; lateral edges match in either orientation."""
        relation = RelationType.parse(relation)
        edges = self._edges.get(scope, [])
        for i, edge in enumerate(edges):
            if edge.relation is not relation:
                continue
            same = edge.member_a == member_a and edge.member_b == member_b
            mirrored = relation.is_lateral and edge.member_a == member_b and edge.member_b == member_a
            if same or mirrored:
                del edges[i]
                return True
        return False
