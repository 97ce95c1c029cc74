"""
Graph builder.

Turns the edges of one scope into an immutable snapshot: members live in
integer slots, parent edges in a frozen NetworkX DiGraph and spouse or
partner edges in a frozen undirected Graph.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Tuple

import networkx as nx

from .logging import get_logger
from .models import Gender, RelationshipEdge, RelationType, StepKind
from .store import RelationshipStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class KinshipGraph:
    scope: Optional[str]
    members: Tuple[str, ...]            # slot -> member id
    index: Mapping[str, int]            # member id -> slot
    genders: Tuple[Gender, ...]         # slot -> gender
    lineage: nx.DiGraph                 # parent slot -> child slot
    unions: nx.Graph                    # slot -- slot, relation=RelationType

    def __len__(self) -> int:
        return len(self.members)

    def has_member(self, member_id: str) -> bool:
        return member_id in self.index

    def slot(self, member_id: str) -> int:
        return self.index[member_id]

    def member_id(self, slot: int) -> str:
        return self.members[slot]

    def gender(self, slot: int) -> Gender:
        return self.genders[slot]

    def parents(self, slot: int) -> frozenset:
        return frozenset(self.lineage.predecessors(slot))

    def children(self, slot: int) -> frozenset:
        return frozenset(self.lineage.successors(slot))

    def union(self, a: int, b: int) -> Optional[RelationType]:
        data = self.unions.get_edge_data(a, b)
        return data["relation"] if data else None

    def neighbors(self, slot: int) -> List[Tuple[int, StepKind]]:
        """Every (slot, step) reachable in one step, in slot order."""
        steps = [(p, StepKind.PARENT) for p in self.lineage.predecessors(slot)]
        steps.extend((c, StepKind.CHILD) for c in self.lineage.successors(slot))
        for other, data in self.unions.adj[slot].items():
            steps.append((other, StepKind.lateral(data["relation"])))
        steps.sort(key=lambda s: (s[0], s[1].value))
        return steps

    def edge_count(self) -> int:
        return self.lineage.number_of_edges() + self.unions.number_of_edges()


def empty_graph(scope: Optional[str] = None) -> KinshipGraph:
    return graph_from_edges([], scope=scope)


def graph_from_edges(
    edges: Iterable[RelationshipEdge],
    genders: Optional[Callable[[str], object]] = None,
    scope: Optional[str] = None,
) -> KinshipGraph:
    """
    Build an immutable snapshot from raw edges.

    Edges tagged with another scope and self-references are dropped.
    Mirrored spouse/partner rows collapse into one undirected edge; if a
    pair is recorded as both spouse and partner, spouse wins.
    """
    kept: List[RelationshipEdge] = []
    dropped = 0
    for e in edges:
        if e.scope is not None and e.scope != scope:
            logger.warning("graph.edge_out_of_scope", scope=scope, edge_scope=e.scope,
                           member_a=e.member_a, member_b=e.member_b)
            dropped += 1
            continue
        if e.is_self_reference:
            logger.warning("graph.self_reference", scope=scope, member=e.member_a,
                           relation=e.relation.value)
            dropped += 1
            continue
        kept.append(e)

    member_ids = sorted({m for e in kept for m in (e.member_a, e.member_b)})
    index = {m: i for i, m in enumerate(member_ids)}

    lineage = nx.DiGraph()
    lineage.add_nodes_from(range(len(member_ids)))
    unions = nx.Graph()
    unions.add_nodes_from(range(len(member_ids)))

    for e in kept:
        a, b = index[e.member_a], index[e.member_b]
        if e.relation is RelationType.PARENT:
            lineage.add_edge(a, b)
            continue
        existing = unions.get_edge_data(a, b)
        if existing and existing["relation"] is not e.relation:
            logger.warning("graph.conflicting_union", scope=scope,
                           member_a=e.member_a, member_b=e.member_b)
            if existing["relation"] is RelationType.SPOUSE:
                continue
        unions.add_edge(a, b, relation=e.relation)

    lookup = genders or (lambda _member: Gender.UNSPECIFIED)
    graph = KinshipGraph(
        scope=scope,
        members=tuple(member_ids),
        index=MappingProxyType(index),
        genders=tuple(Gender.parse(lookup(m)) for m in member_ids),
        lineage=nx.freeze(lineage),
        unions=nx.freeze(unions),
    )
    logger.debug("graph.built", scope=scope, members=len(graph),
                 parent_edges=lineage.number_of_edges(),
                 union_edges=unions.number_of_edges(), dropped=dropped)
    return graph


def build_graph(store: RelationshipStore, scope: Optional[str]) -> KinshipGraph:
    """Read one scope from the store. A missing or empty scope gives an empty graph."""
    if scope is None:
        return empty_graph()
    return graph_from_edges(store.list_edges(scope), store.get_gender, scope)
