"""Tests for the graph builder."""
from __future__ import annotations

import networkx as nx
import pytest

from kinship.graph import build_graph, empty_graph, graph_from_edges
from kinship.models import Gender, RelationshipEdge, RelationType, StepKind
from kinship.store import InMemoryRelationshipStore

SCOPE = "family"


class TestBuildGraph:
    def test_members_get_sorted_slots(self, family_graph):
        assert list(family_graph.members) == sorted(family_graph.members)
        assert family_graph.member_id(family_graph.slot("ego")) == "ego"

    def test_mirrored_spouse_rows_are_one_edge(self, family_graph):
        dad, mom = family_graph.slot("dad"), family_graph.slot("mom")
        assert family_graph.union(dad, mom) is RelationType.SPOUSE
        # four marriages recorded with five rows
        assert family_graph.unions.number_of_edges() == 4

    def test_parent_edges_are_directed(self, family_graph):
        dad, ego = family_graph.slot("dad"), family_graph.slot("ego")
        assert dad in family_graph.parents(ego)
        assert ego in family_graph.children(dad)
        assert ego not in family_graph.parents(dad)

    def test_neighbors_carry_step_kinds(self, family_graph):
        g = family_graph
        steps = dict(
            (g.member_id(slot), step) for slot, step in g.neighbors(g.slot("dad"))
        )
        assert steps["grandpa"] is StepKind.PARENT
        assert steps["ego"] is StepKind.CHILD
        assert steps["mom"] is StepKind.SPOUSE

    def test_genders_come_from_store(self, family_graph):
        assert family_graph.gender(family_graph.slot("mom")) is Gender.FEMALE
        assert family_graph.gender(family_graph.slot("ego")) is Gender.UNSPECIFIED

    def test_snapshot_is_frozen(self, family_graph):
        with pytest.raises(nx.NetworkXError):
            family_graph.lineage.add_edge(0, 1)
        with pytest.raises(TypeError):
            family_graph.index["someone"] = 99

    def test_edge_count(self, family_graph):
        assert family_graph.edge_count() == 12 + 4


class TestScoping:
    def test_missing_scope_is_empty(self, family_store):
        assert len(build_graph(family_store, None)) == 0
        assert len(build_graph(family_store, "nope")) == 0

    def test_other_scope_is_not_merged(self, family_store):
        family_store.add_parent("community", "stranger", "ego")
        graph = build_graph(family_store, SCOPE)
        assert not graph.has_member("stranger")

        community = build_graph(family_store, "community")
        assert set(community.members) == {"stranger", "ego"}

    def test_foreign_edges_are_dropped(self):
        edges = [
            RelationshipEdge("a", "b", RelationType.PARENT, "one"),
            RelationshipEdge("a", "c", RelationType.PARENT, "two"),
        ]
        graph = graph_from_edges(edges, scope="one")
        assert set(graph.members) == {"a", "b"}


class TestMalformedEdges:
    def test_self_reference_is_dropped(self):
        graph = graph_from_edges([
            RelationshipEdge("a", "a", RelationType.PARENT),
            RelationshipEdge("a", "b", RelationType.SPOUSE),
        ])
        assert graph.lineage.number_of_edges() == 0
        assert graph.unions.number_of_edges() == 1

    def test_spouse_wins_over_partner(self):
        for order in ((RelationType.PARTNER, RelationType.SPOUSE),
                      (RelationType.SPOUSE, RelationType.PARTNER)):
            graph = graph_from_edges([RelationshipEdge("a", "b", r) for r in order])
            assert graph.union(graph.slot("a"), graph.slot("b")) is RelationType.SPOUSE

    def test_parent_cycle_is_kept_as_data(self):
        graph = graph_from_edges([
            RelationshipEdge("a", "b", RelationType.PARENT),
            RelationshipEdge("b", "a", RelationType.PARENT),
        ])
        a, b = graph.slot("a"), graph.slot("b")
        assert graph.parents(a) == {b}
        assert graph.parents(b) == {a}


def test_empty_graph():
    graph = empty_graph("x")
    assert len(graph) == 0
    assert graph.scope == "x"


def test_store_remove_edge_matches_mirrored_lateral():
    store = InMemoryRelationshipStore()
    store.add_edge("s", "a", "b", "partner")
    assert store.remove_edge("s", "b", "a", RelationType.PARTNER)
    assert store.list_edges("s") == []
    assert not store.remove_edge("s", "a", "b", "partner")
