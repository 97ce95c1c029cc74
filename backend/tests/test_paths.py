"""Tests for path enumeration."""
from __future__ import annotations

import pytest

from kinship.graph import graph_from_edges
from kinship.models import RelationshipEdge, RelationType, StepKind
from kinship.paths import find_paths


def _chain(length: int):
    """m0 is the child of m1, the child of m2, ..."""
    return graph_from_edges([
        RelationshipEdge(f"m{i + 1}", f"m{i}", RelationType.PARENT) for i in range(length)
    ])


class TestFindPaths:
    def test_all_simple_paths_shortest_first(self, family_graph):
        g = family_graph
        paths = find_paths(g, g.slot("ego"), g.slot("uncle"))

        assert [len(p) for p in paths] == sorted(len(p) for p in paths)
        shortest = [p for p in paths if len(p) == 3]
        assert {g.member_id(p.slots[2]) for p in shortest} == {"grandpa", "grandma"}
        for p in shortest:
            assert p.steps == (StepKind.PARENT, StepKind.PARENT, StepKind.CHILD)

    def test_paths_are_simple_and_bounded(self, family_graph):
        g = family_graph
        paths = find_paths(g, g.slot("ego"), g.slot("cousin"), max_depth=8)
        assert paths
        for p in paths:
            assert len(set(p.slots)) == len(p.slots)
            assert len(p) <= 8
            assert p.slots[0] == g.slot("ego")
            assert p.slots[-1] == g.slot("cousin")
            assert len(p.slots) == len(p.steps) + 1

    def test_alter_is_never_passed_through(self, family_graph):
        g = family_graph
        alter = g.slot("dad")
        for p in find_paths(g, g.slot("ego"), alter):
            assert alter not in p.slots[:-1]

    def test_spouse_is_one_lateral_step(self, family_graph):
        g = family_graph
        paths = find_paths(g, g.slot("dad"), g.slot("mom"))
        direct = [p for p in paths if len(p) == 1]
        assert len(direct) == 1
        assert direct[0].steps == (StepKind.SPOUSE,)

    def test_self_yields_nothing(self, family_graph):
        ego = family_graph.slot("ego")
        assert find_paths(family_graph, ego, ego) == []

    def test_depth_bound(self):
        graph = _chain(5)
        m0, m5 = graph.slot("m0"), graph.slot("m5")
        assert find_paths(graph, m0, m5, max_depth=4) == []
        (path,) = find_paths(graph, m0, m5, max_depth=5)
        assert path.steps == (StepKind.PARENT,) * 5

    def test_invalid_depth(self, family_graph):
        with pytest.raises(ValueError):
            find_paths(family_graph, 0, 1, max_depth=0)

    def test_path_limit(self, family_graph):
        g = family_graph
        paths = find_paths(g, g.slot("ego"), g.slot("uncle"), max_paths=2)
        assert len(paths) == 2
        assert all(len(p) == 3 for p in paths)


class TestCycles:
    def test_two_cycle_terminates(self):
        graph = graph_from_edges([
            RelationshipEdge("a", "b", RelationType.PARENT),
            RelationshipEdge("b", "a", RelationType.PARENT),
            RelationshipEdge("b", "c", RelationType.PARENT),
        ])
        paths = find_paths(graph, graph.slot("a"), graph.slot("c"))
        assert {p.steps for p in paths} == {
            (StepKind.CHILD, StepKind.CHILD),
            (StepKind.PARENT, StepKind.CHILD),
        }

    def test_long_cycle_terminates(self):
        graph = graph_from_edges([
            RelationshipEdge("a", "b", RelationType.PARENT),
            RelationshipEdge("b", "c", RelationType.PARENT),
            RelationshipEdge("c", "a", RelationType.PARENT),
            RelationshipEdge("x", "y", RelationType.PARENT),
        ])
        assert find_paths(graph, graph.slot("a"), graph.slot("x")) == []
        lengths = sorted(len(p) for p in find_paths(graph, graph.slot("a"), graph.slot("c")))
        assert lengths == [1, 2]
