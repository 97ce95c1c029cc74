"""Shared fixtures: a three-generation family recorded in one scope."""
from __future__ import annotations

import pytest

from kinship.graph import build_graph
from kinship.inference import ResolverSession
from kinship.store import InMemoryRelationshipStore

SCOPE = "family"


@pytest.fixture
def family_store() -> InMemoryRelationshipStore:
    store = InMemoryRelationshipStore()
    parents = [
        ("great_grandpa", "grandpa"),
        ("great_grandma", "grandpa"),
        ("grandpa", "dad"),
        ("grandma", "dad"),
        ("grandpa", "uncle"),
        ("grandma", "uncle"),
        ("uncle", "cousin"),
        ("dad", "ego"),
        ("mom", "ego"),
        ("dad", "sibling"),
        ("mom", "sibling"),
        ("sibling", "nibling"),
    ]
    for parent, child in parents:
        store.add_parent(SCOPE, parent, child)
    store.add_edge(SCOPE, "great_grandpa", "great_grandma", "spouse")
    store.add_edge(SCOPE, "grandpa", "grandma", "spouse")
    store.add_edge(SCOPE, "dad", "mom", "spouse")
    # storage layers often write both directions of a marriage
    store.add_edge(SCOPE, "mom", "dad", "spouse")
    store.add_edge(SCOPE, "uncle", "aunt", "spouse")

    for member in ("great_grandpa", "grandpa", "dad", "uncle"):
        store.set_gender(member, "male")
    for member in ("great_grandma", "grandma", "mom", "aunt"):
        store.set_gender(member, "female")
    return store


@pytest.fixture
def family_graph(family_store):
    return build_graph(family_store, SCOPE)


@pytest.fixture
def family(family_graph) -> ResolverSession:
    return ResolverSession(family_graph)
