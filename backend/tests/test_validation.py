"""Tests for relation-creation checks."""
from __future__ import annotations

import pytest

from kinship.errors import RelationshipValidationError, UnknownRelationTypeError
from kinship.models import RelationType
from kinship.validation import allowed_relation_types, validate_relation

ALL = frozenset(RelationType)


class TestAllowedRelationTypes:
    def test_self(self, family_graph):
        assert allowed_relation_types(family_graph, "ego", "ego") == frozenset()

    def test_already_linked(self, family_graph):
        assert allowed_relation_types(family_graph, "dad", "ego") == frozenset()
        assert allowed_relation_types(family_graph, "ego", "dad") == frozenset()
        assert allowed_relation_types(family_graph, "mom", "dad") == frozenset()

    def test_ancestor_cannot_become_child(self, family_graph):
        # ego as parent of grandpa would be a cycle; marriage is blood
        assert allowed_relation_types(family_graph, "ego", "grandpa") == frozenset()

    def test_blood_relatives_may_not_marry(self, family_graph):
        assert allowed_relation_types(family_graph, "grandpa", "cousin") == {RelationType.PARENT}
        assert allowed_relation_types(family_graph, "ego", "cousin") == {RelationType.PARENT}

    def test_in_laws_may_take_any_type(self, family_graph):
        assert allowed_relation_types(family_graph, "mom", "uncle") == ALL

    def test_unknown_member(self, family_graph):
        assert allowed_relation_types(family_graph, "ego", "newcomer") == ALL


class TestValidateRelation:
    def test_cycle_is_rejected(self, family_graph):
        with pytest.raises(RelationshipValidationError) as exc:
            validate_relation(family_graph, "ego", "grandpa", "parent")
        assert exc.value.reason == "would make a member their own ancestor"
        assert exc.value.relation == "parent"
        assert "ego -> grandpa" in str(exc.value)

    def test_blood_marriage_is_rejected(self, family_graph):
        with pytest.raises(RelationshipValidationError, match="blood relatives"):
            validate_relation(family_graph, "ego", "sibling", "spouse")

    def test_self_is_rejected(self, family_graph):
        with pytest.raises(RelationshipValidationError):
            validate_relation(family_graph, "ego", "ego", RelationType.PARTNER)

    def test_accepted_codes(self, family_graph):
        assert validate_relation(family_graph, "mom", "uncle", "partner_of") is RelationType.PARTNER
        assert validate_relation(family_graph, "ego", "newcomer", "PARENT") is RelationType.PARENT

    def test_unknown_code(self, family_graph):
        with pytest.raises(UnknownRelationTypeError):
            validate_relation(family_graph, "ego", "newcomer", "cousin_of")
