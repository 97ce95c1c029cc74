"""Kinship relationship resolver."""
from .errors import KinshipError, RelationshipValidationError, UnknownRelationTypeError
from .graph import KinshipGraph, build_graph, graph_from_edges
from .inference import KinshipResolver, ResolverSession, resolve_kinship
from .models import Category, Gender, KinshipResult, RelationshipEdge, RelationType, StepKind
from .store import InMemoryRelationshipStore, RelationshipStore
from .validation import allowed_relation_types, validate_relation

__all__ = [
    "Category",
    "Gender",
    "InMemoryRelationshipStore",
    "KinshipError",
    "KinshipGraph",
    "KinshipResolver",
    "KinshipResult",
    "RelationType",
    "RelationshipEdge",
    "RelationshipStore",
    "RelationshipValidationError",
    "ResolverSession",
    "StepKind",
    "UnknownRelationTypeError",
    "allowed_relation_types",
    "build_graph",
    "graph_from_edges",
    "resolve_kinship",
    "validate_relation",
]
