"""
Core types of the kinship resolver: relation codes, genders, path tokens
and the structured result returned to callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import UnknownRelationTypeError


class RelationType(Enum):
    """The three kinds of stored relationship edge."""

    PARENT = "parent"
    SPOUSE = "spouse"
    PARTNER = "partner"

    @property
    def is_lateral(self) -> bool:
        """Spouse and partner edges are symmetric; parent edges are directed."""
        return self is not RelationType.PARENT

    @property
    def codes(self) -> Tuple[str, ...]:
        return (self.value, f"{self.value}_of")

    @classmethod
    def parse(cls, code: object) -> "RelationType":
        if isinstance(code, RelationType):
            return code
        if isinstance(code, str):
            normalized = code.strip().lower()
            for relation in cls:
                if normalized in relation.codes:
                    return relation
        raise UnknownRelationTypeError(code)


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, value: object) -> "Gender":
        """Lenient parse; anything unrecognised is UNSPECIFIED."""
        if isinstance(value, Gender):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ("male", "m"):
                return cls.MALE
            if normalized in ("female", "f"):
                return cls.FEMALE
        return cls.UNSPECIFIED


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    ACROSS = "across"


class StepKind(Enum):
    """
    Normalized path token. The value is the token string used when paths
    are printed or compared lexicographically.
    """

    PARENT = "parent"
    CHILD = "child"
    SPOUSE = "spouse"
    PARTNER = "partner"

    @property
    def direction(self) -> Direction:
        if self is StepKind.PARENT:
            return Direction.UP
        if self is StepKind.CHILD:
            return Direction.DOWN
        return Direction.ACROSS

    @property
    def relation(self) -> RelationType:
        if self is StepKind.SPOUSE:
            return RelationType.SPOUSE
        if self is StepKind.PARTNER:
            return RelationType.PARTNER
        return RelationType.PARENT

    @property
    def is_lateral(self) -> bool:
        return self.direction is Direction.ACROSS

    @classmethod
    def parse(cls, token: str) -> "StepKind":
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise UnknownRelationTypeError(token) from None

    @classmethod
    def lateral(cls, relation: RelationType) -> "StepKind":
        return cls.SPOUSE if relation is RelationType.SPOUSE else cls.PARTNER


def parse_tokens(path: str) -> Tuple[StepKind, ...]:
    """Parse ``"parent > parent > child"`` into step tokens."""
    return tuple(StepKind.parse(t) for t in path.split(">") if t.strip())


def format_tokens(tokens) -> str:
    return " > ".join(t.value for t in tokens)


@dataclass(frozen=True)
class RelationshipEdge:
    """
    A stored fact between two members of a scope. For PARENT edges
    ``member_a`` is the parent and ``member_b`` the child.
    """

    member_a: str
    member_b: str
    relation: RelationType
    scope: Optional[str] = None

    @property
    def is_self_reference(self) -> bool:
        return self.member_a == self.member_b


@dataclass(frozen=True)
class Path:
    """A simple path from ego to alter as member slots and step tokens."""

    slots: Tuple[int, ...]
    steps: Tuple[StepKind, ...]

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(s.value for s in self.steps)

    def describe(self) -> str:
        return format_tokens(self.steps)


class Category(Enum):
    """Path category; ``rank`` is the canonical priority (lower wins)."""

    SELF = "self"
    BLOOD = "blood"
    SPOUSE = "spouse"
    PARTNER = "partner"
    STEP = "step"
    CO = "co"
    IN_LAW = "in-law"
    RELATIVE = "relative"
    UNRELATED = "unrelated"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANK[self]


_CATEGORY_RANK = {
    Category.SELF: -1,
    Category.BLOOD: 0,
    Category.SPOUSE: 1,
    Category.PARTNER: 1,
    Category.STEP: 2,
    Category.CO: 2,
    Category.IN_LAW: 3,
    Category.RELATIVE: 4,
    Category.UNRELATED: 5,
}


@dataclass(frozen=True)
class KinshipResult:
    """Structured answer for one (ego, alter) pair."""

    label: str
    category: Category
    base_term: str
    degree: Optional[int] = None
    removal: Optional[int] = None
    modifiers: Tuple[str, ...] = ()
    gender: Gender = Gender.UNSPECIFIED
    up: int = 0
    down: int = 0
    steps: int = 0
    path: Tuple[StepKind, ...] = field(default=())

    @classmethod
    def self_result(cls) -> "KinshipResult":
        return cls(label="Self", category=Category.SELF, base_term="Self")

    @classmethod
    def unrelated(cls) -> "KinshipResult":
        return cls(label="Unrelated", category=Category.UNRELATED, base_term="Unrelated")

    @property
    def is_related(self) -> bool:
        return self.category not in (Category.SELF, Category.UNRELATED)

    @property
    def path_desc(self) -> str:
        return format_tokens(self.path)
