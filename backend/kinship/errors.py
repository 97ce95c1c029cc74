"""Exceptions raised by the kinship package."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class KinshipError(Exception):
    """Base class for kinship errors."""


class UnknownRelationTypeError(KinshipError, ValueError):
    """A relation code that is not parent, spouse or partner."""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"unknown relation type: {code!r}")


@dataclass
class RelationshipValidationError(KinshipError):
    """Raised when a direct relation may not be created between two members."""

    reason: str
    member_a: Optional[str] = None
    member_b: Optional[str] = None
    relation: Optional[str] = None

    def __str__(self) -> str:
        if self.relation and self.member_a and self.member_b:
            return f"{self.relation} {self.member_a} -> {self.member_b}: {self.reason}"
        return self.reason
