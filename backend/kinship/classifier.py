"""
Path pattern classification.

A path is read as an optional in-law marriage at either end wrapped around
a core of parent/child steps, with at most one spouse or partner "bridge"
inside the core::

    [spouse >] parent* [bridge] ... child* [> spouse]

The leading spouse only counts as in-law when it is followed by ``parent``
(ego married into alter's family) and the trailing one only when it is
preceded by ``child`` (alter married into ego's blood). ``spouse > child``
and ``parent > spouse`` are step relations instead.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .lineage import LineageDistances
from .models import Category, StepKind


@dataclass(frozen=True)
class Classification:
    category: Category
    distances: Optional[LineageDistances] = None
    in_law: bool = False
    # Offsets into the path of the parent/child core, [start, end)
    core_start: int = 0
    core_end: int = 0


RELATIVE = Classification(Category.RELATIVE)


def _blood_shape(core: Sequence[StepKind]) -> Optional[LineageDistances]:
    """parent* child* -> distances; anything else -> None."""
    up = 0
    while up < len(core) and core[up] is StepKind.PARENT:
        up += 1
    down = len(core) - up
    if any(step is not StepKind.CHILD for step in core[up:]):
        return None
    if up + down == 0:
        return None
    return LineageDistances(up=up, down=down)


def lowest_rank(prefix: Sequence[StepKind]) -> int:
    """
    Best category rank any path that extends ``prefix`` by at least one
    more step can classify to.

    A lateral step inside a proper prefix is either the leading in-law
    spouse or a bridge, so one rules out Blood and two rule out everything
    but Relative.
    """
    laterals = sum(1 for step in prefix if step.is_lateral)
    if laterals == 0:
        if _blood_shape(prefix) is not None or not prefix:
            return Category.BLOOD.rank
        return Category.RELATIVE.rank
    if laterals == 1:
        return Category.STEP.rank
    return Category.RELATIVE.rank


def classify(steps: Sequence[StepKind]) -> Classification:
    if not steps:
        return RELATIVE
    if len(steps) == 1 and steps[0].is_lateral:
        category = Category.SPOUSE if steps[0] is StepKind.SPOUSE else Category.PARTNER
        return Classification(category, core_end=1)

    start, end = 0, len(steps)
    if steps[0] is StepKind.SPOUSE and steps[1] is StepKind.PARENT:
        start = 1
    if end - start >= 2 and steps[-1] is StepKind.SPOUSE and steps[-2] is StepKind.CHILD:
        end -= 1
    in_law = start > 0 or end < len(steps)

    core = steps[start:end]
    bridges = [step for step in core if step.is_lateral]
    if len(bridges) > 1:
        return RELATIVE
    if bridges and in_law:
        # step-relation of an in-law: no term for it
        return RELATIVE

    distances = _blood_shape([step for step in core if not step.is_lateral])
    if distances is None:
        return RELATIVE

    if bridges:
        category = Category.STEP if bridges[0] is StepKind.SPOUSE else Category.CO
    elif in_law:
        category = Category.IN_LAW
    else:
        category = Category.BLOOD
    return Classification(category, distances, in_law, start, end)
