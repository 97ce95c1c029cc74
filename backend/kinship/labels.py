"""
Label composition: base term from distances, gender substitution, then the
step/co prefix or in-law suffix.
"""
from __future__ import annotations

from typing import Optional, Tuple

from .lineage import HALF_SIBLING, LineageDistances
from .models import Category, Gender

# neutral base -> (male, female)
_GENDERED = {
    "Parent": ("Father", "Mother"),
    "Child": ("Son", "Daughter"),
    "Sibling": ("Brother", "Sister"),
    "Half-Sibling": ("Half-Brother", "Half-Sister"),
    "Grandparent": ("Grandfather", "Grandmother"),
    "Grandchild": ("Grandson", "Granddaughter"),
    "Pibling": ("Uncle", "Aunt"),
    "Nibling": ("Nephew", "Niece"),
    "Spouse": ("Husband", "Wife"),
}

_REMOVALS = {1: "once removed", 2: "twice removed"}

PREFIXES = {Category.STEP: "Step-", Category.CO: "Co-"}
IN_LAW_SUFFIX = "-in-law"


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def removal_phrase(removal: int) -> str:
    return _REMOVALS.get(removal, f"{removal} times removed")


def gendered(term: str, gender: Gender) -> str:
    variants = _GENDERED.get(term)
    if not variants or gender is Gender.UNSPECIFIED:
        return term
    return variants[0] if gender is Gender.MALE else variants[1]


def _greats(count: int, noun: str) -> str:
    if count <= 0:
        return noun
    return "Great-" + "great-" * (count - 1) + noun[0].lower() + noun[1:]


def base_term(
    distances: LineageDistances,
    gender: Gender = Gender.UNSPECIFIED,
    sibling: Optional[str] = None,
) -> Tuple[str, Optional[int], Optional[int]]:
    """
    Neutral or gendered term for a parent/child core.

    Returns ``(term, degree, removal)``; degree and removal are only set
    for cousins. ``sibling`` is the shared-parent verdict for blood
    siblings ("full"/"half").
    """
    up, down = distances.up, distances.down
    tier = distances.tier

    if tier == "vertical":
        generations = up or down
        noun = "parent" if up else "child"
        if generations == 1:
            return gendered(noun.capitalize(), gender), None, None
        grand = gendered("Grand" + noun, gender)
        return _greats(generations - 2, grand), None, None

    if tier == "sibling":
        term = "Half-Sibling" if sibling == HALF_SIBLING else "Sibling"
        return gendered(term, gender), None, None

    if tier in ("pibling", "nibling"):
        noun = gendered(tier.capitalize(), gender)
        return _greats(max(up, down) - 2, noun), None, None

    degree, removal = distances.degree, distances.removal
    term = f"{ordinal(degree)} cousin"
    if removal:
        term += " " + removal_phrase(removal)
    return term, degree, removal


def _lower_first(term: str) -> str:
    # "1st cousin" has no letter to lower; "Great-uncle" -> "great-uncle"
    return term[0].lower() + term[1:]


def compose(
    category: Category,
    distances: Optional[LineageDistances] = None,
    gender: Gender = Gender.UNSPECIFIED,
    sibling: Optional[str] = None,
) -> Tuple[str, str, Optional[int], Optional[int]]:
    """
    Build the final label. Returns ``(label, base_term, degree, removal)``
    where ``base_term`` is the neutral, unmodified term.
    """
    if category is Category.SELF:
        return "Self", "Self", None, None
    if category is Category.UNRELATED:
        return "Unrelated", "Unrelated", None, None
    if category is Category.SPOUSE:
        return gendered("Spouse", gender), "Spouse", None, None
    if category is Category.PARTNER:
        return "Partner", "Partner", None, None
    if category is Category.RELATIVE or distances is None:
        return "Relative", "Relative", None, None

    blood_sibling = sibling if category is Category.BLOOD else None
    neutral, degree, removal = base_term(distances, Gender.UNSPECIFIED, blood_sibling)
    term, _, _ = base_term(distances, gender, blood_sibling)

    prefix = PREFIXES.get(category)
    if prefix:
        term = prefix + _lower_first(term)
    elif category is Category.IN_LAW:
        term = term + IN_LAW_SUFFIX
    return term, neutral, degree, removal


def modifiers_for(category: Category, sibling: Optional[str] = None) -> Tuple[str, ...]:
    mods = []
    if category is Category.STEP:
        mods.append("step")
    elif category is Category.CO:
        mods.append("co")
    elif category is Category.IN_LAW:
        mods.append("in-law")
    if category is Category.BLOOD and sibling == HALF_SIBLING:
        mods.append("half")
    return tuple(mods)
