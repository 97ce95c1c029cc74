"""
Acceptance corpus loader.

``data/kinship_corpus.csv`` lists ``label,path`` pairs, where ``path`` is a
``>``-separated step sequence walked from ego. The file is parsed once and
cached; ``build_corpus_edges`` turns the fixtures into one family in which
every fixture path leads from "Ego" to its own member.
"""
import csv
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .models import RelationshipEdge, RelationType, StepKind, format_tokens, parse_tokens

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
CSV_PATH = os.path.join(DATA_DIR, "kinship_corpus.csv")

EGO = "Ego"


@dataclass(frozen=True)
class CorpusFixture:
    label: str
    steps: Tuple[StepKind, ...]

    @property
    def path(self) -> str:
        return format_tokens(self.steps)

    @property
    def member_id(self) -> str:
        """Member reached by walking the path from Ego."""
        return member_for(self.steps)


def member_for(steps: Iterable[StepKind]) -> str:
    return " > ".join([EGO] + [s.value for s in steps])


def _parse_csv_row(row: list) -> Optional[CorpusFixture]:
    if len(row) < 2:
        return None
    label = row[0].strip()
    path = row[1].strip().strip('"')
    if not label or not path:
        return None
    return CorpusFixture(label=label, steps=parse_tokens(path))


def read_corpus(csv_path: str = CSV_PATH) -> List[CorpusFixture]:
    fixtures = []
    with open(csv_path, "r", encoding="utf-8") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row in reader:
            parsed = _parse_csv_row(row)
            if parsed:
                fixtures.append(parsed)
    return fixtures


_corpus: Optional[List[CorpusFixture]] = None


def load_corpus() -> List[CorpusFixture]:
    """Cached copy of the bundled corpus."""
    global _corpus
    if _corpus is None:
        _corpus = read_corpus()
    return list(_corpus)


def build_corpus_edges(
    fixtures: Iterable[CorpusFixture], scope: Optional[str] = None
) -> List[RelationshipEdge]:
    """
    Build a prefix tree of members: each distinct path prefix is one member,
    linked to the member of the prefix one step shorter. The result is a
    tree, so every fixture member is reached from Ego by exactly one path.
    """
    edges: Dict[Tuple[str, str], RelationshipEdge] = {}
    for fixture in fixtures:
        previous = EGO
        for i, step in enumerate(fixture.steps):
            current = member_for(fixture.steps[: i + 1])
            if (previous, current) in edges:
                previous = current
                continue
            if step is StepKind.PARENT:
                edge = RelationshipEdge(current, previous, RelationType.PARENT, scope)
            elif step is StepKind.CHILD:
                edge = RelationshipEdge(previous, current, RelationType.PARENT, scope)
            else:
                edge = RelationshipEdge(previous, current, step.relation, scope)
            edges[(previous, current)] = edge
            previous = current
    return list(edges.values())
