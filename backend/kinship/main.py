from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Dict, Any, Optional

from .errors import UnknownRelationTypeError
from .graph import KinshipGraph, graph_from_edges
from .inference import ResolverSession, resolve_kinship
from .models import Gender, RelationshipEdge, RelationType
from .validation import allowed_relation_types

app = FastAPI(title="Kinship Resolver API")


class GraphRequest(BaseModel):
    nodes: List[Dict[str, Any]] = []
    edges: List[Dict[str, Any]]
    sourceId: str


class CalculateRequest(GraphRequest):
    targetId: str
    maxDepth: Optional[int] = None


class PairRequest(GraphRequest):
    targetId: str


class CalculateResponse(BaseModel):
    title: str
    category: str
    baseTerm: str
    degree: Optional[int] = None
    removal: Optional[int] = None
    modifiers: List[str] = []
    gender: str = Gender.UNSPECIFIED.value
    steps: int = 0
    pathDesc: str = ""


class RelationshipEntry(BaseModel):
    label: str
    steps: int


class RelationshipMapResponse(BaseModel):
    relationships: Dict[str, RelationshipEntry]


class AllowedRelationsResponse(BaseModel):
    allowed: List[str]


def _graph(req: GraphRequest) -> KinshipGraph:
    """Nodes carry ``id``/``gender``; edges carry ``source``/``target``/``label``."""
    genders = {n["id"]: n.get("gender") for n in req.nodes if "id" in n}
    try:
        edges = [
            RelationshipEdge(e["source"], e["target"], RelationType.parse(e.get("label")))
            for e in req.edges
        ]
    except UnknownRelationTypeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except KeyError as exc:
        raise HTTPException(status_code=422, detail=f"edge is missing {exc}") from exc
    return graph_from_edges(edges, genders.get)


@app.post("/api/calculate", response_model=CalculateResponse)
def calculate_relationship(req: CalculateRequest):
    if req.maxDepth is not None and req.maxDepth < 1:
        raise HTTPException(status_code=422, detail="maxDepth must be at least 1")
    result = resolve_kinship(_graph(req), req.sourceId, req.targetId, req.maxDepth)
    return CalculateResponse(
        title=result.label,
        category=result.category.value,
        baseTerm=result.base_term,
        degree=result.degree,
        removal=result.removal,
        modifiers=list(result.modifiers),
        gender=result.gender.value,
        steps=result.steps,
        pathDesc=result.path_desc,
    )


@app.post("/api/relationship-map", response_model=RelationshipMapResponse)
def relationship_map(req: GraphRequest):
    roster = ResolverSession(_graph(req)).relationship_map(req.sourceId)
    return RelationshipMapResponse(relationships={
        member: RelationshipEntry(label=label, steps=steps)
        for member, (label, steps) in roster.items()
    })


@app.post("/api/allowed-relations", response_model=AllowedRelationsResponse)
def allowed_relations(req: PairRequest):
    allowed = allowed_relation_types(_graph(req), req.sourceId, req.targetId)
    return AllowedRelationsResponse(allowed=sorted(r.value for r in allowed))


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
