from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import logging

from ..algebra import UnknownRelationError, parse_chain, parse_path
from ..config import load_config
from ..localization import step_labels
from ..models import Gender, Language
from ..service import KinshipService, set_default_service

app = FastAPI(title="kinship-py")

cfg = load_config()

logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))
logging.info("kinship API starting (default_language=%s, cache_max_entries=%s)", cfg.default_language.value, cfg.cache_max_entries)

# The service is pure apart from its response cache, so it is safe to build
# at import time. It also becomes the process default for resolve_kinship.
service = KinshipService.from_config(cfg)
set_default_service(service)


class ResolveRequest(BaseModel):
    chain: List[str] = Field(default_factory=list)
    speakerGender: Gender = cfg.default_gender
    language: Language = cfg.default_language


class ExplainRequest(BaseModel):
    chain: List[str] = Field(default_factory=list)
    speakerGender: Gender = cfg.default_gender


class KinshipResponseModel(BaseModel):
    title: str
    colloquial: str
    description: str
    emoji: str
    relationPath: str
    reciprocal: str


def _resolve(chain, gender: Gender, language: Language) -> Dict[str, Any]:
    try:
        steps = parse_chain(chain)
    except UnknownRelationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        return service.resolve(steps, gender, language).to_dict()
    except Exception:
        logging.exception("Failed to resolve %s", steps)
        raise HTTPException(status_code=500, detail="kinship resolution failed")


@app.get("/api/health")
def health_check():
    return {"status": "ok", "cache": service.cache.stats()}


@app.get("/api/relations")
def relations(lang: Optional[Language] = Query(None)):
    """List the step identifiers with their labels in the requested language."""
    language = lang or cfg.default_language
    return {"language": language.value, "relations": step_labels(language)}


@app.post("/api/resolve", response_model=KinshipResponseModel)
def resolve(req: ResolveRequest):
    return _resolve(req.chain, req.speakerGender, req.language)


@app.get("/api/resolve", response_model=KinshipResponseModel)
def resolve_path(
    path: str = Query("", description="step identifiers joined by '>'"),
    gender: Optional[Gender] = Query(None),
    lang: Optional[Language] = Query(None),
):
    try:
        steps = parse_path(path)
    except UnknownRelationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _resolve(steps, gender or cfg.default_gender, lang or cfg.default_language)


@app.post("/api/explain")
def explain(req: ExplainRequest):
    try:
        return service.explain(req.chain, req.speakerGender)
    except UnknownRelationError as e:
        raise HTTPException(status_code=422, detail=str(e))
