from __future__ import annotations

from fastapi import APIRouter

from persona_engine.memory.samples import SAMPLE_CONVERSATIONS
from persona_engine.personas.catalog import get_all_personas

router = APIRouter()


@router.get("/personalities")
def list_personalities():
    return {"success": True, "personalities": [p.to_payload() for p in get_all_personas()]}


@router.get("/samples")
def list_samples():
    return {"success": True, "samples": [s.to_payload() for s in SAMPLE_CONVERSATIONS]}
