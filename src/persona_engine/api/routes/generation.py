from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from persona_engine.api.deps import (
    NOT_ALLOWED_METHODS,
    error_response,
    get_service,
    method_not_allowed,
    read_json,
)
from persona_engine.application import PersonaEngineService
from persona_engine.core.errors import PersonaEngineError

router = APIRouter()


@router.post("/generate-response")
async def generate_response(request: Request, service: PersonaEngineService = Depends(get_service)):
    try:
        payload = await read_json(request)
    except PersonaEngineError as exc:
        return error_response(exc)

    result = await service.generate(payload)
    if not result.is_ok():
        return error_response(result.error)
    return result.unwrap().to_payload()


@router.api_route("/generate-response", methods=NOT_ALLOWED_METHODS, include_in_schema=False)
async def generate_response_other_methods():
    return method_not_allowed()
