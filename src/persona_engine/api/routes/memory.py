from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from persona_engine.api.deps import (
    NOT_ALLOWED_METHODS,
    error_response,
    get_service,
    method_not_allowed,
    read_json,
)
from persona_engine.application import PersonaEngineService, extraction_payload
from persona_engine.core.errors import PersonaEngineError

router = APIRouter()


@router.post("/extract-memory")
async def extract_memory(request: Request, service: PersonaEngineService = Depends(get_service)):
    try:
        payload = await read_json(request)
    except PersonaEngineError as exc:
        return error_response(exc)

    # extraction blocks on the model call
    result = await run_in_threadpool(service.extract, payload)
    if not result.is_ok():
        return error_response(result.error)
    return extraction_payload(result.unwrap())


@router.api_route("/extract-memory", methods=NOT_ALLOWED_METHODS, include_in_schema=False)
async def extract_memory_other_methods():
    return method_not_allowed()
