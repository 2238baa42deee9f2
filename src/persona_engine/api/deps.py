"""Shared FastAPI dependencies and response helpers."""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from persona_engine.application import PersonaEngineService, failure_payload
from persona_engine.core.errors import InputFormatError, PersonaEngineError

NOT_ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_service(request: Request) -> PersonaEngineService:
    return request.app.state.service


async def read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError as exc:
        raise InputFormatError(message="Invalid JSON in request body") from exc


def error_response(error: PersonaEngineError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content=failure_payload(error))


def method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=405,
        content={"success": False, "error": "Method not allowed. Use POST."},
    )
