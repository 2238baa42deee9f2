"""
Application layer: the orchestration service used by the API and the CLI.
"""

from .service import (
    ExtractRequest,
    GenerateRequest,
    GenerationOutcome,
    PersonaEngineService,
    extraction_payload,
    failure_payload,
)

__all__ = [
    "ExtractRequest",
    "GenerateRequest",
    "GenerationOutcome",
    "PersonaEngineService",
    "extraction_payload",
    "failure_payload",
]
