"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    PersonaEngineError,
    InputFormatError,
    ValidationError,
    ExternalServiceError,
    ExtractionError,
    GenerationError,
    NotFoundError,
    Result,
)

__all__ = [
    "ErrorSeverity",
    "PersonaEngineError",
    "InputFormatError",
    "ValidationError",
    "ExternalServiceError",
    "ExtractionError",
    "GenerationError",
    "NotFoundError",
    "Result",
]
