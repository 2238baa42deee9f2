"""
Error taxonomy and Result wrapper shared by the orchestration boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # request may continue
    ERROR = "error"          # request fails
    CRITICAL = "critical"    # process-level failure


@dataclass(eq=False)
class PersonaEngineError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None
    http_status: int = 500

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass(eq=False)
class InputFormatError(PersonaEngineError):
    """Malformed request shape."""

    code: str = "INPUT_FORMAT_ERROR"
    http_status: int = 400


@dataclass(eq=False)
class ValidationError(PersonaEngineError):
    """Quality gate failure on a transcript or a query."""

    code: str = "VALIDATION_ERROR"
    http_status: int = 400


@dataclass(eq=False)
class ExternalServiceError(PersonaEngineError):
    """The generation boundary failed or returned non-conforming output."""

    code: str = "EXTERNAL_SERVICE_ERROR"
    http_status: int = 500


@dataclass(eq=False)
class ExtractionError(ExternalServiceError):
    code: str = "EXTRACTION_ERROR"


@dataclass(eq=False)
class GenerationError(ExternalServiceError):
    code: str = "GENERATION_ERROR"


@dataclass(eq=False)
class NotFoundError(PersonaEngineError):
    code: str = "NOT_FOUND"
    http_status: int = 404


T = TypeVar("T")
E = TypeVar("E", bound=PersonaEngineError)


@dataclass
class Result(Generic[T, E]):
    """Functional result wrapper, avoids scattering status dicts."""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    def is_ok(self) -> bool:
        return self._is_ok

    @property
    def error(self) -> E | None:
        return None if self._is_ok else cast(E, self._value)

    def unwrap(self) -> T:
        if not self._is_ok:
            raise cast(E, self._value)
        return cast(T, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def map(self, fn) -> "Result[T, E]":
        if self._is_ok:
            return Result.ok(fn(self._value))  # type: ignore[arg-type]
        return self
