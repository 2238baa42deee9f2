# src/persona_engine/application/service.py
"""
Orchestration boundary shared by the HTTP API and the CLI.

Accepts decoded JSON payloads, checks their shape, runs the quality gates and
hands off to extraction or persona generation. Every failure below this layer
comes back as a failed ``Result`` carrying a ``PersonaEngineError``; nothing
is raised past it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    StringConstraints,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from persona_engine.config import AppConfig
from persona_engine.core.errors import (
    ExternalServiceError,
    InputFormatError,
    PersonaEngineError,
    Result,
    ValidationError,
)
from persona_engine.infrastructure.llm import LLMProvider, ModelRouter, TaskType
from persona_engine.memory.extractor import extract_memories
from persona_engine.memory.schema import ChatMessage, MemoryProfile, format_violation
from persona_engine.memory.validation import validate_messages, validate_query
from persona_engine.personas.catalog import PERSONA_IDS
from persona_engine.personas.engine import (
    PersonaResponse,
    generate_all_persona_responses,
    generate_persona_response,
)

logger = logging.getLogger(__name__)


# ============ request shapes ============


class ExtractMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Literal["user", "ai", "assistant"]
    content: Annotated[StrictStr, StringConstraints(strip_whitespace=True, min_length=1)]

    def to_message(self) -> ChatMessage:
        return ChatMessage(role="user" if self.role == "user" else "assistant", content=self.content)


class ExtractRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: List[ExtractMessage]


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    query: StrictStr
    memories: MemoryProfile
    personality: Optional[StrictStr] = None
    generate_all: StrictBool = Field(default=False, alias="generateAll")

    @field_validator("personality")
    @classmethod
    def _known_persona(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in PERSONA_IDS:
            raise ValueError(f"must be one of {', '.join(PERSONA_IDS)}")
        return value


def _parse_request(model: type, payload: Any):
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        detail = "; ".join(format_violation(err) for err in exc.errors())
        raise InputFormatError(
            message=f"Invalid request format: {detail}",
            context={"errors": exc.errors(include_url=False)},
        ) from exc


# ============ outcomes ============


@dataclass
class GenerationOutcome:
    """Either one persona reply or the full fan-out."""

    single: Optional[PersonaResponse] = None
    responses: List[PersonaResponse] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        if self.single is not None:
            return {
                "success": True,
                "response": self.single.response_text,
                "memoryReferences": list(self.single.memory_references),
            }
        return {"success": True, "responses": [r.to_payload() for r in self.responses]}


def failure_payload(error: PersonaEngineError) -> Dict[str, Any]:
    return {"success": False, "error": error.message}


def extraction_payload(profile: MemoryProfile) -> Dict[str, Any]:
    return {"success": True, "memories": profile.to_payload()}


def _join_warnings(warnings: Sequence[str]) -> str:
    return ". ".join(w.rstrip(".") for w in warnings) + "."


# ============ service ============


class PersonaEngineService:
    """
    Extract and generate, with errors folded into ``Result``.

    Example:
    ```python
    service = PersonaEngineService.from_config(load_config())
    result = service.extract({"messages": [...]})
    if result.is_ok():
        profile = result.unwrap()
    ```
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        router: Optional[ModelRouter] = None,
        *,
        provider: Optional[LLMProvider] = None,
    ):
        self.config = config or AppConfig()
        self._router = router
        # an explicit provider serves both tasks
        self._provider = provider

    @classmethod
    def from_config(cls, config: AppConfig) -> "PersonaEngineService":
        return cls(config, ModelRouter.from_app_config(config))

    def _provider_for(self, task: TaskType) -> LLMProvider:
        if self._provider is not None:
            return self._provider
        if self._router is None:
            self._router = ModelRouter.from_app_config(self.config)
        return self._router.get_provider(task)

    # -------- extraction --------

    def extract(self, payload: Any) -> Result[MemoryProfile, PersonaEngineError]:
        """Extract a profile from a ``{"messages": [...]}`` payload."""
        try:
            request = _parse_request(ExtractRequest, payload)
        except PersonaEngineError as exc:
            return Result.err(exc)
        return self.extract_messages([m.to_message() for m in request.messages])

    def extract_messages(
        self, messages: Sequence[ChatMessage]
    ) -> Result[MemoryProfile, PersonaEngineError]:
        try:
            check = validate_messages(messages)
            if not check.is_valid:
                raise ValidationError(
                    message=_join_warnings(check.warnings),
                    context={"warnings": check.warnings},
                )
            if check.warnings:
                logger.warning("Message validation warnings: %s", check.warnings)

            profile = extract_memories(
                messages,
                provider=self._provider_for(TaskType.EXTRACTION),
                settings=self.config.extraction,
            )
            return Result.ok(profile)
        except PersonaEngineError as exc:
            logger.warning("Extraction rejected: %s", exc)
            return Result.err(exc)
        except Exception as exc:
            logger.exception("Unexpected error during memory extraction")
            return Result.err(
                ExternalServiceError(message=f"Memory extraction failed: {exc}")
            )

    # -------- generation --------

    async def generate(self, payload: Any) -> Result[GenerationOutcome, PersonaEngineError]:
        """Answer a query with one persona or with all of them."""
        try:
            request = _parse_request(GenerateRequest, payload)
            if request.personality and request.generate_all:
                raise InputFormatError(
                    message="Invalid request format: specify either 'personality' or 'generateAll: true', not both"
                )
            if not request.personality and not request.generate_all:
                raise InputFormatError(
                    message="Invalid request format: must specify either 'personality' or 'generateAll: true'"
                )

            query_check = validate_query(request.query)
            if not query_check.is_valid:
                raise ValidationError(message=query_check.error or "Invalid query")

            provider = self._provider_for(TaskType.PERSONA)
            if request.generate_all:
                responses = await generate_all_persona_responses(
                    request.query,
                    request.memories,
                    provider=provider,
                    settings=self.config.generation,
                )
                return Result.ok(GenerationOutcome(responses=responses))

            single = await generate_persona_response(
                request.personality,
                request.query,
                request.memories,
                provider=provider,
                settings=self.config.generation,
            )
            return Result.ok(GenerationOutcome(single=single))
        except PersonaEngineError as exc:
            logger.warning("Generation rejected: %s", exc)
            return Result.err(exc)
        except Exception as exc:
            logger.exception("Unexpected error during response generation")
            return Result.err(
                ExternalServiceError(message=f"Failed to generate response: {exc}")
            )
