from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from persona_engine.config import GenerationConfig
from persona_engine.core.errors import GenerationError
from persona_engine.infrastructure.llm import LLMProvider, ModelRouter, TaskType
from persona_engine.memory.schema import MemoryProfile

from .catalog import PERSONA_IDS, get_persona
from .prompts import build_persona_prompt
from .references import extract_memory_references

logger = logging.getLogger(__name__)


@dataclass
class PersonaResponse:
    persona_id: str
    response_text: str
    memory_references: List[str] = field(default_factory=list)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_payload(self) -> Dict[str, object]:
        return {
            "personaId": self.persona_id,
            "responseText": self.response_text,
            "memoryReferences": list(self.memory_references),
            "generatedAt": self.generated_at.isoformat(),
        }


async def generate_persona_response(
    persona_id: str,
    query: str,
    profile: MemoryProfile,
    *,
    provider: Optional[LLMProvider] = None,
    settings: Optional[GenerationConfig] = None,
) -> PersonaResponse:
    """
    Answer ``query`` in the voice of one persona.

    Unknown ids raise ``NotFoundError``; any failure of the model call is
    wrapped in ``GenerationError``. References are computed on the raw reply.
    """
    persona = get_persona(persona_id)
    settings = settings or GenerationConfig()
    provider = provider or ModelRouter.from_env().get_provider(TaskType.PERSONA)
    prompt = build_persona_prompt(persona_id, query, profile)

    logger.info("Generating response for %s", persona.name)
    try:
        # provider clients are blocking
        raw = await asyncio.to_thread(
            provider.complete,
            prompt,
            temperature=persona.temperature,
            max_tokens=settings.max_tokens,
        )
    except Exception as exc:
        logger.error("Error generating %s response: %s", persona_id, exc)
        raise GenerationError(
            message=f"Failed to generate response: {exc}",
            context={"persona_id": persona_id},
        ) from exc

    raw = raw or ""
    return PersonaResponse(
        persona_id=persona_id,
        response_text=raw.strip(),
        memory_references=extract_memory_references(raw, profile),
        generated_at=datetime.now(timezone.utc),
    )


async def generate_all_persona_responses(
    query: str,
    profile: MemoryProfile,
    *,
    provider: Optional[LLMProvider] = None,
    settings: Optional[GenerationConfig] = None,
) -> List[PersonaResponse]:
    """Run every persona concurrently; the first failure fails the whole call."""
    provider = provider or ModelRouter.from_env().get_provider(TaskType.PERSONA)
    logger.info("Generating responses from all %d personas", len(PERSONA_IDS))
    responses = await asyncio.gather(
        *(
            generate_persona_response(pid, query, profile, provider=provider, settings=settings)
            for pid in PERSONA_IDS
        )
    )
    logger.info("All persona responses generated successfully")
    return list(responses)


def summarize_memory_usage(responses: Sequence[PersonaResponse]) -> Dict[str, int]:
    """Number of memory references each persona's reply picked up."""
    usage = {pid: 0 for pid in PERSONA_IDS}
    for response in responses:
        usage[response.persona_id] = len(response.memory_references)
    return usage
