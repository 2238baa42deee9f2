from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from persona_engine.config import ExtractionConfig
from persona_engine.core.errors import ExtractionError
from persona_engine.infrastructure.llm import LLMProvider, ModelRouter, TaskType
from persona_engine.utils.text_processing import parse_json_response, truncate_content

from .prompts import build_extraction_prompt
from .schema import ChatMessage, MemoryProfile, validate_memory_profile

logger = logging.getLogger(__name__)

LOW_MESSAGE_COUNT = 10


def extract_memories(
    messages: Sequence[ChatMessage],
    *,
    provider: Optional[LLMProvider] = None,
    settings: Optional[ExtractionConfig] = None,
) -> MemoryProfile:
    """
    Extract a memory profile from a transcript with one JSON-mode LLM call.

    Raises ``ExtractionError`` for an empty transcript, a failed call, a
    non-JSON reply or a reply that does not match the profile schema.
    Nothing is retried.
    """
    if not messages:
        raise ExtractionError(message="Memory extraction failed: no messages provided")

    if len(messages) < LOW_MESSAGE_COUNT:
        logger.warning(
            "Only %d messages provided. Recommended: 30 messages for best results.", len(messages)
        )

    settings = settings or ExtractionConfig()
    provider = provider or ModelRouter.from_env().get_provider(TaskType.EXTRACTION)
    prompt = build_extraction_prompt(messages)

    logger.info("Extracting memories from %d messages with %r", len(messages), provider)
    try:
        raw = provider.complete_json(
            prompt,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
    except Exception as exc:
        raise ExtractionError(
            message=f"Memory extraction failed: {exc}",
            context={"stage": "generation"},
        ) from exc

    try:
        data = parse_json_response(raw)
    except json.JSONDecodeError as exc:
        raise ExtractionError(
            message=f"Memory extraction failed: response is not valid JSON ({exc.msg})",
            context={"stage": "parse", "raw": truncate_content(raw or "", 500)},
        ) from exc

    check = validate_memory_profile(data)
    if not check.is_valid:
        raise ExtractionError(
            message="Memory extraction failed: response does not match the memory schema ("
            + "; ".join(check.violations)
            + ")",
            context={"stage": "schema", "violations": check.violations},
        )

    logger.info("Memory extraction successful")
    return check.profile  # type: ignore[return-value]


@dataclass
class MemoryStats:
    total_preferences: int
    total_emotional_patterns: int
    total_facts: int
    by_category: Dict[str, Dict[str, int]] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, object]:
        return {
            "totalPreferences": self.total_preferences,
            "totalEmotionalPatterns": self.total_emotional_patterns,
            "totalFacts": self.total_facts,
            "byCategory": self.by_category,
        }


def memory_stats(profile: MemoryProfile) -> MemoryStats:
    prefs = profile.preferences
    emo = profile.emotional_patterns
    facts = profile.facts
    by_category = {
        "preferences": {
            "hobbies": len(prefs.hobbies),
            "likes": len(prefs.likes),
            "dislikes": len(prefs.dislikes),
            "habits": len(prefs.habits),
        },
        "emotionalPatterns": {
            "commonEmotions": len(emo.common_emotions),
            "stressTriggers": len(emo.stress_triggers),
            "joySources": len(emo.joy_sources),
        },
        "facts": {
            "personalDetails": len(facts.personal_details),
            "relationships": len(facts.relationships),
            "goals": len(facts.goals),
            "values": len(facts.values),
        },
    }
    return MemoryStats(
        total_preferences=sum(by_category["preferences"].values()),
        # communicationStyle always counts as one pattern
        total_emotional_patterns=sum(by_category["emotionalPatterns"].values()) + 1,
        total_facts=sum(by_category["facts"].values()),
        by_category=by_category,
    )
