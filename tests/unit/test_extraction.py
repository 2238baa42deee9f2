"""
Extraction prompt and orchestration
"""

import json
import logging

import pytest

from persona_engine.config import ExtractionConfig
from persona_engine.core.errors import ExternalServiceError, ExtractionError
from persona_engine.memory.extractor import extract_memories, memory_stats
from persona_engine.memory.prompts import build_extraction_prompt, render_conversation
from persona_engine.memory.schema import ChatMessage, MemoryProfile
from tests.test_framework import FakeProvider, MockDataGenerator


def test_prompt_embeds_conversation_blocks():
    messages = [
        ChatMessage(role="user", content="I love rock climbing"),
        ChatMessage(role="assistant", content="Since when?"),
    ]
    assert render_conversation(messages) == "User: I love rock climbing\n\nAI: Since when?"

    prompt = build_extraction_prompt(messages)
    assert "User: I love rock climbing\n\nAI: Since when?" in prompt
    assert "{conversation}" not in prompt
    for field_name in ("hobbies", "commonEmotions", "communicationStyle", "personalDetails", "values"):
        assert field_name in prompt
    assert "2+ times" in prompt
    assert "2-8 items" in prompt


def test_prompt_is_deterministic_and_keeps_braces():
    messages = [ChatMessage(role="user", content="my {weird} text")]
    assert build_extraction_prompt(messages) == build_extraction_prompt(messages)
    assert "my {weird} text" in build_extraction_prompt(messages)
    assert '"preferences": {' in build_extraction_prompt(messages)


def test_extracts_profile_with_json_mode(extraction_provider, profile_dict):
    messages = MockDataGenerator.create_messages(pairs=15)
    profile = extract_memories(messages, provider=extraction_provider)

    assert isinstance(profile, MemoryProfile)
    assert profile.emotional_patterns.communication_style
    assert len(extraction_provider.calls) == 1
    call = extraction_provider.calls[0]
    assert call["temperature"] == 0.3
    assert call["max_tokens"] == 4096
    assert call["response_format"] == {"type": "json_object"}


def test_settings_are_passed_to_provider(extraction_provider):
    settings = ExtractionConfig(temperature=0.1, max_tokens=512)
    extract_memories(MockDataGenerator.create_messages(pairs=15), provider=extraction_provider, settings=settings)
    assert extraction_provider.calls[0]["temperature"] == 0.1
    assert extraction_provider.calls[0]["max_tokens"] == 512


def test_code_fenced_json_is_accepted(profile_dict):
    provider = FakeProvider(replies=["```json\n" + json.dumps(profile_dict) + "\n```"])
    profile = extract_memories(MockDataGenerator.create_messages(pairs=15), provider=provider)
    assert profile.to_payload() == profile_dict


def test_empty_transcript_fails_without_calling_provider(extraction_provider):
    with pytest.raises(ExtractionError):
        extract_memories([], provider=extraction_provider)
    assert extraction_provider.calls == []


def test_provider_failure_is_wrapped():
    provider = FakeProvider(fail_when=lambda prompt: True)
    with pytest.raises(ExtractionError) as exc_info:
        extract_memories(MockDataGenerator.create_messages(pairs=15), provider=provider)
    err = exc_info.value
    assert isinstance(err, ExternalServiceError)
    assert err.message.startswith("Memory extraction failed:")
    assert "upstream unavailable" in err.message
    assert isinstance(err.__cause__, RuntimeError)


def test_invalid_json_is_a_hard_failure():
    provider = FakeProvider(replies=["Sure! Here is the profile: {not json"])
    with pytest.raises(ExtractionError) as exc_info:
        extract_memories(MockDataGenerator.create_messages(pairs=15), provider=provider)
    assert exc_info.value.context["stage"] == "parse"
    assert len(provider.calls) == 1


def test_schema_violation_is_a_hard_failure():
    bad = MockDataGenerator.create_empty_profile_dict()
    del bad["emotionalPatterns"]["communicationStyle"]
    provider = FakeProvider(replies=[json.dumps(bad)])
    with pytest.raises(ExtractionError) as exc_info:
        extract_memories(MockDataGenerator.create_messages(pairs=15), provider=provider)
    assert exc_info.value.context["stage"] == "schema"
    assert "communicationStyle" in exc_info.value.message


def test_low_message_count_logs_warning(extraction_provider, caplog):
    caplog.set_level(logging.WARNING, logger="persona_engine.memory.extractor")
    extract_memories(MockDataGenerator.create_messages(pairs=2), provider=extraction_provider)
    assert any("Only 4 messages" in r.getMessage() for r in caplog.records)


def test_memory_stats_counts(profile):
    stats = memory_stats(profile)
    assert stats.total_preferences == 12
    # three lists of three plus the communication style
    assert stats.total_emotional_patterns == 10
    assert stats.total_facts == 12
    payload = stats.to_payload()
    assert payload["byCategory"]["preferences"]["hobbies"] == 3
