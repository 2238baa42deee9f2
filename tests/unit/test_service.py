"""
Orchestration service: request shapes, gates and failure folding
"""

import copy
import json

import pytest

from persona_engine.application import PersonaEngineService, extraction_payload, failure_payload
from persona_engine.config import AppConfig
from persona_engine.core.errors import (
    ExternalServiceError,
    ExtractionError,
    GenerationError,
    InputFormatError,
    ValidationError,
)
from persona_engine.infrastructure.llm import ModelRouter, RouterConfig
from tests.test_framework import FakeProvider, MockDataGenerator, assert_failure_payload


def _extract_payload(pairs=15):
    messages = []
    for m in MockDataGenerator.create_messages(pairs=pairs):
        messages.append({"role": "user" if m.role == "user" else "ai", "content": m.content})
    return {"messages": messages}


def _persona_reply(prompt, kwargs):
    return "Rock climbing might help you unwind."


class TestExtract:

    def test_success(self, extraction_provider, profile_dict):
        service = PersonaEngineService(provider=extraction_provider)
        result = service.extract(_extract_payload())
        assert result.is_ok()
        assert extraction_payload(result.unwrap()) == {"success": True, "memories": profile_dict}

    def test_ai_and_assistant_roles_are_accepted(self, extraction_provider):
        payload = _extract_payload()
        payload["messages"][1]["role"] = "assistant"
        assert PersonaEngineService(provider=extraction_provider).extract(payload).is_ok()

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            {},
            {"messages": "User: hi"},
            {"messages": [{"role": "system", "content": "hi"}]},
            {"messages": [{"role": "user", "content": ""}]},
            {"messages": [{"role": "user", "content": "   "}, {"role": "ai", "content": "hello there friend"}]},
            {"messages": [{"role": "ai", "content": "\n\t"}]},
            {"messages": [{"role": "user"}]},
        ],
    )
    def test_malformed_shapes(self, extraction_provider, payload):
        result = PersonaEngineService(provider=extraction_provider).extract(payload)
        assert not result.is_ok()
        assert isinstance(result.error, InputFormatError)
        assert result.error.message.startswith("Invalid request format:")
        assert extraction_provider.calls == []

    def test_message_content_is_trimmed_before_prompting(self, extraction_provider):
        payload = _extract_payload()
        payload["messages"][0]["content"] = "   I went climbing again   "
        assert PersonaEngineService(provider=extraction_provider).extract(payload).is_ok()
        prompt = extraction_provider.calls[0]["prompt"]
        assert "User: I went climbing again\n\nAI:" in prompt

    def test_empty_message_list_is_blocked_by_quality_gate(self, extraction_provider):
        result = PersonaEngineService(provider=extraction_provider).extract({"messages": []})
        assert isinstance(result.error, ValidationError)
        assert result.error.message == "No messages found in the conversation."
        assert result.error.http_status == 400
        assert extraction_provider.calls == []

    def test_no_user_messages_joins_warnings(self, extraction_provider):
        payload = {"messages": [{"role": "ai", "content": "ok"} for _ in range(3)]}
        result = PersonaEngineService(provider=extraction_provider).extract(payload)
        assert isinstance(result.error, ValidationError)
        assert "No user messages found in the conversation" in result.error.message
        assert ". No user messages" in result.error.message
        assert ".." not in result.error.message

    def test_warned_transcript_still_extracts(self, extraction_provider):
        result = PersonaEngineService(provider=extraction_provider).extract(_extract_payload(pairs=3))
        assert result.is_ok()
        assert len(extraction_provider.calls) == 1

    def test_extraction_failure_is_folded(self):
        service = PersonaEngineService(provider=FakeProvider(replies=["not json"]))
        result = service.extract(_extract_payload())
        assert isinstance(result.error, ExtractionError)
        assert_failure_payload(failure_payload(result.error), contains="Memory extraction failed")

    def test_missing_api_key_becomes_external_error(self):
        service = PersonaEngineService.from_config(AppConfig())
        result = service.extract(_extract_payload())
        assert isinstance(result.error, ExternalServiceError)
        assert result.error.message.startswith("Memory extraction failed:")

    def test_uses_router_and_extraction_settings(self, extraction_provider):
        router = ModelRouter(RouterConfig())
        router.register_provider("default", extraction_provider)
        config = AppConfig(extraction={"temperature": 0.0, "max_tokens": 100})
        result = PersonaEngineService(config, router).extract(_extract_payload())
        assert result.is_ok()
        assert extraction_provider.calls[0]["temperature"] == 0.0
        assert extraction_provider.calls[0]["max_tokens"] == 100


class TestGenerate:

    @pytest.mark.asyncio
    async def test_single_persona(self, profile_dict):
        provider = FakeProvider(reply=_persona_reply)
        service = PersonaEngineService(provider=provider)
        result = await service.generate(
            {"query": "How can I relax after work?", "memories": profile_dict, "personality": "therapist"}
        )
        assert result.is_ok()
        payload = result.unwrap().to_payload()
        assert payload["success"] is True
        assert payload["response"] == "Rock climbing might help you unwind."
        assert "Hobby: Rock climbing at indoor gym" in payload["memoryReferences"]
        assert provider.calls[0]["temperature"] == 0.6

    @pytest.mark.asyncio
    async def test_generate_all(self, profile_dict):
        service = PersonaEngineService(provider=FakeProvider(reply=_persona_reply))
        result = await service.generate(
            {"query": "How can I relax after work?", "memories": profile_dict, "generateAll": True}
        )
        payload = result.unwrap().to_payload()
        assert len(payload["responses"]) == 3
        assert {r["personaId"] for r in payload["responses"]} == {"calm_mentor", "witty_friend", "therapist"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "extra",
        [
            {},
            {"generateAll": False},
            {"personality": "therapist", "generateAll": True},
            {"personality": "pirate"},
            {"generateAll": "yes"},
        ],
    )
    async def test_target_selection_errors(self, profile_dict, extra):
        provider = FakeProvider(reply=_persona_reply)
        payload = {"query": "How can I relax after work?", "memories": profile_dict, **extra}
        result = await PersonaEngineService(provider=provider).generate(payload)
        assert isinstance(result.error, InputFormatError)
        assert result.error.message.startswith("Invalid request format:")
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_invalid_memories_are_input_errors(self, profile_dict):
        memories = copy.deepcopy(profile_dict)
        del memories["emotionalPatterns"]["communicationStyle"]
        result = await PersonaEngineService(provider=FakeProvider()).generate(
            {"query": "How can I relax after work?", "memories": memories, "personality": "therapist"}
        )
        assert isinstance(result.error, InputFormatError)
        assert "memories.emotionalPatterns.communicationStyle" in result.error.message

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "query, message",
        [
            ("   ", "Query cannot be empty"),
            ("hey", "Query is too short. Please provide more context."),
            ("x" * 501, "Query is too long. Please keep it under 500 characters."),
        ],
    )
    async def test_query_gate(self, profile_dict, query, message):
        result = await PersonaEngineService(provider=FakeProvider()).generate(
            {"query": query, "memories": profile_dict, "personality": "calm_mentor"}
        )
        assert isinstance(result.error, ValidationError)
        assert result.error.message == message

    @pytest.mark.asyncio
    async def test_generation_failure_is_folded(self, profile_dict):
        provider = FakeProvider(fail_when=lambda prompt: "(as Therapist)" in prompt, reply=_persona_reply)
        result = await PersonaEngineService(provider=provider).generate(
            {"query": "How can I relax after work?", "memories": profile_dict, "generateAll": True}
        )
        assert isinstance(result.error, GenerationError)
        assert failure_payload(result.error) == {
            "success": False,
            "error": "Failed to generate response: upstream unavailable",
        }

    @pytest.mark.asyncio
    async def test_round_trips_extracted_profile(self, extraction_provider):
        service = PersonaEngineService(provider=extraction_provider)
        memories = extraction_payload(service.extract(_extract_payload()).unwrap())["memories"]
        json.dumps(memories)

        gen = PersonaEngineService(provider=FakeProvider(reply=_persona_reply))
        result = await gen.generate(
            {"query": "Any advice for this week?", "memories": memories, "personality": "witty_friend"}
        )
        assert result.is_ok()
