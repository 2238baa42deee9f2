# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds src to sys.path so `import persona_engine` works without installing.
"""

import json
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _no_real_llm_env(monkeypatch):
    # Tests never reach a real endpoint.
    for name in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "LLM_DEFAULT_MODEL",
                 "PERSONA_ENGINE_CONFIG", "PERSONA_ENGINE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def profile_dict():
    from tests.test_framework import MockDataGenerator
    return MockDataGenerator.create_profile_dict()


@pytest.fixture
def profile(profile_dict):
    from persona_engine.memory.schema import MemoryProfile
    return MemoryProfile.model_validate(profile_dict)


@pytest.fixture
def extraction_provider(profile_dict):
    """Fake provider that always answers with the example profile."""
    from tests.test_framework import FakeProvider
    return FakeProvider(reply=lambda prompt, kwargs: json.dumps(profile_dict))
