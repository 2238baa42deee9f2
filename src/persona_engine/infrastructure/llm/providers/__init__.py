# src/persona_engine/infrastructure/llm/providers/__init__.py
"""
LLM Provider layer

- Unified LLMProvider interface
- OpenAI-compatible backend
"""

from .base import JSON_RESPONSE_FORMAT, LLMProvider, ProviderInfo
from .openai_provider import OpenAIProvider

__all__ = [
    "JSON_RESPONSE_FORMAT",
    "LLMProvider",
    "ProviderInfo",
    "OpenAIProvider",
]
