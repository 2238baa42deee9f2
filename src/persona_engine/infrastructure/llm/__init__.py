"""
LLM client layer.

- LLMProvider base class
- OpenAI-compatible backend
- ModelRouter task routing
"""

from .providers.base import JSON_RESPONSE_FORMAT, LLMProvider, ProviderInfo
from .router import ModelRouter, ModelConfig, RouterConfig, TaskType

__all__ = [
    "JSON_RESPONSE_FORMAT",
    "LLMProvider",
    "ProviderInfo",
    "ModelRouter",
    "ModelConfig",
    "RouterConfig",
    "TaskType",
]
