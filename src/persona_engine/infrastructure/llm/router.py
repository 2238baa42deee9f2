# src/persona_engine/infrastructure/llm/router.py
"""
Model Router

Picks the provider for each task type.

- extraction -> JSON-mode, low temperature model
- persona    -> free-text persona responses
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional
from enum import Enum

from .providers.base import LLMProvider

logger = logging.getLogger(__name__)


class TaskType(str, Enum):
    """Task types"""
    EXTRACTION = "extraction"      # memory profile extraction
    PERSONA = "persona"            # persona-styled answers


@dataclass
class ModelConfig:
    """
    Model configuration

    Attributes:
        provider: provider type (openai)
        model: model name
        api_key_env: API key environment variable
        base_url: custom API endpoint (optional)
        timeout: request timeout in seconds (optional)
    """
    provider: str
    model: str
    api_key_env: str = "OPENAI_API_KEY"
    base_url: Optional[str] = None
    timeout: Optional[float] = None


@dataclass
class RouterConfig:
    """
    Router configuration

    Attributes:
        models: config name -> ModelConfig
        fallback_model: config used when a task has no route
    """
    models: Dict[str, ModelConfig] = field(default_factory=dict)
    fallback_model: str = "default"


class ModelRouter:
    """
    Task-aware model router

    - Picks a model config per task type
    - Caches created Provider instances
    - Falls back to the default config for unrouted tasks

    Example:
    ```python
    router = ModelRouter.from_env()
    provider = router.get_provider(TaskType.EXTRACTION)
    raw = provider.complete_json(prompt, temperature=0.3)
    ```
    """

    DEFAULT_ROUTING = {
        TaskType.EXTRACTION: "extraction",
        TaskType.PERSONA: "persona",
    }

    def __init__(self, config: RouterConfig):
        self.config = config
        self._providers: Dict[str, LLMProvider] = {}
        self._task_routing: Dict[str, str] = {str(k.value): v for k, v in self.DEFAULT_ROUTING.items()}
        logger.info("ModelRouter initialised with %d model configs", len(config.models))

    def get_provider(self, task_type: str) -> LLMProvider:
        """
        Return the provider for a task

        Args:
            task_type: task type

        Returns:
            LLMProvider instance
        """
        key = task_type.value if isinstance(task_type, TaskType) else str(task_type)
        config_name = self._task_routing.get(key, self.config.fallback_model)
        if config_name not in self.config.models:
            config_name = self.config.fallback_model

        if config_name in self._providers:
            return self._providers[config_name]

        model_config = self.config.models.get(config_name)
        if not model_config:
            raise ValueError(f"No model config found: {config_name}")

        provider = self._create_provider(model_config)
        self._providers[config_name] = provider
        return provider

    def register_provider(self, config_name: str, provider: LLMProvider) -> None:
        """Install a ready-made provider (local servers, tests)."""
        self._providers[config_name] = provider
        self.config.models.setdefault(
            config_name, ModelConfig(provider="custom", model=provider.info.model_name)
        )

    def _create_provider(self, config: ModelConfig) -> LLMProvider:
        api_key = os.getenv(config.api_key_env, "")

        if config.provider == "openai":
            from .providers.openai_provider import OpenAIProvider
            return OpenAIProvider(
                api_key=api_key,
                model_name=config.model,
                base_url=config.base_url,
                timeout=config.timeout,
            )

        raise ValueError(f"Unknown provider type: {config.provider}")

    @classmethod
    def from_app_config(cls, app_config) -> "ModelRouter":
        """
        Build the router from ``AppConfig``

        Extraction and persona generation share the base LLM settings; each
        may override the model name.
        """
        llm = app_config.llm

        def _model(name: Optional[str]) -> ModelConfig:
            return ModelConfig(
                provider=llm.provider,
                model=name or llm.model,
                api_key_env=llm.api_key_env,
                base_url=llm.base_url,
                timeout=llm.timeout,
            )

        config = RouterConfig(
            models={
                "default": _model(None),
                "extraction": _model(app_config.extraction.model),
                "persona": _model(app_config.generation.model),
            },
            fallback_model="default",
        )
        return cls(config)

    @classmethod
    def from_env(cls) -> "ModelRouter":
        """
        Build the router from environment variables

        - OPENAI_API_KEY: API key
        - OPENAI_BASE_URL: OpenAI-compatible endpoint (optional)
        - LLM_DEFAULT_MODEL: model name (default: gpt-4o-mini)
        """
        from persona_engine.config import AppConfig

        return cls.from_app_config(AppConfig().with_env_overrides())
