# src/persona_engine/infrastructure/llm/providers/openai_provider.py
"""
OpenAI Provider

Works with every OpenAI-compatible chat completions service.
"""

from __future__ import annotations

import os
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI

from .base import LLMProvider, ProviderInfo

logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """
    OpenAI-compatible LLM Provider

    Supports:
    - OpenAI (gpt-4o, gpt-4o-mini)
    - OpenAI-compatible servers via base_url (Ollama, vLLM)
    """

    ALLOWED_PARAMS = {
        "temperature", "top_p", "presence_penalty",
        "frequency_penalty", "max_tokens", "timeout", "response_format",
    }

    def __init__(
        self,
        api_key: str,
        model_name: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Args:
            api_key: API key
            model_name: model name
            base_url: custom API endpoint
            timeout: request timeout (seconds)
        """
        if not api_key:
            if not base_url:
                raise ValueError("API key must not be empty")
            # local OpenAI-compatible servers usually ignore the key
            api_key = "not-needed"

        self.api_key = api_key
        self.model_name = model_name
        self.base_url = base_url

        if timeout is not None:
            self.timeout = timeout
        else:
            timeout_env = os.getenv("LLM_REQUEST_TIMEOUT", "120")
            try:
                self.timeout = float(timeout_env)
            except ValueError:
                self.timeout = 120.0

        self._provider_name = self._detect_provider()

        client_kwargs: Dict[str, Any] = {
            "api_key": api_key,
            "max_retries": 0,
        }
        if base_url:
            client_kwargs["base_url"] = base_url

        self.client = OpenAI(**client_kwargs)
        logger.info("OpenAIProvider initialised: %s", self)

    def _detect_provider(self) -> str:
        if self.base_url and "api.openai.com" not in self.base_url.lower():
            return "openai-compatible"
        return "openai"

    def invoke(
        self,
        messages: List[Dict[str, str]],
        **kwargs
    ) -> str:
        extra_params = {
            k: v for k, v in kwargs.items()
            if k in self.ALLOWED_PARAMS and v is not None
        }

        timeout = extra_params.pop("timeout", self.timeout)

        response = self.client.chat.completions.create(
            model=self.model_name,
            messages=messages,
            timeout=timeout,
            **extra_params,
        )

        if response.choices and response.choices[0].message:
            content = response.choices[0].message.content
            return content or ""
        return ""

    @property
    def info(self) -> ProviderInfo:
        return ProviderInfo(
            provider_name=self._provider_name,
            model_name=self.model_name,
            api_base=self.base_url or "https://api.openai.com",
        )
