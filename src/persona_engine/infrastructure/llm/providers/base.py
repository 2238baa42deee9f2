# src/persona_engine/infrastructure/llm/providers/base.py
"""
LLM Provider base class

Defines the single call surface the extraction and persona engines depend on.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

JSON_RESPONSE_FORMAT: Dict[str, str] = {"type": "json_object"}


@dataclass
class ProviderInfo:
    """Provider metadata"""
    provider_name: str
    model_name: str
    api_base: Optional[str] = None


class LLMProvider(ABC):
    """
    Abstract LLM provider

    Every backend implements ``invoke`` with OpenAI-style messages.

    Design notes:
    - Unified message format (OpenAI style)
    - Non-streaming calls only
    - Subclasses let transport errors propagate
    """

    @abstractmethod
    def invoke(
        self,
        messages: List[Dict[str, str]],
        **kwargs
    ) -> str:
        """
        Call the LLM without streaming

        Args:
            messages: message list [{"role": "user", "content": "..."}, ...]
            **kwargs: extra parameters (temperature, max_tokens, response_format ...)

        Returns:
            Response text
        """
        ...

    @property
    @abstractmethod
    def info(self) -> ProviderInfo:
        """Provider metadata"""
        ...

    # ==================== convenience ====================

    def complete(self, prompt: str, **kwargs) -> str:
        """
        Single-prompt text completion

        Args:
            prompt: full prompt text, sent as one user message
            **kwargs: extra parameters

        Returns:
            Raw response text
        """
        return self.invoke([{"role": "user", "content": prompt}], **kwargs)

    def complete_json(self, prompt: str, **kwargs) -> str:
        """
        Single-prompt completion asking the backend for a JSON object

        Returns:
            Raw response text, expected to parse as JSON
        """
        kwargs.setdefault("response_format", JSON_RESPONSE_FORMAT)
        return self.complete(prompt, **kwargs)

    def __repr__(self) -> str:
        info = self.info
        return f"{self.__class__.__name__}(model={info.model_name}, provider={info.provider_name})"
