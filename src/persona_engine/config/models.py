"""
Pydantic configuration models with YAML and environment loading.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

CONFIG_ENV_VAR = "PERSONA_ENGINE_CONFIG"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class LLMConfig(_ConfigModel):
    provider: Literal["openai"] = "openai"
    model: str = "gpt-4o-mini"
    api_key_env: str = "OPENAI_API_KEY"
    base_url: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)


class ExtractionConfig(_ConfigModel):
    # low temperature keeps extraction close to deterministic
    temperature: float = Field(default=0.3, ge=0, le=2)
    max_tokens: int = Field(default=4096, gt=0)
    model: Optional[str] = None


class GenerationConfig(_ConfigModel):
    max_tokens: int = Field(default=1024, gt=0)
    model: Optional[str] = None


class LoggingConfig(_ConfigModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(_ConfigModel):
    llm: LLMConfig = Field(default_factory=LLMConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in config file {file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {file_path}")
        return cls.model_validate(data)

    def with_env_overrides(self) -> "AppConfig":
        llm_updates: Dict[str, Any] = {}
        if os.getenv("LLM_DEFAULT_MODEL"):
            llm_updates["model"] = os.environ["LLM_DEFAULT_MODEL"]
        if os.getenv("OPENAI_BASE_URL"):
            llm_updates["base_url"] = os.environ["OPENAI_BASE_URL"]

        updates: Dict[str, Any] = {}
        if llm_updates:
            updates["llm"] = self.llm.model_copy(update=llm_updates)
        if os.getenv("PERSONA_ENGINE_LOG_LEVEL"):
            updates["logging"] = self.logging.model_copy(
                update={"level": os.environ["PERSONA_ENGINE_LOG_LEVEL"]}
            )
        return self.model_copy(update=updates) if updates else self


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """Load configuration from ``path`` (or $PERSONA_ENGINE_CONFIG) and apply env overrides."""
    config_path = path or os.getenv(CONFIG_ENV_VAR)
    config = AppConfig.from_yaml(config_path) if config_path else AppConfig()
    return config.with_env_overrides()
