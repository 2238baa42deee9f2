from .models import (
    CONFIG_ENV_VAR,
    AppConfig,
    ExtractionConfig,
    GenerationConfig,
    LLMConfig,
    LoggingConfig,
    load_config,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "AppConfig",
    "ExtractionConfig",
    "GenerationConfig",
    "LLMConfig",
    "LoggingConfig",
    "load_config",
]
