from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger as loguru_logger

from persona_engine.config import LoggingConfig


def configure_logging(config: Optional[LoggingConfig] = None, *, verbose: bool = False) -> None:
    """Configure stdlib logging and the loguru sink used by the text helpers."""
    config = config or LoggingConfig()
    level_name = "DEBUG" if verbose else config.level.upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=config.format, force=True)

    # The OpenAI SDK logs every HTTP request at INFO.
    for noisy in ("httpx", "openai"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=logging.getLevelName(level))
