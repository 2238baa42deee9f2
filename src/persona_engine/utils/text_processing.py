"""
Text helpers for LLM output.

Cleans Markdown wrappers around JSON responses and shortens text for logs.
"""

import re
import json
from typing import Any

from loguru import logger


def clean_json_tags(text: str) -> str:
    """
    Remove Markdown code fences around a JSON payload

    Args:
        text: raw model output

    Returns:
        Text without the leading ```json and trailing ``` fences
    """
    text = re.sub(r'^\s*```(?:json)?\s*', '', text, flags=re.IGNORECASE)
    text = re.sub(r'\s*```\s*$', '', text)

    return text.strip()


def parse_json_response(text: str) -> Any:
    """
    Parse a JSON response after fence cleanup

    No repair is attempted; malformed JSON raises ``json.JSONDecodeError``.

    Args:
        text: raw model output

    Returns:
        Decoded JSON value
    """
    cleaned = clean_json_tags(text or "")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        logger.warning("Unparsable JSON response: {}", truncate_content(cleaned, 200))
        raise


def truncate_content(content: str, max_length: int = 20000) -> str:
    """
    Truncate content to ``max_length`` characters

    Args:
        content: text
        max_length: maximum length

    Returns:
        Truncated text, cut at a word boundary when one is close
    """
    if len(content) <= max_length:
        return content

    truncated = content[:max_length]
    last_space = truncated.rfind(' ')

    if last_space > max_length * 0.8:
        return truncated[:last_space] + "..."
    else:
        return truncated + "..."
