"""Heuristic quality gates for transcripts and user questions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .schema import ChatMessage

RECOMMENDED_MESSAGES = 30
MAX_USEFUL_MESSAGES = 50
MAX_ROLE_IMBALANCE = 5
SHORT_MESSAGE_CHARS = 10
SHORT_MESSAGE_RATIO = 0.3

MIN_QUERY_CHARS = 5
MAX_QUERY_CHARS = 500


@dataclass
class ValidationResult:
    is_valid: bool
    warnings: List[str] = field(default_factory=list)


@dataclass
class QueryValidation:
    is_valid: bool
    error: Optional[str] = None


def validate_messages(messages: Sequence[ChatMessage]) -> ValidationResult:
    """
    Run the transcript quality rules.

    Only the empty-transcript rule short-circuits; every other rule adds its
    own warning. Missing user messages make the result invalid.
    """
    total = len(messages)
    if total == 0:
        return ValidationResult(is_valid=False, warnings=["No messages found in the conversation."])

    warnings: List[str] = []
    is_valid = True

    if total < RECOMMENDED_MESSAGES:
        warnings.append(
            f"Only {total} messages found. "
            f"Recommended {RECOMMENDED_MESSAGES} messages for optimal memory extraction."
        )
    if total > MAX_USEFUL_MESSAGES:
        warnings.append(
            f"{total} messages found; more than {MAX_USEFUL_MESSAGES} may not help extraction quality."
        )

    user_count = sum(1 for m in messages if m.role == "user")
    ai_count = sum(1 for m in messages if m.role == "assistant")

    if user_count == 0:
        is_valid = False
        warnings.append("No user messages found in the conversation.")

    if abs(user_count - ai_count) > MAX_ROLE_IMBALANCE:
        warnings.append(
            "Unbalanced conversation: significant difference between user and AI messages."
        )

    short_count = sum(1 for m in messages if len(m.content) < SHORT_MESSAGE_CHARS)
    if short_count > total * SHORT_MESSAGE_RATIO:
        warnings.append(
            "Messages too short: longer, more detailed messages provide better memory extraction."
        )

    return ValidationResult(is_valid=is_valid, warnings=warnings)


def validate_query(query: Optional[str]) -> QueryValidation:
    if not query or not query.strip():
        return QueryValidation(is_valid=False, error="Query cannot be empty")
    if len(query.strip()) < MIN_QUERY_CHARS:
        return QueryValidation(is_valid=False, error="Query is too short. Please provide more context.")
    if len(query) > MAX_QUERY_CHARS:
        return QueryValidation(
            is_valid=False,
            error=f"Query is too long. Please keep it under {MAX_QUERY_CHARS} characters.",
        )
    return QueryValidation(is_valid=True)
