"""
Memory layer: transcript parsing, quality checks, the profile schema and
LLM-backed extraction.
"""

from .extractor import MemoryStats, extract_memories, memory_stats
from .parsers import format_transcript, parse_transcript, parse_transcript_bytes
from .prompts import EXAMPLE_EXTRACTION, build_extraction_prompt, render_conversation
from .samples import SAMPLE_CONVERSATIONS, SampleConversation, get_sample
from .schema import (
    ChatMessage,
    EmotionalPatterns,
    Facts,
    MemoryProfile,
    Preferences,
    SchemaCheck,
    validate_memory_profile,
)
from .validation import QueryValidation, ValidationResult, validate_messages, validate_query

__all__ = [
    "MemoryStats",
    "extract_memories",
    "memory_stats",
    "format_transcript",
    "parse_transcript",
    "parse_transcript_bytes",
    "EXAMPLE_EXTRACTION",
    "build_extraction_prompt",
    "render_conversation",
    "SAMPLE_CONVERSATIONS",
    "SampleConversation",
    "get_sample",
    "ChatMessage",
    "EmotionalPatterns",
    "Facts",
    "MemoryProfile",
    "Preferences",
    "SchemaCheck",
    "validate_memory_profile",
    "QueryValidation",
    "ValidationResult",
    "validate_messages",
    "validate_query",
]
