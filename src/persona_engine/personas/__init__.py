"""
Persona layer: catalog, prompt rendering, reference heuristic and generation.
"""

from .catalog import PERSONA_IDS, PERSONAS, PersonaDefinition, get_all_personas, get_persona
from .engine import (
    PersonaResponse,
    generate_all_persona_responses,
    generate_persona_response,
    summarize_memory_usage,
)
from .prompts import build_persona_prompt, format_memory_context
from .references import extract_memory_references, find_reference

__all__ = [
    "PERSONA_IDS",
    "PERSONAS",
    "PersonaDefinition",
    "get_all_personas",
    "get_persona",
    "PersonaResponse",
    "generate_all_persona_responses",
    "generate_persona_response",
    "summarize_memory_usage",
    "build_persona_prompt",
    "format_memory_context",
    "extract_memory_references",
    "find_reference",
]
