# persona_engine/__init__.py
"""
Persona Engine - memory extraction and persona-styled replies

- Parse chat transcripts into role-tagged messages
- Extract a structured memory profile with an LLM
- Answer questions in the voice of three fixed personas
- Attribute replies back to the memories they used
"""

from __future__ import annotations

__version__ = "0.1.0"


# Lazy imports keep `import persona_engine` free of the OpenAI/FastAPI stack.
def __getattr__(name: str):
    if name == "PersonaEngineService":
        from persona_engine.application import PersonaEngineService
        return PersonaEngineService
    if name == "MemoryProfile":
        from persona_engine.memory.schema import MemoryProfile
        return MemoryProfile
    if name == "ChatMessage":
        from persona_engine.memory.schema import ChatMessage
        return ChatMessage
    if name == "parse_transcript":
        from persona_engine.memory.parsers import parse_transcript
        return parse_transcript
    if name == "extract_memories":
        from persona_engine.memory.extractor import extract_memories
        return extract_memories
    if name == "generate_persona_response":
        from persona_engine.personas.engine import generate_persona_response
        return generate_persona_response
    if name == "generate_all_persona_responses":
        from persona_engine.personas.engine import generate_all_persona_responses
        return generate_all_persona_responses

    raise AttributeError(f"module 'persona_engine' has no attribute '{name}'")


__all__ = [
    "__version__",
    "PersonaEngineService",
    "MemoryProfile",
    "ChatMessage",
    "parse_transcript",
    "extract_memories",
    "generate_persona_response",
    "generate_all_persona_responses",
]
