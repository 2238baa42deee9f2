from __future__ import annotations

import re
from typing import List

from persona_engine.memory.schema import MemoryProfile

from .catalog import get_persona


PERSONA_PROMPT_TEMPLATE = """{instructions}

**IMPORTANT INSTRUCTIONS:**
1. Stay fully in character for the {name} personality
2. Use the provided memories naturally - don't just list them
3. Keep your response conversational (2-4 paragraphs)
4. Reference specific memories when relevant to the question
5. Maintain the tone and style described above

**WHAT YOU KNOW ABOUT THE USER:**

{memory_context}

**USER'S QUESTION:**
{query}

**YOUR RESPONSE (as {name}):**"""

_PLACEHOLDER = re.compile(r"\{(instructions|name|memory_context|query)\}")


def _line(label: str, items: List[str]) -> List[str]:
    return [f"{label}: {', '.join(items)}"] if items else []


def format_memory_context(profile: MemoryProfile) -> str:
    """
    Render the non-empty parts of a profile as prompt context.

    A section header is emitted only when one of its gating lists has items;
    an emotional section is gated by emotions and stress triggers alone.
    """
    sections: List[str] = []

    prefs = profile.preferences
    if prefs.hobbies or prefs.likes or prefs.dislikes or prefs.habits:
        parts = (
            _line("Hobbies", prefs.hobbies)
            + _line("Likes", prefs.likes)
            + _line("Dislikes", prefs.dislikes)
            + _line("Habits", prefs.habits)
        )
        sections.append("**Preferences:**\n" + "\n".join(parts))

    emo = profile.emotional_patterns
    if emo.common_emotions or emo.stress_triggers:
        parts = (
            _line("Common Emotions", emo.common_emotions)
            + _line("Stress Triggers", emo.stress_triggers)
            + _line("Joy Sources", emo.joy_sources)
        )
        if emo.communication_style:
            parts.append(f"Communication Style: {emo.communication_style}")
        sections.append("**Emotional Patterns:**\n" + "\n".join(parts))

    facts = profile.facts
    if facts.personal_details or facts.relationships or facts.goals or facts.values:
        parts = (
            _line("Personal", facts.personal_details)
            + _line("Relationships", facts.relationships)
            + _line("Goals", facts.goals)
            + _line("Values", facts.values)
        )
        sections.append("**Important Facts:**\n" + "\n".join(parts))

    return "\n\n".join(sections)


def build_persona_prompt(persona_id: str, query: str, profile: MemoryProfile) -> str:
    persona = get_persona(persona_id)
    values = {
        "instructions": persona.system_instructions,
        "name": persona.name,
        "memory_context": format_memory_context(profile),
        "query": query,
    }
    # Single pass, so braces inside user text are left alone.
    return _PLACEHOLDER.sub(lambda m: values[m.group(1)], PERSONA_PROMPT_TEMPLATE)
