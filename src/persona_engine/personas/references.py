"""
Memory-reference heuristic.

Attributes a generated reply back to profile items by plain keyword overlap.
Approximate on purpose: no stemming and no semantic matching, so short common
words can produce false positives.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from persona_engine.memory.schema import MemoryProfile

MIN_KEYWORD_LENGTH = 4


def find_reference(response: str, item: str, category: str) -> Optional[str]:
    """Return ``"<category>: <item>"`` when ``response`` mentions ``item``, else None."""
    lower_response = response.lower()
    lower_item = item.lower()
    if not lower_item.strip():
        return None
    if lower_item in lower_response:
        return f"{category}: {item}"
    keywords = [w for w in lower_item.split() if len(w) >= MIN_KEYWORD_LENGTH]
    if any(word in lower_response for word in keywords):
        return f"{category}: {item}"
    return None


def _labelled_items(profile: MemoryProfile) -> Iterable[Tuple[str, str]]:
    prefs = profile.preferences
    emo = profile.emotional_patterns
    facts = profile.facts
    groups: List[Tuple[str, List[str]]] = [
        ("Hobby", prefs.hobbies),
        ("Like", prefs.likes),
        ("Dislike", prefs.dislikes),
        ("Habit", prefs.habits),
        ("Emotion", emo.common_emotions),
        ("Stress Trigger", emo.stress_triggers),
        ("Joy Source", emo.joy_sources),
        ("Communication Style", [emo.communication_style]),
        ("Personal Detail", facts.personal_details),
        ("Relationship", facts.relationships),
        ("Goal", facts.goals),
        ("Value", facts.values),
    ]
    for label, items in groups:
        for item in items:
            yield label, item


def extract_memory_references(response: str, profile: MemoryProfile) -> List[str]:
    # dict keeps insertion order and drops repeats
    found: Dict[str, None] = {}
    for label, item in _labelled_items(profile):
        ref = find_reference(response, item, label)
        if ref is not None:
            found.setdefault(ref, None)
    return list(found)
