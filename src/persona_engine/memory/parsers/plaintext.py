from __future__ import annotations

import re
from typing import Iterable, List

from ..schema import ChatMessage


_ROLE_PATTERNS = [
    ("user", re.compile(r"^User:\s*(.+)$", re.IGNORECASE)),
    ("assistant", re.compile(r"^AI:\s*(.+)$", re.IGNORECASE)),
]


def parse_transcript(text: str) -> List[ChatMessage]:
    """
    Parse a pasted transcript into role-tagged messages.

    Only ``User: ...`` and ``AI: ...`` lines are kept; everything else is dropped.
    An empty list is a valid result, callers check the length.
    """
    messages: List[ChatMessage] = []
    for ln in (text or "").splitlines():
        stripped = ln.strip()
        if not stripped:
            continue
        for role, rx in _ROLE_PATTERNS:
            m = rx.match(stripped)
            if m:
                content = m.group(1).strip()
                if content:
                    messages.append(ChatMessage(role=role, content=content))  # type: ignore[arg-type]
                break
    return messages


def parse_transcript_bytes(data: bytes) -> List[ChatMessage]:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        # best-effort
        text = data.decode("utf-8", errors="ignore")
    return parse_transcript(text)


def format_transcript(messages: Iterable[ChatMessage]) -> str:
    return "\n".join(f"{m.speaker}: {m.content}" for m in messages)
