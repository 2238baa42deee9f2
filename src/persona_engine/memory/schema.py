from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError


Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    @property
    def speaker(self) -> str:
        return "User" if self.role == "user" else "AI"

    def to_payload(self) -> Dict[str, str]:
        return {"role": "user" if self.role == "user" else "ai", "content": self.content}


class _ProfileSection(BaseModel):
    # Wire names are camelCase; Python attributes stay snake_case.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Preferences(_ProfileSection):
    hobbies: List[StrictStr] = Field(default_factory=list)
    likes: List[StrictStr] = Field(default_factory=list)
    dislikes: List[StrictStr] = Field(default_factory=list)
    habits: List[StrictStr] = Field(default_factory=list)


class EmotionalPatterns(_ProfileSection):
    common_emotions: List[StrictStr] = Field(default_factory=list, alias="commonEmotions")
    stress_triggers: List[StrictStr] = Field(default_factory=list, alias="stressTriggers")
    joy_sources: List[StrictStr] = Field(default_factory=list, alias="joySources")
    communication_style: StrictStr = Field(..., alias="communicationStyle")

    @field_validator("communication_style")
    @classmethod
    def _style_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("communicationStyle must not be empty")
        return value


class Facts(_ProfileSection):
    personal_details: List[StrictStr] = Field(default_factory=list, alias="personalDetails")
    relationships: List[StrictStr] = Field(default_factory=list)
    goals: List[StrictStr] = Field(default_factory=list)
    values: List[StrictStr] = Field(default_factory=list)


class MemoryProfile(_ProfileSection):
    """Structured summary of a user extracted from one transcript."""

    preferences: Preferences
    emotional_patterns: EmotionalPatterns = Field(..., alias="emotionalPatterns")
    facts: Facts

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass
class SchemaCheck:
    profile: Optional[MemoryProfile] = None
    violations: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.profile is not None and not self.violations


def format_violation(error: Mapping[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    return f"{loc}: {error.get('msg', 'invalid value')}"


def validate_memory_profile(data: Any) -> SchemaCheck:
    """Check ``data`` against the memory profile schema in one pass."""
    if not isinstance(data, Mapping):
        return SchemaCheck(violations=[f"<root>: expected an object, got {type(data).__name__}"])
    try:
        profile = MemoryProfile.model_validate(data)
    except PydanticValidationError as exc:
        return SchemaCheck(violations=[format_violation(err) for err in exc.errors()])
    return SchemaCheck(profile=profile)
