"""Project input: a skill the project needs and how badly it needs it."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Priority = Literal["Must Have", "Nice to Have"]

_PRIORITY_ALIASES = {
    "musthave": "Must Have",
    "must have": "Must Have",
    "nicetohave": "Nice to Have",
    "nice to have": "Nice to Have",
}


class SkillRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill_id: int | str
    skill_name: str = ""
    category: str = ""
    required_proficiency: int = Field(..., ge=1, le=5)
    priority: Priority = "Must Have"

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, value):
        if isinstance(value, str):
            return _PRIORITY_ALIASES.get(value.strip().lower(), value)
        return value
