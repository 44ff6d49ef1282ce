"""Roster inputs: a candidate with rated skills and existing allocations."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CandidateSkill(BaseModel):
    """A skill a candidate holds, rated 1 (novice) to 5 (expert)."""
    model_config = ConfigDict(frozen=True)

    skill_id: int | str
    skill_name: str = ""
    proficiency_level: int = Field(..., ge=1, le=5)


class Allocation(BaseModel):
    """A committed or proposed assignment to another project."""
    model_config = ConfigDict(frozen=True)

    project_name: str | None = None
    allocation_start: str  # ISO-8601 date or datetime
    allocation_end: str
    allocation_percentage: int = Field(..., ge=0, le=100)


class Candidate(BaseModel):
    """A person being evaluated for assignment.

    ``experience_level`` is kept as a free string: Junior, Mid and Senior carry
    a bonus, anything else is scored as no bonus rather than rejected.
    """
    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    role: str = ""
    experience_level: str = ""
    email: str | None = None
    skills: list[CandidateSkill] = []
    allocations: list[Allocation] = []

    @field_validator("role", "experience_level", mode="before")
    @classmethod
    def _text_or_blank(cls, value):
        return value if isinstance(value, str) else ""

    @field_validator("skills")
    @classmethod
    def _unique_skill_ids(cls, skills: list[CandidateSkill]) -> list[CandidateSkill]:
        seen: set[int | str] = set()
        for skill in skills:
            if skill.skill_id in seen:
                raise ValueError(f"duplicate skill_id {skill.skill_id!r}")
            seen.add(skill.skill_id)
        return skills
