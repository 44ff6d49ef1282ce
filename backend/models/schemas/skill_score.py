"""Skill-gap scoring output for one candidate against one project."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillStatus = Literal["Exceeds", "Meets", "Below", "Missing"]


class SkillDetail(BaseModel):
    skill_name: str
    required: int
    actual: int = 0  # 0 when the candidate lacks the skill
    status: SkillStatus
    score: int = 0


class MissingSkill(BaseModel):
    skill_name: str
    required_proficiency: int


class SkillScore(BaseModel):
    """Aggregate of per-skill scores.

    ``total_score`` is the plain sum of ``skill_details[*].score`` and may be
    negative when a candidate is far below several requirements.
    """
    model_config = ConfigDict(populate_by_name=True)

    total_score: int = Field(0, alias="totalScore")
    matched_skills: int = Field(0, alias="matchedSkills")
    total_required: int = Field(0, alias="totalRequired")
    match_percentage: int = Field(0, alias="matchPercentage")
    missing_skills: list[MissingSkill] = Field([], alias="missingSkills")
    skill_details: list[SkillDetail] = Field([], alias="skillDetails")
