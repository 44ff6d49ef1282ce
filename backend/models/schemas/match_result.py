"""Per-candidate match results and the digest over a whole match run."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.availability import ConflictingProject
from models.schemas.skill_score import MissingSkill, SkillDetail


class MatchResult(BaseModel):
    """Everything computed for one candidate in one match run."""
    model_config = ConfigDict(populate_by_name=True)

    personnel_id: int | str
    name: str
    role: str = ""
    experience_level: str = ""

    # Skill fit
    total_score: int = Field(0, alias="totalScore")
    matched_skills: int = Field(0, alias="matchedSkills")
    total_required: int = Field(0, alias="totalRequired")
    match_percentage: int = Field(0, alias="matchPercentage")
    missing_skills: list[MissingSkill] = Field([], alias="missingSkills")
    skill_details: list[SkillDetail] = Field([], alias="skillDetails")
    experience_bonus: int = Field(0, alias="experienceBonus")

    # Availability
    available: bool = True
    utilization_percentage: int = Field(0, alias="utilizationPercentage")
    conflicting_projects: list[ConflictingProject] = Field([], alias="conflictingProjects")

    # Final scores
    base_score: int = Field(0, alias="baseScore")
    overall_score: int = Field(0, alias="overallScore")
    recommendation: str = ""


class TopCandidate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    score: int
    match_percentage: int = Field(0, alias="matchPercentage")


class MatchSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_candidates: int = Field(0, alias="totalCandidates")
    perfect_matches: int = Field(0, alias="perfectMatches")
    fully_qualified: int = Field(0, alias="fullyQualified")
    partially_qualified: int = Field(0, alias="partiallyQualified")
    available: int = 0
    top_candidate: TopCandidate | None = Field(None, alias="topCandidate")


class MatchOutcome(BaseModel):
    """Ranked matches plus the summary digest."""
    matches: list[MatchResult] = []
    summary: MatchSummary = MatchSummary()
