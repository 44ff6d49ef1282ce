from pydantic import BaseModel, ConfigDict, Field

from models.schemas.match_result import MatchResult, MatchSummary


class MatchingCriteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    required_skills: int = Field(0, alias="requiredSkills")
    project_duration: int = Field(0, alias="projectDuration")
    sorted_by: str = Field("bestFit", alias="sortedBy")


class MatchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    matches: list[MatchResult] = []
    summary: MatchSummary = MatchSummary()
    matching_criteria: MatchingCriteria = Field(MatchingCriteria(), alias="matchingCriteria")

