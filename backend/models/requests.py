from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.schemas.candidate import Candidate
from models.schemas.requirement import SkillRequirement


class MatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    personnel: list[Candidate] = Field(..., description="Candidates with their skills and allocations")
    required_skills: list[SkillRequirement] = Field(..., alias="requiredSkills")
    project_start: str = Field(..., alias="projectStart", min_length=1, description="ISO-8601 date")
    project_end: str = Field(..., alias="projectEnd", min_length=1, description="ISO-8601 date")
    sort_by: str | None = Field(None, alias="sortBy", description="bestFit | availability | matchPercentage")

    @field_validator("sort_by", mode="before")
    @classmethod
    def _ignore_non_text_sort(cls, value):
        # Unrecognized strategies fall back to bestFit downstream
        return value if isinstance(value, str) else None


class UtilizationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    personnel: list[Candidate]
    as_of: date | None = Field(None, alias="asOf", description="Defaults to today")
