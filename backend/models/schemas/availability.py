"""Availability output: how much of the project window is already committed."""

from pydantic import BaseModel, ConfigDict, Field


class ConflictingProject(BaseModel):
    project_name: str
    start: str
    end: str
    allocation_percentage: int


class AvailabilityResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available: bool = True
    utilization_percentage: int = Field(0, alias="utilizationPercentage")
    conflicting_projects: list[ConflictingProject] = Field([], alias="conflictingProjects")
