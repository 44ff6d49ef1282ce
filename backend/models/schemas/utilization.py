"""Current workload per person, independent of any one project."""

from pydantic import BaseModel


class UtilizationEntry(BaseModel):
    personnel_id: int | str
    name: str
    role: str = ""
    active_projects: int = 0
    total_allocation: int = 0  # summed allocation_percentage, may exceed 100
