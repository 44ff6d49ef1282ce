"""Roster builders for tests."""

from models.schemas.candidate import Allocation, Candidate, CandidateSkill
from models.schemas.requirement import SkillRequirement

PROJECT_START = "2025-01-01"
PROJECT_END = "2025-01-31"  # 30 days


def make_requirement(skill_id, required_proficiency=3, name=None, priority="Must Have"):
    return SkillRequirement(
        skill_id=skill_id,
        skill_name=name or f"skill-{skill_id}",
        category="Engineering",
        required_proficiency=required_proficiency,
        priority=priority,
    )


def make_allocation(start=PROJECT_START, end=PROJECT_END, pct=100, project="Apollo"):
    return Allocation(
        project_name=project,
        allocation_start=start,
        allocation_end=end,
        allocation_percentage=pct,
    )


def make_candidate(cid=1, name="Ada", level="Mid", skills=None, allocations=None, role="Engineer"):
    """skills: mapping of skill_id -> proficiency_level."""
    return Candidate(
        id=cid,
        name=name,
        role=role,
        experience_level=level,
        skills=[
            CandidateSkill(skill_id=sid, skill_name=f"skill-{sid}", proficiency_level=lvl)
            for sid, lvl in (skills or {}).items()
        ],
        allocations=allocations or [],
    )
