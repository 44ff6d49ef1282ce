"""Pydantic contracts shared by the matching services and the API."""

from models.schemas.availability import AvailabilityResult, ConflictingProject
from models.schemas.candidate import Allocation, Candidate, CandidateSkill
from models.schemas.match_result import MatchOutcome, MatchResult, MatchSummary, TopCandidate
from models.schemas.requirement import SkillRequirement
from models.schemas.skill_score import MissingSkill, SkillDetail, SkillScore
from models.schemas.utilization import UtilizationEntry

__all__ = [
    "Allocation",
    "AvailabilityResult",
    "Candidate",
    "CandidateSkill",
    "ConflictingProject",
    "MatchOutcome",
    "MatchResult",
    "MatchSummary",
    "MissingSkill",
    "SkillDetail",
    "SkillRequirement",
    "SkillScore",
    "TopCandidate",
    "UtilizationEntry",
]
