"""Skill-gap scoring: one candidate's rated skills against a project's requirements.

Per required skill:
    meets/exceeds  -> 100 + 20 per level above the requirement
    below          -> 50 - 15 per level short (can go negative, not floored)
    missing        -> 0
"""

from collections.abc import Iterable, Sequence

from models.schemas.candidate import CandidateSkill
from models.schemas.requirement import SkillRequirement
from models.schemas.skill_score import MissingSkill, SkillDetail, SkillScore
from services.rounding import round_half_up

MATCH_BASE_SCORE = 100
EXCEED_BONUS_PER_LEVEL = 20
BELOW_BASE_SCORE = 50
BELOW_PENALTY_PER_LEVEL = 15


def score_skill(actual: int, required: int) -> tuple[int, str]:
    """Score a held skill. Returns (score, status)."""
    diff = actual - required
    if diff >= 0:
        status = "Exceeds" if diff > 0 else "Meets"
        return MATCH_BASE_SCORE + diff * EXCEED_BONUS_PER_LEVEL, status
    return BELOW_BASE_SCORE + diff * BELOW_PENALTY_PER_LEVEL, "Below"


def score_skills(
    candidate_skills: Iterable[CandidateSkill],
    required_skills: Sequence[SkillRequirement],
) -> SkillScore:
    """Score a candidate's skill set against every required skill."""
    held = {skill.skill_id: skill for skill in candidate_skills}

    total_score = 0
    matched_skills = 0
    missing_skills: list[MissingSkill] = []
    skill_details: list[SkillDetail] = []

    for req in required_skills:
        skill = held.get(req.skill_id)
        if skill is None:
            missing_skills.append(MissingSkill(
                skill_name=req.skill_name,
                required_proficiency=req.required_proficiency,
            ))
            skill_details.append(SkillDetail(
                skill_name=req.skill_name,
                required=req.required_proficiency,
                actual=0,
                status="Missing",
                score=0,
            ))
            continue

        score, status = score_skill(skill.proficiency_level, req.required_proficiency)
        if status != "Below":
            matched_skills += 1
        total_score += score
        skill_details.append(SkillDetail(
            skill_name=req.skill_name,
            required=req.required_proficiency,
            actual=skill.proficiency_level,
            status=status,
            score=score,
        ))

    total_required = len(required_skills)
    match_percentage = (
        round_half_up(matched_skills / total_required * 100) if total_required > 0 else 0
    )

    return SkillScore(
        total_score=total_score,
        matched_skills=matched_skills,
        total_required=total_required,
        match_percentage=match_percentage,
        missing_skills=missing_skills,
        skill_details=skill_details,
    )
