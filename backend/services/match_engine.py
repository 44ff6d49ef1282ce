"""Match engine: scores every candidate against a project and ranks them.

Flow per candidate (independent, no shared state):
    skills       -> score_skills()        -> SkillScore
    allocations  -> check_availability()  -> AvailabilityResult
    level        -> experience_bonus()    -> int
                        ↓
    base = skill total + bonus; overall = base * (1.0 if available else 0.3)
                        ↓
    recommend(match %, available)

Results are collected in input order, then ranked once and summarized.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from models.schemas.candidate import Candidate
from models.schemas.match_result import MatchOutcome, MatchResult, MatchSummary, TopCandidate
from models.schemas.requirement import SkillRequirement
from services.availability import DateLike, check_availability, parse_date
from services.experience import experience_bonus
from services.rounding import round_half_up
from services.skill_scorer import score_skills

logger = logging.getLogger(__name__)

SORT_BEST_FIT = "bestFit"
SORT_AVAILABILITY = "availability"
SORT_MATCH_PERCENTAGE = "matchPercentage"
SORT_STRATEGIES = (SORT_BEST_FIT, SORT_AVAILABILITY, SORT_MATCH_PERCENTAGE)

AVAILABLE_MULTIPLIER = 1.0
UNAVAILABLE_MULTIPLIER = 0.3  # busy candidates are penalized, not dropped

PERFECT_MATCH_PCT = 100
GOOD_MATCH_PCT = 75
PARTIAL_MATCH_PCT = 50


def resolve_sort_strategy(sort_by: str | None) -> str:
    """Return the effective strategy; absent or unknown values mean bestFit."""
    return sort_by if sort_by in SORT_STRATEGIES else SORT_BEST_FIT


def recommend(match_percentage: int, available: bool) -> str:
    if match_percentage == PERFECT_MATCH_PCT and available:
        return "Excellent Match - Highly Recommended"
    if match_percentage == PERFECT_MATCH_PCT:
        return "Perfect Skills - Limited Availability"
    if match_percentage >= GOOD_MATCH_PCT and available:
        return "Good Match - Recommended"
    if match_percentage >= PARTIAL_MATCH_PCT:
        return "Partial Match - Consider with Training"
    return "Poor Match - Not Recommended"


def score_candidate(
    candidate: Candidate,
    required_skills: Sequence[SkillRequirement],
    project_start: DateLike,
    project_end: DateLike,
) -> MatchResult:
    """Score a single candidate. Pure: depends only on its arguments."""
    skill_score = score_skills(candidate.skills, required_skills)
    availability = check_availability(candidate.allocations, project_start, project_end)
    bonus = experience_bonus(candidate.experience_level)

    base_score = skill_score.total_score + bonus
    multiplier = AVAILABLE_MULTIPLIER if availability.available else UNAVAILABLE_MULTIPLIER
    overall_score = round_half_up(base_score * multiplier)

    return MatchResult(
        personnel_id=candidate.id,
        name=candidate.name,
        role=candidate.role,
        experience_level=candidate.experience_level,
        total_score=skill_score.total_score,
        matched_skills=skill_score.matched_skills,
        total_required=skill_score.total_required,
        match_percentage=skill_score.match_percentage,
        missing_skills=skill_score.missing_skills,
        skill_details=skill_score.skill_details,
        experience_bonus=bonus,
        available=availability.available,
        utilization_percentage=availability.utilization_percentage,
        conflicting_projects=availability.conflicting_projects,
        base_score=base_score,
        overall_score=overall_score,
        recommendation=recommend(skill_score.match_percentage, availability.available),
    )


def rank_matches(matches: Sequence[MatchResult], sort_by: str | None) -> list[MatchResult]:
    """Sort a copy of matches by the chosen strategy. Ties keep input order."""
    strategy = resolve_sort_strategy(sort_by)
    if strategy == SORT_AVAILABILITY:
        return sorted(matches, key=lambda m: m.utilization_percentage)
    if strategy == SORT_MATCH_PERCENTAGE:
        return sorted(matches, key=lambda m: m.match_percentage, reverse=True)
    return sorted(matches, key=lambda m: m.overall_score, reverse=True)


def summarize(matches: Sequence[MatchResult], ranked: Sequence[MatchResult]) -> MatchSummary:
    """Digest counts over all matches; the top candidate comes from the ranking."""
    top = ranked[0] if ranked else None
    return MatchSummary(
        total_candidates=len(matches),
        perfect_matches=sum(
            1 for m in matches if m.match_percentage == PERFECT_MATCH_PCT and m.available
        ),
        fully_qualified=sum(1 for m in matches if m.match_percentage == PERFECT_MATCH_PCT),
        partially_qualified=sum(
            1 for m in matches if PARTIAL_MATCH_PCT <= m.match_percentage < PERFECT_MATCH_PCT
        ),
        available=sum(1 for m in matches if m.available),
        top_candidate=TopCandidate(
            name=top.name,
            score=top.overall_score,
            match_percentage=top.match_percentage,
        ) if top else None,
    )


def match_candidates(
    candidates: Sequence[Candidate],
    required_skills: Sequence[SkillRequirement],
    project_start: DateLike,
    project_end: DateLike,
    sort_by: str | None = SORT_BEST_FIT,
    max_workers: int | None = None,
) -> MatchOutcome:
    """Score, rank and summarize all candidates for one project.

    With ``max_workers > 1`` candidates are scored on a thread pool; output
    order and content are identical either way.
    """
    logger.info(
        "Matching %d personnel against %d required skills",
        len(candidates), len(required_skills),
    )

    # Parse the window once; a bad date fails the whole run before any scoring
    window_start = parse_date(project_start)
    window_end = parse_date(project_end)

    def _score(candidate: Candidate) -> MatchResult:
        return score_candidate(candidate, required_skills, window_start, window_end)

    if max_workers and max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            matches = list(pool.map(_score, candidates))
    else:
        matches = [_score(c) for c in candidates]

    ranked = rank_matches(matches, sort_by)
    summary = summarize(matches, ranked)

    logger.info("Matching complete: %d perfect matches found", summary.perfect_matches)
    return MatchOutcome(matches=ranked, summary=summary)
