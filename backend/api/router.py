import logging
from datetime import date

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_workers, get_today
from api.errors import MatchingError
from config import settings
from models.requests import MatchRequest, UtilizationRequest
from models.responses import MatchingCriteria, MatchResponse
from models.schemas.utilization import UtilizationEntry
from services import match_engine
from services.availability import project_duration_days
from services.utilization import summarize_utilization

logger = logging.getLogger(__name__)

SERVICE_NAME = "Skills Matching Service"
SERVICE_VERSION = "1.0.0"

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/")
async def service_info():
    return {
        "service": SERVICE_NAME,
        "description": "Personnel-to-project matching based on skills, proficiency, and availability",
        "version": SERVICE_VERSION,
        "endpoints": {
            "POST /match": "Match personnel to project requirements",
            "POST /utilization": "Current allocation load per person",
            "GET /health": "Service health check",
            "GET /": "Service information",
        },
    }


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": ["/match", "/utilization", "/health"],
    }


@router.post("/match", response_model=MatchResponse)
@limiter.limit(settings.match_rate_limit)
def match(
    request: Request,
    body: MatchRequest,
    max_workers: int = Depends(get_match_workers),
):
    try:
        outcome = match_engine.match_candidates(
            body.personnel,
            body.required_skills,
            body.project_start,
            body.project_end,
            sort_by=body.sort_by,
            max_workers=max_workers,
        )
        duration = project_duration_days(body.project_start, body.project_end)
    except Exception as e:
        logger.exception("Matching error")
        raise MatchingError(str(e)) from e

    return MatchResponse(
        success=True,
        matches=outcome.matches,
        summary=outcome.summary,
        matching_criteria=MatchingCriteria(
            required_skills=len(body.required_skills),
            project_duration=duration,
            sorted_by=match_engine.resolve_sort_strategy(body.sort_by),
        ),
    )


@router.post("/utilization", response_model=list[UtilizationEntry])
def utilization(body: UtilizationRequest, today: date = Depends(get_today)):
    try:
        return summarize_utilization(body.personnel, body.as_of or today)
    except ValueError as e:
        logger.exception("Utilization error")
        raise MatchingError(str(e)) from e
