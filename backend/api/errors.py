"""Error responses for the matching API.

Missing request fields -> 400 naming the fields, before any scoring runs.
Other invalid input   -> 400 with pydantic's error details.
Computation faults    -> 500 carrying the underlying message.
"""

import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MatchingError(Exception):
    """Raised when scoring fails on structurally valid input (e.g. a bad date)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _missing_fields(errors: list[dict]) -> list[str]:
    """Top-level body fields that were absent, null or empty strings."""
    missing: list[str] = []
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) != 2 or loc[0] != "body":
            continue
        if err.get("type") == "missing" or err.get("input") in (None, ""):
            if loc[1] not in missing:
                missing.append(str(loc[1]))
    return missing


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    missing = _missing_fields(errors)
    if missing:
        logger.warning("Rejected %s: missing %s", request.url.path, ", ".join(missing))
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Missing required fields: {', '.join(missing)}",
                "missing": missing,
            },
        )
    logger.warning("Rejected %s: invalid request body", request.url.path)
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "detail": jsonable_encoder(errors)},
    )


async def matching_error_handler(request: Request, exc: MatchingError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": "Matching failed", "message": exc.message},
    )
