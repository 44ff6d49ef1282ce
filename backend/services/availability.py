"""Availability: how much of a project window a candidate has already committed.

Utilization is calendar overlap weighted by allocation percentage, so someone
40% allocated for half the window is ~20% utilized and still available.
"""

import math
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone

from models.schemas.availability import AvailabilityResult, ConflictingProject
from models.schemas.candidate import Allocation
from services.rounding import round_half_up

FULLY_BOOKED_PCT = 100
UNKNOWN_PROJECT = "Unknown Project"

_ONE_DAY = timedelta(days=1)

DateLike = date | datetime | str


def parse_date(value: DateLike) -> datetime:
    """Parse an ISO-8601 date or datetime into a naive UTC datetime.

    Date-only values are midnight. Raises ValueError on unparseable input.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def days_between(start: datetime, end: datetime) -> int:
    """Whole calendar days from start to end, partial days rounded up."""
    return math.ceil((end - start) / _ONE_DAY)


def project_duration_days(project_start: DateLike, project_end: DateLike) -> int:
    return days_between(parse_date(project_start), parse_date(project_end))


def check_availability(
    allocations: Sequence[Allocation],
    project_start: DateLike,
    project_end: DateLike,
) -> AvailabilityResult:
    """Compute utilization of the project window from existing allocations."""
    if not allocations:
        return AvailabilityResult(available=True, utilization_percentage=0, conflicting_projects=[])

    window_start = parse_date(project_start)
    window_end = parse_date(project_end)
    project_duration = days_between(window_start, window_end)

    total_overlap = 0.0
    conflicts: list[ConflictingProject] = []

    for alloc in allocations:
        overlap_start = max(parse_date(alloc.allocation_start), window_start)
        overlap_end = min(parse_date(alloc.allocation_end), window_end)

        # Touching or disjoint ranges do not conflict
        if overlap_start >= overlap_end:
            continue

        overlap_days = days_between(overlap_start, overlap_end)
        total_overlap += overlap_days * (alloc.allocation_percentage / 100)
        conflicts.append(ConflictingProject(
            project_name=alloc.project_name or UNKNOWN_PROJECT,
            start=alloc.allocation_start,
            end=alloc.allocation_end,
            allocation_percentage=alloc.allocation_percentage,
        ))

    utilization = (
        round_half_up(total_overlap / project_duration * 100) if project_duration > 0 else 0
    )

    return AvailabilityResult(
        available=utilization < FULLY_BOOKED_PCT,
        utilization_percentage=utilization,
        conflicting_projects=conflicts,
    )
