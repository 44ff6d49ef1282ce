"""Current workload per person across all of their active allocations."""

from collections.abc import Sequence

from models.schemas.candidate import Candidate
from models.schemas.utilization import UtilizationEntry
from services.availability import DateLike, parse_date


def summarize_utilization(personnel: Sequence[Candidate], as_of: DateLike) -> list[UtilizationEntry]:
    """Count allocations not yet ended on ``as_of`` and sum their percentages.

    Sorted by total allocation, highest first; ties keep roster order.
    """
    cutoff = parse_date(as_of)
    entries: list[UtilizationEntry] = []
    for person in personnel:
        active = [a for a in person.allocations if parse_date(a.allocation_end) >= cutoff]
        entries.append(UtilizationEntry(
            personnel_id=person.id,
            name=person.name,
            role=person.role,
            active_projects=len(active),
            total_allocation=sum(a.allocation_percentage for a in active),
        ))
    return sorted(entries, key=lambda e: e.total_allocation, reverse=True)
