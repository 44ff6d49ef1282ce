"""Flat score bonus by experience tier."""

EXPERIENCE_BONUSES: dict[str, int] = {
    "Senior": 30,
    "Mid": 15,
    "Junior": 0,
}


def experience_bonus(experience_level: str | None) -> int:
    """Unrecognized or missing levels get no bonus rather than an error."""
    return EXPERIENCE_BONUSES.get(experience_level or "", 0)
