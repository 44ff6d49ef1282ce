"""Shared dependencies for API routes."""

from datetime import date

from config import settings


def get_match_workers() -> int:
    return settings.match_workers


def get_today() -> date:
    return date.today()
