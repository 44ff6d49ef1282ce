"""Tests for the per-person workload report."""

from datetime import date

from factories import make_allocation, make_candidate
from services.utilization import summarize_utilization


def test_counts_only_active_allocations():
    person = make_candidate(allocations=[
        make_allocation(start="2024-01-01", end="2024-06-30", pct=50),  # ended
        make_allocation(start="2025-01-01", end="2025-03-31", pct=40),
        make_allocation(start="2025-02-01", end="2025-02-28", pct=30, project="Gemini"),
    ])
    [entry] = summarize_utilization([person], date(2025, 2, 10))
    assert entry.active_projects == 2
    assert entry.total_allocation == 70


def test_allocation_ending_today_is_active():
    person = make_candidate(allocations=[make_allocation(end="2025-02-10", pct=25)])
    [entry] = summarize_utilization([person], "2025-02-10")
    assert entry.active_projects == 1


def test_sorted_by_load_then_roster_order():
    roster = [
        make_candidate(1, "Ada"),
        make_candidate(2, "Bo", allocations=[make_allocation(end="2030-01-01", pct=80)]),
        make_candidate(3, "Cy"),
        make_candidate(4, "Di", allocations=[make_allocation(end="2030-01-01", pct=60)]),
    ]
    entries = summarize_utilization(roster, date(2025, 1, 1))
    assert [e.name for e in entries] == ["Bo", "Di", "Ada", "Cy"]
    assert entries[2].active_projects == 0
    assert entries[2].total_allocation == 0


def test_empty_roster():
    assert summarize_utilization([], date(2025, 1, 1)) == []
