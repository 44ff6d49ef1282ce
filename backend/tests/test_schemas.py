"""Tests for the request and result contracts."""

import pytest
from pydantic import ValidationError

from models.requests import MatchRequest
from models.schemas.candidate import Allocation, Candidate, CandidateSkill
from models.schemas.match_result import MatchResult, MatchSummary
from models.schemas.requirement import SkillRequirement


class TestCandidate:
    def test_duplicate_skill_ids_rejected(self):
        with pytest.raises(ValidationError):
            Candidate(
                id=1,
                name="Ada",
                skills=[
                    CandidateSkill(skill_id=1, proficiency_level=3),
                    CandidateSkill(skill_id=1, proficiency_level=4),
                ],
            )

    def test_defaults(self):
        c = Candidate(id=1, name="Ada")
        assert c.skills == []
        assert c.allocations == []
        assert c.experience_level == ""

    def test_frozen(self):
        c = Candidate(id=1, name="Ada")
        with pytest.raises(ValidationError):
            c.name = "Bo"

    @pytest.mark.parametrize("level", [0, 6])
    def test_proficiency_range(self, level):
        with pytest.raises(ValidationError):
            CandidateSkill(skill_id=1, proficiency_level=level)

    def test_allocation_percentage_range(self):
        with pytest.raises(ValidationError):
            Allocation(allocation_start="2025-01-01", allocation_end="2025-02-01", allocation_percentage=101)


class TestSkillRequirement:
    @pytest.mark.parametrize("raw,expected", [
        ("Must Have", "Must Have"),
        ("MustHave", "Must Have"),
        ("nice to have", "Nice to Have"),
        ("NiceToHave", "Nice to Have"),
    ])
    def test_priority_spellings(self, raw, expected):
        req = SkillRequirement(skill_id=1, required_proficiency=3, priority=raw)
        assert req.priority == expected

    def test_priority_default(self):
        assert SkillRequirement(skill_id=1, required_proficiency=3).priority == "Must Have"

    def test_unknown_priority_rejected(self):
        with pytest.raises(ValidationError):
            SkillRequirement(skill_id=1, required_proficiency=3, priority="Optional")


class TestWireNames:
    def test_request_accepts_camel_case(self):
        req = MatchRequest.model_validate({
            "personnel": [],
            "requiredSkills": [],
            "projectStart": "2025-01-01",
            "projectEnd": "2025-02-01",
            "sortBy": "availability",
        })
        assert req.sort_by == "availability"
        assert req.project_start == "2025-01-01"

    def test_result_dumps_camel_case_aggregates(self):
        data = MatchResult(personnel_id=1, name="Ada").model_dump(by_alias=True)
        for key in ("totalScore", "matchPercentage", "utilizationPercentage", "overallScore"):
            assert key in data
        assert "personnel_id" in data
        assert "experience_level" in data

    def test_summary_defaults(self):
        s = MatchSummary()
        assert s.total_candidates == 0
        assert s.top_candidate is None


class TestLenientFields:
    @pytest.mark.parametrize("level", [None, 3, ["Senior"]])
    def test_non_string_experience_level_blanked(self, level):
        c = Candidate(id=1, name="Ada", experience_level=level, role=None)
        assert c.experience_level == ""
        assert c.role == ""

    @pytest.mark.parametrize("sort_by", [5, None, {"by": "bestFit"}])
    def test_non_string_sort_by_dropped(self, sort_by):
        req = MatchRequest.model_validate({
            "personnel": [],
            "requiredSkills": [],
            "projectStart": "2025-01-01",
            "projectEnd": "2025-02-01",
            "sortBy": sort_by,
        })
        assert req.sort_by is None
