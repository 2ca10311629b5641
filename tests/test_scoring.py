"""Unit tests for the property compliance score."""

from datetime import date, datetime, timedelta

import pytest

from compliance.local_laws import PropertyProfile, get_applicable_laws
from compliance.local_laws.rules import check_ll33, check_ll126
from compliance.scoring import (
    ComplianceScore,
    calculate_compliance_score,
    portfolio_average,
    score_to_grade,
)
from compliance.violations import ViolationRecord


TODAY = date(2026, 1, 1)


def _make_violation(**kwargs) -> ViolationRecord:
    defaults = {"agency": "DOB", "status": "open"}
    defaults.update(kwargs)
    return ViolationRecord(**defaults)


def _closed(days_to_close: int | None) -> ViolationRecord:
    if days_to_close is None:
        return _make_violation(status="closed")
    created = date(2025, 1, 1)
    return _make_violation(status="closed", created_at=created,
                           closed_at=created + timedelta(days=days_to_close))


def _overdue():
    return check_ll126(PropertyProfile(has_gas=True), datetime(2026, 1, 1))


def _pending():
    return check_ll33(PropertyProfile(has_gas=True), datetime(2026, 1, 1))


class TestGrades:
    @pytest.mark.parametrize("score,grade", [
        (100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"),
        (70, "C"), (69, "D"), (60, "D"), (59, "F"), (0, "F"),
    ])
    def test_boundaries(self, score, grade):
        assert score_to_grade(score) == grade


class TestViolationComponent:
    def test_clean_property(self):
        result = calculate_compliance_score([], [])
        assert result.score == 100
        assert result.grade == "A"
        assert (result.violation_score, result.compliance_score, result.resolution_score) == (40, 40, 20)

    def test_single_critical(self):
        result = calculate_compliance_score([_make_violation(severity="critical")], [])
        assert result.violation_score == 30
        assert result.resolution_score == 5
        assert result.score == 75
        assert result.grade == "C"
        assert result.violation_details["critical_open"] == 1

    def test_order_flags_count_as_critical(self):
        result = calculate_compliance_score([_make_violation(is_vacate_order=True)], [])
        assert result.violation_details["critical_open"] == 1

    def test_high_capped(self):
        result = calculate_compliance_score(
            [_make_violation(severity="high") for _ in range(5)], [])
        assert result.violation_score == 20

    def test_normal_capped(self):
        result = calculate_compliance_score([_make_violation() for _ in range(6)], [])
        assert result.violation_score == 30
        assert result.violation_details["normal_open"] == 6

    def test_floor_at_zero(self):
        violations = (
            [_make_violation(severity="critical") for _ in range(5)]
            + [_make_violation(severity="high") for _ in range(5)]
            + [_make_violation() for _ in range(6)]
        )
        assert calculate_compliance_score(violations, []).violation_score == 0

    def test_stored_suppressed_excluded(self):
        result = calculate_compliance_score(
            [_make_violation(severity="critical", suppressed=True)], [])
        assert result.score == 100
        assert result.resolution_details["total_violations"] == 0

    def test_aged_violations_excluded_when_dated(self):
        stale = _make_violation(agency="ECB", severity="critical",
                                issued_date=TODAY - timedelta(days=800))
        assert calculate_compliance_score([stale], [], today=TODAY).score == 100
        assert calculate_compliance_score([stale], []).score == 75


class TestComplianceComponent:
    def test_overdue_capped(self):
        result = calculate_compliance_score([], [_overdue()] * 3)
        assert result.compliance_score == 0
        assert result.compliance_details == {"overdue_count": 3, "pending_count": 0}

    def test_pending_capped(self):
        result = calculate_compliance_score([], [_pending()] * 3)
        assert result.compliance_score == 30

    def test_exempt_ignored(self):
        reqs = get_applicable_laws(PropertyProfile(), datetime(2026, 1, 1))
        assert calculate_compliance_score([], reqs).compliance_score == 40


class TestResolutionComponent:
    @pytest.mark.parametrize("days,points", [
        (20, 20), (45, 15), (75, 10), (120, 5), (200, 0),
    ])
    def test_bands(self, days, points):
        result = calculate_compliance_score([_closed(days)], [])
        assert result.resolution_score == points
        assert result.resolution_details["avg_days_to_close"] == float(days)

    def test_missing_timestamps_default(self):
        result = calculate_compliance_score([_closed(None)], [])
        assert result.resolution_details["avg_days_to_close"] == 90.0
        assert result.resolution_score == 5

    def test_undated_closures_left_out_of_average(self):
        result = calculate_compliance_score([_closed(10), _closed(None)], [])
        assert result.resolution_details["avg_days_to_close"] == 10.0
        assert result.resolution_details["closed_violations"] == 2
        assert result.resolution_score == 20

    def test_no_closures(self):
        result = calculate_compliance_score([_make_violation()], [])
        assert result.resolution_score == 5
        assert result.resolution_details["closed_violations"] == 0


class TestPortfolioAverage:
    def _score(self, value: int) -> ComplianceScore:
        return ComplianceScore(value, score_to_grade(value), 0, 0, 0)

    def test_half_up(self):
        assert portfolio_average([self._score(90), self._score(81)]) == (86, "B")

    def test_empty(self):
        assert portfolio_average([]) is None
