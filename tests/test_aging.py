"""Unit tests for the violation aging filter."""

from datetime import date, datetime, timedelta

import pytest

from compliance.aging import (
    AGING_RULES,
    AgencyAgingRule,
    AgingDecision,
    days_since_issue,
    find_aging_rule,
    partition_by_aging,
    should_suppress_violation,
)
from compliance.violations import ViolationRecord


TODAY = date(2026, 2, 23)


def _make_violation(days_old: int | None = 0, **kwargs) -> ViolationRecord:
    defaults = {
        "violation_number": "V-1",
        "agency": "ECB",
        "status": "open",
        "issued_date": None if days_old is None else TODAY - timedelta(days=days_old),
    }
    defaults.update(kwargs)
    return ViolationRecord(**defaults)


class TestRuleTable:
    def test_thresholds(self):
        assert {r.agency: r.suppress_after_days for r in AGING_RULES} == {
            "ECB": 730, "DOB": 1095, "HPD": 1095,
        }

    def test_find_rule_case_insensitive(self):
        assert find_aging_rule("hpd").agency == "HPD"
        assert find_aging_rule("FDNY") is None
        assert find_aging_rule("") is None


class TestShouldSuppress:
    def test_at_threshold_kept(self):
        assert should_suppress_violation(_make_violation(730), TODAY) == AgingDecision(False)

    def test_past_threshold_suppressed(self):
        decision = should_suppress_violation(_make_violation(731), TODAY)
        assert decision.suppress is True
        assert decision.reason == (
            "ECB violations open >2 years are likely resolved but not updated in system"
            " (2 years old)"
        )

    @pytest.mark.parametrize("agency,days,suppress", [
        ("DOB", 1095, False),
        ("DOB", 1096, True),
        ("HPD", 1200, True),
        ("FDNY", 5000, False),
        ("DOT", 5000, False),
    ])
    def test_per_agency(self, agency, days, suppress):
        v = _make_violation(days, agency=agency)
        assert should_suppress_violation(v, TODAY).suppress is suppress

    def test_closed_never_suppressed(self):
        v = _make_violation(2000, status="closed")
        assert should_suppress_violation(v, TODAY).suppress is False

    def test_missing_issue_date_kept(self):
        assert should_suppress_violation(_make_violation(None), TODAY).suppress is False

    def test_custom_rules(self):
        rules = (AgencyAgingRule("DOT", 300, "DOT records go stale"),)
        decision = should_suppress_violation(_make_violation(400, agency="DOT"), TODAY, rules)
        assert decision.reason == "DOT records go stale (1 year old)"

    def test_accepts_datetime(self):
        v = _make_violation(731)
        assert should_suppress_violation(v, datetime(2026, 2, 23, 18, 30)).suppress is True

    def test_no_reason_when_kept(self):
        assert should_suppress_violation(_make_violation(10), TODAY).reason is None


class TestHelpers:
    def test_days_since_issue(self):
        assert days_since_issue(_make_violation(45), TODAY) == 45
        assert days_since_issue(_make_violation(None), TODAY) is None

    def test_partition_preserves_order(self):
        fresh = _make_violation(10, violation_number="A")
        stale = _make_violation(900, violation_number="B")
        closed = _make_violation(900, violation_number="C", status="closed")
        kept, suppressed = partition_by_aging([fresh, stale, closed], TODAY)
        assert [v.violation_number for v in kept] == ["A", "C"]
        assert [v.violation_number for v, _ in suppressed] == ["B"]
        assert suppressed[0][1].suppress is True
