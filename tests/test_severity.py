"""Unit tests for the violation severity classifier — pure functions."""

import pytest

from compliance.severity import (
    CRITICAL_KEYWORDS,
    HIGH_KEYWORDS,
    MEDIUM_KEYWORDS,
    SEVERITY_RULES,
    SeverityLevel,
    calculate_violation_severity,
    classify_violations,
    match_severity_rule,
    severity_badge_classes,
    severity_text,
)
from compliance.violations import ViolationRecord


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_violation(**kwargs) -> ViolationRecord:
    defaults = {
        "violation_number": "V-1",
        "agency": "DOB",
        "description_raw": "",
        "status": "open",
    }
    defaults.update(kwargs)
    return ViolationRecord(**defaults)


# ---------------------------------------------------------------------------
# Order flags
# ---------------------------------------------------------------------------

class TestOrderFlags:
    def test_vacate_flag_beats_benign_text(self):
        info = calculate_violation_severity(
            _make_violation(is_vacate_order=True, description_raw="dirty sidewalk"))
        assert info.level == "Critical"
        assert "Vacate Order" in info.explanation

    def test_stop_work_flag(self):
        info = calculate_violation_severity(_make_violation(is_stop_work_order=True))
        assert info.level == "Critical"
        assert "Stop Work Order" in info.explanation
        assert "SWO" in info.recommended_action

    def test_stop_work_wording_wins_when_both_flags(self):
        info = calculate_violation_severity(
            _make_violation(is_stop_work_order=True, is_vacate_order=True))
        assert "Stop Work Order" in info.explanation


# ---------------------------------------------------------------------------
# Keyword cascade
# ---------------------------------------------------------------------------

class TestKeywordCascade:
    @pytest.mark.parametrize("text", [
        "WORK WITHOUT PERMIT at cellar",
        "Illegal conversion of basement",
        "Blocked fire escape",
        "no permit for demolition",
    ])
    def test_critical(self, text):
        assert calculate_violation_severity(_make_violation(description_raw=text)).level == "Critical"

    @pytest.mark.parametrize("text", [
        "Failure to maintain facade",
        "Defective sprinkler head",
        "Fire alarm not tested",
        "Elevator inspection overdue",
    ])
    def test_high(self, text):
        assert calculate_violation_severity(_make_violation(description_raw=text)).level == "High"

    @pytest.mark.parametrize("text", [
        "Noise complaint",
        "Plumbing work",
        "Expired permit renewal",
    ])
    def test_medium(self, text):
        assert calculate_violation_severity(_make_violation(description_raw=text)).level == "Medium"

    def test_fdny_is_high_without_keywords(self):
        info = calculate_violation_severity(_make_violation(agency="FDNY"))
        assert info.level == "High"

    def test_fdny_agency_case_insensitive(self):
        info = calculate_violation_severity(_make_violation(agency="fdny"))
        assert info.level == "High"

    def test_critical_keyword_outranks_fdny(self):
        info = calculate_violation_severity(
            _make_violation(agency="FDNY", description_raw="Imminent danger"))
        assert info.level == "Critical"

    def test_type_and_class_fields_searched(self):
        info = calculate_violation_severity(
            _make_violation(violation_type="LL11 - Facade", description_raw=""))
        assert info.level == "High"

    def test_stored_hint_searched(self):
        # 'emergency' stored as the severity hint
        info = calculate_violation_severity(_make_violation(severity="emergency"))
        assert info.level == "Critical"

    def test_severity_text_lowercased_and_joined(self):
        v = _make_violation(description_raw="ABC", violation_type="Def",
                            violation_class="G", severity="High")
        assert severity_text(v) == "abc def g high"

    def test_match_severity_rule_none(self):
        assert match_severity_rule("dirty sidewalk", "DOB") is None

    def test_rules_in_declared_order(self):
        assert [r.level for r in SEVERITY_RULES] == ["Critical", "High", "Medium"]
        assert SEVERITY_RULES[0].keywords == CRITICAL_KEYWORDS
        assert SEVERITY_RULES[1].keywords == HIGH_KEYWORDS
        assert SEVERITY_RULES[2].keywords == MEDIUM_KEYWORDS


# ---------------------------------------------------------------------------
# Penalty and fallback
# ---------------------------------------------------------------------------

class TestPenaltyAndFallback:
    def test_penalty_at_threshold_is_medium(self):
        info = calculate_violation_severity(
            _make_violation(description_raw="debris on roof", penalty_amount=5000))
        assert info.level == "Medium"
        assert "$5,000" in info.explanation

    def test_fractional_penalty_formatting(self):
        info = calculate_violation_severity(
            _make_violation(description_raw="debris on roof", penalty_amount=12500.5))
        assert "$12,500.50" in info.explanation

    def test_penalty_below_threshold_is_low(self):
        info = calculate_violation_severity(
            _make_violation(description_raw="debris on roof", penalty_amount=4999))
        assert info.level == "Low"

    def test_benign_is_low(self):
        info = calculate_violation_severity(_make_violation(description_raw="dirty sidewalk"))
        assert info.level == "Low"
        assert info.icon == "🔵"

    def test_empty_record_is_low(self):
        assert calculate_violation_severity(ViolationRecord()).level == "Low"

    def test_numeric_class_from_row_classifies(self):
        v = ViolationRecord.from_dict({
            "agency": "HPD", "violation_class": 2, "description": "peeling paint",
        })
        assert calculate_violation_severity(v).level == "Low"


# ---------------------------------------------------------------------------
# Batch and styling
# ---------------------------------------------------------------------------

class TestBatchAndStyling:
    def test_classify_violations_preserves_order(self):
        levels = [i.level for i in classify_violations([
            _make_violation(description_raw="dirty sidewalk"),
            _make_violation(is_vacate_order=True),
            _make_violation(description_raw="boiler"),
        ])]
        assert levels == ["Low", "Critical", "High"]

    def test_styling_fields(self):
        info = calculate_violation_severity(_make_violation(is_vacate_order=True))
        assert info.color == "text-red-600"
        assert info.bg_color == "bg-red-500/10"
        assert info.border_color == "border-red-200"

    def test_badge_classes(self):
        assert severity_badge_classes("High") == "bg-orange-500/10 text-orange-600 border-orange-200"

    def test_badge_classes_unknown_level(self):
        assert severity_badge_classes("Unknown") == "bg-muted text-muted-foreground border-muted"

    def test_badge_classes_accept_level(self):
        assert severity_badge_classes(SeverityLevel.CRITICAL) == (
            "bg-red-500/10 text-red-600 border-red-200"
        )


class TestSeverityLevel:
    def test_level_is_enum_member(self):
        info = calculate_violation_severity(_make_violation(is_vacate_order=True))
        assert info.level is SeverityLevel.CRITICAL
        assert info.level.value == "Critical"

    def test_levels_in_severity_order(self):
        assert [level.value for level in SeverityLevel] == ["Critical", "High", "Medium", "Low"]

    def test_rules_tagged_with_levels(self):
        assert all(isinstance(rule.level, SeverityLevel) for rule in SEVERITY_RULES)
