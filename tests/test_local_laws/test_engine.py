"""Tests for catalog evaluation, ordering and summary counts."""

from datetime import date, datetime, timedelta, timezone

from compliance.local_laws import (
    LOCAL_LAW_CATALOG,
    ComplianceSummary,
    LocalLawCheck,
    PropertyProfile,
    RequirementStatus,
    evaluate_catalog,
    get_applicable_laws,
    get_compliance_summary,
    sort_requirements,
)
from compliance.local_laws.rules import check_ll62, check_ll126


NOW = datetime(2024, 1, 1)

CATALOG_ORDER = [
    "LL11", "LL84", "LL97", "LL87", "LL152", "LL62",
    "LL126", "LL33/95", "LL77", "LL88", "LL26",
]


def _make_profile(**kwargs) -> PropertyProfile:
    return PropertyProfile(**kwargs)


def _gas_and_elevator() -> PropertyProfile:
    return _make_profile(id="p-1", has_gas=True, has_elevator=True)


class TestGetApplicableLaws:
    def test_empty_profile_all_exempt_in_catalog_order(self):
        reqs = get_applicable_laws(_make_profile(), NOW)
        assert [r.local_law for r in reqs] == CATALOG_ORDER
        assert all(r.status == RequirementStatus.EXEMPT for r in reqs)
        assert all(not r.applies for r in reqs)

    def test_one_record_per_check(self):
        reqs = get_applicable_laws(_gas_and_elevator(), NOW)
        assert len(reqs) == len(LOCAL_LAW_CATALOG)
        assert sorted(r.local_law for r in reqs) == sorted(CATALOG_ORDER)

    def test_sorted_applicable_first_then_status(self):
        reqs = get_applicable_laws(_gas_and_elevator(), NOW)
        assert [r.local_law for r in reqs] == [
            "LL126",    # due_soon
            "LL152",    # pending, catalog order among ties
            "LL62",
            "LL33/95",
            "LL11", "LL84", "LL97", "LL87", "LL77", "LL88", "LL26",
        ]
        assert reqs[0].status == RequirementStatus.DUE_SOON

    def test_idempotent_for_fixed_clock(self):
        p = _make_profile(stories=20, building_area_sqft=100_000, has_gas=True,
                          has_elevator=True, building_class="O4", bbl="1000070001")
        assert get_applicable_laws(p, NOW) == get_applicable_laws(p, NOW)

    def test_accepts_plain_date(self):
        p = _gas_and_elevator()
        assert get_applicable_laws(p, date(2024, 1, 1)) == get_applicable_laws(p, NOW)

    def test_accepts_aware_datetime(self):
        p = _gas_and_elevator()
        aware = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert get_applicable_laws(p, aware) == get_applicable_laws(p, NOW)

    def test_defaults_to_current_time(self):
        reqs = get_applicable_laws(_gas_and_elevator())
        assert len(reqs) == len(CATALOG_ORDER)

    def test_custom_catalog(self):
        catalog = (LocalLawCheck("LL62", check_ll62), LocalLawCheck("LL126", check_ll126))
        reqs = get_applicable_laws(_gas_and_elevator(), NOW, catalog)
        assert [r.local_law for r in reqs] == ["LL126", "LL62"]


class TestEvaluateCatalog:
    def test_unsorted_catalog_order(self):
        reqs = evaluate_catalog(_gas_and_elevator(), NOW)
        assert [r.local_law for r in reqs] == CATALOG_ORDER


class TestSortRequirements:
    def test_stable_for_equal_keys(self):
        reqs = evaluate_catalog(_make_profile(), NOW)
        assert sort_requirements(reqs) == reqs

    def test_overdue_before_pending(self):
        p = _make_profile(has_gas=True, bbl="1000010001")
        reqs = evaluate_catalog(p, datetime(2026, 1, 1))
        statuses = [r.status for r in sort_requirements(reqs) if r.applies]
        assert statuses[0] == RequirementStatus.OVERDUE
        assert statuses == sorted(statuses, key=lambda s: list(RequirementStatus).index(s))


class TestComplianceSummary:
    def test_counts(self):
        summary = get_compliance_summary(get_applicable_laws(_gas_and_elevator(), NOW))
        assert summary == ComplianceSummary(
            total=4, overdue=0, due_soon=1, compliant=0, pending=3, exempt=7,
        )

    def test_total_plus_exempt_is_catalog_size(self):
        p = _make_profile(stories=30, building_area_sqft=60_000, building_class="O4",
                          has_gas=True, has_elevator=True, has_sprinkler=True,
                          bbl="1000020001")
        summary = get_compliance_summary(get_applicable_laws(p, NOW))
        assert summary.total + summary.exempt == len(LOCAL_LAW_CATALOG)
        assert summary.compliant == 1  # sprinklered high-rise office
        assert (summary.overdue + summary.due_soon + summary.pending
                + summary.compliant) == summary.total

    def test_empty_input(self):
        assert get_compliance_summary([]) == ComplianceSummary()

    def test_to_dict_keys(self):
        assert list(ComplianceSummary().to_dict()) == [
            "total", "overdue", "due_soon", "compliant", "pending", "exempt",
        ]


class TestStatusInvariants:
    def test_status_follows_clock(self):
        p = _make_profile(has_gas=True, bbl="1000010001")
        start = datetime(2023, 6, 1)
        for step in range(0, 1200, 45):
            now = start + timedelta(days=step)
            for r in get_applicable_laws(p, now):
                if r.next_due_date is None:
                    continue
                past = datetime.combine(r.next_due_date, datetime.min.time()) < now
                assert (r.status == RequirementStatus.OVERDUE) == past
