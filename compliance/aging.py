"""Violation aging filter.

Agency feeds lag reality: an ECB or HPD violation still marked open years
after issue has usually been cured or settled without the record being
closed. Those records are suppressed from active counts. Agencies without a
rule are never suppressed by age.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Sequence

from compliance.violations import ViolationRecord

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


@dataclass(frozen=True)
class AgencyAgingRule:
    agency: str
    suppress_after_days: int
    reason: str


@dataclass(frozen=True)
class AgingDecision:
    suppress: bool
    reason: str | None = None


AGING_RULES: tuple[AgencyAgingRule, ...] = (
    AgencyAgingRule(
        agency="ECB",
        suppress_after_days=730,  # 2 years
        reason="ECB violations open >2 years are likely resolved but not updated in system",
    ),
    AgencyAgingRule(
        agency="DOB",
        suppress_after_days=1095,  # 3 years
        reason="DOB violations open >3 years may be disputed or administratively stale",
    ),
    AgencyAgingRule(
        agency="HPD",
        suppress_after_days=1095,  # 3 years
        reason="HPD violations open >3 years likely corrected but not closed",
    ),
)

_KEEP = AgingDecision(suppress=False)


def find_aging_rule(
    agency: str,
    rules: Sequence[AgencyAgingRule] = AGING_RULES,
) -> AgencyAgingRule | None:
    agency = (agency or "").strip().upper()
    for rule in rules:
        if rule.agency == agency:
            return rule
    return None


def _as_date(today: date | datetime | None) -> date:
    if today is None:
        return date.today()
    if isinstance(today, datetime):
        return today.date()
    return today


def days_since_issue(violation: ViolationRecord, today: date | datetime | None = None) -> int | None:
    """Whole days between issue and today, or None without an issue date."""
    if violation.issued_date is None:
        return None
    return (_as_date(today) - violation.issued_date).days


def _age_label(days: int) -> str:
    years = days // DAYS_PER_YEAR
    return f"{years} year{'s' if years != 1 else ''} old"


def should_suppress_violation(
    violation: ViolationRecord,
    today: date | datetime | None = None,
    rules: Sequence[AgencyAgingRule] = AGING_RULES,
) -> AgingDecision:
    """Decide whether an aged open violation drops out of active counts.

    Only open violations are candidates. A violation is suppressed when it
    has been open strictly longer than its agency's threshold.
    """
    if not violation.is_open:
        return _KEEP

    days = days_since_issue(violation, today)
    if days is None:
        logger.debug("No issue date on %s violation %s; keeping",
                      violation.agency, violation.violation_number or "?")
        return _KEEP

    rule = find_aging_rule(violation.agency, rules)
    if rule is None or days <= rule.suppress_after_days:
        return _KEEP

    logger.debug("Suppressing %s violation %s (%d days open)",
                 violation.agency, violation.violation_number or "?", days)
    return AgingDecision(suppress=True, reason=f"{rule.reason} ({_age_label(days)})")


def partition_by_aging(
    violations: Iterable[ViolationRecord],
    today: date | datetime | None = None,
    rules: Sequence[AgencyAgingRule] = AGING_RULES,
) -> tuple[list[ViolationRecord], list[tuple[ViolationRecord, AgingDecision]]]:
    """Split violations into (kept, suppressed-with-decision), order preserved."""
    today = _as_date(today)
    kept: list[ViolationRecord] = []
    suppressed: list[tuple[ViolationRecord, AgingDecision]] = []
    for v in violations:
        decision = should_suppress_violation(v, today, rules)
        if decision.suppress:
            suppressed.append((v, decision))
        else:
            kept.append(v)
    return kept, suppressed
