"""Run the full local law catalog against a property and summarize it."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from compliance.local_laws.rules import LOCAL_LAW_CATALOG
from compliance.local_laws.schedule import as_datetime
from compliance.local_laws.types import (
    STATUS_ORDER,
    ComplianceSummary,
    LocalLawCheck,
    LocalLawRequirement,
    PropertyProfile,
    RequirementStatus,
)

logger = logging.getLogger(__name__)

# Rank for any status missing from STATUS_ORDER.
_UNRANKED = len(STATUS_ORDER)


def _sort_key(req: LocalLawRequirement) -> tuple[bool, int]:
    return (not req.applies, STATUS_ORDER.get(req.status, _UNRANKED))


def sort_requirements(requirements: Iterable[LocalLawRequirement]) -> list[LocalLawRequirement]:
    """Applicable first, then by status severity. Ties keep input order."""
    return sorted(requirements, key=_sort_key)


def evaluate_catalog(
    profile: PropertyProfile,
    now: datetime | date | None = None,
    catalog: Iterable[LocalLawCheck] = LOCAL_LAW_CATALOG,
) -> list[LocalLawRequirement]:
    """Evaluate every check in catalog order, unsorted."""
    now = as_datetime(now)
    return [check.evaluate(profile, now) for check in catalog]


def get_applicable_laws(
    profile: PropertyProfile,
    now: datetime | date | None = None,
    catalog: Iterable[LocalLawCheck] = LOCAL_LAW_CATALOG,
) -> list[LocalLawRequirement]:
    """Evaluate the catalog for one property and sort the results.

    Args:
        profile: The building to evaluate.
        now: Evaluation instant. Captured once when None so every check
            sees the same time.
        catalog: Checks to run, in tie-break order.

    Returns:
        One LocalLawRequirement per check, applicable entries first.
    """
    now = as_datetime(now)
    requirements = sort_requirements(evaluate_catalog(profile, now, catalog))
    logger.debug(
        "Evaluated %d local laws for property %s at %s (%d applicable)",
        len(requirements), profile.id or profile.bbl or "?", now.isoformat(),
        sum(1 for r in requirements if r.applies),
    )
    return requirements


def get_compliance_summary(requirements: Iterable[LocalLawRequirement]) -> ComplianceSummary:
    """Count applicable requirements by status; exempt counts the rest."""
    requirements = list(requirements)
    applicable = [r for r in requirements if r.applies]

    def _count(status: RequirementStatus) -> int:
        return sum(1 for r in applicable if r.status == status)

    return ComplianceSummary(
        total=len(applicable),
        overdue=_count(RequirementStatus.OVERDUE),
        due_soon=_count(RequirementStatus.DUE_SOON),
        compliant=_count(RequirementStatus.COMPLIANT),
        pending=_count(RequirementStatus.PENDING),
        exempt=sum(1 for r in requirements if not r.applies),
    )
