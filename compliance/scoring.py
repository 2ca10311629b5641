"""Property compliance score — 0-100 with a letter grade.

Three components:
  1. Violations (40 pts) — deductions for open, non-suppressed violations
     by stored severity (critical -10, high -5, other -2, each capped)
  2. Local laws (40 pts) — deductions for overdue (-15) and pending (-5)
     requirements
  3. Resolution (20 pts) — banded on average days to close

Grades: A >=90, B >=80, C >=70, D >=60, F below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable

from compliance.aging import should_suppress_violation
from compliance.local_laws.types import LocalLawRequirement, RequirementStatus
from compliance.violations import ViolationRecord


@dataclass
class ComplianceScore:
    """Output of the compliance scoring model."""

    score: int
    grade: str
    violation_score: int
    compliance_score: int
    resolution_score: int
    violation_details: dict[str, int] = field(default_factory=dict)
    compliance_details: dict[str, int] = field(default_factory=dict)
    resolution_details: dict[str, float] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VIOLATION_POINTS = 40
COMPLIANCE_POINTS = 40
RESOLUTION_POINTS = 20

# (points per item, cap)
_CRITICAL_DEDUCTION = (10, 40)
_HIGH_DEDUCTION = (5, 20)
_NORMAL_DEDUCTION = (2, 10)
_OVERDUE_DEDUCTION = (15, 40)
_PENDING_DEDUCTION = (5, 10)

# Average days-to-close assumed when no closed violation has both timestamps.
DEFAULT_DAYS_TO_CLOSE = 90.0

# (upper bound on average days to close, points)
_RESOLUTION_BANDS = [
    (30, 20),
    (60, 15),
    (90, 10),
    (180, 5),
]
_NO_CLOSURES_POINTS = 5

_GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _deduct(count: int, rate: tuple[int, int]) -> int:
    per_item, cap = rate
    return min(cap, count * per_item)


def score_to_grade(score: int) -> str:
    for threshold, grade in _GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"


def _is_suppressed(v: ViolationRecord, today: date | datetime | None) -> bool:
    if v.suppressed:
        return True
    if today is None:
        return False
    return should_suppress_violation(v, today).suppress


def _severity_bucket(v: ViolationRecord) -> str:
    hint = (v.severity or "").strip().lower()
    if hint == "critical" or v.is_stop_work_order or v.is_vacate_order:
        return "critical"
    if hint == "high":
        return "high"
    return "normal"


def _days_to_close(v: ViolationRecord) -> float | None:
    if v.created_at is None or v.closed_at is None:
        return None
    return float((v.closed_at - v.created_at).days)


# ---------------------------------------------------------------------------
# Component scorers
# ---------------------------------------------------------------------------

def _score_violations(violations: list[ViolationRecord]) -> tuple[int, dict[str, int]]:
    counts = {"critical": 0, "high": 0, "normal": 0}
    for v in violations:
        if v.is_open:
            counts[_severity_bucket(v)] += 1

    score = max(0, VIOLATION_POINTS
                - _deduct(counts["critical"], _CRITICAL_DEDUCTION)
                - _deduct(counts["high"], _HIGH_DEDUCTION)
                - _deduct(counts["normal"], _NORMAL_DEDUCTION))
    details = {
        "critical_open": counts["critical"],
        "high_open": counts["high"],
        "normal_open": counts["normal"],
    }
    return score, details


def _score_requirements(requirements: list[LocalLawRequirement]) -> tuple[int, dict[str, int]]:
    overdue = sum(1 for r in requirements if r.status == RequirementStatus.OVERDUE)
    pending = sum(1 for r in requirements if r.status == RequirementStatus.PENDING)
    score = max(0, COMPLIANCE_POINTS
                - _deduct(overdue, _OVERDUE_DEDUCTION)
                - _deduct(pending, _PENDING_DEDUCTION))
    return score, {"overdue_count": overdue, "pending_count": pending}


def _score_resolution(violations: list[ViolationRecord]) -> tuple[int, dict[str, float]]:
    closed = [v for v in violations if v.status.strip().lower() == "closed"]
    avg_days = 0.0

    if not violations:
        score = RESOLUTION_POINTS
    elif closed:
        # Undated closures are left out of the mean, not counted as the default.
        durations = [d for d in (_days_to_close(v) for v in closed) if d is not None]
        if durations:
            avg_days = sum(durations) / len(durations)
        else:
            avg_days = DEFAULT_DAYS_TO_CLOSE
        score = 0
        for upper, points in _RESOLUTION_BANDS:
            if avg_days < upper:
                score = points
                break
    else:
        score = _NO_CLOSURES_POINTS

    details = {
        "total_violations": len(violations),
        "closed_violations": len(closed),
        "avg_days_to_close": round(avg_days, 1),
    }
    return score, details


# ---------------------------------------------------------------------------
# Main scoring function
# ---------------------------------------------------------------------------

def calculate_compliance_score(
    violations: Iterable[ViolationRecord],
    requirements: Iterable[LocalLawRequirement],
    today: date | datetime | None = None,
) -> ComplianceScore:
    """Score one property from its violations and local law requirements.

    Args:
        violations: All violations on the property, open and closed.
        requirements: Output of get_applicable_laws for the property.
        today: When given, open violations the aging filter would suppress
            as of this date are excluded as well as stored-suppressed ones.

    Returns:
        ComplianceScore with component scores and their inputs.
    """
    counted = [v for v in violations if not _is_suppressed(v, today)]
    requirements = list(requirements)

    violation_score, violation_details = _score_violations(counted)
    compliance_score, compliance_details = _score_requirements(requirements)
    resolution_score, resolution_details = _score_resolution(counted)

    total = violation_score + compliance_score + resolution_score
    return ComplianceScore(
        score=total,
        grade=score_to_grade(total),
        violation_score=violation_score,
        compliance_score=compliance_score,
        resolution_score=resolution_score,
        violation_details=violation_details,
        compliance_details=compliance_details,
        resolution_details=resolution_details,
    )


def portfolio_average(scores: Iterable[ComplianceScore]) -> tuple[int, str] | None:
    """Rounded mean score across properties and its grade, or None if empty."""
    values = [s.score for s in scores]
    if not values:
        return None
    # Half-up rounding; scores are never negative.
    average = int(sum(values) / len(values) + 0.5)
    return average, score_to_grade(average)
