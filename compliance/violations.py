"""Violation records as consumed by the severity, aging and scoring models.

Pure data + status vocabulary, no database dependency. Rows from any agency
feed (DOB, ECB, HPD, FDNY, ...) are normalized through ViolationRecord.from_dict.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from compliance.parsing import parse_bool, parse_date, parse_float, parse_text


@dataclass(frozen=True)
class ViolationRecord:
    """Minimal violation data needed by the evaluation core."""

    violation_number: str = ""
    agency: str = ""
    description_raw: str = ""
    violation_type: str = ""
    violation_class: str = ""
    severity: str = ""  # stored severity hint, e.g. 'critical', 'high'
    is_stop_work_order: bool = False
    is_vacate_order: bool = False
    penalty_amount: float | None = None
    issued_date: date | None = None
    status: str = ""
    oath_status: str = ""
    suppressed: bool = False
    created_at: date | None = None
    closed_at: date | None = None

    @classmethod
    def from_dict(cls, d: dict) -> ViolationRecord:
        """Build from a violation dict (e.g. from DB row or API response)."""
        return cls(
            violation_number=parse_text(d.get("violation_number")) or "",
            agency=(parse_text(d.get("agency")) or "").upper(),
            description_raw=parse_text(d.get("description_raw") or d.get("description")) or "",
            violation_type=parse_text(d.get("violation_type")) or "",
            violation_class=parse_text(d.get("violation_class")) or "",
            severity=parse_text(d.get("severity")) or "",
            is_stop_work_order=bool(parse_bool(d.get("is_stop_work_order"))),
            is_vacate_order=bool(parse_bool(d.get("is_vacate_order"))),
            penalty_amount=parse_float(d.get("penalty_amount")),
            issued_date=parse_date(d.get("issued_date")),
            status=(parse_text(d.get("status")) or "").lower(),
            oath_status=parse_text(d.get("oath_status")) or "",
            suppressed=bool(parse_bool(d.get("suppressed"))),
            created_at=parse_date(d.get("created_at")),
            closed_at=parse_date(d.get("closed_at") or d.get("updated_at")),
        )

    @property
    def is_open(self) -> bool:
        return self.status.strip().lower() == "open"


# Statuses that mean the violation is resolved and out of active counts.
RESOLVED_VIOLATION_STATUSES: tuple[str, ...] = (
    "written off",
    "closed",
    "dismissed",
    "paid",
    "paid in full",
    "resolved",
    "complied",
    "withdrawn",
    "stipulation",
    "default - paid",
    "in violation - resolved",
    "in violation - paid",
)


def is_resolved_violation_status(status: str | None) -> bool:
    """True if the status matches the resolved vocabulary (substring either way)."""
    if not status:
        return False
    normalized = status.lower().strip()
    if not normalized:
        return False
    return any(
        normalized in resolved or resolved in normalized
        for resolved in RESOLVED_VIOLATION_STATUSES
    )


def is_active_violation(violation: ViolationRecord) -> bool:
    """Active unless closed or resolved by either the agency or OATH status.

    OATH statuses such as 'Docketed' or 'Rescheduled' leave it active.
    """
    if violation.status.strip().lower() == "closed":
        return False
    if is_resolved_violation_status(violation.status):
        return False
    if is_resolved_violation_status(violation.oath_status):
        return False
    return True
