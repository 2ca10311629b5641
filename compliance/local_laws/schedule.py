"""Cycle arithmetic and status derivation shared by the catalog checks.

All functions are pure. "now" is captured once by the engine and threaded
through every check so one evaluation sees a single instant.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone

from compliance.bbl import get_block_last_digit
from compliance.local_laws.types import PropertyProfile, RequirementStatus

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LARGE_BUILDING_SQFT = 25_000

# A "month" in the due-soon windows is a flat 30 days.
_SECONDS_PER_MONTH = 30 * 24 * 60 * 60

DUE_SOON_MONTHS = 12.0
BENCHMARKING_DUE_SOON_DAYS = 90
BENCHMARKING_DUE_SOON_MONTHS = BENCHMARKING_DUE_SOON_DAYS / 30
ELEVATOR_DUE_SOON_MONTHS = 3.0

# FISP sub-cycle deadlines within Cycle 9 (2020-2028).
FISP_SUBCYCLE_DUE_DATES: dict[str, date] = {
    "A": date(2023, 2, 21),
    "B": date(2026, 2, 21),
    "C": date(2029, 2, 21),
}

# Gas piping inspection years, one per block-digit bucket.
GAS_PIPING_BUCKET_YEARS: tuple[int, int, int] = (2025, 2027, 2029)

ENERGY_AUDIT_BASE_YEAR = 2020
ENERGY_AUDIT_CYCLE_YEARS = 10

_RESIDENTIAL_CLASS_PREFIXES = {"A", "B", "C", "D", "R", "S"}
_COMMERCIAL_CLASS_PREFIXES = {"O", "L", "K", "E"}


# ---------------------------------------------------------------------------
# Time helpers
# ---------------------------------------------------------------------------

def as_datetime(now: datetime | date | None = None) -> datetime:
    """Normalize "now" to a naive datetime.

    None captures the wall clock; a bare date means midnight; an aware
    datetime is converted to UTC before the zone is dropped.
    """
    if now is None:
        return datetime.now()
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            return now.astimezone(timezone.utc).replace(tzinfo=None)
        return now
    return datetime.combine(now, time.min)


def months_until(due: date, now: datetime) -> float:
    """Months (of 30 days) from now to midnight of the due date."""
    delta = datetime.combine(due, time.min) - now
    return delta.total_seconds() / _SECONDS_PER_MONTH


def is_past_due(due: date, now: datetime) -> bool:
    return datetime.combine(due, time.min) < now


def derive_status(
    applies: bool,
    due: date | None,
    now: datetime,
    due_soon_months: float | None = DUE_SOON_MONTHS,
) -> RequirementStatus:
    """Status state machine for scheduled requirements.

    exempt if not applicable; pending if there is no due date; overdue once
    the due date has passed; due_soon inside the window; pending otherwise.
    A window of None treats any future due date as due_soon.
    """
    if not applies:
        return RequirementStatus.EXEMPT
    if due is None:
        return RequirementStatus.PENDING
    if is_past_due(due, now):
        return RequirementStatus.OVERDUE
    if due_soon_months is None or months_until(due, now) <= due_soon_months:
        return RequirementStatus.DUE_SOON
    return RequirementStatus.PENDING


# ---------------------------------------------------------------------------
# Property classification
# ---------------------------------------------------------------------------

def effective_sqft(p: PropertyProfile) -> float:
    """Building area if present, else gross area, else 0."""
    return p.building_area_sqft or p.gross_sqft or 0


def block_digit(p: PropertyProfile) -> int | None:
    return get_block_last_digit(p.bbl)


def _class_prefix(p: PropertyProfile) -> str:
    return (p.building_class or "")[:1].upper()


def _use_text(p: PropertyProfile) -> str:
    return (p.use_type or p.primary_use_group or "").lower()


def is_residential(p: PropertyProfile) -> bool:
    if _class_prefix(p) in _RESIDENTIAL_CLASS_PREFIXES:
        return True
    if (p.dwelling_units or 0) > 0:
        return True
    use = _use_text(p)
    return "resid" in use or "dwelling" in use


def is_commercial_or_office(p: PropertyProfile) -> bool:
    if _class_prefix(p) in _COMMERCIAL_CLASS_PREFIXES:
        return True
    use = _use_text(p)
    return "office" in use or "commercial" in use


# ---------------------------------------------------------------------------
# Cycle strategies
# ---------------------------------------------------------------------------

def fisp_subcycle(digit: int) -> str:
    """Block digit 0-3 -> A, 4-6 -> B, 7-9 -> C."""
    if digit <= 3:
        return "A"
    if digit <= 6:
        return "B"
    return "C"


def annual_due_date(now: datetime, month: int, day: int) -> date:
    """This calendar year's occurrence, even if it has already passed."""
    return date(now.year, month, day)


def rolling_cycle_year(
    digit: int,
    now: datetime,
    base_year: int = ENERGY_AUDIT_BASE_YEAR,
    cycle_years: int = ENERGY_AUDIT_CYCLE_YEARS,
) -> int:
    """base_year + digit, advanced by whole cycles until >= last year."""
    year = base_year + digit
    while year < now.year - 1:
        year += cycle_years
    return year


def bucket_cycle_year(
    digit: int,
    years: tuple[int, int, int] = GAS_PIPING_BUCKET_YEARS,
) -> int:
    if digit <= 3:
        return years[0]
    if digit <= 6:
        return years[1]
    return years[2]


def year_end(year: int) -> date:
    return date(year, 12, 31)
