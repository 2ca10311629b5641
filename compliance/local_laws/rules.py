"""NYC local law catalog — one independent check per recurring obligation.

Every check has the signature ``(PropertyProfile, datetime) -> LocalLawRequirement``
and never mutates its input. Static metadata (names, URLs, penalties) lives in
LawInfo records; the check functions hold only the applicability predicate,
the cycle computation, and the status rule.

Several cycles key off the last digit of the tax block as a stand-in for the
real inspection districts. The digit-to-year mappings below are reproduced
literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from compliance.local_laws import schedule
from compliance.local_laws.types import (
    LocalLawCheck,
    LocalLawRequirement,
    PropertyProfile,
    RequirementStatus,
)


@dataclass(frozen=True)
class LawInfo:
    """Static catalog metadata for one requirement."""

    local_law: str
    requirement_name: str
    description: str
    learn_more_url: str
    tooltip: str
    penalty_amount: float
    penalty_description: str


def _build(
    info: LawInfo,
    applies: bool,
    reason: str,
    status: RequirementStatus,
    cycle_year: int | None = None,
    next_due: date | None = None,
) -> LocalLawRequirement:
    # Schedule and penalty fields are only reported for applicable rules.
    if not applies:
        cycle_year = None
        next_due = None
    return LocalLawRequirement(
        local_law=info.local_law,
        requirement_name=info.requirement_name,
        description=info.description,
        applies=applies,
        applicability_reason=reason,
        cycle_year=cycle_year,
        next_due_date=next_due,
        filing_deadline=next_due,
        penalty_amount=info.penalty_amount if applies else None,
        penalty_description=info.penalty_description if applies else None,
        status=status,
        learn_more_url=info.learn_more_url,
        tooltip=info.tooltip,
    )


def _sqft(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


# ---------------------------------------------------------------------------
# Catalog metadata
# ---------------------------------------------------------------------------

LL11_INFO = LawInfo(
    local_law="LL11",
    requirement_name="Facade Inspection (FISP)",
    description=(
        "Periodic facade inspection and repair for buildings over 6 stories. "
        "Filed as a Critical Examination Report every 5 years within a 9-year cycle."
    ),
    learn_more_url="https://www1.nyc.gov/site/buildings/safety/fisp.page",
    tooltip=(
        "Local Law 11 requires buildings taller than 6 stories to have their facades "
        "inspected every 5 years as part of a 9-year inspection cycle."
    ),
    penalty_amount=1000,
    penalty_description="$1,000/month late fee + potential DOB violation",
)

LL84_INFO = LawInfo(
    local_law="LL84",
    requirement_name="Energy Benchmarking",
    description=(
        "Annual energy and water benchmarking report filed via EPA Portfolio Manager "
        "for buildings ≥ 25,000 sqft."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/codes/benchmarking.page",
    tooltip=(
        "Requires annual energy and water usage benchmarking for buildings 25,000+ sqft. "
        "Filed through EPA Portfolio Manager by May 1 each year."
    ),
    penalty_amount=500,
    penalty_description="$500 quarterly penalty for non-compliance",
)

LL97_INFO = LawInfo(
    local_law="LL97",
    requirement_name="Carbon Emissions Limits",
    description=(
        "Building carbon emission limits. Period 1 (2024-2029): moderate limits. "
        "Period 2 (2030+): stricter limits with significant penalties."
    ),
    learn_more_url="https://www.nyc.gov/site/sustainablebuildings/ll97/local-law-97.page",
    tooltip=(
        "Sets carbon emission limits for large buildings. Penalties of $268/ton over "
        "the limit. Period 1 limits began in 2024."
    ),
    penalty_amount=268,
    penalty_description="$268 per metric ton of CO₂ over the limit per year",
)

LL87_INFO = LawInfo(
    local_law="LL87",
    requirement_name="Energy Audit & Retro-Commissioning",
    description=(
        "Requires energy audit and retro-commissioning every 10 years for buildings "
        "≥ 25,000 sqft."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/codes/energy-audits.page",
    tooltip=(
        "Energy audit and retro-commissioning every 10 years. Cycle based on last "
        "digit of tax block number."
    ),
    penalty_amount=3000,
    penalty_description="DOB violation + potential $3,000+ penalties",
)

LL152_INFO = LawInfo(
    local_law="LL152",
    requirement_name="Gas Piping Inspection",
    description=(
        "Periodic inspection of gas piping systems by a Licensed Master Plumber "
        "every 4 years."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/safety/gas-piping-periodic-inspection.page",
    tooltip=(
        "Requires gas piping inspection every 4 years by a Licensed Master Plumber. "
        "Non-compliance can result in gas service shutoff."
    ),
    penalty_amount=10000,
    penalty_description="Up to $10,000 fine + potential gas shutoff",
)

LL62_INFO = LawInfo(
    local_law="LL62",
    requirement_name="Elevator Inspection & Testing",
    description=(
        "Annual Category 1 (CAT1) and 5-year Category 5 (CAT5) elevator testing "
        "and inspection."
    ),
    learn_more_url="https://www1.nyc.gov/site/buildings/safety/elevator-periodic-inspections-and-tests.page",
    tooltip=(
        "Buildings with elevators must have annual Category 1 inspections and "
        "5-year Category 5 load tests."
    ),
    penalty_amount=5000,
    penalty_description="Up to $5,000 penalty per violation + potential DOB seal",
)

LL126_INFO = LawInfo(
    local_law="LL126",
    requirement_name="Gas Detection Devices",
    description=(
        "Requires installation of natural gas detectors in buildings with gas "
        "service. Effective May 1, 2025."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/safety/gas-detection.page",
    tooltip=(
        "Requires natural gas leak detectors in all buildings with gas piping. "
        "Owners must install and maintain detectors."
    ),
    penalty_amount=2500,
    penalty_description="Up to $2,500 fine for non-compliance",
)

LL33_INFO = LawInfo(
    local_law="LL33/95",
    requirement_name="Post-Gas Incident Inspection",
    description=(
        "After any gas-related incident, building owner must have gas piping "
        "inspected within 90 days."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/safety/gas-piping-periodic-inspection.page",
    tooltip=(
        "If there is a gas-related incident, the owner must commission a gas "
        "piping inspection within 90 days."
    ),
    penalty_amount=10000,
    penalty_description="Up to $10,000 fine for failure to inspect after incident",
)

LL77_INFO = LawInfo(
    local_law="LL77",
    requirement_name="Crane Wind Action Plan",
    description=(
        "Buildings using cranes must have wind action plans. Applies during "
        "construction of tall buildings."
    ),
    learn_more_url="https://www1.nyc.gov/site/buildings/safety/cranes-derricks.page",
    tooltip=(
        "Requires wind action plans for crane operations, especially near tall "
        "buildings. Enforced during active construction."
    ),
    penalty_amount=25000,
    penalty_description="Up to $25,000 per violation",
)

LL88_INFO = LawInfo(
    local_law="LL88",
    requirement_name="Lighting Upgrades & Sub-Metering",
    description=(
        "Non-residential buildings ≥ 25,000 sqft must upgrade lighting to meet "
        "energy code and install sub-meters."
    ),
    learn_more_url="https://www.nyc.gov/site/buildings/codes/energy-audits.page",
    tooltip=(
        "Requires sub-metering and lighting upgrades in non-residential buildings "
        "25,000+ sqft to meet NYC Energy Conservation Code."
    ),
    penalty_amount=1500,
    penalty_description="Potential DOB violation + fines",
)

LL26_INFO = LawInfo(
    local_law="LL26",
    requirement_name="Sprinkler Retrofit",
    description="Commercial office buildings over 100 feet must be fully sprinklered by July 2019.",
    learn_more_url="https://www.nyc.gov/site/buildings/codes/sprinkler-requirements.page",
    tooltip="Requires full sprinkler coverage in commercial buildings over 100 feet tall.",
    penalty_amount=5000,
    penalty_description="DOB violations + potential penalties",
)

# LL126 detectors were required from this date.
GAS_DETECTION_DEADLINE = date(2025, 5, 1)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def check_ll11(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL11/98 (FISP) — facade inspection for buildings over 6 stories."""
    stories = p.stories or 0
    applies = stories > 6
    digit = schedule.block_digit(p)

    cycle_year = None
    next_due = None
    if applies and digit is not None:
        subcycle = schedule.fisp_subcycle(digit)
        next_due = schedule.FISP_SUBCYCLE_DUE_DATES[subcycle]
        cycle_year = next_due.year

    if not applies:
        reason = f"Building has {stories or 'unknown'} stories. LL11 requires >6 stories."
    elif digit is None:
        reason = (
            f"Building has {stories} stories (>6 required). "
            "Block digit unknown; sub-cycle cannot be determined."
        )
    else:
        reason = (
            f"Building has {stories} stories (>6 required). "
            f"Block digit {digit} → Sub-cycle {schedule.fisp_subcycle(digit)}."
        )

    status = schedule.derive_status(applies, next_due, now)
    return _build(LL11_INFO, applies, reason, status, cycle_year, next_due)


def check_ll84(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL84/09 — annual energy benchmarking, due May 1 of the current year.

    The due date does not roll into next year once it has passed; the
    status flips to overdue instead.
    """
    sqft = schedule.effective_sqft(p)
    applies = sqft >= schedule.LARGE_BUILDING_SQFT
    next_due = schedule.annual_due_date(now, 5, 1)

    if applies:
        reason = f"Building is {_sqft(sqft)} sqft (≥25,000 threshold)."
    else:
        reason = f"Building is {_sqft(sqft)} sqft (<25,000 threshold)."

    status = schedule.derive_status(
        applies, next_due, now, schedule.BENCHMARKING_DUE_SOON_MONTHS,
    )
    return _build(LL84_INFO, applies, reason, status, now.year, next_due)


def check_ll97(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL97/19 — carbon emissions limits, reported per compliance period."""
    sqft = schedule.effective_sqft(p)
    applies = sqft >= schedule.LARGE_BUILDING_SQFT

    # Period 1 report (2024-2029), then Period 2.
    if now.year <= 2029:
        cycle_year = 2025
    else:
        cycle_year = 2030
    next_due = date(cycle_year, 5, 1)

    if applies:
        reason = f"Building is {_sqft(sqft)} sqft (≥25,000). Emission limits apply."
    else:
        reason = f"Building is {_sqft(sqft)} sqft (<25,000 threshold)."

    status = schedule.derive_status(applies, next_due, now)
    return _build(LL97_INFO, applies, reason, status, cycle_year, next_due)


def check_ll87(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL87/09 — energy audit every 10 years, year offset by block digit."""
    sqft = schedule.effective_sqft(p)
    applies = sqft >= schedule.LARGE_BUILDING_SQFT
    digit = schedule.block_digit(p)

    cycle_year = None
    next_due = None
    if applies and digit is not None:
        cycle_year = schedule.rolling_cycle_year(digit, now)
        next_due = schedule.year_end(cycle_year)

    if not applies:
        reason = f"Building is {_sqft(sqft)} sqft (<25,000 threshold)."
    elif digit is None:
        reason = (
            f"Building is {_sqft(sqft)} sqft (≥25,000). "
            "Block digit unknown; due year cannot be determined."
        )
    else:
        reason = (
            f"Building is {_sqft(sqft)} sqft (≥25,000). "
            f"Block digit {digit} → due year {cycle_year}."
        )

    status = schedule.derive_status(applies, next_due, now)
    return _build(LL87_INFO, applies, reason, status, cycle_year, next_due)


def check_ll152(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL152/16 — gas piping inspection, 4-year cycle bucketed by block digit."""
    applies = bool(p.has_gas)
    digit = schedule.block_digit(p)

    cycle_year = None
    next_due = None
    if applies and digit is not None:
        cycle_year = schedule.bucket_cycle_year(digit)
        next_due = schedule.year_end(cycle_year)

    if applies:
        reason = "Building has gas service. Gas piping inspection required."
    else:
        reason = "Building does not have gas service. LL152 does not apply."

    status = schedule.derive_status(applies, next_due, now)
    return _build(LL152_INFO, applies, reason, status, cycle_year, next_due)


def check_ll62(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL62/91 — annual CAT1 / five-year CAT5 elevator tests, due Dec 31."""
    applies = bool(p.has_elevator)
    next_due = schedule.year_end(now.year)

    if applies:
        reason = "Building has elevator(s). Annual CAT1 and periodic CAT5 testing required."
    else:
        reason = "Building does not have elevators. LL62 does not apply."

    status = schedule.derive_status(
        applies, next_due, now, schedule.ELEVATOR_DUE_SOON_MONTHS,
    )
    return _build(LL62_INFO, applies, reason, status, now.year, next_due)


def check_ll126(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL126/21 — natural gas detectors. Due soon until the deadline passes."""
    applies = bool(p.has_gas)

    if applies:
        reason = "Building has gas service. Gas detection devices required."
    else:
        reason = "Building does not have gas service."

    status = schedule.derive_status(applies, GAS_DETECTION_DEADLINE, now, None)
    return _build(LL126_INFO, applies, reason, status, now.year, GAS_DETECTION_DEADLINE)


def check_ll33(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL33/07 & LL95/22 — inspection after a gas incident. No fixed schedule."""
    applies = bool(p.has_gas)

    if applies:
        reason = "Building has gas service. Post-incident inspection obligations apply."
    else:
        reason = "Building does not have gas service."

    status = schedule.derive_status(applies, None, now)
    return _build(LL33_INFO, applies, reason, status)


def check_ll77(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL77/17 — crane wind action plan, approximated as >15 stories."""
    stories = p.stories or 0
    applies = stories > 15

    if applies:
        reason = (
            f"Building has {stories} stories (>15). "
            "May require crane wind action plan during construction."
        )
    else:
        reason = (
            f"Building has {stories or 'unknown'} stories. "
            "Typically applies to tall construction sites."
        )

    status = schedule.derive_status(applies, None, now)
    return _build(LL77_INFO, applies, reason, status)


def check_ll88(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL88/09 — lighting upgrades for non-residential buildings ≥ 25,000 sqft."""
    sqft = schedule.effective_sqft(p)
    large = sqft >= schedule.LARGE_BUILDING_SQFT
    applies = large and not schedule.is_residential(p)

    if applies:
        reason = f"Non-residential building at {_sqft(sqft)} sqft (≥25,000). Lighting upgrade required."
    elif not large:
        reason = f"Building is {_sqft(sqft)} sqft (<25,000)."
    else:
        reason = "Building is primarily residential. LL88 targets non-residential space."

    status = schedule.derive_status(applies, None, now)
    return _build(LL88_INFO, applies, reason, status)


def check_sprinkler(p: PropertyProfile, now: datetime) -> LocalLawRequirement:
    """LL26/04 — sprinkler retrofit for high-rise commercial buildings.

    The only check whose status depends on a non-date attribute: an
    applicable building is compliant once sprinklered, overdue otherwise.
    """
    stories = p.stories or 0
    applies = stories > 7 and schedule.is_commercial_or_office(p)

    if applies:
        reason = f"Commercial building with {stories} stories. Sprinkler retrofit required."
        status = RequirementStatus.COMPLIANT if p.has_sprinkler else RequirementStatus.OVERDUE
    else:
        reason = "Not a qualifying high-rise commercial building."
        status = RequirementStatus.EXEMPT

    return _build(LL26_INFO, applies, reason, status)


# Declaration order is the tie-break order after sorting.
LOCAL_LAW_CATALOG: tuple[LocalLawCheck, ...] = (
    LocalLawCheck("LL11", check_ll11),
    LocalLawCheck("LL84", check_ll84),
    LocalLawCheck("LL97", check_ll97),
    LocalLawCheck("LL87", check_ll87),
    LocalLawCheck("LL152", check_ll152),
    LocalLawCheck("LL62", check_ll62),
    LocalLawCheck("LL126", check_ll126),
    LocalLawCheck("LL33/95", check_ll33),
    LocalLawCheck("LL77", check_ll77),
    LocalLawCheck("LL88", check_ll88),
    LocalLawCheck("LL26", check_sprinkler),
)
