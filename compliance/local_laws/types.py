"""Type definitions for the local law compliance catalog.

PropertyProfile is the input to every check; LocalLawRequirement is the
one-record-per-check output. Both are rebuilt on every evaluation and never
persisted here.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Enum
from typing import Callable

from compliance.parsing import parse_bool, parse_float, parse_int, parse_text


class RequirementStatus(str, Enum):
    """Requirement status, declared in severity order."""

    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    PENDING = "pending"
    COMPLIANT = "compliant"
    EXEMPT = "exempt"


# Sort priority: lower sorts first.
STATUS_ORDER: dict[RequirementStatus, int] = {
    RequirementStatus.OVERDUE: 0,
    RequirementStatus.DUE_SOON: 1,
    RequirementStatus.PENDING: 2,
    RequirementStatus.COMPLIANT: 3,
    RequirementStatus.EXEMPT: 4,
}


@dataclass(frozen=True)
class PropertyProfile:
    """Physical and administrative attributes of one building.

    Every field is optional. Absent booleans read as False, absent numbers
    as 0, absent text as empty.
    """

    id: str | None = None
    bbl: str | None = None
    stories: int | None = None
    gross_sqft: float | None = None
    building_area_sqft: float | None = None
    dwelling_units: int | None = None
    has_gas: bool | None = None
    has_elevator: bool | None = None
    has_boiler: bool | None = None
    has_sprinkler: bool | None = None
    building_class: str | None = None
    occupancy_group: str | None = None
    year_built: int | None = None
    height_ft: float | None = None
    is_landmark: bool | None = None
    number_of_buildings: int | None = None
    primary_use_group: str | None = None
    use_type: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> PropertyProfile:
        """Build from a property dict (e.g. from DB row or API response)."""
        return cls(
            id=parse_text(d.get("id")),
            bbl=parse_text(d.get("bbl")),
            stories=parse_int(d.get("stories")),
            gross_sqft=parse_float(d.get("gross_sqft")),
            building_area_sqft=parse_float(d.get("building_area_sqft")),
            dwelling_units=parse_int(d.get("dwelling_units")),
            has_gas=parse_bool(d.get("has_gas")),
            has_elevator=parse_bool(d.get("has_elevator")),
            has_boiler=parse_bool(d.get("has_boiler")),
            has_sprinkler=parse_bool(d.get("has_sprinkler")),
            building_class=parse_text(d.get("building_class")),
            occupancy_group=parse_text(d.get("occupancy_group")),
            year_built=parse_int(d.get("year_built")),
            height_ft=parse_float(d.get("height_ft")),
            is_landmark=parse_bool(d.get("is_landmark")),
            number_of_buildings=parse_int(d.get("number_of_buildings")),
            primary_use_group=parse_text(d.get("primary_use_group")),
            use_type=parse_text(d.get("use_type")),
        )


@dataclass(frozen=True)
class LocalLawRequirement:
    """Outcome of one catalog check against one property."""

    local_law: str
    requirement_name: str
    description: str
    applies: bool
    applicability_reason: str
    cycle_year: int | None
    next_due_date: date | None
    filing_deadline: date | None
    penalty_amount: float | None
    penalty_description: str | None
    status: RequirementStatus
    learn_more_url: str
    tooltip: str

    def to_dict(self) -> dict:
        """JSON-ready dict: enum as its value, dates as ISO strings."""
        d = asdict(self)
        d["status"] = self.status.value
        for key in ("next_due_date", "filing_deadline"):
            if d[key] is not None:
                d[key] = d[key].isoformat()
        return d


@dataclass(frozen=True)
class ComplianceSummary:
    """Counts by status. Status counts cover applicable requirements only."""

    total: int = 0
    overdue: int = 0
    due_soon: int = 0
    compliant: int = 0
    pending: int = 0
    exempt: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class LocalLawCheck:
    """A catalog entry: a stable law code tagged onto its evaluator."""

    local_law: str
    evaluate: Callable[[PropertyProfile, datetime], LocalLawRequirement]
