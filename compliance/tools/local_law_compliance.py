"""Tool: local_law_compliance — Which NYC local laws apply to a building, and when they are due."""

import logging

from compliance.formatters import format_compliance_summary, format_requirement_list
from compliance.local_laws import PropertyProfile, get_applicable_laws, get_compliance_summary
from compliance.tools._common import resolve_as_of

logger = logging.getLogger(__name__)


async def local_law_compliance(
    bbl: str | None = None,
    stories: int | None = None,
    gross_sqft: float | None = None,
    building_area_sqft: float | None = None,
    dwelling_units: int | None = None,
    has_gas: bool | None = None,
    has_elevator: bool | None = None,
    has_boiler: bool | None = None,
    has_sprinkler: bool | None = None,
    building_class: str | None = None,
    occupancy_group: str | None = None,
    year_built: int | None = None,
    height_ft: float | None = None,
    is_landmark: bool | None = None,
    number_of_buildings: int | None = None,
    primary_use_group: str | None = None,
    use_type: str | None = None,
    as_of: str | None = None,
) -> str:
    """Evaluate the NYC local law catalog (LL11 facade, LL84/LL97/LL87 energy,
    LL152/LL126/LL33 gas, LL62 elevators, LL77 cranes, LL88 lighting,
    LL26 sprinklers) for one building.

    Args:
        bbl: 10-digit Borough-Block-Lot (e.g., '1012340001'). The block's last
            digit assigns facade, energy audit and gas piping cycles.
        stories: Number of stories.
        gross_sqft: Gross floor area, used when building_area_sqft is absent.
        building_area_sqft: Building floor area.
        dwelling_units: Residential unit count.
        has_gas / has_elevator / has_boiler / has_sprinkler: Building systems.
        building_class: DOF building class (e.g., 'O4' office, 'D1' elevator apartments).
        primary_use_group / use_type: Free-text use, e.g. 'Office', 'Residential'.
        as_of: Evaluate as of this ISO date instead of today (YYYY-MM-DD).

    Returns requirement table with status (overdue/due soon/pending/compliant),
    due dates, penalties and a status summary.
    """
    profile = PropertyProfile(
        bbl=bbl,
        stories=stories,
        gross_sqft=gross_sqft,
        building_area_sqft=building_area_sqft,
        dwelling_units=dwelling_units,
        has_gas=has_gas,
        has_elevator=has_elevator,
        has_boiler=has_boiler,
        has_sprinkler=has_sprinkler,
        building_class=building_class,
        occupancy_group=occupancy_group,
        year_built=year_built,
        height_ft=height_ft,
        is_landmark=is_landmark,
        number_of_buildings=number_of_buildings,
        primary_use_group=primary_use_group,
        use_type=use_type,
    )
    today = resolve_as_of(as_of)
    requirements = get_applicable_laws(profile, today)
    summary = get_compliance_summary(requirements)

    title = f"# Local Law Compliance: {bbl}" if bbl else "# Local Law Compliance"
    lines = [
        title,
        f"*As of {today.isoformat()}*\n",
        format_compliance_summary(summary),
        "",
        format_requirement_list(requirements),
    ]
    return "\n".join(lines)
