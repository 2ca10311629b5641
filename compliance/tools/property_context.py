"""Tool: property_context — Enforcement agencies, CO status and complaint codes for a building."""

import logging

from compliance.agencies import determine_applicable_agencies
from compliance.complaints import decode_complaint_category
from compliance.formatters import (
    format_agency_list,
    format_co_status,
    format_complaint_category,
)
from compliance.occupancy import determine_co_status
from compliance.tools._common import load_json_rows, resolve_as_of

logger = logging.getLogger(__name__)


async def property_context(
    bbl: str | None = None,
    primary_use_group: str | None = None,
    dwelling_units: int | None = None,
    year_built: int | None = None,
    co_json: str | None = None,
    complaint_codes: str | None = None,
    as_of: str | None = None,
) -> str:
    """Which NYC agencies issue violations for a building, where to look them
    up, its Certificate of Occupancy status, and what DOB complaint category
    codes mean.

    Args:
        bbl: 10-digit Borough-Block-Lot; makes DOB lookup links parcel-specific.
        primary_use_group: Occupancy group, e.g. 'R-2', 'B', 'M'.
        dwelling_units: Residential unit count (3+ brings in HPD).
        year_built: Year built; pre-1938 buildings need no CO.
        co_json: JSON object from a CO lookup with keys such as has_co,
            is_temporary, is_expired, expiration_date, use_violation, co_number.
        complaint_codes: Comma-separated DOB complaint category codes, e.g. '5,86,1E'.
        as_of: Evaluate as of this ISO date instead of today (YYYY-MM-DD).
    """
    try:
        co_rows = load_json_rows(co_json, "co_json")
    except ValueError as e:
        logger.warning("property_context rejected input: %s", e)
        return str(e)
    if len(co_rows) > 1:
        return "co_json must describe a single certificate lookup."

    today = resolve_as_of(as_of)
    agencies = determine_applicable_agencies(primary_use_group, dwelling_units)
    co_status = determine_co_status(co_rows[0] if co_rows else None, year_built, today)

    title = f"# Property Context: {bbl}" if bbl else "# Property Context"
    lines = [
        title,
        f"*As of {today.isoformat()}*\n",
        format_co_status(co_status),
        "",
        "## Agencies\n",
        format_agency_list(agencies, bbl),
    ]

    codes = [c.strip() for c in (complaint_codes or "").split(",") if c.strip()]
    if codes:
        lines.append("\n## Complaint Categories\n")
        for code in codes:
            lines.append(format_complaint_category(code, decode_complaint_category(code)))
    return "\n".join(lines)
