"""Tool: compliance_score — 0-100 compliance score and grade for a property."""

import logging

from compliance.formatters import format_compliance_score
from compliance.local_laws import PropertyProfile, get_applicable_laws
from compliance.scoring import calculate_compliance_score
from compliance.violations import ViolationRecord
from compliance.tools._common import load_json_rows, resolve_as_of

logger = logging.getLogger(__name__)


async def compliance_score(
    violations_json: str | None = None,
    property_json: str | None = None,
    as_of: str | None = None,
) -> str:
    """Score a property's compliance posture (violations 40 pts, local laws
    40 pts, resolution speed 20 pts) and assign a letter grade.

    Args:
        violations_json: JSON array of violation objects with keys such as
            agency, description, severity, status, issued_date,
            is_stop_work_order, is_vacate_order, created_at, closed_at.
        property_json: JSON object with building attributes (bbl, stories,
            building_area_sqft, has_gas, has_elevator, building_class, ...).
            Local laws are evaluated from it; omit to score violations only.
        as_of: Evaluate as of this ISO date instead of today (YYYY-MM-DD).
    """
    try:
        violation_rows = load_json_rows(violations_json, "violations_json")
        property_rows = load_json_rows(property_json, "property_json")
    except ValueError as e:
        logger.warning("compliance_score rejected input: %s", e)
        return str(e)

    if len(property_rows) > 1:
        return "property_json must describe a single property."

    today = resolve_as_of(as_of)
    violations = [ViolationRecord.from_dict(row) for row in violation_rows]
    requirements = []
    if property_rows:
        requirements = get_applicable_laws(PropertyProfile.from_dict(property_rows[0]), today)

    score = calculate_compliance_score(violations, requirements, today)
    lines = [
        "# Compliance Score\n",
        f"*As of {today.isoformat()}*\n",
        format_compliance_score(score),
    ]
    if not property_rows:
        lines.append("\n*No property attributes given; local law component assumes nothing is overdue.*")
    return "\n".join(lines)
