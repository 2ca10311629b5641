"""Tool: violation_severity — Classify a violation as Critical/High/Medium/Low."""

import logging

from compliance.agencies import agency_display_name, agency_lookup_url
from compliance.formatters import format_severity
from compliance.severity import calculate_violation_severity
from compliance.violations import ViolationRecord

logger = logging.getLogger(__name__)


async def violation_severity(
    agency: str | None = None,
    description: str | None = None,
    violation_type: str | None = None,
    violation_class: str | None = None,
    severity_hint: str | None = None,
    is_stop_work_order: bool = False,
    is_vacate_order: bool = False,
    penalty_amount: float | None = None,
) -> str:
    """Classify a NYC building violation by severity with an explanation and
    recommended next step.

    Args:
        agency: Issuing agency code (DOB, ECB, HPD, FDNY, ...).
        description: Violation description text.
        violation_type: Agency violation type (e.g., 'LL6291', 'ACC1').
        violation_class: Violation class (e.g., HPD class 'C').
        severity_hint: Severity stored by the source feed, if any.
        is_stop_work_order: Violation is a Stop Work Order.
        is_vacate_order: Violation is a Vacate Order.
        penalty_amount: Penalty imposed in dollars.
    """
    if not any([agency, description, violation_type, violation_class, severity_hint,
                is_stop_work_order, is_vacate_order, penalty_amount]):
        logger.warning("violation_severity called with no violation details")
        return ("Please provide at least a description, agency, violation type, "
                "or order flag to classify.")

    violation = ViolationRecord.from_dict({
        "agency": agency,
        "description_raw": description,
        "violation_type": violation_type,
        "violation_class": violation_class,
        "severity": severity_hint,
        "is_stop_work_order": is_stop_work_order,
        "is_vacate_order": is_vacate_order,
        "penalty_amount": penalty_amount,
    })
    info = calculate_violation_severity(violation)

    lines = ["# Violation Severity\n", format_severity(info)]
    if violation.agency:
        lines.append(f"**Agency:** {violation.agency} ({agency_display_name(violation.agency)})")
        lines.append(f"**Look up:** {agency_lookup_url(violation.agency)}")
    return "\n".join(lines)
