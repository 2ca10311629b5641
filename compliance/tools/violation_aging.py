"""Tool: violation_aging — Should an old open violation drop out of active counts?"""

import logging

from compliance.aging import AGING_RULES, days_since_issue, should_suppress_violation
from compliance.formatters import format_aging_decision
from compliance.violations import ViolationRecord
from compliance.tools._common import resolve_as_of

logger = logging.getLogger(__name__)


async def violation_aging(
    agency: str,
    issued_date: str,
    status: str = "open",
    as_of: str | None = None,
) -> str:
    """Check whether an open violation is old enough that the agency record is
    probably stale (ECB > 2 years, DOB/HPD > 3 years).

    Args:
        agency: Issuing agency code (ECB, DOB, HPD, ...).
        issued_date: Issue date, YYYY-MM-DD.
        status: Current violation status (only 'open' can be suppressed).
        as_of: Evaluate as of this ISO date instead of today (YYYY-MM-DD).
    """
    violation = ViolationRecord.from_dict({
        "agency": agency,
        "issued_date": issued_date,
        "status": status,
    })
    if violation.issued_date is None:
        logger.warning("violation_aging: unparseable issued_date %r", issued_date)
        return f"Could not read issued_date **{issued_date}** — use YYYY-MM-DD."

    today = resolve_as_of(as_of)
    decision = should_suppress_violation(violation, today)
    days = days_since_issue(violation, today)

    lines = [
        f"# Violation Aging: {violation.agency or 'Unknown agency'}\n",
        f"*As of {today.isoformat()}*\n",
        format_aging_decision(decision, days),
    ]
    if not any(rule.agency == violation.agency for rule in AGING_RULES):
        lines.append(f"\n{violation.agency or 'This agency'} has no aging rule; "
                     "its violations are never suppressed by age.")
    return "\n".join(lines)
