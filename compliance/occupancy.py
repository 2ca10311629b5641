"""Certificate of Occupancy status for a building."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time

from compliance.parsing import parse_bool, parse_date

# Buildings completed before this year predate the CO requirement.
CO_REQUIRED_FROM_YEAR = 1938


@dataclass(frozen=True)
class COStatus:
    status: str  # valid, temporary, expired_tco, missing, pre_1938, use_violation
    icon: str
    message: str
    severity: str  # ok, warning, critical


def determine_co_status(
    co_data: dict | None,
    year_built: int | None = None,
    today: date | datetime | None = None,
) -> COStatus:
    """Derive CO status from a CO lookup row.

    Recognized keys: has_co, is_temporary, is_expired, expiration_date,
    use_violation, co_number.
    """
    if not co_data or not parse_bool(co_data.get("has_co")):
        if year_built and year_built < CO_REQUIRED_FROM_YEAR:
            return COStatus("pre_1938", "🏛️", "Pre-1938 building", "ok")
        return COStatus("missing", "🔴", "No Certificate of Occupancy", "critical")

    is_temporary = parse_bool(co_data.get("is_temporary"))
    is_expired = parse_bool(co_data.get("is_expired"))

    if is_temporary and is_expired:
        return COStatus("expired_tco", "🔴", "Temporary CO expired", "critical")

    expiration = parse_date(co_data.get("expiration_date"))
    if is_temporary and expiration is not None:
        if today is None:
            now = datetime.now()
        elif isinstance(today, datetime):
            now = today
        else:
            now = datetime.combine(today, time.min)
        remaining = datetime.combine(expiration, time.min) - now
        days_until = math.ceil(remaining.total_seconds() / 86400)
        return COStatus("temporary", "🟡", f"TCO expires in {days_until} days", "warning")

    if parse_bool(co_data.get("use_violation")):
        return COStatus("use_violation", "🟡", "Use violation detected", "warning")

    co_number = co_data.get("co_number")
    message = f"Valid CO #{co_number}" if co_number else "Valid CO"
    return COStatus("valid", "🟢", message, "ok")
