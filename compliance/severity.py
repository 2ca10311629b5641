"""Violation Severity Classifier — Critical / High / Medium / Low.

Pure functions, no database dependency. Classification is an ordered cascade;
the first matching step wins:
  1. Stop-work or vacate order flag -> Critical (flag-specific wording)
  2. Keyword rules over description + type + class + stored severity hint,
     evaluated top to bottom: Critical, High (or FDNY-issued), Medium
  3. Penalty of $5,000 or more -> Medium
  4. Everything else -> Low

Keyword lists overlap ("fire escape" is critical, "fire alarm" is high,
"permit" is medium but "no permit" is critical), so rule order is the only
thing that resolves them. Keep SEVERITY_RULES as an ordered tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from compliance.violations import ViolationRecord


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

class SeverityLevel(str, Enum):
    """Severity levels, most severe first."""

    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class SeverityInfo:
    """Output of the severity classifier."""

    level: SeverityLevel
    color: str
    bg_color: str
    border_color: str
    icon: str
    explanation: str
    recommended_action: str


@dataclass(frozen=True)
class SeverityRule:
    """One step of the keyword cascade."""

    level: SeverityLevel
    keywords: tuple[str, ...]
    explanation: str
    recommended_action: str
    agencies: tuple[str, ...] = ()

    def matches(self, text: str, agency: str) -> bool:
        if any(kw in text for kw in self.keywords):
            return True
        return agency in self.agencies


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CRITICAL_KEYWORDS: tuple[str, ...] = (
    "vacate", "stop work", "swo", "unsafe", "work without permit",
    "illegal conversion", "imminent danger", "collapse", "emergency",
    "no permit", "cease", "life safety", "fire escape",
)

HIGH_KEYWORDS: tuple[str, ...] = (
    "safety", "structural", "facade", "ll11", "local law 11",
    "ll196", "local law 196", "scaffold", "sidewalk shed",
    "parapet", "exterior wall", "retaining wall", "failure to maintain",
    "gas", "boiler", "elevator", "sprinkler", "standpipe",
    "means of egress", "fire alarm", "fire suppression",
)

MEDIUM_KEYWORDS: tuple[str, ...] = (
    "complaint", "quality of life", "permit", "noise",
    "construction fence", "signage", "certificate of occupancy",
    "plumbing", "electrical", "hvac", "maintenance",
    "zoning", "alteration", "administrative",
)

# Agencies whose violations are High regardless of wording.
HIGH_SEVERITY_AGENCIES: tuple[str, ...] = ("FDNY",)

HIGH_PENALTY_THRESHOLD = 5000

# level -> (color, bg_color, border_color, icon)
LEVEL_STYLES: dict[SeverityLevel, tuple[str, str, str, str]] = {
    SeverityLevel.CRITICAL: ("text-red-600", "bg-red-500/10", "border-red-200", "🔴"),
    SeverityLevel.HIGH: ("text-orange-600", "bg-orange-500/10", "border-orange-200", "🟠"),
    SeverityLevel.MEDIUM: ("text-yellow-600", "bg-yellow-500/10", "border-yellow-200", "🟡"),
    SeverityLevel.LOW: ("text-blue-600", "bg-blue-500/10", "border-blue-200", "🔵"),
}

_MUTED_BADGE = "bg-muted text-muted-foreground border-muted"

SEVERITY_RULES: tuple[SeverityRule, ...] = (
    SeverityRule(
        level=SeverityLevel.CRITICAL,
        keywords=CRITICAL_KEYWORDS,
        explanation=(
            "This violation involves a serious safety concern or unauthorized work "
            "that requires immediate attention."
        ),
        recommended_action=(
            "Address within 48 hours. Contact your expediter or file corrective "
            "documents with the issuing agency immediately. Failure to act may result "
            "in escalated penalties or criminal referral."
        ),
    ),
    SeverityRule(
        level=SeverityLevel.HIGH,
        keywords=HIGH_KEYWORDS,
        agencies=HIGH_SEVERITY_AGENCIES,
        explanation=(
            "This violation relates to building safety systems, structural integrity, "
            "or fire safety. These typically carry significant penalties if unresolved."
        ),
        recommended_action=(
            "Schedule inspection or file corrective action within 1-2 weeks. Engage a "
            "licensed professional (PE/RA) if structural or facade-related. Track "
            "hearing dates closely."
        ),
    ),
    SeverityRule(
        level=SeverityLevel.MEDIUM,
        keywords=MEDIUM_KEYWORDS,
        explanation=(
            "This violation involves permits, complaints, or maintenance issues. While "
            "not immediately dangerous, unresolved issues may escalate."
        ),
        recommended_action=(
            "Review violation details and prepare response before hearing date. File "
            "necessary permits or corrections. Consider attending ECB hearing to contest "
            "or settle."
        ),
    ),
)

_STOP_WORK_EXPLANATION = (
    "This Stop Work Order halts all construction activity. Continuing work risks "
    "additional penalties and criminal charges."
)
_STOP_WORK_ACTION = (
    "File permit application or correction documents within 48 hours. Schedule DOB "
    "inspection to lift order. Do NOT resume work until SWO is officially rescinded."
)
_VACATE_EXPLANATION = (
    "This Vacate Order requires immediate evacuation. The building or area is deemed "
    "unsafe for occupancy."
)
_VACATE_ACTION = (
    "Ensure all occupants have vacated the affected area. Engage a licensed engineer "
    "to assess conditions. File for re-occupancy after DOB inspection."
)
_PENALTY_ACTION = (
    "Review penalty details and consider filing for a hearing to negotiate reduction. "
    "Ensure underlying condition is corrected to prevent additional daily penalties."
)
_LOW_EXPLANATION = (
    "This is a lower-priority violation. It should still be addressed but poses "
    "minimal immediate risk."
)
_LOW_ACTION = (
    "Add to your compliance tracking queue. Address during next scheduled maintenance "
    "or before permit renewals. Monitor for status changes."
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _info(level: SeverityLevel, explanation: str, recommended_action: str) -> SeverityInfo:
    color, bg_color, border_color, icon = LEVEL_STYLES[level]
    return SeverityInfo(
        level=level,
        color=color,
        bg_color=bg_color,
        border_color=border_color,
        icon=icon,
        explanation=explanation,
        recommended_action=recommended_action,
    )


def _format_dollars(amount: float) -> str:
    if float(amount).is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def severity_text(violation: ViolationRecord) -> str:
    """Lowercased description, type, class and stored hint, space-joined."""
    return " ".join(str(part or "") for part in (
        violation.description_raw,
        violation.violation_type,
        violation.violation_class,
        violation.severity,
    )).lower()


def match_severity_rule(text: str, agency: str = "") -> SeverityRule | None:
    """Return the first keyword rule that matches, in declaration order."""
    agency = (agency or "").strip().upper()
    for rule in SEVERITY_RULES:
        if rule.matches(text, agency):
            return rule
    return None


# ---------------------------------------------------------------------------
# Main classification function
# ---------------------------------------------------------------------------

def calculate_violation_severity(violation: ViolationRecord) -> SeverityInfo:
    """Classify one violation into a severity level with guidance.

    Args:
        violation: ViolationRecord; every optional field may be empty.

    Returns:
        SeverityInfo with level, display styling, explanation and
        recommended action.
    """
    if violation.is_stop_work_order:
        return _info(SeverityLevel.CRITICAL, _STOP_WORK_EXPLANATION, _STOP_WORK_ACTION)
    if violation.is_vacate_order:
        return _info(SeverityLevel.CRITICAL, _VACATE_EXPLANATION, _VACATE_ACTION)

    rule = match_severity_rule(severity_text(violation), violation.agency)
    if rule is not None:
        return _info(rule.level, rule.explanation, rule.recommended_action)

    amount = violation.penalty_amount
    if amount and amount >= HIGH_PENALTY_THRESHOLD:
        explanation = (
            f"This violation carries a significant penalty of {_format_dollars(amount)}. "
            "Prompt resolution may reduce the financial exposure."
        )
        return _info(SeverityLevel.MEDIUM, explanation, _PENALTY_ACTION)

    return _info(SeverityLevel.LOW, _LOW_EXPLANATION, _LOW_ACTION)


def classify_violations(violations: list[ViolationRecord]) -> list[SeverityInfo]:
    """Classify multiple violations. Convenience wrapper."""
    return [calculate_violation_severity(v) for v in violations]


def severity_badge_classes(level: SeverityLevel | str) -> str:
    """Combined background/text/border classes for a severity badge."""
    try:
        style = LEVEL_STYLES[SeverityLevel(level)]
    except ValueError:
        return _MUTED_BADGE
    color, bg_color, border_color, _icon = style
    return f"{bg_color} {color} {border_color}"
