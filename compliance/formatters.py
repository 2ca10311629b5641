"""Markdown formatters for evaluation results.

Shared by the MCP tools and the CLI, and usable by digest/report generators
that render the same results for email or chat.
"""

from __future__ import annotations

from compliance.agencies import agency_display_name, agency_lookup_url
from compliance.aging import AgingDecision
from compliance.complaints import ComplaintCategory
from compliance.local_laws.types import ComplianceSummary, LocalLawRequirement
from compliance.occupancy import COStatus
from compliance.scoring import ComplianceScore
from compliance.severity import SeverityInfo

STATUS_LABELS: dict[str, str] = {
    "overdue": "OVERDUE",
    "due_soon": "DUE SOON",
    "pending": "Pending",
    "compliant": "Compliant",
    "exempt": "Exempt",
}


def _money(amount: float | None) -> str:
    if amount is None:
        return "N/A"
    return f"${amount:,.0f}"


def format_requirement_list(requirements: list[LocalLawRequirement]) -> str:
    """Table of applicable requirements, then a one-line list of exempt ones."""
    applicable = [r for r in requirements if r.applies]
    exempt = [r for r in requirements if not r.applies]

    if not applicable:
        lines = ["No local law requirements apply to this property."]
    else:
        lines = [
            "| Law | Requirement | Status | Due | Penalty |",
            "|-----|-------------|--------|-----|---------|",
        ]
        for r in applicable:
            due = r.next_due_date.isoformat() if r.next_due_date else "—"
            lines.append(
                f"| {r.local_law} | {r.requirement_name} | "
                f"{STATUS_LABELS.get(r.status.value, r.status.value)} | {due} | "
                f"{_money(r.penalty_amount)} |"
            )
        lines.append("")
        for r in applicable:
            lines.append(f"- **{r.local_law}**: {r.applicability_reason}")

    if exempt:
        lines.append("")
        lines.append("**Not applicable:** " + ", ".join(r.local_law for r in exempt))
    return "\n".join(lines)


def format_compliance_summary(summary: ComplianceSummary) -> str:
    return (
        f"**Applicable:** {summary.total} | **Overdue:** {summary.overdue} | "
        f"**Due soon:** {summary.due_soon} | **Pending:** {summary.pending} | "
        f"**Compliant:** {summary.compliant} | **Exempt:** {summary.exempt}"
    )


def format_severity(info: SeverityInfo) -> str:
    lines = [
        f"**Severity:** {info.icon} {info.level.value}",
        f"**Why:** {info.explanation}",
        f"**Recommended action:** {info.recommended_action}",
    ]
    return "\n".join(lines)


def format_aging_decision(decision: AgingDecision, days_open: int | None = None) -> str:
    if decision.suppress:
        line = f"**Suppressed from active counts:** {decision.reason}"
    else:
        line = "**Active:** not suppressed by age."
    if days_open is not None:
        line += f"\n**Days since issue:** {days_open}"
    return line


def format_compliance_score(score: ComplianceScore) -> str:
    v = score.violation_details
    c = score.compliance_details
    r = score.resolution_details
    lines = [
        f"**Score:** {score.score}/100 — **Grade {score.grade}**",
        "",
        "| Component | Points | Inputs |",
        "|-----------|--------|--------|",
        f"| Violations | {score.violation_score}/40 | "
        f"{v.get('critical_open', 0)} critical, {v.get('high_open', 0)} high, "
        f"{v.get('normal_open', 0)} other open |",
        f"| Local laws | {score.compliance_score}/40 | "
        f"{c.get('overdue_count', 0)} overdue, {c.get('pending_count', 0)} pending |",
        f"| Resolution | {score.resolution_score}/20 | "
        f"{r.get('closed_violations', 0)} of {r.get('total_violations', 0)} closed, "
        f"avg {r.get('avg_days_to_close', 0)} days |",
    ]
    return "\n".join(lines)


def format_agency_list(agencies: list[str], bbl: str | None = None) -> str:
    lines = [
        "| Agency | Name | Lookup |",
        "|--------|------|--------|",
    ]
    for code in agencies:
        lines.append(
            f"| {code} | {agency_display_name(code)} | {agency_lookup_url(code, bbl)} |"
        )
    return "\n".join(lines)


def format_co_status(status: COStatus) -> str:
    return f"**Certificate of Occupancy:** {status.icon} {status.message} ({status.severity})"


def format_complaint_category(code: str, category: ComplaintCategory | None) -> str:
    if category is None:
        return f"- **{code}**: Unknown complaint category"
    return (
        f"- **{code}** {category.name} ({category.severity}): {category.description}"
    )
