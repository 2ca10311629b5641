"""Local law applicability engine — catalog checks, sorting, summary."""

from compliance.local_laws.types import (
    ComplianceSummary,
    LocalLawCheck,
    LocalLawRequirement,
    PropertyProfile,
    RequirementStatus,
    STATUS_ORDER,
)
from compliance.local_laws.rules import LOCAL_LAW_CATALOG
from compliance.local_laws.engine import (
    evaluate_catalog,
    get_applicable_laws,
    get_compliance_summary,
    sort_requirements,
)

__all__ = [
    "ComplianceSummary",
    "LocalLawCheck",
    "LocalLawRequirement",
    "PropertyProfile",
    "RequirementStatus",
    "STATUS_ORDER",
    "LOCAL_LAW_CATALOG",
    "evaluate_catalog",
    "get_applicable_laws",
    "get_compliance_summary",
    "sort_requirements",
]
