#!/usr/bin/env python3
"""Evaluate properties and violations from JSON files on the command line.

Usage:
    python -m compliance.cli laws property.json [--today 2026-01-15]
    python -m compliance.cli severity violations.json
    python -m compliance.cli aging violations.json [--today 2026-01-15]
    python -m compliance.cli score violations.json --property property.json
    python -m compliance.cli context property.json [--today 2026-01-15]

Each input file holds one JSON object or an array of objects.
"""

import argparse
import json
import logging
import os
import sys
from datetime import date

from compliance.agencies import determine_applicable_agencies
from compliance.aging import days_since_issue, should_suppress_violation
from compliance.complaints import decode_complaint_category
from compliance.formatters import (
    format_agency_list,
    format_aging_decision,
    format_co_status,
    format_compliance_score,
    format_complaint_category,
    format_compliance_summary,
    format_requirement_list,
    format_severity,
)
from compliance.local_laws import PropertyProfile, get_applicable_laws, get_compliance_summary
from compliance.occupancy import determine_co_status
from compliance.parsing import parse_date
from compliance.scoring import calculate_compliance_score
from compliance.severity import calculate_violation_severity
from compliance.violations import ViolationRecord

logger = logging.getLogger(__name__)


def _load_rows(path: str) -> list[dict]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise ValueError(f"{path}: expected a JSON object or an array of objects")
    return data


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def _default_today() -> date | None:
    return parse_date(os.environ.get("COMPLIANCE_TODAY"))


def cmd_laws(args) -> None:
    for row in _load_rows(args.file):
        profile = PropertyProfile.from_dict(row)
        requirements = get_applicable_laws(profile, args.today)
        print(f"## {profile.id or profile.bbl or 'Property'}\n")
        print(format_compliance_summary(get_compliance_summary(requirements)))
        print()
        print(format_requirement_list(requirements))
        print()


def cmd_severity(args) -> None:
    for row in _load_rows(args.file):
        violation = ViolationRecord.from_dict(row)
        print(f"## {violation.violation_number or violation.agency or 'Violation'}\n")
        print(format_severity(calculate_violation_severity(violation)))
        print()


def cmd_aging(args) -> None:
    today = args.today or date.today()
    for row in _load_rows(args.file):
        violation = ViolationRecord.from_dict(row)
        decision = should_suppress_violation(violation, today)
        print(f"## {violation.violation_number or violation.agency or 'Violation'}\n")
        print(format_aging_decision(decision, days_since_issue(violation, today)))
        print()


def cmd_score(args) -> None:
    today = args.today or date.today()
    violations = [ViolationRecord.from_dict(row) for row in _load_rows(args.file)]
    requirements = []
    if args.property:
        rows = _load_rows(args.property)
        if len(rows) != 1:
            raise ValueError(f"{args.property}: expected exactly one property")
        requirements = get_applicable_laws(PropertyProfile.from_dict(rows[0]), today)
    print(format_compliance_score(calculate_compliance_score(violations, requirements, today)))


def cmd_context(args) -> None:
    today = args.today or date.today()
    for row in _load_rows(args.file):
        profile = PropertyProfile.from_dict(row)
        co_data = row.get("certificate_of_occupancy")
        if co_data is not None and not isinstance(co_data, dict):
            raise ValueError(f"{args.file}: certificate_of_occupancy must be an object")
        codes = row.get("complaint_codes") or []
        if isinstance(codes, str):
            codes = codes.split(",")

        agencies = determine_applicable_agencies(profile.primary_use_group, profile.dwelling_units)
        print(f"## {profile.id or profile.bbl or 'Property'}\n")
        print(format_co_status(determine_co_status(co_data, profile.year_built, today)))
        print()
        print(format_agency_list(agencies, profile.bbl))
        codes = [str(c).strip() for c in codes if str(c).strip()]
        if codes:
            print()
            for code in codes:
                print(format_complaint_category(code, decode_complaint_category(code)))
        print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compliance",
        description="NYC property compliance evaluation",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--today", type=_parse_today, default=_default_today(),
                        help="Evaluate as of this date (YYYY-MM-DD)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_laws = sub.add_parser("laws", parents=[common], help="Local law applicability and due dates")
    p_laws.add_argument("file", help="JSON file with property attributes")
    p_laws.set_defaults(func=cmd_laws)

    p_sev = sub.add_parser("severity", parents=[common], help="Classify violation severity")
    p_sev.add_argument("file", help="JSON file with violation records")
    p_sev.set_defaults(func=cmd_severity)

    p_aging = sub.add_parser("aging", parents=[common], help="Check aged open violations")
    p_aging.add_argument("file", help="JSON file with violation records")
    p_aging.set_defaults(func=cmd_aging)

    p_score = sub.add_parser("score", parents=[common], help="Property compliance score")
    p_score.add_argument("file", help="JSON file with violation records")
    p_score.add_argument("--property", help="JSON file with property attributes")
    p_score.set_defaults(func=cmd_score)

    p_ctx = sub.add_parser("context", parents=[common],
                           help="Agencies, CO status and complaint codes")
    p_ctx.add_argument("file", help="JSON file with property attributes")
    p_ctx.set_defaults(func=cmd_context)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except (OSError, ValueError) as e:
        logger.error("Evaluation failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
