"""Shared argument handling for the compliance tools."""

from __future__ import annotations

import json
import logging
import os
from datetime import date

from compliance.parsing import parse_date

logger = logging.getLogger(__name__)


def resolve_as_of(as_of: str | None = None) -> date:
    """Evaluation date: explicit argument, else COMPLIANCE_TODAY, else today.

    Unparseable values fall through to the next source.
    """
    explicit = parse_date(as_of)
    if explicit is not None:
        return explicit
    if as_of:
        logger.warning("Ignoring unparseable as_of date %r", as_of)
    configured = parse_date(os.environ.get("COMPLIANCE_TODAY"))
    if configured is not None:
        return configured
    return date.today()


def load_json_rows(raw: str | None, label: str) -> list[dict]:
    """Parse a JSON object or array of objects into a list of dicts.

    Raises ValueError with a user-facing message on bad input.
    """
    if not raw or not raw.strip():
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{label} is not valid JSON ({e.msg}).") from e
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise ValueError(f"{label} must be a JSON object or an array of objects.")
    return data
