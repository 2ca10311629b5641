"""Borough-Block-Lot (BBL) tax parcel identifiers.

A BBL is ten digits: borough (1), block (5), lot (4). The compliance
schedules only use the block segment, and only its last digit.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s\-/]")

BOROUGH_CODES: dict[str, str] = {
    "manhattan": "1",
    "bronx": "2",
    "brooklyn": "3",
    "queens": "4",
    "staten island": "5",
    "1": "1",
    "2": "2",
    "3": "3",
    "4": "4",
    "5": "5",
}

BOROUGH_NAMES: dict[str, str] = {
    "1": "Manhattan",
    "2": "Bronx",
    "3": "Brooklyn",
    "4": "Queens",
    "5": "Staten Island",
}


def normalize_bbl(bbl: str | None) -> str:
    """Strip whitespace and the common '1-01234-0001' separators."""
    if not bbl:
        return ""
    return _SEPARATORS.sub("", str(bbl))


def parse_bbl(bbl: str | None) -> tuple[str, str, str] | None:
    """Split a BBL into (borough, block, lot) strings, or None if malformed."""
    text = normalize_bbl(bbl)
    if len(text) != 10 or not text.isdigit():
        return None
    return text[0], text[1:6], text[6:10]


def get_block(bbl: str | None) -> int | None:
    """Return the 5-digit block segment as an integer.

    Only the block segment has to be well formed; a short or missing lot is
    tolerated. Returns None when the block cannot be read.
    """
    text = normalize_bbl(bbl)
    if len(text) < 6:
        return None
    segment = text[1:6]
    if not segment.isdigit():
        logger.debug("Non-numeric block segment in BBL %r", bbl)
        return None
    return int(segment)


def get_block_last_digit(bbl: str | None) -> int | None:
    """The 'block digit' used to assign inspection sub-cycles."""
    block = get_block(bbl)
    if block is None:
        return None
    return block % 10


def get_borough_code(borough: str | None) -> str:
    return BOROUGH_CODES.get((borough or "").strip().lower(), "0")


def borough_name(code: str) -> str:
    return BOROUGH_NAMES.get(code, code)


def format_bbl(borough: str, block: str, lot: str) -> str:
    """Build a 10-digit BBL from a borough name/code, block and lot."""
    return f"{get_borough_code(borough)}{block.strip().zfill(5)}{lot.strip().zfill(4)}"
