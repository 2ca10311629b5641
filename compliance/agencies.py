"""NYC enforcement agencies: display names, lookup portals, applicability."""

from __future__ import annotations

from compliance.bbl import parse_bbl

AGENCY_DISPLAY_NAMES: dict[str, str] = {
    "DOB": "Dept. of Buildings",
    "ECB": "Environmental Control Board",
    "HPD": "Housing Preservation",
    "FDNY": "Fire Department",
    "DEP": "Environmental Protection",
    "DOT": "Dept. of Transportation",
    "DSNY": "Sanitation",
    "LPC": "Landmarks",
    "DOF": "Dept. of Finance",
}

OATH_SUMMONS_FINDER_URL = "http://a820-ecbticketfinder.nyc.gov/searchHome.action"

# Portals whose URL does not depend on the parcel.
_STATIC_LOOKUP_URLS: dict[str, str] = {
    "ECB": OATH_SUMMONS_FINDER_URL,
    "FDNY": "https://fires.fdnycloud.org/CitizenAccess/",
    "DEP": "https://www1.nyc.gov/site/dep/about/contact-us.page",
    "DOT": "https://nycstreets.net/",
    "DSNY": "https://portal.311.nyc.gov/",
    "LPC": "https://www1.nyc.gov/site/lpc/index.page",
}


def agency_display_name(agency: str) -> str:
    return AGENCY_DISPLAY_NAMES.get(agency, agency)


def agency_lookup_url(agency: str, bbl: str | None = None) -> str:
    """Public lookup page for an agency's violations, parcel-specific where possible."""
    if agency == "DOB":
        parts = parse_bbl(bbl)
        if parts:
            borough, block, lot = parts
            return (
                "https://a810-bisweb.nyc.gov/bisweb/PropertyProfileOverviewServlet"
                f"?boro={borough}&block={block}&lot={lot}"
            )
        return "https://a810-bisweb.nyc.gov/bisweb/bispi00.jsp"
    if agency == "HPD":
        if bbl:
            return "https://hpdonline.nyc.gov/HPDonline/Provide_address.aspx"
        return "https://hpdonline.nyc.gov/HPDonline/"
    if agency == "DOF":
        if bbl:
            return "https://a836-pts-access.nyc.gov/care/search/commonsearch.aspx?mode=persprop"
        return "https://www1.nyc.gov/site/finance/taxes/property.page"
    return _STATIC_LOOKUP_URLS.get(agency, OATH_SUMMONS_FINDER_URL)


def determine_applicable_agencies(
    primary_use_group: str | None,
    dwelling_units: int | None,
) -> list[str]:
    """Agencies whose violation feeds are relevant to a property.

    HPD only covers multi-family residential buildings.
    """
    occupancy = (primary_use_group or "").upper()
    units = dwelling_units or 0

    if "R-2" in occupancy or "R-1" in occupancy or units >= 3:
        return ["DOB", "ECB", "HPD", "FDNY"]
    if "M" in occupancy or "B" in occupancy:
        return ["DOB", "ECB", "FDNY"]
    if "R-3" in occupancy and units < 3:
        return ["DOB", "ECB", "FDNY"]
    return ["DOB", "ECB"]
