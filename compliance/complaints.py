"""DOB complaint category codes.

Official category list from nyc.gov/buildings, each tagged with the severity
used when a complaint is shown alongside violations.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplaintCategory:
    name: str
    description: str
    severity: str  # critical, high, medium, low


def _c(name: str, description: str, severity: str) -> ComplaintCategory:
    return ComplaintCategory(name=name, description=description, severity=severity)


COMPLAINT_CATEGORIES: dict[str, ComplaintCategory] = {
    "1": _c("Accident – Construction/Plumbing", "Construction or plumbing accident on site", "critical"),
    "2": _c("Accident – To Public", "Accident affecting the public", "critical"),
    "3": _c("Adjacent Buildings – Not Protected", "Adjacent buildings not properly protected during construction", "high"),
    "4": _c("After Hours Work – Illegal", "Construction work being done outside permitted hours", "medium"),
    "5": _c("No Permit", "Building/PA/Demo work without required permit", "high"),
    "9": _c("Debris – Excessive", "Excessive debris accumulation on site", "medium"),
    "10": _c("Falling Debris/Building", "Building or debris falling or in danger of falling", "critical"),
    "11": _c("Demolition – No Permit", "Demolition work without permit", "high"),
    "12": _c("Demolition – Unsafe/Illegal", "Unsafe, illegal, or mechanical demolition", "critical"),
    "14": _c("Excavation Undermining", "Excavation undermining adjacent building", "critical"),
    "15": _c("Fence – None/Inadequate", "Construction fence missing or inadequate", "medium"),
    "16": _c("Inadequate Support/Shoring", "Insufficient support or shoring during construction", "critical"),
    "1A": _c("Illegal Conversion – Commercial to Residential", "Commercial building/space illegally converted to dwelling units", "critical"),
    "1C": _c("Disaster Damage Assessment", "Damage assessment request or report", "high"),
    "1D": _c("Con Edison Referral", "Referral from Con Edison for utility-related issue", "high"),
    "1E": _c("Suspended Scaffolds – Dangerous", "Hanging scaffolds without permit, license, or in dangerous condition", "critical"),
    "1G": _c("Stalled Construction Site", "Construction site that has stalled", "medium"),
    "1L": _c("Gas Utility Referral", "Referral from gas utility company", "high"),
    "20": _c("Landmark – Illegal Work", "Illegal work on a landmark building", "high"),
    "21": _c("Safety Net/Guard Rail – Inadequate", "Safety net or guard rail damaged, inadequate, or missing (over 6 stories)", "critical"),
    "23": _c("Sidewalk Shed/Scaffold – Defective", "Sidewalk shed or supported scaffold inadequate, defective, or missing", "high"),
    "27": _c("Auto Repair – Illegal", "Illegal auto repair shop operation", "medium"),
    "28": _c("Building – Danger of Collapse", "Building in danger of collapse", "critical"),
    "29": _c("Building – Vacant/Open/Unguarded", "Vacant building that is open and unguarded", "high"),
    "2A": _c("Posted Notice Tampered", "Posted notice or order removed or tampered with", "high"),
    "2B": _c("Failure to Comply with Vacate Order", "Occupants not complying with vacate order", "critical"),
    "2G": _c("Illegal Sign/Billboard", "Advertising sign, billboard, or poster installed illegally", "medium"),
    "2K": _c("Structurally Compromised Building", "Building structurally compromised per LL33/08", "critical"),
    "2L": _c("Façade – Unsafe (LL11/98)", "Unsafe façade notification under Local Law 11", "critical"),
    "30": _c("Building Shaking/Vibrating", "Building shaking, vibrating, or structural stability affected", "critical"),
    "31": _c("Certificate of Occupancy – None/Illegal", "No Certificate of Occupancy or use contrary to CO", "high"),
    "32": _c("C of O – Not Complied With", "Certificate of Occupancy not being complied with", "high"),
    "33": _c("Commercial Use – Illegal", "Illegal commercial use of building/space", "high"),
    "35": _c("Curb Cut/Driveway – Illegal", "Illegal curb cut, driveway, or carport", "medium"),
    "37": _c("Egress – Locked/Blocked/Improper", "Emergency exit locked, blocked, or improper egress", "critical"),
    "38": _c("Exit Door Not Proper", "Exit door not meeting code requirements", "high"),
    "3A": _c("Illegal/Improper Electrical Work", "Unlicensed or improper electrical work in progress", "high"),
    "40": _c("Falling – Part of Building", "Part of building is falling", "critical"),
    "41": _c("Falling – In Danger Of", "Part of building in danger of falling", "critical"),
    "43": _c("Structural Stability Affected", "Structural stability of building affected", "critical"),
    "45": _c("Illegal Conversion", "Building illegally converted to different use/occupancy", "critical"),
    "48": _c("Residential Use – Illegal", "Illegal residential use of space", "high"),
    "49": _c("Illegal Sign/Awning/Canopy", "Storefront sign, awning, marquee, or canopy installed illegally", "medium"),
    "4A": _c("Illegal Hotel Rooms", "Illegal hotel rooms in residential buildings", "critical"),
    "4B": _c("Professional Certification Audit", "SEP professional certification compliance audit", "medium"),
    "50": _c("Sign Falling/Illegal Erection", "Sign falling or sign erection/display in progress illegally", "high"),
    "52": _c("Sprinkler System – Inadequate", "Sprinkler system inadequate or defective", "high"),
    "53": _c("Vent/Exhaust – Illegal/Improper", "Illegal or improper ventilation or exhaust", "medium"),
    "54": _c("Wall/Retaining Wall – Bulging/Cracked", "Wall or retaining wall is bulging or cracked", "critical"),
    "55": _c("Zoning – Non-Conforming", "Non-conforming use under zoning regulations", "medium"),
    "56": _c("Boiler – Fumes/Smoke/CO", "Boiler producing fumes, smoke, or carbon monoxide", "critical"),
    "57": _c("Boiler – Illegal", "Illegal boiler installation", "high"),
    "58": _c("Boiler – Defective/No Permit", "Boiler defective, inoperative, or without permit", "high"),
    "59": _c("Electrical Wiring – Defective/Exposed", "Defective or exposed electrical wiring in progress", "high"),
    "5G": _c("Illegal/Improper Work In-Progress", "Unlicensed, illegal, or improper work in progress", "high"),
    "62": _c("Elevator – Danger Condition", "Elevator dangerous condition or shaft open/unguarded", "critical"),
    "63": _c("Elevator – Defective/Inoperative", "Elevator defective or inoperative", "high"),
    "65": _c("Gas Hook-Up/Piping – Illegal/Defective", "Illegal or defective gas hook-up or piping", "critical"),
    "66": _c("Plumbing Work – Illegal/No Permit", "Illegal plumbing work or work without permit", "high"),
    "67": _c("Crane – Unsafe/Illegal/No Permit", "Crane without permit, license, or in unsafe condition", "critical"),
    "71": _c("SRO – Illegal Work/No Permit", "Illegal work or occupancy change in Single Room Occupancy building", "high"),
    "73": _c("Failure to Maintain", "Failure to maintain building in safe condition", "medium"),
    "74": _c("Illegal Commercial/Manufacturing Use", "Illegal commercial or manufacturing use in residential zone", "high"),
    "76": _c("Illegal Plumbing Work In-Progress", "Unlicensed or improper plumbing work in progress", "high"),
    "77": _c("Handicap Access Non-Compliance", "Non-compliance with LL58/87 (handicap access requirements)", "medium"),
    "80": _c("Elevator Not Inspected/Illegal", "Elevator not inspected, illegal, or without permit", "high"),
    "81": _c("Elevator Accident", "Elevator accident occurred", "critical"),
    "82": _c("Boiler Accident/Explosion", "Boiler accident or explosion", "critical"),
    "83": _c("Construction Beyond Approved Plans", "Construction contrary to or beyond approved plans/permits", "high"),
    "84": _c("Façade – Defective/Cracking", "Building façade is defective or cracking", "high"),
    "85": _c("Improper Drainage", "Failure to retain water or improper drainage per LL103/89", "medium"),
    "86": _c("Work Contrary to Stop Work Order", "Work being done contrary to a stop work order", "critical"),
    "90": _c("Unlicensed/Illegal Activity", "Unlicensed or illegal activity at building", "high"),
    "91": _c("Site Conditions Endangering Workers", "Site conditions that endanger workers", "critical"),
    "92": _c("Illegal Conversion – Industrial", "Illegal conversion of manufacturing or industrial space", "high"),
    "94": _c("Plumbing – Defective/Leaking", "Plumbing defective, leaking, or not maintained", "medium"),
    "7J": _c("Work Without Permit – Occupied Dwelling", "Work without a permit in an occupied multiple dwelling", "high"),
}


def decode_complaint_category(code: str | None) -> ComplaintCategory | None:
    """Look up a category code, ignoring case and surrounding whitespace."""
    if not code:
        return None
    return COMPLAINT_CATEGORIES.get(code.strip().upper())
