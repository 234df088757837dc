"""
Layout of a wristband code: Event/Location/Zone/Date/Time/Wristband number.
"""

SEPARATOR = "/"

# Field names in positional order; also the order fields are validated in
FIELD_ORDER = ("event", "location", "zone", "date", "time", "wristband_id")

EXPECTED_PARTS = len(FIELD_ORDER)

LAYOUT_DESCRIPTION = "Event/Location/Zone/Date/Time/Wristband number"

FIELD_DESCRIPTIONS = {
    "event": "Event code (4 numeric digits)",
    "location": "Location code (4 numeric digits)",
    "zone": "Zone code (2 numeric digits)",
    "date": "Event date (YYYY-MM-DD format)",
    "time": "Event time (HH:MM format)",
    "wristband_id": "Unique wristband number (8 numeric digits)",
}


def get_field_descriptions() -> dict[str, str]:
    """Human-readable description of each field, in layout order."""
    return dict(FIELD_DESCRIPTIONS)
