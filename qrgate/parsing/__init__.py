"""
Decoding and validation of wristband QR codes.
"""

from .error_codes import derive_error_code
from .layout import (
    EXPECTED_PARTS,
    FIELD_DESCRIPTIONS,
    FIELD_ORDER,
    LAYOUT_DESCRIPTION,
    SEPARATOR,
    get_field_descriptions,
)
from .parser import parse, parse_and_validate
from .validator import get_default_engine, validate, validate_record

__all__ = [
    "parse",
    "parse_and_validate",
    "validate",
    "validate_record",
    "get_default_engine",
    "derive_error_code",
    "get_field_descriptions",
    "FIELD_DESCRIPTIONS",
    "FIELD_ORDER",
    "EXPECTED_PARTS",
    "LAYOUT_DESCRIPTION",
    "SEPARATOR",
]
