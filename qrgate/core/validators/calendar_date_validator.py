"""
CalendarDateValidator - validates that a value names a real calendar date.
"""

import re
from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser

from .base_validator import BaseValidator

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# dateutil fills missing parts from its default; two defaults that differ in
# year, month and day expose a value that does not name a full date
FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


class CalendarDateValidator(BaseValidator):
    """
    Validates that a field can be interpreted as a calendar date.

    Canonical YYYY-MM-DD values are checked strictly, so 2024-02-30 fails.
    Anything else goes through dateutil's lenient parser and must still
    supply a year, month and day, so "10:30" or "Monday" are rejected.
    Reporting the non-canonical layout is left to a separate regex rule.
    """

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is a real calendar date.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If the value cannot be read as a date
        """
        if value is None or value == "":
            return

        value_str = str(value)
        if parse_calendar_date(value_str) is None:
            raise self.fail(f'Invalid {self.label.lower()}: "{value_str}"')

    @property
    def rule_type(self) -> str:
        return "calendar_date"


def parse_calendar_date(value: str) -> date | None:
    """
    Interpret a string as a calendar date.

    Returns:
        The date, or None when the string does not name one
    """
    if ISO_DATE_PATTERN.match(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            return None

    try:
        first, second = (date_parser.parse(value, default=fill).date() for fill in FILL_DEFAULTS)
    except (date_parser.ParserError, ValueError, OverflowError):
        return None

    return first if first == second else None
