"""
Validation rule implementations.

Provides validators for required fields, fixed-length digit codes, regex
layouts, calendar dates and time-of-day ranges.
"""

from .base_validator import BaseValidator, ValidationError
from .calendar_date_validator import CalendarDateValidator, parse_calendar_date
from .digits_validator import DigitsValidator
from .regex_validator import RegexValidator
from .required_field_validator import RequiredFieldValidator
from .time_range_validator import TimeRangeValidator, parse_hour_minute

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RequiredFieldValidator",
    "DigitsValidator",
    "RegexValidator",
    "CalendarDateValidator",
    "TimeRangeValidator",
    "parse_calendar_date",
    "parse_hour_minute",
]
