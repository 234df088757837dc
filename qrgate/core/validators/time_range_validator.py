"""
TimeRangeValidator - validates hour and minute components of a time of day.
"""

from typing import Any

from .base_validator import BaseValidator


class TimeRangeValidator(BaseValidator):
    """
    Validates that an "H:M" value has an hour and minute in range.

    The value is split on ':' and the first two components are read as
    integers. Extra components (seconds) are ignored.

    Parameters:
    - max_hour: Largest accepted hour (default 23)
    - max_minute: Largest accepted minute (default 59)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.max_hour = self.parameters.get("max_hour", 23)
        self.max_minute = self.parameters.get("max_minute", 59)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate the hour and minute of the value.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If a component is missing, not a number, or out of range
        """
        if value is None or value == "":
            return

        value_str = str(value)
        if parse_hour_minute(value_str, self.max_hour, self.max_minute) is None:
            raise self.fail(f'Invalid {self.label.lower()}: "{value_str}"')

    @property
    def rule_type(self) -> str:
        return "time_range"


def parse_hour_minute(value: str, max_hour: int = 23, max_minute: int = 59) -> tuple[int, int] | None:
    """
    Split a time string into (hour, minute).

    Returns:
        The pair, or None when either part is missing, non-numeric or out of range
    """
    parts = value.split(":")
    if len(parts) < 2:
        return None

    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return None

    if not 0 <= hours <= max_hour or not 0 <= minutes <= max_minute:
        return None

    return hours, minutes
