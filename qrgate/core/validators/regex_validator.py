"""
RegexValidator - validates field values against a regular expression pattern.
"""

import re
from re import Pattern
from typing import Any

from .base_validator import BaseValidator


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression pattern.

    Parameters:
    - pattern: Regular expression pattern (string or compiled Pattern)
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    - message: Optional message template, formatted with {label} and {value}
    """

    DEFAULT_MESSAGE = '{label} value "{value}" does not match the expected format'

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern")
        if not pattern:
            raise ValueError("RegexValidator requires 'pattern' parameter")

        flags = self.parameters.get("flags", 0)

        try:
            if isinstance(pattern, str):
                self.pattern: Pattern = re.compile(pattern, flags)
            elif isinstance(pattern, Pattern):
                self.pattern = pattern
            else:
                raise ValueError(f"Pattern must be string or compiled Pattern, got {type(pattern)}")
        except re.error as e:
            raise ValueError(f"Invalid regex pattern: {e}")

        self.message = self.parameters.get("message", self.DEFAULT_MESSAGE)

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value matches the regex pattern.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If value doesn't match the pattern
        """
        if value is None or value == "":
            return

        value_str = value if isinstance(value, str) else str(value)

        if not self.pattern.match(value_str):
            raise self.fail(self.message.format(label=self.label, value=value_str))

    @property
    def rule_type(self) -> str:
        return "regex"
