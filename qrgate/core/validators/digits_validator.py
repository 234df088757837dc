"""
DigitsValidator - validates that a field is a fixed-length run of digits.
"""

import re
from typing import Any

from .base_validator import BaseValidator


class DigitsValidator(BaseValidator):
    """
    Validates that a field holds exactly N ASCII digits.

    Parameters:
    - digits: Required digit count (positive integer)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        digits = self.parameters.get("digits")
        if not isinstance(digits, int) or isinstance(digits, bool) or digits < 1:
            raise ValueError(f"DigitsValidator requires a positive integer 'digits' parameter, got {digits!r}")

        self.digits = digits
        self.pattern = re.compile(rf"[0-9]{{{digits}}}")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is exactly `digits` digits long.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If the value has the wrong length or non-digit content
        """
        # Emptiness is reported by the required_field rule
        if value is None or value == "":
            return

        value_str = str(value)
        if not self.pattern.fullmatch(value_str):
            raise self.fail(
                f"{self.label} field must have exactly {self.digits} digits, "
                f'received: "{value_str}" ({len(value_str)} characters)'
            )

    @property
    def rule_type(self) -> str:
        return "digits"
