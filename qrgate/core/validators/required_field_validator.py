"""
RequiredFieldValidator - ensures a field is present and not empty.
"""

from typing import Any, Dict
from .base_validator import BaseValidator


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a required field is present and not empty.

    Fails if:
    - Field is missing from the record
    - Field value is None
    - Field value is an empty string
    """

    def validate(self, value: Any, record: Dict[str, Any]) -> None:
        """
        Validate that the field is present and not empty.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If field is missing, None, or empty string
        """
        if self.field_name not in record or value is None or value == "":
            raise self.fail(f"{self.label} field empty (position {self.position})")

    @property
    def rule_type(self) -> str:
        return "required_field"

