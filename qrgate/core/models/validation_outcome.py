"""
ValidationOutcome model representing the result of checking the six raw fields (ephemeral).
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class ValidationOutcome(BaseModel):
    """
    Outcome of validating the fields of one scanned code.

    Attributes:
        valid: True when no field broke a hard rule
        errors: Hard failures, in field-check order
        warnings: Non-blocking layout deviations, in field-check order
    """

    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @field_validator('errors')
    @classmethod
    def check_valid_consistency(cls, v, info):
        """Validate that valid is exactly 'no errors'."""
        valid = info.data.get('valid')
        if valid and len(v) > 0:
            raise ValueError("valid=True but errors is not empty")
        if valid is False and len(v) == 0:
            raise ValueError("valid=False but errors is empty")
        return v

    @classmethod
    def from_messages(cls, errors: List[str], warnings: List[str]) -> "ValidationOutcome":
        """Build an outcome whose validity follows from the error list."""
        return cls(valid=len(errors) == 0, errors=list(errors), warnings=list(warnings))

    @property
    def first_error(self) -> str | None:
        return self.errors[0] if self.errors else None

    class Config:
        json_schema_extra = {
            "example": {
                "valid": False,
                "errors": [
                    'Event field must have exactly 4 digits, received: "123" (3 characters)'
                ],
                "warnings": [
                    'Non-standard time format: "9:05" (expected HH:MM)'
                ],
            }
        }
