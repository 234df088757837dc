"""
ParsingStats model: aggregate view over a batch of parse results.
"""

from pydantic import BaseModel, Field


class ParsingStats(BaseModel):
    """
    Totals over a set of parse attempts.

    Attributes:
        total: Number of attempts
        successful: Attempts that produced a record
        failed: Attempts that did not
        success_rate: successful / total as a percentage (0 when total is 0)
        error_breakdown: Failure count per error code
    """

    total: int = Field(..., ge=0)
    successful: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    success_rate: float = Field(..., ge=0.0, le=100.0)
    error_breakdown: dict[str, int] = Field(default_factory=dict)
