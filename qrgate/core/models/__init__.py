"""
Core data models for wristband code decoding.

All models use Pydantic for runtime validation and type safety.
"""

from .parse_result import (
    ParseError,
    ParseErrorKind,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    QRErrorCode,
    ScanCheck,
)
from .parsed_record import ParsedRecord
from .parsing_stats import ParsingStats
from .submission_payload import UNKNOWN_OPERATOR, SubmissionPayload
from .validation_outcome import ValidationOutcome

__all__ = [
    "ParsedRecord",
    "ValidationOutcome",
    "SubmissionPayload",
    "UNKNOWN_OPERATOR",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "QRErrorCode",
    "ScanCheck",
    "ParsingStats",
]
