"""
Parse result models: the success/failure union returned by the parser.
"""

from enum import Enum
from typing import List, Literal, Union

from pydantic import BaseModel, Field

from .parsed_record import ParsedRecord
from .validation_outcome import ValidationOutcome


class QRErrorCode(str, Enum):
    """Error codes reported to consumers of parse failures."""

    EMPTY_STRING = "EMPTY_STRING"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_FIELD_COUNT = "INVALID_FIELD_COUNT"
    INVALID_EVENTO = "INVALID_EVENTO"
    INVALID_UBICACION = "INVALID_UBICACION"
    INVALID_ZONA = "INVALID_ZONA"
    INVALID_FECHA = "INVALID_FECHA"
    INVALID_HORA = "INVALID_HORA"
    INVALID_BRAZALETE = "INVALID_BRAZALETE"
    PARSING_ERROR = "PARSING_ERROR"


class ParseErrorKind(str, Enum):
    """Fatal failure categories."""

    EMPTY_INPUT = "EmptyInput"
    FIELD_COUNT_MISMATCH = "FieldCountMismatch"
    FIELD_VALIDATION_FAILED = "FieldValidationFailed"
    INTERNAL_PARSING_ERROR = "InternalParsingError"


class ParseError(BaseModel):
    """
    Why a raw code could not be turned into a ParsedRecord.

    Attributes:
        kind: Failure category
        code: Classified error code
        message: Human-readable text, shown verbatim by callers
        errors: Every field error (FieldValidationFailed only)
        warnings: Warnings collected alongside the errors
        expected_parts: Required segment count (FieldCountMismatch only)
        actual_parts: Segment count found (FieldCountMismatch only)
    """

    kind: ParseErrorKind
    code: QRErrorCode
    message: str
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    expected_parts: int | None = None
    actual_parts: int | None = None

    class Config:
        frozen = True


class ParseSuccess(BaseModel):
    """Successful parse: the record and any non-blocking warnings."""

    success: Literal[True] = True
    record: ParsedRecord
    warnings: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class ParseFailure(BaseModel):
    """Failed parse: the classified error."""

    success: Literal[False] = False
    error: ParseError

    @property
    def code(self) -> QRErrorCode:
        return self.error.code

    class Config:
        frozen = True


ParseResult = Union[ParseSuccess, ParseFailure]


class ScanCheck(BaseModel):
    """
    Result of running parse and validation back to back for one scan.

    Attributes:
        result: The parser's success or failure
        outcome: Validation outcome of the same fields
    """

    result: Union[ParseSuccess, ParseFailure]
    outcome: ValidationOutcome

    @property
    def ready_for_submission(self) -> bool:
        """True only when the code parsed and its outcome is valid."""
        return isinstance(self.result, ParseSuccess) and self.outcome.valid

    @property
    def record(self) -> ParsedRecord | None:
        return self.result.record if isinstance(self.result, ParseSuccess) else None
