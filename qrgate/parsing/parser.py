"""
Parser for wristband codes.

Turns a raw scanned string into a ParsedRecord, or a ParseFailure that
says why not. Nothing raised while parsing reaches the caller.
"""

from qrgate.core.models import (
    ParsedRecord,
    ParseError,
    ParseErrorKind,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    QRErrorCode,
    ScanCheck,
    ValidationOutcome,
)
from qrgate.core.rules import RuleEngine, outcome_from_violations
from qrgate.observability.logger import get_logger
from qrgate.observability.metrics import (
    parse_duration_seconds,
    record_parse_failure,
    record_parse_success,
    track_duration,
)

from .error_codes import derive_error_code
from .layout import EXPECTED_PARTS, FIELD_ORDER, LAYOUT_DESCRIPTION, SEPARATOR
from .validator import get_default_engine, validate_record

logger = get_logger(__name__)


def parse(raw_code: str | None, engine: RuleEngine | None = None) -> ParseResult:
    """
    Parse a raw wristband code.

    Expected format: Event/Location/Zone/Date/Time/Wristband number, e.g.
    1234/5678/01/2024-01-15/10:30/12345678

    Args:
        raw_code: The scanned or typed string
        engine: Rule engine to validate with (defaults to the wristband rules)

    Returns:
        ParseSuccess with the record and warnings, or ParseFailure
    """
    try:
        with track_duration(parse_duration_seconds, operation="parse"):
            result = _parse(raw_code, engine or get_default_engine())
    except Exception as e:
        logger.error(
            "Unexpected error while parsing QR code",
            extra={"raw_code": repr(raw_code)},
            exc_info=True,
        )
        result = _failure(
            ParseErrorKind.INTERNAL_PARSING_ERROR,
            QRErrorCode.PARSING_ERROR,
            f"Error processing QR code: {e}",
        )
        record_parse_failure(result.error.code.value)

    return result


def _parse(raw_code: str | None, engine: RuleEngine) -> ParseResult:
    clean = raw_code.strip() if raw_code is not None else ""

    if not clean:
        result = _failure(ParseErrorKind.EMPTY_INPUT, QRErrorCode.EMPTY_STRING, "Empty or null QR string")
        logger.warning("Empty QR code", extra={"error_code": result.error.code.value})
        record_parse_failure(result.error.code.value)
        return result

    parts = clean.split(SEPARATOR)

    if len(parts) != EXPECTED_PARTS:
        result = _failure(
            ParseErrorKind.FIELD_COUNT_MISMATCH,
            QRErrorCode.INVALID_FIELD_COUNT,
            f"Invalid QR format. Expected {EXPECTED_PARTS} parts separated by '{SEPARATOR}', "
            f"found {len(parts)}. Expected format: {LAYOUT_DESCRIPTION}",
            expected_parts=EXPECTED_PARTS,
            actual_parts=len(parts),
        )
        logger.warning(
            "QR code has wrong number of fields",
            extra={"raw_code": clean, "error_code": result.error.code.value, "actual_parts": len(parts)},
        )
        record_parse_failure(result.error.code.value)
        return result

    fields = dict(zip(FIELD_ORDER, (part.strip() for part in parts)))
    logger.debug("Extracted QR fields", extra={"fields": fields})

    violations = engine.check(fields)
    outcome = outcome_from_violations(violations)
    warning_fields = [v.field_name for v in violations if v.severity != "error"]

    for warning in outcome.warnings:
        logger.warning(warning, extra={"raw_code": clean})

    if not outcome.valid:
        code = derive_error_code(outcome.errors[0])
        result = _failure(
            ParseErrorKind.FIELD_VALIDATION_FAILED,
            code,
            ", ".join(outcome.errors),
            errors=outcome.errors,
            warnings=outcome.warnings,
        )
        logger.warning(
            "QR code failed validation",
            extra={"raw_code": clean, "error_code": code.value, "errors": outcome.errors},
        )
        record_parse_failure(code.value, warning_fields)
        return result

    record = ParsedRecord(**fields, raw=SEPARATOR.join(fields.values()))
    logger.info(
        "QR code parsed",
        extra={"wristband_id": record.wristband_id, "warning_count": len(outcome.warnings)},
    )
    record_parse_success(warning_fields)
    return ParseSuccess(record=record, warnings=outcome.warnings)


def _failure(kind: ParseErrorKind, code: QRErrorCode, message: str, **details) -> ParseFailure:
    return ParseFailure(error=ParseError(kind=kind, code=code, message=message, **details))


def parse_and_validate(raw_code: str | None, engine: RuleEngine | None = None) -> ScanCheck:
    """
    Parse a code and validate the resulting record.

    Used by the submission flow, which only proceeds when
    ScanCheck.ready_for_submission is true.

    Args:
        raw_code: The scanned or typed string
        engine: Rule engine to use (defaults to the wristband rules)

    Returns:
        ScanCheck pairing the parse result with its validation outcome
    """
    result = parse(raw_code, engine)

    if isinstance(result, ParseSuccess):
        outcome = validate_record(result.record, engine)
    else:
        outcome = ValidationOutcome(
            valid=False,
            errors=result.error.errors or [result.error.message],
            warnings=result.error.warnings,
        )

    return ScanCheck(result=result, outcome=outcome)
