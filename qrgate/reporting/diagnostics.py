"""
Diagnostic helpers: structured dumps of parsed records and a parser self-test.
"""

import logging

from qrgate.core.models import ParsedRecord, ParseResult, ParseSuccess
from qrgate.core.validators import DigitsValidator, RegexValidator, ValidationError
from qrgate.core.rules.rule_config import DATE_FORMAT_PATTERN, TIME_FORMAT_PATTERN
from qrgate.observability.logger import get_logger
from qrgate.parsing import EXPECTED_PARTS, parse, validate_record

logger = get_logger(__name__)

SELF_TEST_CASES = (
    # Valid
    "1234/5678/01/2024-01-15/10:30/12345678",
    "9876/5432/99/2024-01-16/14:00/87654321",
    "0001/0002/03/2024-01-17/20:15/11111111",
    # Invalid
    "123/5678/01/2024-01-15/10:30/12345678",   # event: 3 digits
    "1234/567/01/2024-01-15/10:30/12345678",   # location: 3 digits
    "1234/5678/1/2024-01-15/10:30/12345678",   # zone: 1 digit
    "1234/5678/01/2024-01-15/10:30/1234567",   # wristband: 7 digits
    "1234/5678/01/fecha/10:30/12345678",       # unreadable date
    "1234/5678/01/2024-01-15/25:30/12345678",  # hour out of range
)

_FIELD_CHECKS = (
    ("event", "Event (4 digits)", DigitsValidator("event", {"digits": 4})),
    ("location", "Location (4 digits)", DigitsValidator("location", {"digits": 4})),
    ("zone", "Zone (2 digits)", DigitsValidator("zone", {"digits": 2})),
    ("date", "Date (YYYY-MM-DD)", RegexValidator("date", {"pattern": DATE_FORMAT_PATTERN})),
    ("time", "Time (HH:MM)", RegexValidator("time", {"pattern": TIME_FORMAT_PATTERN})),
    ("wristband_id", "Wristband (8 digits)", DigitsValidator("wristband_id", {"digits": 8})),
)


def field_check_summary(record: ParsedRecord) -> list[str]:
    """One "ok"/"fail" line per field for log output."""
    values = record.field_values()
    summary = []
    for field_name, description, validator in _FIELD_CHECKS:
        try:
            validator.validate(values[field_name], values)
            summary.append(f"ok {description}")
        except ValidationError:
            summary.append(f"fail {description} ({len(values[field_name])} chars)")
    return summary


def log_parsed_record(record: ParsedRecord, log: logging.Logger | None = None) -> None:
    """
    Log every field of a parsed record and its validation state.

    Args:
        record: The record to dump
        log: Logger to write to (defaults to this module's)
    """
    log = log or logger
    outcome = validate_record(record)

    log.info(
        "Parsed QR record",
        extra={
            "raw_code": record.raw,
            **record.field_values(),
            "field_count": EXPECTED_PARTS,
            "valid": outcome.valid,
        },
    )
    if outcome.errors:
        log.error("Parsed QR record has errors", extra={"errors": outcome.errors})
    if outcome.warnings:
        log.warning("Parsed QR record has warnings", extra={"warnings": outcome.warnings})

    log.info("Field checks: " + ", ".join(field_check_summary(record)))


def run_self_test(cases: tuple[str, ...] = SELF_TEST_CASES) -> list[tuple[str, ParseResult]]:
    """
    Parse a fixed set of sample codes and log each result.

    Args:
        cases: Codes to parse

    Returns:
        (code, result) pairs in input order
    """
    results = []
    for index, code in enumerate(cases, start=1):
        result = parse(code)
        if isinstance(result, ParseSuccess):
            logger.info(f"Self-test case {index} parsed", extra={"raw_code": code})
            log_parsed_record(result.record)
        else:
            logger.info(
                f"Self-test case {index} rejected: {result.error.message}",
                extra={"raw_code": code, "error_code": result.error.code.value},
            )
        results.append((code, result))
    return results
