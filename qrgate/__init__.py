"""
qrgate: decoding and validation of wristband QR codes.

Typical flow::

    from qrgate import parse_and_validate, format_for_submission

    check = parse_and_validate(scanned)
    if check.ready_for_submission:
        payload = await format_for_submission(check.record, identity_provider)
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
    SubmissionPayload,
    ValidationOutcome,
)
from qrgate.formatting import IdentityProvider, format_for_submission, prepare_submission
from qrgate.parsing import parse, parse_and_validate, validate, validate_record

__version__ = "0.1.0"

__all__ = [
    "parse",
    "validate",
    "validate_record",
    "parse_and_validate",
    "format_for_submission",
    "prepare_submission",
    "IdentityProvider",
    "ParsedRecord",
    "ValidationOutcome",
    "SubmissionPayload",
    "ParseError",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "QRErrorCode",
    "ScanCheck",
]
