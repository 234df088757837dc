"""
Formatting of parsed records into verification endpoint payloads.
"""

from datetime import datetime, timezone
from typing import Callable

from qrgate.core.models import (
    UNKNOWN_OPERATOR,
    ParsedRecord,
    ParseError,
    ParseErrorKind,
    ParseFailure,
    SubmissionPayload,
)
from qrgate.core.rules import RuleEngine
from qrgate.observability.logger import get_logger
from qrgate.observability.metrics import record_submission_formatted
from qrgate.parsing import derive_error_code, parse_and_validate

from .identity import IdentityProvider

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def resolve_operator_label(identity_provider: IdentityProvider | None) -> str | None:
    """
    Ask the identity provider who is verifying.

    Lookup is best-effort. Anything but a non-blank string yields None,
    and a failing lookup is logged, never raised.
    """
    if identity_provider is None:
        return None

    try:
        label = await identity_provider.get_current_operator_label()
    except Exception as e:
        logger.warning(
            "Could not resolve operator identity",
            extra={"error_type": type(e).__name__, "error_message": str(e)},
        )
        return None

    if not isinstance(label, str) or not label.strip():
        return None

    return label.strip()


async def format_for_submission(
    record: ParsedRecord,
    identity_provider: IdentityProvider | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> SubmissionPayload:
    """
    Build the verification payload for a parsed record.

    The processing timestamp and the operator are both captured now, at
    format time, not when the code was scanned.

    Args:
        record: A successfully parsed record
        identity_provider: Source of the operator label
        clock: Returns the current time (injectable for tests)

    Returns:
        SubmissionPayload; use to_api_dict() for the wire form
    """
    label = await resolve_operator_label(identity_provider)
    if label is None:
        logger.warning("Operator identity unavailable, using placeholder", extra={"operator": UNKNOWN_OPERATOR})

    payload = SubmissionPayload(
        event=record.event,
        location=record.location,
        zone=record.zone,
        date=record.date,
        time=record.time,
        wristband_id=record.wristband_id,
        raw=record.raw,
        processed_at=clock(),
        verifying_operator=label or UNKNOWN_OPERATOR,
    )
    record_submission_formatted(label is not None)
    return payload


async def prepare_submission(
    raw_code: str | None,
    identity_provider: IdentityProvider | None = None,
    engine: RuleEngine | None = None,
) -> SubmissionPayload | ParseFailure:
    """
    Parse, validate and format a scanned code for verification.

    Args:
        raw_code: The scanned or typed string
        identity_provider: Source of the operator label
        engine: Rule engine to use (defaults to the wristband rules)

    Returns:
        The payload when the code is ready for submission, otherwise the
        ParseFailure (or a FieldValidationFailed failure built from the outcome)
    """
    check = parse_and_validate(raw_code, engine)

    if isinstance(check.result, ParseFailure):
        return check.result

    if not check.ready_for_submission:
        return _revalidation_failure(check.outcome.errors, check.outcome.warnings)

    return await format_for_submission(check.record, identity_provider)


def _revalidation_failure(errors: list[str], warnings: list[str]) -> ParseFailure:
    return ParseFailure(
        error=ParseError(
            kind=ParseErrorKind.FIELD_VALIDATION_FAILED,
            code=derive_error_code(errors[0]),
            message=", ".join(errors),
            errors=errors,
            warnings=warnings,
        )
    )
