"""
Field validation for wristband codes.

validate() is total: whatever it is given, it returns a ValidationOutcome
and never raises.
"""

from typing import Any, Mapping, Sequence

from qrgate.core.models import ParsedRecord, ValidationOutcome
from qrgate.core.rules import RuleEngine, default_wristband_rules
from qrgate.observability.metrics import parse_duration_seconds, track_duration

from .layout import FIELD_ORDER

_default_engine: RuleEngine | None = None


def get_default_engine() -> RuleEngine:
    """Rule engine for the built-in wristband layout."""
    global _default_engine
    if _default_engine is None:
        _default_engine = RuleEngine(default_wristband_rules())
    return _default_engine


def normalize_fields(fields: Mapping[str, Any] | Sequence[Any]) -> dict[str, str | None]:
    """
    Coerce the six raw values into a field-name mapping of strings.

    Sequences are read positionally in layout order; missing positions
    and keys are left out so the required-field rule reports them.
    """
    if isinstance(fields, Mapping):
        items = [(name, fields[name]) for name in FIELD_ORDER if name in fields]
    else:
        items = list(zip(FIELD_ORDER, fields))

    return {name: value if value is None or isinstance(value, str) else str(value) for name, value in items}


def validate(
    fields: Mapping[str, Any] | Sequence[Any],
    engine: RuleEngine | None = None,
) -> ValidationOutcome:
    """
    Validate the six raw fields of a code.

    Args:
        fields: Mapping keyed by field name, or the six values in layout order
        engine: Rule engine to use (defaults to the wristband rules)

    Returns:
        ValidationOutcome with every error and warning, in field order
    """
    with track_duration(parse_duration_seconds, operation="validate"):
        return (engine or get_default_engine()).evaluate(normalize_fields(fields))


def validate_record(record: ParsedRecord, engine: RuleEngine | None = None) -> ValidationOutcome:
    """Re-validate the fields of an already parsed record."""
    return validate(record.field_values(), engine)
