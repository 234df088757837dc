"""
Rule engine for orchestrating field rules over the raw fields of a scanned code.

The rule engine loads rule configurations, applies them to the fields in
order and produces a ValidationOutcome.
"""

from typing import Any, NamedTuple

from qrgate.core.models import ValidationOutcome
from qrgate.core.validators import (
    BaseValidator,
    CalendarDateValidator,
    DigitsValidator,
    RegexValidator,
    RequiredFieldValidator,
    TimeRangeValidator,
    ValidationError,
)
from qrgate.observability.logger import get_logger

logger = get_logger(__name__)


class RuleViolation(NamedTuple):
    """One failed rule: which field, how severe, and the display message."""

    rule_name: str
    field_name: str
    severity: str
    message: str


class RuleEngine:
    """
    Orchestrates field rules over a mapping of raw field values.

    Rules run in configuration order and every field is checked, so a
    single pass reports all violated fields. A failing rule marked
    stop_on_failure skips the remaining rules of the same field only.
    """

    VALIDATOR_REGISTRY = {
        "required_field": RequiredFieldValidator,
        "digits": DigitsValidator,
        "regex": RegexValidator,
        "calendar_date": CalendarDateValidator,
        "time_range": TimeRangeValidator,
    }

    def __init__(self, rules: list[dict[str, Any]]):
        """
        Initialize the rule engine with field rules.

        Args:
            rules: List of rule configurations, each containing:
                   - rule_name: str
                   - rule_type: str (required_field, digits, regex, calendar_date, time_range)
                   - field_name: str
                   - parameters: Dict[str, Any] (optional)
                   - severity: str (error or warning)
                   - enabled: bool (default True)
                   - stop_on_failure: bool (default False)
        """
        self.rules = rules
        self.validators: list[tuple[str, str, bool, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule in self.rules:
            if not rule.get("enabled", True):
                continue

            rule_name = rule["rule_name"]
            rule_type = rule["rule_type"]
            field_name = rule["field_name"]
            parameters = rule.get("parameters", {})
            severity = rule.get("severity", "error")
            stop_on_failure = rule.get("stop_on_failure", False)

            validator_class = self.VALIDATOR_REGISTRY.get(rule_type)
            if not validator_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            try:
                validator = validator_class(field_name, parameters)
            except Exception as e:
                raise ValueError(f"Failed to create validator for rule '{rule_name}': {e}")

            self.validators.append((rule_name, severity, stop_on_failure, validator))

    @property
    def field_names(self) -> list[str]:
        """Distinct field names in the order rules first mention them."""
        names: list[str] = []
        for _, _, _, validator in self.validators:
            if validator.field_name not in names:
                names.append(validator.field_name)
        return names

    def check(self, fields: dict[str, Any]) -> list[RuleViolation]:
        """
        Run all rules over raw field values.

        Never raises for bad input: every failure becomes a violation.

        Args:
            fields: Raw field values keyed by field name

        Returns:
            Violations in rule order
        """
        violations: list[RuleViolation] = []
        halted_fields: set[str] = set()

        for rule_name, severity, stop_on_failure, validator in self.validators:
            field_name = validator.field_name
            if field_name in halted_fields:
                continue

            value = fields.get(field_name)

            try:
                validator.validate(value, fields)
                continue
            except ValidationError as e:
                message = e.message
            except Exception as e:
                logger.error(
                    f"Rule '{rule_name}' raised unexpectedly",
                    extra={"rule_name": rule_name, "field_name": field_name},
                    exc_info=True,
                )
                message = f"{validator.label} field could not be checked: {e}"

            violations.append(RuleViolation(rule_name, field_name, severity, message))

            if stop_on_failure:
                halted_fields.add(field_name)

        return violations

    def evaluate(self, fields: dict[str, Any]) -> ValidationOutcome:
        """
        Check raw field values and summarise them as a ValidationOutcome.

        Args:
            fields: Raw field values keyed by field name

        Returns:
            ValidationOutcome with errors and warnings in rule order
        """
        return outcome_from_violations(self.check(fields))

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts and types
        """
        return {
            "total_rules": len(self.validators),
            "fields": self.field_names,
            "rules_by_type": self._count_by_type(),
            "rules_by_severity": self._count_by_severity(),
        }

    def _count_by_type(self) -> dict[str, int]:
        """Count validators by rule type."""
        counts: dict[str, int] = {}
        for _, _, _, validator in self.validators:
            rule_type = validator.rule_type
            counts[rule_type] = counts.get(rule_type, 0) + 1
        return counts

    def _count_by_severity(self) -> dict[str, int]:
        """Count validators by severity."""
        counts: dict[str, int] = {}
        for _, severity, _, _ in self.validators:
            counts[severity] = counts.get(severity, 0) + 1
        return counts


def outcome_from_violations(violations: list[RuleViolation]) -> ValidationOutcome:
    """Split violations into error and warning messages, keeping their order."""
    errors = [v.message for v in violations if v.severity == "error"]
    warnings = [v.message for v in violations if v.severity != "error"]
    return ValidationOutcome.from_messages(errors, warnings)
