"""
Rule configuration management.

Loads field rules from YAML files and provides the built-in rule set for
the wristband code layout.
"""

from pathlib import Path
from typing import Any

import yaml

DATE_FORMAT_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_FORMAT_PATTERN = r"^\d{2}:\d{2}$"


class RuleConfigLoader:
    """
    Loads field rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    fields:
      event:
        label: Event
        position: 1

    rules:
      event:
        - type: required_field
          stop_on_failure: true
        - type: digits
          params:
            digits: 4

      date:
        - type: regex
          severity: warning
          params:
            pattern: "^\\d{4}-\\d{2}-\\d{2}$"
            message: 'Non-standard date format: "{value}" (expected YYYY-MM-DD)'
    ```

    Entries under `fields` are merged into the params of every rule for
    that field; a rule's own params win.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse field rules from YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            ValueError: If YAML is invalid or missing required fields
        """
        with open(self.config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not config or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        field_meta = config.get("fields") or {}
        rules = []

        for field_name, field_rule_list in config["rules"].items():
            if not isinstance(field_rule_list, list):
                raise ValueError(f"Rules for field '{field_name}' must be a list")

            for idx, rule_def in enumerate(field_rule_list):
                rule = self._parse_rule(field_name, rule_def, idx, field_meta.get(field_name, {}))
                rules.append(rule)

        return rules

    def _parse_rule(
        self,
        field_name: str,
        rule_def: dict[str, Any],
        idx: int,
        field_meta: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)
            field_meta: Shared params for the field (label, position)

        Returns:
            Parsed rule dictionary

        Raises:
            ValueError: If rule definition is invalid
        """
        if "type" not in rule_def:
            raise ValueError(f"Rule for field '{field_name}' is missing 'type'")

        rule_type = rule_def["type"]
        rule_name = rule_def.get("name", f"{field_name}_{rule_type}_{idx}")

        parameters = {**field_meta, **rule_def.get("params", rule_def.get("parameters", {}))}

        severity = rule_def.get("severity", "error")
        if severity not in ("error", "warning"):
            raise ValueError(f"Invalid severity '{severity}' for rule '{rule_name}'. Must be 'error' or 'warning'")

        return {
            "rule_name": rule_name,
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": parameters,
            "severity": severity,
            "enabled": rule_def.get("enabled", True),
            "stop_on_failure": rule_def.get("stop_on_failure", False),
        }


class RuleConfigBuilder:
    """
    Programmatically build rule configurations.
    """

    def __init__(self):
        """Initialize empty rule configuration."""
        self.rules: list[dict[str, Any]] = []
        self._field_meta: dict[str, dict[str, Any]] = {}

    def field(self, field_name: str, label: str, position: int) -> "RuleConfigBuilder":
        """Declare the display label and position shared by a field's rules."""
        self._field_meta[field_name] = {"label": label, "position": position}
        return self

    def _add(
        self,
        field_name: str,
        rule_type: str,
        parameters: dict[str, Any],
        severity: str = "error",
        stop_on_failure: bool = False,
        suffix: str | None = None,
    ) -> "RuleConfigBuilder":
        self.rules.append({
            "rule_name": f"{field_name}_{suffix or rule_type}",
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": {**self._field_meta.get(field_name, {}), **parameters},
            "severity": severity,
            "enabled": True,
            "stop_on_failure": stop_on_failure,
        })
        return self

    def add_required_field(self, field_name: str) -> "RuleConfigBuilder":
        """Add a required field rule; an empty field skips its other rules."""
        return self._add(field_name, "required_field", {}, stop_on_failure=True, suffix="required")

    def add_digits(self, field_name: str, digits: int) -> "RuleConfigBuilder":
        """Add a fixed-length digit rule."""
        return self._add(field_name, "digits", {"digits": digits})

    def add_regex(
        self,
        field_name: str,
        pattern: str,
        message: str | None = None,
        severity: str = "error",
    ) -> "RuleConfigBuilder":
        """Add a regex rule, optionally as a warning."""
        params: dict[str, Any] = {"pattern": pattern}
        if message is not None:
            params["message"] = message
        suffix = "format" if severity == "warning" else "regex"
        return self._add(field_name, "regex", params, severity=severity, suffix=suffix)

    def add_calendar_date(self, field_name: str) -> "RuleConfigBuilder":
        """Add a real-calendar-date rule."""
        return self._add(field_name, "calendar_date", {})

    def add_time_range(self, field_name: str, max_hour: int = 23, max_minute: int = 59) -> "RuleConfigBuilder":
        """Add an hour/minute range rule."""
        return self._add(field_name, "time_range", {"max_hour": max_hour, "max_minute": max_minute})

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return self.rules


def default_wristband_rules() -> list[dict[str, Any]]:
    """
    Rules for the Event/Location/Zone/Date/Time/Wristband layout.

    Fields are listed in check order; error and warning lists follow it.
    """
    return (
        RuleConfigBuilder()
        .field("event", "Event", 1)
        .add_required_field("event")
        .add_digits("event", 4)
        .field("location", "Location", 2)
        .add_required_field("location")
        .add_digits("location", 4)
        .field("zone", "Zone", 3)
        .add_required_field("zone")
        .add_digits("zone", 2)
        .field("date", "Date", 4)
        .add_required_field("date")
        .add_regex(
            "date",
            DATE_FORMAT_PATTERN,
            message='Non-standard date format: "{value}" (expected YYYY-MM-DD)',
            severity="warning",
        )
        .add_calendar_date("date")
        .field("time", "Time", 5)
        .add_required_field("time")
        .add_regex(
            "time",
            TIME_FORMAT_PATTERN,
            message='Non-standard time format: "{value}" (expected HH:MM)',
            severity="warning",
        )
        .add_time_range("time")
        .field("wristband_id", "Wristband number", 6)
        .add_required_field("wristband_id")
        .add_digits("wristband_id", 8)
        .build()
    )
