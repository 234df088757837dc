"""
Field rule engine and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigLoader, default_wristband_rules
from .rule_engine import RuleEngine, RuleViolation, outcome_from_violations

__all__ = [
    "RuleEngine",
    "RuleViolation",
    "outcome_from_violations",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "default_wristband_rules",
]
