"""
Reporting helpers: statistics, sample codes and diagnostics.
"""

from .diagnostics import SELF_TEST_CASES, field_check_summary, log_parsed_record, run_self_test
from .samples import generate_sample_code
from .stats import get_parsing_stats

__all__ = [
    "get_parsing_stats",
    "generate_sample_code",
    "log_parsed_record",
    "field_check_summary",
    "run_self_test",
    "SELF_TEST_CASES",
]
