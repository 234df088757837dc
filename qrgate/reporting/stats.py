"""
Aggregate statistics over parse results.
"""

from typing import Iterable

from qrgate.core.models import ParseFailure, ParseResult, ParsingStats


def get_parsing_stats(results: Iterable[ParseResult]) -> ParsingStats:
    """
    Summarise a batch of parse results.

    Args:
        results: Results returned by parse()

    Returns:
        ParsingStats with totals, success rate (percent) and failures per code
    """
    total = 0
    successful = 0
    error_breakdown: dict[str, int] = {}

    for result in results:
        total += 1
        if isinstance(result, ParseFailure):
            code = result.error.code.value
            error_breakdown[code] = error_breakdown.get(code, 0) + 1
        else:
            successful += 1

    success_rate = (successful / total) * 100 if total > 0 else 0.0

    return ParsingStats(
        total=total,
        successful=successful,
        failed=total - successful,
        success_rate=success_rate,
        error_breakdown=error_breakdown,
    )
