"""
Command-line interface for decoding and checking wristband codes.

Usage:
    qrgate parse <code>
    qrgate format <code> [--operator <label>]
    qrgate sample [--count N] [--seed S]
    qrgate selftest
    qrgate stats <file>
    qrgate describe
"""

import argparse
import asyncio
import json
import os
import random
import sys
from pathlib import Path

from qrgate.core.models import ParseFailure, ParseSuccess
from qrgate.core.rules import RuleConfigLoader, RuleEngine
from qrgate.formatting import EnvironmentIdentityProvider, StaticIdentityProvider, prepare_submission
from qrgate.observability.logger import get_logger, log_operation
from qrgate.parsing import get_default_engine, get_field_descriptions, parse
from qrgate.reporting import generate_sample_code, get_parsing_stats, run_self_test

logger = get_logger(__name__)


def build_engine(rules_path: str | None) -> RuleEngine:
    """
    Rule engine from a YAML file, or the built-in wristband rules.

    Args:
        rules_path: Path to a rules YAML file, or None
    """
    if not rules_path:
        return get_default_engine()

    logger.info(f"Loading field rules from {rules_path}")
    return RuleEngine(RuleConfigLoader(rules_path).load_rules())


def print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def parse_command(args) -> int:
    """
    Parse one code and print the result.

    Args:
        args: Command line arguments
    """
    result = parse(args.code, build_engine(args.rules))
    print_json(result.model_dump(mode="json"))
    return 0 if isinstance(result, ParseSuccess) else 1


def format_command(args) -> int:
    """
    Parse, validate and format one code as a verification payload.

    Args:
        args: Command line arguments
    """
    if args.operator:
        provider = StaticIdentityProvider(args.operator)
    else:
        provider = EnvironmentIdentityProvider()

    outcome = asyncio.run(prepare_submission(args.code, provider, build_engine(args.rules)))

    if isinstance(outcome, ParseFailure):
        logger.error(f"Code rejected: {outcome.error.message}")
        print_json(outcome.model_dump(mode="json"))
        return 1

    print_json(outcome.to_api_dict())
    return 0


def sample_command(args) -> int:
    """Print randomly generated well-formed codes."""
    rng = random.Random(args.seed)
    for _ in range(args.count):
        print(generate_sample_code(rng))
    return 0


def selftest_command(args) -> int:
    """Run the parser over the built-in sample cases."""
    results = run_self_test()

    for code, result in results:
        if isinstance(result, ParseSuccess):
            print(f"OK    {code}")
        else:
            print(f"FAIL  {code}  [{result.error.code.value}] {result.error.message}")

    stats = get_parsing_stats(result for _, result in results)
    print(f"\n{stats.successful}/{stats.total} parsed ({stats.success_rate:.1f}%)")
    return 0


def stats_command(args) -> int:
    """
    Parse every non-blank line of a file and print aggregate statistics.

    Args:
        args: Command line arguments
    """
    input_path = Path(args.file)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.file}")
        return 1

    engine = build_engine(args.rules)
    with log_operation("Parsing scan file", logger=logger, input_file=str(input_path)) as op:
        with open(input_path, encoding="utf-8") as f:
            results = [parse(line, engine) for line in f if line.strip()]
        stats = get_parsing_stats(results)
        op.note(scans=stats.total, failed=stats.failed)

    print_json(stats.model_dump())
    return 0


def describe_command(args) -> int:
    """Print the field layout and the loaded rules."""
    print_json({
        "fields": get_field_descriptions(),
        "rules": build_engine(args.rules).get_rule_summary(),
    })
    return 0


COMMANDS = {
    "parse": parse_command,
    "format": format_command,
    "sample": sample_command,
    "selftest": selftest_command,
    "stats": stats_command,
    "describe": describe_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrgate",
        description="Decode and validate wristband QR codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a scanned code
  qrgate parse "1234/5678/01/2024-01-15/10:30/12345678"

  # Build the verification payload for an operator
  qrgate format "1234/5678/01/2024-01-15/10:30/12345678" --operator checker@example.com

  # Use custom field rules
  qrgate --rules config/wristband_rules.yaml stats scans.txt
        """
    )
    parser.add_argument(
        "--rules",
        default=os.getenv("QRGATE_RULES"),
        help="Path to field rules YAML file (default: $QRGATE_RULES or built-in rules)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Parse and validate a code")
    parse_parser.add_argument("code", help="Raw code, e.g. 1234/5678/01/2024-01-15/10:30/12345678")

    format_parser = subparsers.add_parser("format", help="Format a code as a verification payload")
    format_parser.add_argument("code", help="Raw code")
    format_parser.add_argument(
        "--operator",
        help="Operator label (default: $QRGATE_OPERATOR)"
    )

    sample_parser = subparsers.add_parser("sample", help="Generate sample codes")
    sample_parser.add_argument("--count", type=int, default=1, help="Number of codes (default: 1)")
    sample_parser.add_argument("--seed", type=int, help="Random seed")

    subparsers.add_parser("selftest", help="Run the parser over built-in sample cases")

    stats_parser = subparsers.add_parser("stats", help="Parse a file of codes and summarise")
    stats_parser.add_argument("file", help="File with one code per line")

    subparsers.add_parser("describe", help="Show the field layout and rules")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        exit_code = COMMANDS[args.command](args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
