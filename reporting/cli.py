#!/usr/bin/env python3
"""
CLI for generating valuation memo PDFs.

Usage:
    python -m reporting.cli sample [--policy cost_curve]
    python -m reporting.cli [--output-dir DIR] generate <memo_json>

Examples:
    # Generate sample memo with the calculator's default inputs
    python -m reporting.cli sample

    # Generate from JSON memo file
    python -m reporting.cli generate memos/flat_pune.json
"""

import argparse
import json
import sys
from pathlib import Path

from core.valuation_engine import BuildingPolicy

from .pdf_generator import ReportSuccess, generate_report
from .schemas import create_sample_memo, memo_from_dict


def _print_result(result) -> int:
    if isinstance(result, ReportSuccess):
        print(f"Report generated: {result.path}")
        print(f"Years projected: {result.years_projected}")
        return 0
    print(f"Error: {result.parameter}: {result.message}", file=sys.stderr)
    return 1


def cmd_sample(args):
    """Generate a sample valuation memo for testing."""
    policy = BuildingPolicy.from_string(args.policy)
    if policy is None:
        print(f"Error: Unknown policy: {args.policy}", file=sys.stderr)
        return 1

    print(f"Generating sample valuation memo ({policy.value})...")
    return _print_result(generate_report(create_sample_memo(policy), args.output_dir))


def cmd_generate(args):
    """Generate a memo from a JSON file."""
    input_path = Path(args.memo_file)

    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    print(f"Loading memo from: {input_path}")

    try:
        with open(input_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        print(f"Error: File is not UTF-8 text: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1

    try:
        memo = memo_from_dict(data)
    except KeyError as e:
        print(f"Error: Missing field: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid memo data: {e}", file=sys.stderr)
        return 1

    print(f"Generating memo for: {memo.prepared_for or memo.reference_id}")
    return _print_result(generate_report(memo, args.output_dir))


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Property Valuation - Valuation Memo Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m reporting.cli sample
    python -m reporting.cli sample --policy cost_curve
    python -m reporting.cli generate memos/flat_pune.json

Output:
    Reports are saved to: reports/valuation-<reference_id>.pdf
        """,
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated PDFs (default: reports/)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Generate a sample memo with the calculator's default inputs",
    )
    sample_parser.add_argument(
        "--policy",
        default=BuildingPolicy.YIELD_BACKED.value,
        help="Building policy: yield_backed or cost_curve",
    )
    sample_parser.set_defaults(func=cmd_sample)

    # Generate command
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a memo from a JSON file",
    )
    gen_parser.add_argument(
        "memo_file",
        help="Path to JSON memo file",
    )
    gen_parser.set_defaults(func=cmd_generate)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
