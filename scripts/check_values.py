#!/usr/bin/env python3
"""
Check JSON records against field expectations declared in YAML.

Each field in the expectations file gets a matcher (close_to or type_of);
every record is checked field by field and a per-record summary printed.

Exit status: 0 when every field matched, 1 on any mismatch, 2 when the
config or records cannot be loaded.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from components.config_loader import load_field_matchers
from components.record_check import check_record


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        log_file: Optional path to log file
        verbose: Log at DEBUG instead of WARNING

    Replaces handlers left by an earlier call.
    """
    handlers = [logging.StreamHandler()]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def load_records(records_path: Path) -> list:
    """Load a JSON object or list of objects."""
    with open(records_path, encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list) and all(isinstance(r, dict) for r in data):
        return data
    raise ValueError("Records file must hold a JSON object or a list of objects")


def main(argv: list[str] | None = None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Check JSON records against field expectations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  check-values --config expectations.yaml --records results.json
  check-values --config expectations.yaml --records results.json --log-file logs/check.log --verbose
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to YAML expectations file",
    )

    parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="Path to JSON file with one record or a list of records",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to log file (default: None, logs to console only)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        field_matchers = load_field_matchers(args.config)
        records = load_records(args.records)
    except (OSError, ValueError, TypeError) as e:
        parser.error(f"could not load input: {e}")

    all_matched = True
    for idx, record in enumerate(records):
        score, details = check_record(record, field_matchers)
        print(f"Record {idx}: {score:.2f} ({details['total_fields'] - details['failed_fields']}/{details['total_fields']} fields)")

        for name, result in details["field_results"].items():
            if result:
                print(f"  ✓ {name}: {field_matchers[name]}")
            else:
                print(f"  ✗ {name}: expected {field_matchers[name]}, {result.description}")

        if details["failed_fields"]:
            all_matched = False

    sys.exit(0 if all_matched else 1)


if __name__ == "__main__":
    main()
