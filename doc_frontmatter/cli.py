#!/usr/bin/env python3
"""Command-line frontmatter checker.

Scans a document tree, validates each document's frontmatter against an
optional schema file and prints every issue found.

Exit codes: 0 clean, 1 issues or unreadable documents, 2 bad configuration.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .batch import ScanReport
from .batch import scan_documents_sync
from .config import get_settings
from .exceptions import ConfigurationError
from .exceptions import DocFrontmatterError
from .logger_config import configure_logging
from .models import FrontmatterSchema
from .models import ReadOptions
from .validator import build_validator

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_CONFIG_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="doc-frontmatter",
        description="Validate the YAML frontmatter of every document in a directory tree.",
    )

    parser.add_argument("root", type=Path, help="Directory (or single document) to scan")

    parser.add_argument(
        "--schema",
        "-s",
        type=Path,
        help="YAML or JSON file with the frontmatter schema (default: no constraints)",
    )

    parser.add_argument(
        "--pattern",
        "-p",
        type=str,
        default=None,
        help="Filename glob of documents to scan (default: *.md)",
    )

    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=None,
        help="Language code of the documents (default: the configured default language)",
    )

    parser.add_argument(
        "--validate-key-names",
        action="store_true",
        help="Report keys that the schema does not declare",
    )

    parser.add_argument(
        "--validate-key-order",
        action="store_true",
        help="Report documents whose keys are not in schema order",
    )

    parser.add_argument(
        "--max-concurrency",
        type=int,
        default=None,
        help="Maximum number of documents read at the same time",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full report as JSON",
    )

    return parser


def load_schema(path: Path | None) -> FrontmatterSchema:
    """Load a schema file; JSON files are read through the YAML loader too."""
    if path is None:
        return FrontmatterSchema()

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError("schema", f"cannot read {path}: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigurationError("schema", f"{path} is not valid YAML/JSON: {e}", str(path)) from e

    if raw is None:
        return FrontmatterSchema()
    if not isinstance(raw, dict):
        raise ConfigurationError("schema", f"{path} must contain a mapping", str(path))
    return FrontmatterSchema.coerce(raw)


def print_report(report: ScanReport, as_json: bool = False) -> None:
    """Print the issues of a scan, one per line, or the report as JSON."""
    if as_json:
        print(json.dumps(report.to_dict(), indent=2, default=str))
        return

    for issue in report.iter_issues():
        print(str(issue))
    for failure in report.failed:
        print(f"{failure.filepath}: could not be read ({failure.error_type}: {failure.error})")

    print(
        f"\n{report.total_documents} document(s) scanned, "
        f"{report.error_count} issue(s) in {len(report.documents)} document(s), "
        f"{len(report.failed)} unreadable"
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = create_parser().parse_args(argv)
    configure_logging(get_settings())

    try:
        schema = load_schema(args.schema)
        build_validator(schema)
        if args.max_concurrency is not None and args.max_concurrency < 1:
            raise ConfigurationError("max_concurrency", "must be at least 1", args.max_concurrency)
        if not args.root.exists():
            raise ConfigurationError("root", f"{args.root} does not exist", str(args.root))

        options = ReadOptions(
            schema=schema,
            validate_key_names=args.validate_key_names,
            validate_key_order=args.validate_key_order,
        )
        report = scan_documents_sync(
            args.root,
            pattern=args.pattern,
            language_code=args.language,
            options=options,
            max_concurrency=args.max_concurrency,
        )
    except DocFrontmatterError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print_report(report, as_json=args.json)
    return EXIT_OK if report.ok else EXIT_ISSUES


if __name__ == "__main__":
    sys.exit(main())
