# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""``okey`` command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from ..config import CHAIN_FILE_ENV
from ..exceptions import ConfigurationError
from ..validation import ValidatorChain, get_default_registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def cmd_list(args: argparse.Namespace) -> int:
    """Print every registered validator and the options it requires."""

    for definition in get_default_registry().get_definitions():
        required = ", ".join(sorted(definition.required_options)) or "-"
        print(f"{definition.name:<12} options: {required:<12} {definition.description}")
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    """Run each value through the configured chain."""

    chain = ValidatorChain.from_file(args.config)
    if args.no_break_on_error:
        chain.break_on_error = False

    reports: List[Dict[str, Any]] = []
    for raw in args.values:
        value = chain.validate(raw)
        reports.append(
            {
                "input": raw,
                "value": value,
                "errors": list(chain.errors),
                "has_error": chain.has_error,
            }
        )

    if args.as_json:
        print(json.dumps(reports, indent=2, default=str))
    else:
        for report in reports:
            if report["has_error"]:
                for message in report["errors"]:
                    print(f"{report['input']!r}: {message}")
            else:
                print(f"{report['input']!r}: ok -> {report['value']!r}")

    return EXIT_INVALID if any(report["has_error"] for report in reports) else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="okey",
        description="Validate values against a chain of named validators.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    list_parser = subparsers.add_parser("list", help="List the built-in validators")
    list_parser.set_defaults(func=cmd_list)

    validate_parser = subparsers.add_parser("validate", help="Validate one or more values")
    validate_parser.add_argument("values", nargs="+", help="Values to validate")
    validate_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help=f"YAML or JSON chain file (default: ${CHAIN_FILE_ENV})",
    )
    validate_parser.add_argument(
        "--no-break-on-error",
        action="store_true",
        help="Run every validator even after one fails",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print results as JSON",
    )
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def run_command(args: argparse.Namespace) -> int:
    return args.func(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return run_command(args)
    except ConfigurationError as exc:
        logger.debug("Configuration error", exc_info=True)
        print(f"okey: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR


__all__ = ["build_parser", "cmd_list", "cmd_validate", "main", "run_command"]
