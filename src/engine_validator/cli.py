"""Command line entrypoint for checking engine compatibility."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from .bin_version import BinVersionError
from .config import ConfigError, load_settings
from .core import check_detailed, format_incompatibility
from .logging_config import setup_logging
from .models import ExplicitExpectation, ManifestRoot
from .parsers.package_json import ManifestError
from .summary import render_summary

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INCOMPATIBLE = 10


def _pair(value: str) -> tuple[str, str]:
    name, sep, version = value.partition("=")
    if not sep or not name.strip() or not version.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name.strip(), version.strip()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--cwd",
        type=Path,
        default=Path("."),
        help="Directory to start searching for package.json from",
    )
    parser.add_argument(
        "--engine",
        dest="engines",
        type=_pair,
        action="append",
        default=[],
        metavar="NAME=RANGE",
        help="Expected engine range; when given, package.json is not read",
    )
    parser.add_argument(
        "--known",
        type=_pair,
        action="append",
        default=[],
        metavar="NAME=VERSION",
        help="Actual engine version to use instead of looking it up",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--warn-only", action="store_true", help="Exit 0 even when engines are incompatible"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    setup_logging(args.log_level or settings.log_level)

    wanted = ExplicitExpectation(dict(args.engines)) if args.engines else ManifestRoot(args.cwd)
    try:
        report = asyncio.run(check_detailed(wanted, dict(args.known)))
    except (FileNotFoundError, BinVersionError) as exc:
        print(f"ERROR: Failed to determine an engine version: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (ManifestError, OSError) as exc:
        print(f"ERROR: Failed to read engine constraints: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(render_summary(report), end="")

    if report.all_satisfied:
        return EXIT_OK

    print(format_incompatibility(report), file=sys.stderr, end="")
    if args.warn_only or settings.warn_only:
        return EXIT_OK
    return EXIT_INCOMPATIBLE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
