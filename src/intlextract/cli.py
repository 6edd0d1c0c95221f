"""Command-line interface: extract catalogs from a source tree.

Usage:
    intlextract src/ --messages-dir build/messages
    intlextract src/App.jsx --enforce-descriptions --format simple
    python -m intlextract src/ --pot messages.pot

Exit Codes:
    0: All units extracted
    1: At least one unit failed (other units are still processed)
    2: Usage error (bad arguments, missing path, missing Babel for --pot)

Python 3.13+.
"""

import argparse
import logging
import sys
import tomllib
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

from intlextract.config import ExtractionOptions, load_options
from intlextract.constants import SOURCE_SUFFIXES
from intlextract.core.babel_compat import BabelImportError
from intlextract.diagnostics import DiagnosticFormatter, ExtractionError, OutputFormat
from intlextract.extract import ExtractionResult, extract_file

__all__ = ["build_parser", "iter_source_files", "main"]

logger = logging.getLogger(__name__)

# Directories never descended into when walking a source tree.
_SKIPPED_DIRECTORIES: frozenset[str] = frozenset({"node_modules", ".git"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intlextract",
        description="Extract react-intl message descriptors from JavaScript/JSX sources.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Source files or directories")
    parser.add_argument("--messages-dir", help="Write one JSON catalog per source file under this directory")
    parser.add_argument(
        "--module-source",
        action="append",
        dest="module_source_names",
        metavar="NAME",
        help="Module exporting the markers (repeatable, default: react-intl)",
    )
    parser.add_argument(
        "--component",
        action="append",
        dest="component_names",
        metavar="NAME",
        help="Marker component name (repeatable)",
    )
    parser.add_argument(
        "--function",
        action="append",
        dest="function_names",
        metavar="NAME",
        help="Marker function name (repeatable)",
    )
    parser.add_argument(
        "--enforce-descriptions",
        action="store_true",
        default=None,
        help="Fail on messages without a description",
    )
    parser.add_argument("--config", type=Path, help="pyproject.toml with a [tool.intlextract] table")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Error output format (default: rust)",
    )
    parser.add_argument("--pot", type=Path, metavar="FILE", help="Also write a gettext template (needs Babel)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def iter_source_files(paths: Sequence[Path]) -> Iterator[Path]:
    """Files to extract: given files as-is, directories walked for JS sources."""
    for path in paths:
        if not path.is_dir():
            yield path
            continue
        for candidate in sorted(path.rglob("*")):
            if candidate.suffix not in SOURCE_SUFFIXES or not candidate.is_file():
                continue
            if _SKIPPED_DIRECTORIES.intersection(candidate.relative_to(path).parts):
                continue
            yield candidate


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    missing = [str(path) for path in args.paths if not path.exists()]
    if missing:
        parser.error(f"no such file or directory: {', '.join(missing)}")
    if args.config is not None and not args.config.is_file():
        parser.error(f"no such config file: {args.config}")

    try:
        options = _resolve_options(args)
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
        parser.error(f"invalid configuration: {exc}")

    formatter = DiagnosticFormatter(OutputFormat(args.format), color=sys.stderr.isatty())
    results: list[ExtractionResult] = []
    failed = 0
    for path in iter_source_files(args.paths):
        try:
            result = extract_file(path, options)
        except ExtractionError as exc:
            failed += 1
            print(formatter.format(exc.diagnostic) if exc.diagnostic else f"{path}: {exc}", file=sys.stderr)
            continue
        except (OSError, UnicodeDecodeError) as exc:
            failed += 1
            logger.error("%s: %s", path, exc)
            continue
        logger.info("%s: %d messages", path, len(result.messages))
        results.append(result)

    if args.pot is not None:
        from intlextract.babel_extract import write_pot  # noqa: PLC0415 - optional Babel

        try:
            write_pot(results, args.pot)
        except BabelImportError as exc:
            parser.error(str(exc))

    total = sum(len(result.messages) for result in results)
    logger.info("Extracted %d messages from %d files (%d failed)", total, len(results), failed)
    return 1 if failed else 0


def _resolve_options(args: argparse.Namespace) -> ExtractionOptions:
    options = load_options(args.config)
    overrides: dict[str, Any] = {
        name: value
        for name in ("module_source_names", "component_names", "function_names", "enforce_descriptions", "messages_dir")
        if (value := getattr(args, name)) is not None
    }
    return options.merged(overrides)
