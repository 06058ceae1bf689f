"""CLI entrypoints for sitecheck commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .checks import BUILTIN_CHECKS
from .logging import configure_logging
from .orchestrator import SiteChecker
from .render import format_cleanup, format_report, format_report_json


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the site root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitecheck",
        description="Diagnose common problems in Hugo sites authored with R Markdown.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Run the site checks and print the findings.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_path_argument(check_parser)
    check_parser.add_argument(
        "--only",
        nargs="+",
        choices=BUILTIN_CHECKS,
        metavar="CHECK",
        help=f"Run only the named checks ({', '.join(BUILTIN_CHECKS)}).",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON.",
    )
    check_parser.add_argument(
        "--fix",
        action="store_true",
        help="Apply safe configuration fixes (e.g. the goldmark renderer setting).",
    )

    clean_parser = subparsers.add_parser(
        "clean-duplicates",
        help="List or delete duplicated .html/.md output files.",
    )
    _add_verbose_option(clean_parser, suppress_default=True)
    _add_path_argument(clean_parser)
    clean_parser.add_argument(
        "--no-preview",
        dest="preview",
        action="store_false",
        help="Delete the files instead of only listing them.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sitecheck commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    checker = SiteChecker()

    if args.command == "check":
        try:
            report = checker.run_check(args.path, only=args.only, fix=bool(args.fix))
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except ValueError as exc:
            parser.exit(1, f"sitecheck check failed: {exc}\n")
        if args.json:
            sys.stdout.write(format_report_json(report))
        else:
            sys.stdout.write(format_report(report))
    elif args.command == "clean-duplicates":
        try:
            outcome = checker.clean_duplicates(args.path, preview=bool(args.preview))
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        sys.stdout.write(format_cleanup(outcome))
        if outcome.failed:
            parser.exit(1, f"{len(outcome.failed)} file(s) could not be deleted.\n")
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
