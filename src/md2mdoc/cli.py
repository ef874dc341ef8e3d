"""Command-line entry point: ``md2mdoc [INPUT ...] [-o OUTPUT]``."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from md2mdoc import __version__
from md2mdoc.config import DEFAULT_CONFIG, ConvertConfig
from md2mdoc.errors import ResourceUnavailableError
from md2mdoc.io import STDIO, convert_file, convert_files
from md2mdoc.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_RESOURCE_UNAVAILABLE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2mdoc",
        description="Convert simple markdown to mdoc(7) manual pages.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="markdown file(s); '-' or nothing reads stdin",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="output file for one input (default: stdout), "
        "or output directory for several inputs (default: next to each input)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=None,
        help="documents converted in parallel when several inputs are given",
    )
    parser.add_argument(
        "-s",
        "--section",
        default=DEFAULT_CONFIG.section,
        help="manual section used as the output suffix in batch mode (default: %(default)s)",
    )
    parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="do not strip leading whitespace from text lines",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress (-v) or every dispatch decision (-vv) to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")

    config = ConvertConfig(
        strip_leading_whitespace=not args.keep_whitespace,
        section=args.section,
    )
    inputs: list[str] = args.inputs or [STDIO]

    try:
        if len(inputs) == 1:
            convert_file(inputs[0], args.output or STDIO, config)
        else:
            if STDIO in inputs:
                parser.error("stdin ('-') cannot be combined with other inputs")
            convert_files(inputs, args.output, jobs=args.jobs, config=config)
    except ResourceUnavailableError as exc:
        logger.debug("conversion aborted", exc_info=True)
        print(f"md2mdoc: {exc}", file=sys.stderr)
        return EXIT_RESOURCE_UNAVAILABLE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
