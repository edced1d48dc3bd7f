"""
Command line entrypoint: python -m noglobals [-t] [path ...]

Prints one diagnostic per line. Exit status is 1 when any global variable
was found and 2 when a path could not be read or parsed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from noglobals.config import settings
from noglobals.core.parser import ParseError
from noglobals.core.walker import Scanner

logger = logging.getLogger("noglobals.cli")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noglobals",
        description="Report top-level Go variables that are not allow-listed.",
    )
    parser.add_argument(
        "-t",
        dest="include_tests",
        action="store_true",
        default=settings.include_tests,
        help=f"include {settings.test_suffix} files",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="directories or files to check; append /... to recurse",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    scanner = Scanner()
    messages: list[str] = []
    for path in args.paths:
        try:
            messages.extend(scanner.scan(path, include_tests=args.include_tests).messages)
        except (ParseError, OSError) as e:
            logger.error(f"Scan of {path} failed")
            print(e, file=sys.stderr)
            return 2

    for message in messages:
        print(message)

    return 1 if messages else 0


if __name__ == "__main__":
    sys.exit(main())
