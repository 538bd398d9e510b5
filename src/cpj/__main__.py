"""Entry point: python -m cpj"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from cpj.copying.tree_copy import parallel_copy
from cpj.copying.types import DispatchResult
from cpj.errors import CopyError
from cpj.infrastructure.config import DEFAULT_CONTINUE, DEFAULT_JOBS, CopyOptions
from cpj.infrastructure.logger import setup_logging


class _ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="cpj", description="Copy a file or directory tree with parallel workers.")
    parser.add_argument("--link", action="store_true", help="Hard link copied files if able.")
    parser.add_argument("--recurse", action="store_true", help="Recurse the supplied directory.")
    parser.add_argument("--jobs", type=int, default=DEFAULT_JOBS, help="Number of jobs to run in parallel.")
    parser.add_argument(
        "--continue",
        dest="continue_on_error",
        action=argparse.BooleanOptionalAction,
        default=DEFAULT_CONTINUE,
        help="Continue parallel copy even if individual file errors occur.",
    )
    parser.add_argument("--useful", action="store_true", help="Print some useful statistics.")
    parser.add_argument("--verbose", action="store_true", help="Provide verbose messages. Implies --useful.")
    parser.add_argument("--debug", action="store_true", help="Print debug messages. Implies --verbose.")
    parser.add_argument("source")
    parser.add_argument("dest")
    return parser


def print_stats(result: DispatchResult) -> None:
    print(f"Number of files to be copied: {result.files}")
    print(f"Copied {result.copied} file(s) with {result.workers} worker(s) in {result.elapsed_s:.2f}s")
    if result.errors:
        print(f"{len(result.errors)} error(s)")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    options = CopyOptions(
        hardlink=args.link,
        recurse=args.recurse,
        continue_on_error=args.continue_on_error,
        jobs=args.jobs,
        useful=args.useful,
        verbose=args.verbose,
        debug=args.debug,
    )
    log = setup_logging(options.log_level)

    try:
        result = parallel_copy(args.source, args.dest, options, log=log)
    except (CopyError, OSError) as err:
        print(f"cpj: {err}", file=sys.stderr)
        return 1

    if options.useful:
        print_stats(result)
    for err in result.errors:
        print(f"cpj: {err}", file=sys.stderr)
    return 0 if result.ok else 1


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
