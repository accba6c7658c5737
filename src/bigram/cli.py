"""
Command-line interface for the bigram counter.

    bigram [-v | -vv] [--fold-case] [--strip-punctuation] [--verify] PATH
"""
from __future__ import annotations

import argparse
import logging
import sys

from .engine.pipeline import run_pipeline
from .engine.tokenizer import TokenizerConfig
from .errors import BigramError, UsageError

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str):
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="bigram",
        description="Generate an ordered histogram of adjacent word pairs in a UTF-8 text file",
    )
    parser.add_argument("path", help="Path to the text file")
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log pipeline progress to stderr (-vv for debug output)",
    )
    parser.add_argument(
        "--fold-case",
        action="store_true",
        help="Lowercase ASCII letters before counting",
    )
    parser.add_argument(
        "--strip-punctuation",
        action="store_true",
        help="Drop leading punctuation and cut at the next punctuation, instead of cutting at quotes",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-count the pairs independently and fail if the histogram disagrees",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except SystemExit as e:
        # --help
        return e.code if isinstance(e.code, int) else 0

    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)

    config = TokenizerConfig(
        fold_case=args.fold_case,
        strip_punctuation=args.strip_punctuation,
    )

    try:
        result = run_pipeline(args.path, config=config, verify=args.verify)
    except BigramError as e:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code

    validation = result["validation"]
    if validation is not None and not validation["passed"]:
        print(f"error: verification failed with {len(validation['errors'])} errors",
              file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
