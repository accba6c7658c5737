"""Bigram pipeline — text file to printed histogram.

Usage:
    python -m bigram.engine.pipeline <text_file>

Processes a text file through:
1. Read (whole file into memory, strict UTF-8 decode)
2. Tokenization (whitespace split, quote truncation)
3. Counting (ordered bigram histogram)
4. Report (one line per bigram in first-seen order, then the total)
"""
from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from ..errors import BigramError, FileAccessError, InvalidEncoding
from .histogram import BigramHistogram
from .tokenizer import TokenizerConfig, tokenize
from .validate import validate_histogram

logger = logging.getLogger(__name__)

BULLET = "•"


def read_text(path) -> str:
    """Read a file fully and decode it as UTF-8.

    A leading byte-order mark is dropped. Raises FileAccessError when the
    file cannot be read and InvalidEncoding when it is not valid UTF-8.
    """
    text_path = Path(path)
    try:
        data = text_path.read_bytes()
    except OSError as e:
        raise FileAccessError(path, e) from e

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(path, e.start) from e
    return text.removeprefix("\ufeff")


def format_header(path) -> str:
    return f"Generating bigram histogram for {path}"


def format_report(path, histogram: BigramHistogram) -> list[str]:
    """Render the report lines for a histogram.

    Header, one bullet line per bigram in first-seen order, then the
    total number of bigram occurrences.
    """
    lines = [format_header(path)]
    for entry in histogram:
        lines.append(f'{BULLET} "{entry.bigram}" {entry.count}')
    lines.append(f"Total no. of bigrams generated: {histogram.total}")
    return lines


def run_pipeline(path, config: TokenizerConfig | None = None, out=None,
                 verify: bool = False) -> dict:
    """Run the full pipeline on a text file and print the report.

    Args:
        path: Path to a UTF-8 text file
        config: Optional TokenizerConfig
        out: Writable text stream (default: stdout)
        verify: Re-count the pairs independently and check the histogram

    Returns:
        dict with the histogram and run statistics. "validation" holds the
        validate_histogram result when verify is set, else None.
    """
    if out is None:
        out = sys.stdout

    out.write(format_header(path) + "\n")

    # Step 1: Read
    t0 = time.time()
    text = read_text(path)
    t1 = time.time()
    logger.info("Read %s: %d characters (%.3fs)", path, len(text), t1 - t0)

    # Step 2: Tokenize
    tokens = tokenize(text, config)
    t2 = time.time()
    logger.info("Tokens: %d (%.3fs)", len(tokens), t2 - t1)

    # Step 3: Count
    histogram = BigramHistogram.from_tokens(tokens)
    t3 = time.time()
    logger.info("Bigrams: %d distinct from %d total (%.3fs)",
                len(histogram), histogram.total, t3 - t2)

    # Step 4: Report (header already written)
    for line in format_report(path, histogram)[1:]:
        out.write(line + "\n")

    validation = None
    if verify:
        validation = validate_histogram(tokens, histogram)
        if validation["passed"]:
            logger.info("Verified %d bigrams", validation["expected_pairs"])
        else:
            for err in validation["errors"]:
                logger.error(err)

    total_time = time.time() - t0
    logger.debug("Total pipeline time: %.3fs", total_time)

    return {
        "histogram": histogram,
        "token_count": len(tokens),
        "distinct": len(histogram),
        "total": histogram.total,
        "validation": validation,
        "total_time": total_time,
    }


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python -m bigram.engine.pipeline <text_file>", file=sys.stderr)
        sys.exit(2)
    try:
        run_pipeline(sys.argv[1])
    except BigramError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(e.exit_code)
