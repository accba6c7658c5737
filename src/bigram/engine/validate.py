"""Validation utilities for the bigram histogram.

Verifies:
1. Counting accuracy (every pair in the token sequence counted exactly)
2. Order integrity (each bigram listed once, in first-seen order)
3. Total (sum of counts equals the number of adjacent pairs)
"""

from collections import Counter

from .histogram import bigram_key


def validate_histogram(tokens, histogram):
    """Check a histogram against an independent re-count of tokens.

    Returns:
        dict with passed, expected_pairs, actual_pairs, total and a list
        of error strings.
    """
    expected = Counter()
    first_seen = []
    for i in range(len(tokens) - 1):
        key = bigram_key(tokens[i], tokens[i + 1])
        if key not in expected:
            first_seen.append(key)
        expected[key] += 1

    actual = dict(histogram.items())
    order = histogram.order

    errors = []
    for key, count in expected.items():
        if key not in actual:
            errors.append(f"  MISSING: {key!r} (expected count={count})")
        elif actual[key] != count:
            errors.append(f"  COUNT MISMATCH: {key!r} expected={count} got={actual[key]}")

    for key in actual:
        if key not in expected:
            errors.append(f"  EXTRA: {key!r} (count={actual[key]})")

    duplicates = [key for key, n in Counter(order).items() if n > 1]
    for key in duplicates:
        errors.append(f"  DUPLICATE IN ORDER: {key!r}")
    if len(order) != len(actual):
        errors.append(f"  ORDER LENGTH: {len(order)} entries for {len(actual)} bigrams")
    elif not duplicates and order != first_seen:
        errors.append("  ORDER: bigrams not listed in first-seen order")

    expected_total = max(0, len(tokens) - 1)
    if histogram.total != expected_total:
        errors.append(f"  TOTAL: expected={expected_total} got={histogram.total}")
    if sum(actual.values()) != histogram.total:
        errors.append(f"  TOTAL: counts sum to {sum(actual.values())}, "
                      f"histogram reports {histogram.total}")

    return {
        "passed": len(errors) == 0,
        "expected_pairs": len(expected),
        "actual_pairs": len(actual),
        "total": histogram.total,
        "errors": errors,
    }
