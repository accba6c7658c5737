"""Engine tokenizer — text to word sequence.

Text is split on whitespace into maximal non-whitespace runs. Line breaks
of either convention (LF, CRLF) are whitespace like any other, so the same
words on differently terminated lines tokenize identically.

Normalization per run:
  - Quote truncation: everything from the first quote character onward is
    dropped ("scott's" -> "scott", "her'cules" -> "her")
  - Runs that end up empty are discarded; their neighbours become adjacent
  - Case is preserved unless fold_case is set

Code points are never rewritten beyond the rules above.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

# ASCII apostrophe, right single quotation mark, ASCII double quote
QUOTE_CHARS = "'’\""

_QUOTE_PATTERN = re.compile("[" + re.escape(QUOTE_CHARS) + "]")

# Anything that is not an ASCII letter or digit counts as punctuation
_PUNCT_PATTERN = re.compile(r"[^A-Za-z0-9]+")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

# Unicode White_Space only; U+001C-U+001F separators stay inside words
_WHITESPACE_PATTERN = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


@dataclass(frozen=True)
class TokenizerConfig:
    """Configuration for word normalization."""
    fold_case: bool = False          # ASCII-lowercase every word
    strip_punctuation: bool = False  # Drop leading punctuation, cut at the next; replaces quote truncation


DEFAULT_CONFIG = TokenizerConfig()


def truncate_at_quote(word: str) -> str:
    """Cut a word at its first quote character.

    Returns the substring strictly before the quote, which is empty when
    the word starts with one. Words without quotes come back unchanged.
    """
    m = _QUOTE_PATTERN.search(word)
    if m is None:
        return word
    return word[:m.start()]


def strip_punctuation(word: str) -> str:
    """Remove leading punctuation and cut at the first punctuation after it.

    "...???fox...!!!" -> "fox", "fox's" -> "fox", "?!" -> "".
    """
    m = _PUNCT_PATTERN.search(word)
    if m is None:
        return word
    if m.start() > 0:
        return word[:m.start()]

    # Punctuation at the start: drop it, then cut at any trailing punctuation
    rest = word[m.end():]
    m = _PUNCT_PATTERN.search(rest)
    if m is None:
        return rest
    return rest[:m.start()]


def normalize(word: str, config: TokenizerConfig = DEFAULT_CONFIG) -> str:
    """Normalize one whitespace-delimited run. May return an empty string."""
    if config.fold_case:
        word = word.translate(_ASCII_LOWER)
    if config.strip_punctuation:
        return strip_punctuation(word)
    return truncate_at_quote(word)


def iter_tokens(text: str, config: TokenizerConfig | None = None):
    """Yield normalized, non-empty tokens from text in order."""
    if config is None:
        config = DEFAULT_CONFIG
    for run in _WHITESPACE_PATTERN.split(text):
        word = normalize(run, config)
        if word:
            yield word


def tokenize(text: str, config: TokenizerConfig | None = None) -> list[str]:
    """Tokenize text into a list of words.

    Args:
        text: Decoded input text
        config: Optional TokenizerConfig (defaults to quote truncation,
            case preserved)

    Returns:
        List of non-empty token strings in text order.
    """
    if not isinstance(text, str):
        raise ValueError(f"tokenize expects str, got {type(text).__name__}")
    return list(iter_tokens(text, config))
