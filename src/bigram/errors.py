"""Errors raised by the bigram counter.

Each error carries the process exit code the CLI reports it with.
"""


class BigramError(Exception):
    """Base class for all bigram counter failures."""
    exit_code = 1


class UsageError(BigramError):
    """Wrong command-line arguments. No file I/O has been attempted."""
    exit_code = 2


class FileAccessError(BigramError):
    """The input path is missing, a directory, or cannot be read."""
    exit_code = 9

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Cannot read the file {path}: {reason}")


class InvalidEncoding(BigramError):
    """The input file is not valid UTF-8."""
    exit_code = 9

    def __init__(self, path, offset):
        self.path = path
        self.offset = offset
        super().__init__(
            f"{path} is not valid UTF-8 (first invalid byte at offset {offset})"
        )
