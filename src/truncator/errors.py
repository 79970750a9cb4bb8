from __future__ import annotations


class TruncatorError(Exception):
    """Base error for anything the truncation engine rejects."""


class InvalidArgumentError(TruncatorError, ValueError):
    """Empty or missing target directory, or a negative limit."""


class UnsupportedOperationError(TruncatorError, NotImplementedError):
    """Requested truncation mode is reserved but not implemented."""


class DirectoryNotFoundError(FileNotFoundError):
    """The directory containing an entry disappeared before it was deleted."""
