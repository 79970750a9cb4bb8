"""
Directory truncation engine.

Keeps the newest N entries of a directory (files, or immediate child
directories) and deletes the rest, oldest first by creation time.

No side effects at package import time.
"""
from __future__ import annotations

from .engine import DirectoryTruncator
from .errors import (
    DirectoryNotFoundError,
    InvalidArgumentError,
    TruncatorError,
    UnsupportedOperationError,
)
from .filesystem import FileSystem, LocalFileSystem
from .results import (
    DeletionOutcome,
    DeletionResult,
    Entry,
    TruncationMode,
    TruncationReport,
)

__all__ = [
    "DirectoryTruncator",
    "DirectoryNotFoundError",
    "InvalidArgumentError",
    "TruncatorError",
    "UnsupportedOperationError",
    "FileSystem",
    "LocalFileSystem",
    "DeletionOutcome",
    "DeletionResult",
    "Entry",
    "TruncationMode",
    "TruncationReport",
]
