from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class TruncationMode(str, Enum):
    FILES = "files"
    DIRECTORIES = "directories"


class DeletionOutcome(str, Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class Entry:
    path: Path
    created: datetime


@dataclass(frozen=True)
class DeletionResult:
    path: Path
    outcome: DeletionOutcome
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == DeletionOutcome.DELETED


@dataclass(frozen=True)
class TruncationReport:
    """
    Outcome of a single truncate call.

    `found` is the size of the snapshot taken at call time; `results` holds
    one entry per attempted deletion, oldest first.
    """

    target: Path
    mode: TruncationMode
    limit: int
    found: int
    results: list[DeletionResult] = field(default_factory=list)

    @property
    def excess(self) -> int:
        return max(0, self.found - self.limit)

    @property
    def deleted(self) -> list[Path]:
        return [r.path for r in self.results if r.ok]

    @property
    def failures(self) -> list[DeletionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failures
