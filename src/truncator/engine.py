from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from logger import get_logger

from .errors import (
    DirectoryNotFoundError,
    InvalidArgumentError,
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

log = get_logger("dirtruncator.engine")


def _require_limit(name: str, value: int) -> None:
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0 (got {value})")


class DirectoryTruncator:
    """
    Trims a directory down to its newest N entries.

    Ordering is ascending by creation time (UTC); entries with equal
    timestamps keep the order the filesystem listed them in. Each call
    re-lists the directory, so nothing is cached between calls.

    Individual deletions never fail the call: every attempt is recorded as a
    DeletionResult on the returned TruncationReport.
    """

    def __init__(
        self,
        target_directory: str | Path | None,
        file_system: Optional[FileSystem] = None,
    ) -> None:
        if target_directory is None or not str(target_directory).strip():
            raise InvalidArgumentError("Target directory must not be empty")

        self._fs: FileSystem = file_system if file_system is not None else LocalFileSystem()
        target = Path(target_directory)

        if not self._fs.directory_exists(target):
            raise InvalidArgumentError(f"Target directory does not exist: {target}")

        self._target = target

    @property
    def target_directory(self) -> Path:
        return self._target

    # ------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------

    def truncate_by_file_count(
        self, max_files: int, recursive: bool = False
    ) -> TruncationReport:
        """
        Delete the oldest files directly inside the target so that at most
        `max_files` remain.

        Raises InvalidArgumentError for a negative limit and
        UnsupportedOperationError when `recursive` is requested.
        """
        _require_limit("max_files", max_files)
        if recursive:
            raise UnsupportedOperationError("Recursive truncation is not supported")

        entries = self._snapshot(self._fs.list_files(self._target))
        return self._truncate(
            entries,
            limit=max_files,
            mode=TruncationMode.FILES,
            delete=self._fs.delete_file,
        )

    def truncate_by_directory(self, max_directories: int) -> TruncationReport:
        """
        Delete the oldest immediate child directories of the target, each
        with its whole subtree, so that at most `max_directories` remain.
        """
        _require_limit("max_directories", max_directories)

        entries = self._snapshot(self._fs.list_directories(self._target))
        return self._truncate(
            entries,
            limit=max_directories,
            mode=TruncationMode.DIRECTORIES,
            delete=self._fs.delete_directory,
        )

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _snapshot(self, paths: Iterable[Path]) -> list[Entry]:
        entries: list[Entry] = []
        for p in paths:
            try:
                created = self._fs.created_at(p)
            except FileNotFoundError:
                log.debug(f"Skipping {p}: removed before it could be inspected")
                continue
            entries.append(Entry(path=p, created=created))

        # list.sort is stable, so equal timestamps keep listing order
        entries.sort(key=lambda e: e.created)
        return entries

    def _truncate(
        self,
        entries: list[Entry],
        *,
        limit: int,
        mode: TruncationMode,
        delete: Callable[[Path], None],
    ) -> TruncationReport:
        report = TruncationReport(
            target=self._target,
            mode=mode,
            limit=limit,
            found=len(entries),
        )

        if report.excess <= 0:
            log.debug(
                f"{self._target}: {len(entries)} {mode.value} within limit {limit}, "
                "nothing to delete"
            )
            return report

        log.info(
            f"{self._target}: {len(entries)} {mode.value} found, limit {limit}, "
            f"deleting {report.excess} oldest"
        )

        for entry in entries[: report.excess]:
            report.results.append(self._delete_one(entry.path, delete))

        if report.failures:
            log.warning(
                f"{self._target}: deleted {len(report.deleted)}/{report.excess}, "
                f"{len(report.failures)} could not be deleted"
            )
        return report

    def _delete_one(
        self, path: Path, delete: Callable[[Path], None]
    ) -> DeletionResult:
        try:
            delete(path)
        except DirectoryNotFoundError as e:
            log.warning(f"Directory vanished before deleting {path}: {e}")
            return DeletionResult(path, DeletionOutcome.DIRECTORY_NOT_FOUND, str(e))
        except FileNotFoundError as e:
            log.info(f"Already gone: {path}")
            return DeletionResult(path, DeletionOutcome.NOT_FOUND, str(e))
        except Exception as e:
            log.error(f"Failed to delete {path}: {e}")
            return DeletionResult(path, DeletionOutcome.FAILED, str(e))

        log.debug(f"Deleted {path}")
        return DeletionResult(path, DeletionOutcome.DELETED)
