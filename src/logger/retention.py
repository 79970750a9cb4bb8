from __future__ import annotations

from pathlib import Path


class _LogFilesOnly:
    """Filesystem view that lists only *.log files; everything else delegates."""

    def __init__(self, fs) -> None:
        self._fs = fs

    def __getattr__(self, name: str):
        return getattr(self._fs, name)

    def list_files(self, path: Path) -> list[Path]:
        return [p for p in self._fs.list_files(path) if p.suffix == ".log"]


def enforce_retention(log_dir: Path, keep: int, *, incoming: int = 0) -> None:
    """
    Bound `log_dir` to the newest `keep` *.log files.

    `incoming` reserves slots for logs about to be written (init_logging
    passes 1 for the file of the current run), so once they exist the
    directory holds at most `keep`. Other files are never touched.

    A non-positive `keep` disables retention. Uses the same truncation
    engine the CLI exposes, so per-file failures are logged, never raised.
    """
    if keep <= 0:
        return

    # Imported lazily: the engine logs through this package.
    from truncator import DirectoryTruncator, LocalFileSystem

    fs = _LogFilesOnly(LocalFileSystem())
    DirectoryTruncator(log_dir, fs).truncate_by_file_count(max(keep - incoming, 0))
