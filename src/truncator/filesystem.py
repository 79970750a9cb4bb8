from __future__ import annotations

import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import NoReturn, Protocol

from .errors import DirectoryNotFoundError


class FileSystem(Protocol):
    """
    The filesystem operations the truncation engine relies on.

    - Listings are non-recursive; their order is not part of the contract.
    - delete_* raise FileNotFoundError when the entry is already gone and
      DirectoryNotFoundError when its parent directory is gone.
    """

    def directory_exists(self, path: Path) -> bool: ...

    def list_files(self, path: Path) -> list[Path]: ...

    def list_directories(self, path: Path) -> list[Path]: ...

    def created_at(self, path: Path) -> datetime: ...

    def delete_file(self, path: Path) -> None: ...

    def delete_directory(self, path: Path) -> None: ...


def _creation_timestamp(path: Path) -> float:
    """
    Creation time in epoch seconds.

    Uses st_birthtime where the platform exposes it (macOS, BSD, Windows).
    Elsewhere (Linux) falls back to the earlier of mtime and ctime: ctime
    alone is the inode change time, which chmod, chown, rename or a new
    hard link would move forward.
    """
    st = path.stat()
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return float(birth)
    return float(min(st.st_mtime, st.st_ctime))


class LocalFileSystem:
    """Port implementation backed by the real OS filesystem."""

    def directory_exists(self, path: Path) -> bool:
        try:
            return Path(path).is_dir()
        except OSError:
            return False

    def list_files(self, path: Path) -> list[Path]:
        return sorted(p for p in Path(path).iterdir() if p.is_file())

    def list_directories(self, path: Path) -> list[Path]:
        return sorted(p for p in Path(path).iterdir() if p.is_dir())

    def created_at(self, path: Path) -> datetime:
        return datetime.fromtimestamp(_creation_timestamp(Path(path)), tz=timezone.utc)

    def delete_file(self, path: Path) -> None:
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError as e:
            self._raise_missing(path, e)

    def delete_directory(self, path: Path) -> None:
        path = Path(path)
        try:
            shutil.rmtree(path)
        except FileNotFoundError as e:
            self._raise_missing(path, e)

    def _raise_missing(self, path: Path, error: FileNotFoundError) -> NoReturn:
        if not self.directory_exists(path.parent):
            raise DirectoryNotFoundError(
                f"Containing directory no longer exists: {path.parent}"
            ) from error
        raise error
