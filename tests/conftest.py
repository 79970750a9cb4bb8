import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeFileSystem:
    """
    In-memory FileSystem port.

    Entries are registered with a creation offset in minutes; listings come
    back in registration order. Each operation can be overridden to return
    a fixed value or raise.
    """

    def __init__(self, root: Path):
        self.root = root
        self.dirs: dict[Path, datetime] = {root: EPOCH}
        self.files: dict[Path, datetime] = {}

        self.exists_result: bool | None = None
        self.list_error: BaseException | None = None
        self.created_errors: dict[Path, BaseException] = {}
        self.delete_errors: dict[Path, BaseException] = {}

        self.delete_attempts: list[Path] = []

    # ---- setup helpers ----

    def add_file(self, name: str, minute: int, parent: Path | None = None) -> Path:
        path = (parent or self.root) / name
        self.files[path] = EPOCH + timedelta(minutes=minute)
        return path

    def add_dir(self, name: str, minute: int, parent: Path | None = None) -> Path:
        path = (parent or self.root) / name
        self.dirs[path] = EPOCH + timedelta(minutes=minute)
        return path

    def fail_delete(self, path: Path, error: BaseException) -> None:
        self.delete_errors[path] = error

    def children(self, parent: Path | None = None) -> set[str]:
        parent = parent or self.root
        names = {p.name for p in self.files if p.parent == parent}
        names |= {p.name for p in self.dirs if p.parent == parent}
        return names

    # ---- port ----

    def directory_exists(self, path: Path) -> bool:
        if self.exists_result is not None:
            return self.exists_result
        return Path(path) in self.dirs

    def list_files(self, path: Path) -> list[Path]:
        if self.list_error is not None:
            raise self.list_error
        return [p for p in self.files if p.parent == Path(path)]

    def list_directories(self, path: Path) -> list[Path]:
        if self.list_error is not None:
            raise self.list_error
        return [p for p in self.dirs if p.parent == Path(path)]

    def created_at(self, path: Path) -> datetime:
        if path in self.created_errors:
            raise self.created_errors[path]
        if path in self.files:
            return self.files[path]
        if path in self.dirs:
            return self.dirs[path]
        raise FileNotFoundError(str(path))

    def delete_file(self, path: Path) -> None:
        self.delete_attempts.append(path)
        if path in self.delete_errors:
            raise self.delete_errors[path]
        if path not in self.files:
            raise FileNotFoundError(str(path))
        del self.files[path]

    def delete_directory(self, path: Path) -> None:
        self.delete_attempts.append(path)
        if path in self.delete_errors:
            raise self.delete_errors[path]
        if path not in self.dirs:
            raise FileNotFoundError(str(path))

        def inside(p: Path) -> bool:
            return p == path or path in p.parents

        self.files = {p: t for p, t in self.files.items() if not inside(p)}
        self.dirs = {p: t for p, t in self.dirs.items() if not inside(p)}


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem(Path("/data"))


@pytest.fixture(autouse=True)
def clean_env_and_logging(monkeypatch, tmp_path_factory):
    """
    Ensure tests don't leak env, logger state, or cached configuration.
    """

    keys = [
        "DIRTRUNCATOR_HOME",
        "DIRTRUNCATOR_LOGS_DIR",
        "DIRTRUNCATOR_COMMAND",
        "DIRTRUNCATOR_RUN_ID",
        "DIRTRUNCATOR_VERBOSE",
        "DIRTRUNCATOR_QUIET",
        "DIRTRUNCATOR_TARGET",
        "DIRTRUNCATOR_COUNT",
        "LOG_LEVEL",
        "LOG_RETENTION",
    ]
    for k in keys:
        monkeypatch.delenv(k, raising=False)

    # Never read config/.env or write tool logs inside the working tree
    monkeypatch.setenv("DIRTRUNCATOR_HOME", str(tmp_path_factory.mktemp("home")))
    monkeypatch.setenv("DIRTRUNCATOR_LOGS_DIR", str(tmp_path_factory.mktemp("logs")))

    import bootstrap
    import env
    from logger import reset_logging

    monkeypatch.setattr(bootstrap, "_BOOTSTRAPPED", False)
    env.reset_env_caches()
    reset_logging()

    yield

    reset_logging()
    logging.getLogger().setLevel(logging.WARNING)
    env.reset_env_caches()
