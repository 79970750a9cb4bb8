import os
import sys
import time
from pathlib import Path

import pytest

from truncator import (
    DeletionOutcome,
    DirectoryNotFoundError,
    DirectoryTruncator,
    InvalidArgumentError,
    TruncationMode,
)


def _four_dirs(fake_fs):
    d1 = fake_fs.add_dir("D1", minute=1)
    d2 = fake_fs.add_dir("D2", minute=2)
    fake_fs.add_dir("nested", minute=3, parent=d2)
    d3 = fake_fs.add_dir("D3", minute=4)
    d4 = fake_fs.add_dir("D4", minute=5)
    return d1, d2, d3, d4


def test_oldest_directory_deleted_regardless_of_nesting(fake_fs):
    d1, d2, _, _ = _four_dirs(fake_fs)

    report = DirectoryTruncator("/data", fake_fs).truncate_by_directory(3)

    assert report.mode == TruncationMode.DIRECTORIES
    assert report.found == 4
    assert report.deleted == [d1]
    assert fake_fs.children() == {"D2", "D3", "D4"}
    assert fake_fs.children(d2) == {"nested"}


def test_grandchildren_not_counted(fake_fs):
    _four_dirs(fake_fs)

    report = DirectoryTruncator("/data", fake_fs).truncate_by_directory(4)

    assert report.found == 4
    assert fake_fs.delete_attempts == []


def test_whole_subtree_removed(fake_fs):
    d1 = fake_fs.add_dir("old", minute=1)
    inner = fake_fs.add_dir("inner", minute=2, parent=d1)
    fake_fs.add_file("x.log", minute=2, parent=inner)
    fake_fs.add_file("y.log", minute=2, parent=d1)
    fake_fs.add_dir("new", minute=9)

    DirectoryTruncator("/data", fake_fs).truncate_by_directory(1)

    assert fake_fs.children() == {"new"}
    assert fake_fs.files == {}


def test_files_in_target_not_counted_as_directories(fake_fs):
    fake_fs.add_file("keep.txt", minute=0)
    fake_fs.add_dir("a", minute=1)

    DirectoryTruncator("/data", fake_fs).truncate_by_directory(0)

    assert fake_fs.children() == {"keep.txt"}


def test_under_limit_is_noop(fake_fs):
    fake_fs.add_dir("a", minute=1)

    report = DirectoryTruncator("/data", fake_fs).truncate_by_directory(5)

    assert report.excess == 0
    assert fake_fs.delete_attempts == []


def test_equal_timestamps_keep_listing_order(fake_fs):
    first = fake_fs.add_dir("b", minute=1)
    fake_fs.add_dir("a", minute=1)

    report = DirectoryTruncator("/data", fake_fs).truncate_by_directory(1)

    assert report.deleted == [first]


def test_negative_limit_rejected(fake_fs):
    fake_fs.add_dir("a", minute=1)

    with pytest.raises(InvalidArgumentError):
        DirectoryTruncator("/data", fake_fs).truncate_by_directory(-1)

    assert fake_fs.delete_attempts == []


def test_deletion_failures_tolerated(fake_fs):
    a = fake_fs.add_dir("a", minute=1)
    b = fake_fs.add_dir("b", minute=2)
    c = fake_fs.add_dir("c", minute=3)
    d = fake_fs.add_dir("d", minute=4)
    fake_fs.fail_delete(a, FileNotFoundError("a"))
    fake_fs.fail_delete(b, DirectoryNotFoundError("/data"))
    fake_fs.fail_delete(c, PermissionError("denied"))

    report = DirectoryTruncator("/data", fake_fs).truncate_by_directory(0)

    assert fake_fs.delete_attempts == [a, b, c, d]
    assert [r.outcome for r in report.results] == [
        DeletionOutcome.NOT_FOUND,
        DeletionOutcome.DIRECTORY_NOT_FOUND,
        DeletionOutcome.FAILED,
        DeletionOutcome.DELETED,
    ]
    assert report.deleted == [d]


# ------------------------------------------------------------
# Real disk
# ------------------------------------------------------------


def _make_dirs(root: Path) -> list[Path]:
    dirs = []
    for name in ("D1", "D2", "D3", "D4"):
        d = root / name
        d.mkdir()
        (d / "content.txt").write_text(name)
        if name == "D2":
            (d / "nested" / "deeper").mkdir(parents=True)
            (d / "nested" / "deeper" / "f.txt").write_text("x")
        dirs.append(d)
    return dirs


def test_real_disk_keeps_newest_directories(tmp_path):
    _make_dirs(tmp_path)

    report = DirectoryTruncator(tmp_path).truncate_by_directory(3)

    assert report.ok
    assert len(report.deleted) == 1
    assert len([p for p in tmp_path.iterdir() if p.is_dir()]) == 3


def test_real_disk_removes_nested_subtrees(tmp_path):
    _make_dirs(tmp_path)
    (tmp_path / "loose.txt").write_text("not a directory")

    DirectoryTruncator(tmp_path).truncate_by_directory(0)

    assert [p.name for p in tmp_path.iterdir()] == ["loose.txt"]


@pytest.mark.skipif(sys.platform == "win32", reason="utime cannot move birth time")
def test_real_disk_orders_directories_by_timestamp(tmp_path):
    now = time.time()
    for name, seconds_ago in (("z", 300), ("y", 200), ("x", 100)):
        d = tmp_path / name
        (d / "inner").mkdir(parents=True)
        os.utime(d, (now - seconds_ago, now - seconds_ago))

    report = DirectoryTruncator(tmp_path).truncate_by_directory(1)

    assert [p.name for p in report.deleted] == ["z", "y"]
    assert [p.name for p in tmp_path.iterdir()] == ["x"]
