"""Shared fixtures for the zip_sync test suite."""

from __future__ import annotations

import os
import time
import zipfile
from pathlib import Path

import pytest

# ── Reusable constants ───────────────────────────────────────────────────────

# Even-second local timestamp, exactly representable in a ZIP entry.
BASE_TIME = time.mktime((2020, 6, 1, 12, 0, 0, 0, 0, -1))


def set_mtime(path: Path, timestamp: float) -> None:
    os.utime(path, (timestamp, timestamp))


def entry_table(archive: Path) -> dict[str, tuple[int, ...]]:
    """Return ``{name: date_time}`` for every entry in *archive*."""
    with zipfile.ZipFile(archive) as zf:
        return {info.filename: info.date_time for info in zf.infolist()}


def entry_names(archive: Path) -> list[str]:
    with zipfile.ZipFile(archive) as zf:
        return zf.namelist()


def read_entry(archive: Path, name: str) -> bytes:
    with zipfile.ZipFile(archive) as zf:
        return zf.read(name)


# ── Directory tree fixtures ──────────────────────────────────────────────────

@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree with pinned modification times.

    Layout::

        source/
        ├── a/
        │   └── b.txt          "hello"
        ├── c.txt              "world"
        ├── binary.bin         (random 4 KiB)
        └── d/                 (empty)
    """
    root = tmp_path / "source"
    root.mkdir()
    (root / "a").mkdir()
    (root / "a" / "b.txt").write_text("hello")
    (root / "c.txt").write_text("world")
    (root / "binary.bin").write_bytes(os.urandom(4096))
    (root / "d").mkdir()
    for p in (root / "a" / "b.txt", root / "c.txt", root / "binary.bin",
              root / "a", root / "d"):
        set_mtime(p, BASE_TIME)
    return root


@pytest.fixture()
def unicode_tree(tmp_path: Path) -> Path:
    """Directory tree with unicode names and content."""
    root = tmp_path / "юнікод_源"
    root.mkdir()
    (root / "файл_文件.txt").write_text("Привіт 你好 🌍\n" * 50, encoding="utf-8")
    sub = root / "підкаталог_子目录"
    sub.mkdir()
    (sub / "δεδομένα.bin").write_bytes(os.urandom(1024))
    return root


@pytest.fixture()
def archive_path(tmp_path: Path) -> Path:
    return tmp_path / "out.zip"
