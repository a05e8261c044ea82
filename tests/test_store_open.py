from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from roster_engine.data_models import Organization
from roster_engine.errors import StoreInitError
from roster_engine.store.schema import SCHEMA_VERSION
from roster_engine.store.sqlite_store import IN_MEMORY_TARGET, open_store


def test_open_creates_parent_directories_and_stamps_version(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "deeper" / "roster.sqlite"

    with open_store(db):
        pass

    assert db.exists()
    conn = sqlite3.connect(db)
    try:
        assert conn.execute("PRAGMA user_version").fetchone()[0] == SCHEMA_VERSION
    finally:
        conn.close()


def test_open_under_data_root_uses_canonical_file(tmp_path: Path) -> None:
    with open_store(data_root=tmp_path) as store:
        assert Path(store.location) == (tmp_path / "orgroster.sqlite").resolve()
    assert (tmp_path / "orgroster.sqlite").exists()


def test_explicit_db_path_wins_over_data_root(tmp_path: Path) -> None:
    db = tmp_path / "explicit.sqlite"
    with open_store(db, data_root=tmp_path / "ignored") as store:
        assert store.location == str(db)
    assert not (tmp_path / "ignored").exists()


def test_in_memory_stores_share_nothing() -> None:
    with open_store(in_memory=True) as first:
        assert first.location == IN_MEMORY_TARGET
        first.add(Organization(id="o1", title="Acme", owner="Jane"))
        first.save()

        with open_store(in_memory=True) as second:
            assert second.query(Organization) == []


def test_open_directory_raises_init_error(tmp_path: Path) -> None:
    with pytest.raises(StoreInitError):
        open_store(tmp_path)


def test_open_garbage_file_raises_init_error(tmp_path: Path) -> None:
    db = tmp_path / "roster.sqlite"
    db.write_bytes(b"this is not a sqlite database\n" * 200)

    with pytest.raises(StoreInitError) as excinfo:
        open_store(db)

    assert isinstance(excinfo.value.__cause__, sqlite3.DatabaseError)


def test_open_newer_schema_version_raises_init_error(tmp_path: Path) -> None:
    db = tmp_path / "roster.sqlite"
    conn = sqlite3.connect(db)
    conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION + 1}")
    conn.close()

    with pytest.raises(StoreInitError, match="newer"):
        open_store(db)


def test_open_when_parent_is_a_file_raises_init_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(StoreInitError):
        open_store(blocker / "roster.sqlite")
