"""
SQLite implementation of Store.

This module owns the on-disk persistence format for organizations and members.

Threading
---------
The store holds one sqlite3 connection for its whole lifetime and is meant to be
used from a single thread. The connection keeps sqlite3's default same-thread
check, so use from another thread fails loudly instead of racing.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Final, Sequence

from ..data_models import Member, Organization
from ..errors import PathConfigError, StoreError, StoreInitError, StoreQueryError, StoreSaveError
from ..paths import resolve_store_path
from .api import R, Record, Store
from .schema import SCHEMA_V1, SCHEMA_VERSION

logger = logging.getLogger(__name__)

IN_MEMORY_TARGET: Final[str] = ":memory:"


@dataclass(frozen=True, slots=True)
class _Table:
    name: str
    columns: tuple[str, ...]


# Insertion order during save; parents before children for the foreign key.
_TABLE_NAMES: Final[dict[type, str]] = {
    Organization: "organizations",
    Member: "members",
}


def _table_for(record_type: type) -> _Table:
    return _Table(name=_TABLE_NAMES[record_type], columns=tuple(f.name for f in fields(record_type)))


def _apply_schema(conn: sqlite3.Connection) -> None:
    """
    Create or validate the schema.

    Raises
    ------
    StoreInitError
        If the file was written by a newer schema version.
    sqlite3.Error
        If the file is not a usable SQLite database.
    """
    version = int(conn.execute("PRAGMA user_version").fetchone()[0])
    if version > SCHEMA_VERSION:
        raise StoreInitError(
            f"Store schema version {version} is newer than supported version {SCHEMA_VERSION}."
        )
    conn.executescript(SCHEMA_V1)
    if version < SCHEMA_VERSION:
        conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")


class SqliteStore(Store):
    """
    SQLite-backed Store with a single live session.

    Parameters
    ----------
    conn:
        Open connection with the schema already applied. Use ``open_store``
        rather than constructing this directly.
    location:
        Display form of where the data lives (a path or ":memory:").
    """

    def __init__(self, conn: sqlite3.Connection, location: str) -> None:
        self._conn = conn
        self._location = location
        self._pending: list[Record] = []

    @property
    def location(self) -> str:
        return self._location

    @property
    def pending(self) -> tuple[Record, ...]:
        """See Store.pending."""
        return tuple(self._pending)

    def add(self, record: Record) -> None:
        """See Store.add."""
        if type(record) not in _TABLE_NAMES:
            raise StoreError(f"Unsupported record type: {type(record).__name__}")
        self._pending.append(record)

    def query(self, record_type: type[R], **criteria: object) -> Sequence[R]:
        """See Store.query."""
        if record_type not in _TABLE_NAMES:
            raise StoreQueryError(f"Unsupported record type: {record_type!r}")
        table = _table_for(record_type)
        unknown = sorted(set(criteria) - set(table.columns))
        if unknown:
            raise StoreQueryError(f"Unknown {table.name} fields: {', '.join(unknown)}")

        sql = f"SELECT {', '.join(table.columns)} FROM {table.name}"
        params = tuple(criteria.values())
        if criteria:
            sql += " WHERE " + " AND ".join(f"{key} IS ?" for key in criteria)
        sql += " ORDER BY rowid ASC"

        try:
            rows = self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StoreQueryError(f"Query on {table.name} failed: {exc}") from exc

        out: list[R] = [record_type(**{col: row[col] for col in table.columns}) for row in rows]
        for rec in self._pending:
            if type(rec) is record_type and all(getattr(rec, k) == v for k, v in criteria.items()):
                out.append(rec)
        return out

    def save(self) -> None:
        """See Store.save."""
        if not self._pending:
            return

        rank = {record_type: i for i, record_type in enumerate(_TABLE_NAMES)}
        ordered = sorted(self._pending, key=lambda rec: rank[type(rec)])
        try:
            self._conn.execute("BEGIN")
            for rec in ordered:
                self._insert(rec)
            self._conn.execute("COMMIT")
        except sqlite3.Error as exc:
            self._rollback()
            raise StoreSaveError(f"Saving {len(ordered)} pending record(s) failed: {exc}") from exc

        logger.debug("Committed %d record(s) to %s", len(ordered), self._location)
        self._pending.clear()

    def close(self) -> None:
        """See Store.close."""
        if self._pending:
            logger.warning(
                "Closing store with %d uncommitted record(s)",
                len(self._pending),
                extra={"db_path": self._location},
            )
        self._conn.close()

    def __enter__(self) -> "SqliteStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _insert(self, record: Record) -> None:
        table = _table_for(type(record))
        placeholders = ", ".join("?" for _ in table.columns)
        self._conn.execute(
            f"INSERT INTO {table.name}({', '.join(table.columns)}) VALUES({placeholders})",
            tuple(getattr(record, col) for col in table.columns),
        )

    def _rollback(self) -> None:
        try:
            if self._conn.in_transaction:
                self._conn.execute("ROLLBACK")
        except sqlite3.Error:
            logger.exception("Rollback failed for %s", self._location)


def open_store(
    db_path: Path | None = None,
    *,
    in_memory: bool = False,
    data_root: Path | None = None,
) -> SqliteStore:
    """
    Open the durable store, creating the file and schema if needed.

    Parameters
    ----------
    db_path:
        Explicit path to the SQLite file. Takes precedence over data_root.
    in_memory:
        Use a non-persistent sink; nothing survives the process.
    data_root:
        Optional override for the orgroster data root.

    Returns
    -------
    SqliteStore
        Ready-to-use store with an empty live session.

    Raises
    ------
    StoreInitError
        If the file cannot be opened or its schema cannot be applied. The caller
        decides whether that is fatal.
    """
    if in_memory:
        target = IN_MEMORY_TARGET
    else:
        try:
            path = db_path if db_path is not None else resolve_store_path(data_root)
            path.parent.mkdir(parents=True, exist_ok=True)
        except (OSError, PathConfigError) as exc:
            raise StoreInitError(f"Cannot prepare store location: {exc}") from exc
        target = str(path)

    try:
        conn = sqlite3.connect(target, isolation_level=None)
    except sqlite3.Error as exc:
        raise StoreInitError(f"Cannot open store at {target}: {exc}") from exc

    try:
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        _apply_schema(conn)
    except StoreInitError:
        conn.close()
        raise
    except sqlite3.Error as exc:
        conn.close()
        raise StoreInitError(f"Cannot apply schema to store at {target}: {exc}") from exc

    logger.info("Opened store at %s", target, extra={"db_path": target})
    return SqliteStore(conn=conn, location=target)
