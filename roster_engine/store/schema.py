"""SQLite schema for the orgroster store.

Notes
-----
``PRAGMA user_version`` records the schema version. A file written by a newer
build is refused rather than guessed at.
"""

from __future__ import annotations

from typing import Final

SCHEMA_VERSION: Final[int] = 1

SCHEMA_V1: Final[str] = """
CREATE TABLE IF NOT EXISTS organizations (
    id    TEXT PRIMARY KEY,
    title TEXT NULL,
    owner TEXT NULL
);

CREATE TABLE IF NOT EXISTS members (
    id              TEXT PRIMARY KEY,
    name            TEXT NULL,
    organization_id TEXT NOT NULL,
    FOREIGN KEY (organization_id) REFERENCES organizations(id)
);

CREATE INDEX IF NOT EXISTS idx_members_organization ON members(organization_id);
"""
