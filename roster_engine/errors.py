"""
Domain exceptions for orgroster.

Notes
-----
Engine code avoids raising generic exceptions. Every expected failure mode maps
to a domain exception, and low-level ``sqlite3`` errors are chained as the cause.
"""

from __future__ import annotations


class RosterError(RuntimeError):
    """Base exception for all orgroster domain failures."""


class PathConfigError(RosterError):
    """Raised when the data root or store path cannot be resolved safely."""


class StoreError(RosterError):
    """Base error for store operations."""


class StoreInitError(StoreError):
    """Raised when the store file cannot be opened or its schema cannot be applied."""


class StoreQueryError(StoreError):
    """Raised when a query against the live session fails."""


class StoreSaveError(StoreError):
    """Raised when pending changes cannot be committed."""
