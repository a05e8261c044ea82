"""
Store public API.

This module defines the persistence surface that repositories are allowed to
call. Repositories must not depend on SQLite details; they speak only in
record types from ``roster_engine.data_models``.

Notes
-----
- All reads and writes go through one live session per store instance.
- ``add`` only registers a record; nothing is durable until ``save``.
- Queries see committed rows first, then pending records.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, Union

from ..data_models import Member, Organization

Record = Union[Organization, Member]
R = TypeVar("R", Organization, Member)


class Store(Protocol):
    """
    Persistence API over a live session.

    Implementations are engine-owned and single-threaded. Callers inject one
    instance into every repository that needs it.
    """

    @property
    def pending(self) -> tuple[Record, ...]:
        """Records added to the live session but not yet committed."""
        ...

    def add(self, record: Record) -> None:
        """
        Register a new record in the live session.

        Parameters
        ----------
        record:
            Organization or Member to insert on the next ``save``.
        """
        raise NotImplementedError

    def query(self, record_type: type[R], **criteria: object) -> Sequence[R]:
        """
        Return records of one type matching equality criteria.

        Parameters
        ----------
        record_type:
            Organization or Member.
        criteria:
            Field name to expected value. No criteria returns every record.

        Returns
        -------
        Sequence[R]
            Committed records in store-native order, followed by matching
            pending records in the order they were added.

        Raises
        ------
        StoreQueryError
            If the type or a criterion is unknown, or the query fails.
        """
        raise NotImplementedError

    def save(self) -> None:
        """
        Commit every pending record atomically.

        Raises
        ------
        StoreSaveError
            If the commit fails. Durable state is unchanged and the pending
            records remain in the live session.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release the underlying storage handle."""
        raise NotImplementedError
