"""
Record types persisted by the store.

Notes
-----
Records are immutable once created; there are no update or delete operations.
Members reference their organization by id rather than holding a pointer, and an
organization holds no member collection. Membership is always a query.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

RecordId = str


def new_record_id() -> RecordId:
    """
    Return a fresh, unique record identifier.

    Returns
    -------
    RecordId
        A random UUID4 rendered as 32 hex characters.
    """
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Organization:
    """
    An organization that members belong to.

    Attributes
    ----------
    id:
        Opaque identifier assigned at creation.
    title:
        Display name. May be absent.
    owner:
        Display name of the responsible party. May be absent.
    """

    id: RecordId
    title: str | None
    owner: str | None

    @property
    def display_title(self) -> str:
        return self.title or ""

    @property
    def display_owner(self) -> str:
        return self.owner or ""


@dataclass(frozen=True, slots=True)
class Member:
    """
    A member of exactly one organization.

    Attributes
    ----------
    id:
        Opaque identifier assigned at creation.
    name:
        Display name. May be absent.
    organization_id:
        Identifier of the owning organization (non-owning link).
    """

    id: RecordId
    name: str | None
    organization_id: RecordId

    @property
    def display_name(self) -> str:
        """Name used for display and sorting; empty when the name is absent."""
        return self.name or ""
