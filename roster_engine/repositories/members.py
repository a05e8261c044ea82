"""
Member repository.

A MemberRepository is bound to one organization for its whole life and
publishes that organization's members, sorted by name descending.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..data_models import Member, Organization, new_record_id
from ..errors import StoreQueryError, StoreSaveError
from ..observable import ObservableList
from ..store.api import Store

logger = logging.getLogger(__name__)


def sort_members(members: Sequence[Member]) -> list[Member]:
    """
    Order members for display: descending by display name.

    Notes
    -----
    Equal names keep their input order (stable sort), but that order is not part
    of the contract.
    """
    return sorted(members, key=lambda m: m.display_name, reverse=True)


class MemberRepository:
    """
    Repository for the members of one organization.

    Parameters
    ----------
    store:
        Live-session store shared with other repositories.
    organization:
        Organization this repository is bound to. Cannot be changed later.

    Notes
    -----
    The member list starts empty; callers fetch when they open the view.
    """

    def __init__(self, store: Store, organization: Organization) -> None:
        self._store = store
        self._organization = organization
        self.members: ObservableList[Member] = ObservableList()

    @property
    def organization(self) -> Organization:
        return self._organization

    def fetch_members(self) -> Sequence[Member]:
        """
        Load the bound organization's members and publish them.

        Returns
        -------
        Sequence[Member]
            Members sorted descending by name. On query failure, the previous
            contents of the observable list.
        """
        try:
            found = self._store.query(Member, organization_id=self._organization.id)
        except StoreQueryError:
            logger.exception(
                "Fetching members failed; keeping previous list",
                extra={"organization_id": self._organization.id},
            )
            return self.members.items
        self.members.replace(sort_members(found))
        return self.members.items

    def add_member(self, name: str) -> Member | None:
        """
        Create a member of the bound organization, save, and refresh.

        Parameters
        ----------
        name:
            Display name. Empty strings are accepted.

        Returns
        -------
        Member | None
            The new record, or None if the save failed. On failure the list is
            not refreshed and the member stays pending in the live session.
        """
        member = Member(id=new_record_id(), name=name, organization_id=self._organization.id)
        self._store.add(member)
        try:
            self._store.save()
        except StoreSaveError:
            logger.exception(
                "Saving member failed; it stays pending in the live session",
                extra={"organization_id": self._organization.id, "member_id": member.id},
            )
            return None

        self.fetch_members()
        return member
