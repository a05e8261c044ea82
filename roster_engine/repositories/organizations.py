"""
Organization repository.

Lists and creates organizations against an injected Store and publishes the
last successful fetch through an ObservableList.

Notes
-----
- ``create`` re-queries every organization after each save instead of
  appending. That is fine at desktop scale and is the simplest way to keep
  the observable list identical to what the store returns.
- Errors never reach the caller. Fetch errors keep the stale list; save errors
  skip the refresh and leave the record pending in the live session.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..data_models import Organization, new_record_id
from ..errors import StoreQueryError, StoreSaveError
from ..observable import ObservableList
from ..store.api import Store

logger = logging.getLogger(__name__)


class OrganizationRepository:
    """
    Repository for Organization records.

    Parameters
    ----------
    store:
        Live-session store shared with other repositories.
    """

    def __init__(self, store: Store) -> None:
        self._store = store
        self.organizations: ObservableList[Organization] = ObservableList()
        self.fetch_all()

    def fetch_all(self) -> Sequence[Organization]:
        """
        Load every organization and publish the result.

        Returns
        -------
        Sequence[Organization]
            Organizations in store-native order. On query failure, the previous
            (stale) contents of the observable list.
        """
        try:
            result = self._store.query(Organization)
        except StoreQueryError:
            logger.exception("Fetching organizations failed; keeping previous list")
            return self.organizations.items
        self.organizations.replace(result)
        return self.organizations.items

    def create(self, title: str, owner: str) -> Organization | None:
        """
        Create an organization, save, and refresh the observable list.

        Parameters
        ----------
        title:
            Display name. Empty strings are accepted.
        owner:
            Responsible party. Empty strings are accepted.

        Returns
        -------
        Organization | None
            The new record, or None if the save failed.
        """
        organization = Organization(id=new_record_id(), title=title, owner=owner)
        self._store.add(organization)
        try:
            self._store.save()
        except StoreSaveError:
            logger.exception(
                "Saving organization failed; it stays pending in the live session",
                extra={"organization_id": organization.id},
            )
            return None

        logger.info("Created organization %r", title, extra={"organization_id": organization.id})
        self.fetch_all()
        return organization
