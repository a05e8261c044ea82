"""
orgroster GUI app.

Two-page window (organizations, then members of one organization) backed by
engine repositories over an injected store.
"""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication, QStackedWidget, QVBoxLayout, QWidget

from gui.views.members_view import MembersView
from gui.views.organizations_view import OrganizationsView
from roster_engine.data_models import Organization
from roster_engine.repositories.members import MemberRepository
from roster_engine.repositories.organizations import OrganizationRepository
from roster_engine.store.api import Store

logger = logging.getLogger(__name__)


class AppWindow(QWidget):
    """
    Main window for the orgroster GUI.

    Responsibilities
    ----------------
    - Own the organization repository for the session
    - Navigate between the organization list and one organization's members
    - Detach views from engine lists when they are closed
    """

    def __init__(self, store: Store) -> None:
        super().__init__()
        self._store = store
        self.setWindowTitle("Company")
        self.resize(520, 720)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self._pages = QStackedWidget()
        root.addWidget(self._pages)

        self.organizations = OrganizationRepository(store)
        self.organizations_view = OrganizationsView(self.organizations)
        self.organizations_view.organization_opened.connect(self.open_organization)
        self._pages.addWidget(self.organizations_view)

        self.members_view: MembersView | None = None

    def open_organization(self, organization: Organization) -> None:
        """Show the members page for organization."""
        self._close_members()
        logger.debug("Opening organization %s", organization.id)
        view = MembersView(MemberRepository(self._store, organization))
        view.back_requested.connect(self.show_organizations)
        self.members_view = view
        self._pages.addWidget(view)
        self._pages.setCurrentWidget(view)
        self.setWindowTitle("Employees")

    def show_organizations(self) -> None:
        """Return to the organization list."""
        self._close_members()
        self._pages.setCurrentWidget(self.organizations_view)
        self.setWindowTitle("Company")

    def _close_members(self) -> None:
        if self.members_view is None:
            return
        self.members_view.shutdown()
        self._pages.removeWidget(self.members_view)
        self.members_view.deleteLater()
        self.members_view = None

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """
        Detach views on close.

        Parameters
        ----------
        event:
            Qt close event.
        """
        try:
            self._close_members()
            self.organizations_view.shutdown()
        finally:
            super().closeEvent(event)


def run_app(store: Store) -> int:
    """
    Run the orgroster GUI over an open store.

    Parameters
    ----------
    store:
        Store to read and write. The caller owns it and closes it afterwards.

    Returns
    -------
    int
        Qt application exit code.
    """
    app = QApplication.instance() or QApplication(sys.argv)
    w = AppWindow(store)
    w.show()
    return app.exec()
