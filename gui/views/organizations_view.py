"""
Organizations page.

Lets the user add an organization (title + owner) and lists every known
organization. Clicking a row opens that organization's members.
"""

from __future__ import annotations

from PySide6.QtCore import QModelIndex, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLineEdit,
    QListView,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.list_model import RecordListModel
from roster_engine.data_models import Organization
from roster_engine.repositories.organizations import OrganizationRepository


def _input_field(placeholder: str) -> QLineEdit:
    edit = QLineEdit()
    edit.setPlaceholderText(placeholder)
    edit.setMinimumHeight(40)
    f = edit.font()
    f.setBold(True)
    edit.setFont(f)
    return edit


class OrganizationsView(QWidget):
    """
    Organization list with an add form.

    Signals
    -------
    organization_opened(Organization):
        Emitted when the user clicks an organization row.
    """

    organization_opened = Signal(object)

    def __init__(self, repository: OrganizationRepository) -> None:
        super().__init__()
        self._repository = repository

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        form = QHBoxLayout()
        fields = QVBoxLayout()
        self.title_edit = _input_field("Enter Company Name")
        self.owner_edit = _input_field("Enter Owner Name")
        fields.addWidget(self.title_edit)
        fields.addWidget(self.owner_edit)
        form.addLayout(fields, 1)

        self.btn_add = QPushButton("Add")
        self.btn_add.clicked.connect(self._add)
        form.addWidget(self.btn_add)
        root.addLayout(form)

        self._model = RecordListModel(
            repository.organizations,
            primary=lambda o: o.display_title,
            secondary=lambda o: o.display_owner,
            parent=self,
        )
        self.list_view = QListView()
        self.list_view.setModel(self._model)
        self.list_view.setSpacing(4)
        self.list_view.clicked.connect(self._open)
        root.addWidget(self.list_view, 1)

    def _add(self) -> None:
        self._repository.create(self.title_edit.text(), self.owner_edit.text())
        self.title_edit.clear()
        self.owner_edit.clear()

    def _open(self, index: QModelIndex) -> None:
        organization: Organization = self._model.record_at(index.row())
        self.organization_opened.emit(organization)

    def shutdown(self) -> None:
        """Detach from the repository's observable list."""
        self._model.detach()
