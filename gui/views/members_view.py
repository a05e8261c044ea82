"""
Members page for one organization.

The page fetches members when it is built, lists them by name (descending) with
the organization's title beneath each, and lets the user add a member.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListView,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from gui.adapters.list_model import RecordListModel
from roster_engine.repositories.members import MemberRepository


class MembersView(QWidget):
    """
    Member list with an add form, bound to a single organization.

    Signals
    -------
    back_requested():
        Emitted when the user wants to return to the organization list.
    """

    back_requested = Signal()

    def __init__(self, repository: MemberRepository) -> None:
        super().__init__()
        self._repository = repository
        organization_title = repository.organization.display_title

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)

        top = QHBoxLayout()
        btn_back = QPushButton("< Company")
        btn_back.clicked.connect(lambda: self.back_requested.emit())
        heading = QLabel(organization_title)
        f = heading.font()
        f.setPointSize(14)
        f.setBold(True)
        heading.setFont(f)
        top.addWidget(btn_back)
        top.addWidget(heading, 1)
        root.addLayout(top)

        form = QHBoxLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Enter Employee Name")
        self.name_edit.setMinimumHeight(40)
        self.btn_add = QPushButton("Add")
        self.btn_add.clicked.connect(self._add)
        form.addWidget(self.name_edit, 1)
        form.addWidget(self.btn_add)
        root.addLayout(form)

        self._model = RecordListModel(
            repository.members,
            primary=lambda m: m.display_name,
            secondary=lambda _m: organization_title,
            parent=self,
        )
        self.list_view = QListView()
        self.list_view.setModel(self._model)
        self.list_view.setSpacing(4)
        root.addWidget(self.list_view, 1)

        repository.fetch_members()

    def _add(self) -> None:
        self._repository.add_member(self.name_edit.text())
        self.name_edit.clear()

    def shutdown(self) -> None:
        """Detach from the repository's observable list."""
        self._model.detach()
