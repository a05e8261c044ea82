"""Qt item model over an engine ObservableList.

The engine publishes record snapshots; this model subscribes and resets itself
on every replacement so any QListView bound to it re-renders.

Threading model
--------------
Repositories run on the UI thread, so notifications arrive on the UI thread and
the model can reset directly without queued signals.
"""

from __future__ import annotations

from typing import Any, Callable

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from roster_engine.observable import ObservableList

PrimaryTextRole = int(Qt.ItemDataRole.UserRole) + 1
SecondaryTextRole = int(Qt.ItemDataRole.UserRole) + 2
RecordRole = int(Qt.ItemDataRole.UserRole) + 3

TextFn = Callable[[Any], str]


class RecordListModel(QAbstractListModel):
    """
    Read-only list model mirroring an ObservableList.

    Parameters
    ----------
    source:
        Observable list to mirror.
    primary:
        Returns the headline text for a record.
    secondary:
        Returns the line shown beneath the headline.
    """

    def __init__(
        self,
        source: ObservableList[Any],
        primary: TextFn,
        secondary: TextFn,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._primary = primary
        self._secondary = secondary
        self._rows: tuple[Any, ...] = source.items
        self._unsubscribe = source.subscribe(self._on_replaced)

    def _on_replaced(self, items: tuple[Any, ...]) -> None:
        self.beginResetModel()
        self._rows = items
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # type: ignore[override]
        return 0 if parent.isValid() else len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:  # type: ignore[override]
        if not index.isValid() or not 0 <= index.row() < len(self._rows):
            return None

        record = self._rows[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return f"{self._primary(record)}\n{self._secondary(record)}"
        if role == PrimaryTextRole:
            return self._primary(record)
        if role == SecondaryTextRole:
            return self._secondary(record)
        if role == RecordRole:
            return record
        return None

    def record_at(self, row: int) -> Any:
        """Return the record shown at row."""
        return self._rows[row]

    def detach(self) -> None:
        """Stop mirroring the source list."""
        self._unsubscribe()
