"""
Table model backing the place list view.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt

from californication.model.place import Place

COLUMNS = ["Name", "Rating", "City"]


class PlaceTableModel(QAbstractTableModel):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._places: List[Place] = []

    def set_places(self, places: Sequence[Place]) -> None:
        self.beginResetModel()
        self._places = list(places)
        self.endResetModel()

    def place_at(self, row: int) -> Optional[Place]:
        if 0 <= row < len(self._places):
            return self._places[row]
        return None

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._places)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else len(COLUMNS)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid():
            return None
        place = self._places[index.row()]
        column = index.column()

        if role == Qt.DisplayRole:
            if column == 0:
                return place.name
            if column == 1:
                return f"{place.rating:.1f}"
            if column == 2:
                return place.city
        elif role == Qt.ToolTipRole and place.summary:
            return place.summary
        elif role == Qt.TextAlignmentRole and column == 1:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole):
        if role == Qt.DisplayRole and orientation == Qt.Horizontal:
            return COLUMNS[section]
        return None
