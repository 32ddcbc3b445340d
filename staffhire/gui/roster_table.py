# gui/roster_table.py
from __future__ import annotations
from typing import List

from PySide6.QtCore import Qt, QModelIndex, QAbstractTableModel

from staffhire.logic import list_summary
from staffhire.roster import ROSTER_HEADERS, StaffRoster


class RosterTableModel(QAbstractTableModel):
    """Schreibgeschütztes Tabellenmodell über der Roster-Übersicht."""

    def __init__(self, roster: StaffRoster, parent=None):
        super().__init__(parent)
        self.headers = list(ROSTER_HEADERS)
        self.roster = roster
        self.rows: List[List[str]] = []
        self.refresh()

    # --- Basis QAbstractTableModel ---
    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self.rows)

    def columnCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self.headers)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        if role == Qt.DisplayRole:
            return self.rows[index.row()][index.column()]
        if role == Qt.TextAlignmentRole and index.column() in (0, 1):
            return Qt.AlignRight | Qt.AlignVCenter
        return None

    def flags(self, index: QModelIndex):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal and 0 <= section < len(self.headers):
            return self.headers[section]
        return None

    # --- Aktualisieren ---
    def refresh(self):
        """Zeilen neu aus dem Roster aufbauen (nach jeder Änderung)."""
        self.beginResetModel()
        self.rows = [row.as_list() for row in list_summary(self.roster)]
        self.endResetModel()
