# gui/main_window.py
"""
Hauptfenster für StaffHire (PySide6).

- Oben: Übersichtstabelle aller Datensätze
- Mitte: Formular (zwei Spalten) mit Eingabemasken
- Unten: Aktionsknöpfe; Ergebnisse erscheinen als QMessageBox
"""

from __future__ import annotations
import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QFormLayout,
    QGroupBox, QTableView, QPushButton, QLabel, QLineEdit, QCheckBox,
    QAbstractItemView, QHeaderView, QMessageBox,
)

from staffhire import logic
from staffhire.model import ErrorKind, Outcome
from staffhire.roster import StaffRoster
from staffhire.gui.roster_table import RosterTableModel
from staffhire.gui.validators import (
    date_validator, decimal_validator, integer_validator, text_validator,
)
from staffhire.gui.dialogs.staff_info import StaffInfoDialog

logger = logging.getLogger(__name__)

# Fehlerart -> (Art der Meldung, Titel)
MESSAGE_STYLE: Dict[ErrorKind, tuple[str, str]] = {
    ErrorKind.MISSING_FIELDS: ("warning", "Missing Information"),
    ErrorKind.NOT_FOUND: ("warning", "Not Found"),
    ErrorKind.INVALID_FORMAT: ("critical", "Invalid Input"),
    ErrorKind.INDEX_OUT_OF_RANGE: ("critical", "Invalid Input"),
    ErrorKind.WRONG_VARIANT: ("critical", "Error"),
    ErrorKind.NOT_JOINED: ("critical", "Error"),
    ErrorKind.NOT_ELIGIBLE: ("critical", "Error"),
    ErrorKind.ALREADY_TERMINATED: ("critical", "Error"),
}


class RecruitmentWindow(QMainWindow):
    """Formular + Tabelle zum Erfassen von Voll- und Teilzeit-Einstellungen."""

    def __init__(self, roster: Optional[StaffRoster] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Recruitment System")
        self.resize(1000, 700)
        self.roster = roster if roster is not None else StaffRoster()

        central = QWidget(self)
        lay = QVBoxLayout(central)
        lay.setContentsMargins(10, 10, 10, 10)
        lay.setSpacing(10)

        title = QLabel("Staff Recruitment System")
        font = QFont()
        font.setPointSize(18)
        font.setBold(True)
        title.setFont(font)
        title.setAlignment(Qt.AlignCenter)

        lay.addWidget(title)
        lay.addWidget(self._build_table_box())
        lay.addWidget(self._build_form_box())
        lay.addLayout(self._build_button_grid())
        self.setCentralWidget(central)

        self.statusBar().showMessage("Ready")

    # ---------- Aufbau ----------
    def _build_table_box(self) -> QGroupBox:
        box = QGroupBox("Staff List")
        self.model = RosterTableModel(self.roster, self)

        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setMinimumHeight(150)
        self.table.doubleClicked.connect(self._on_row_double_clicked)

        QVBoxLayout(box).addWidget(self.table)
        return box

    def _line(self, validator, tooltip: str) -> QLineEdit:
        ed = QLineEdit()
        ed.setValidator(validator)
        ed.setToolTip(tooltip)
        ed.setPlaceholderText(tooltip)
        return ed

    def _build_form_box(self) -> QGroupBox:
        box = QGroupBox("Staff Information")

        # linke Spalte: gemeinsame Felder
        self.edVacancy = self._line(integer_validator(self), "e.g., 123456")
        self.edDesignation = self._line(text_validator(self), "e.g., Head lecturer")
        self.edJobType = self._line(text_validator(self), "e.g., Lecturer/Mentor")
        self.edStaffName = self._line(text_validator(self), "e.g., Lisa Rinna")
        self.edJoiningDate = self._line(date_validator(self), "dd/mm/yyyy")
        self.edJoiningDate.setMaxLength(logic.DATE_MAX_LENGTH)
        self.edQualification = self._line(text_validator(self), "e.g., Masters/PHD/Other")
        self.edAppointedBy = self._line(text_validator(self), "e.g., name of Head of School")

        # rechte Spalte: variantenspezifisch + Anzeige
        self.edSalary = self._line(decimal_validator(self), "e.g., 25000.00")
        self.edWeeklyHours = self._line(integer_validator(self), "e.g., 10")
        self.edWorkingHours = self._line(integer_validator(self), "e.g., 20")
        self.edWages = self._line(decimal_validator(self), "e.g., 13.82")
        self.edShifts = self._line(text_validator(self), "e.g., Morning/Afternoon/Evening")
        self.edDisplayNumber = self._line(
            integer_validator(self), "Please enter an existing staff index number"
        )
        self.chkJoined = QCheckBox()

        left = QFormLayout()
        left.addRow("Vacancy Number:", self.edVacancy)
        left.addRow("Designation:", self.edDesignation)
        left.addRow("Job Type:", self.edJobType)
        left.addRow("Staff Name:", self.edStaffName)
        left.addRow("Joining Date:", self.edJoiningDate)
        left.addRow("Qualification:", self.edQualification)
        left.addRow("Appointed By:", self.edAppointedBy)

        right = QFormLayout()
        right.addRow("Salary:", self.edSalary)
        right.addRow("Weekly Fractional Hours:", self.edWeeklyHours)
        right.addRow("Working Hours:", self.edWorkingHours)
        right.addRow("Wages Per Hour:", self.edWages)
        right.addRow("Shifts:", self.edShifts)
        right.addRow("Display Number:", self.edDisplayNumber)
        right.addRow("Joined:", self.chkJoined)

        cols = QHBoxLayout(box)
        cols.addLayout(left)
        cols.addSpacing(20)
        cols.addLayout(right)
        return box

    def _build_button_grid(self) -> QGridLayout:
        self.btnAddFullTime = QPushButton("Add Full Time Staff")
        self.btnAddPartTime = QPushButton("Add Part Time Staff")
        self.btnSetSalary = QPushButton("Set Salary")
        self.btnSetShifts = QPushButton("Set Shifts")
        self.btnTerminate = QPushButton("Terminate Staff")
        self.btnDisplay = QPushButton("Display Staff")
        self.btnClear = QPushButton("Clear")

        grid = QGridLayout()
        grid.setSpacing(10)
        buttons = [
            (self.btnAddFullTime, self._on_add_full_time),
            (self.btnAddPartTime, self._on_add_part_time),
            (self.btnSetSalary, self._on_set_salary),
            (self.btnSetShifts, self._on_set_shifts),
            (self.btnTerminate, self._on_terminate),
            (self.btnDisplay, self._on_display),
            (self.btnClear, self._clear_fields),
        ]
        for i, (btn, slot) in enumerate(buttons):
            btn.setFocusPolicy(Qt.NoFocus)
            btn.clicked.connect(slot)
            grid.addWidget(btn, i // 4, i % 4)
        return grid

    # ---------- Hilfen ----------
    def _base_values(self) -> Dict[str, object]:
        return {
            "vacancy_number": self.edVacancy.text(),
            "designation": self.edDesignation.text(),
            "job_type": self.edJobType.text(),
            "staff_name": self.edStaffName.text(),
            "joining_date": self.edJoiningDate.text(),
            "qualification": self.edQualification.text(),
            "appointed_by": self.edAppointedBy.text(),
            "joined": self.chkJoined.isChecked(),
        }

    def _show(self, out: Outcome) -> None:
        """Ergebnis als Meldung anzeigen (Erfolg = information)."""
        if out.ok:
            self.statusBar().showMessage(out.message, 5000)
            QMessageBox.information(self, "Success", out.message)
            return
        kind, title = MESSAGE_STYLE.get(out.error, ("critical", "Error"))
        self.statusBar().showMessage(out.message, 5000)
        getattr(QMessageBox, kind)(self, title, out.message)

    def _refresh(self) -> None:
        self.model.refresh()

    def _clear_fields(self) -> None:
        for ed in (
            self.edVacancy, self.edDesignation, self.edJobType, self.edStaffName,
            self.edJoiningDate, self.edQualification, self.edAppointedBy,
            self.edSalary, self.edWeeklyHours, self.edWorkingHours, self.edWages,
            self.edShifts, self.edDisplayNumber,
        ):
            ed.clear()
        self.chkJoined.setChecked(False)

    # ---------- Button-Handler ----------
    def _on_add_full_time(self) -> None:
        out = logic.create_full_time(
            self.roster,
            **self._base_values(),
            salary=self.edSalary.text(),
            weekly_fractional_hours=self.edWeeklyHours.text(),
        )
        if out.ok:
            self._refresh()
            self._clear_fields()
        self._show(out)

    def _on_add_part_time(self) -> None:
        out = logic.create_part_time(
            self.roster,
            **self._base_values(),
            working_hours=self.edWorkingHours.text(),
            wages_per_hour=self.edWages.text(),
            shifts=self.edShifts.text(),
        )
        if out.ok:
            self._refresh()
            self._clear_fields()
        self._show(out)

    def _on_set_salary(self) -> None:
        out = logic.update_salary(self.roster, self.edVacancy.text(), self.edSalary.text())
        self._refresh()
        if out.error is not ErrorKind.INVALID_FORMAT:
            self._clear_fields()
        self._show(out)

    def _on_set_shifts(self) -> None:
        out = logic.update_shifts(self.roster, self.edVacancy.text(), self.edShifts.text())
        self._refresh()
        self._show(out)

    def _on_terminate(self) -> None:
        out = logic.terminate(self.roster, self.edVacancy.text())
        self._refresh()
        self._show(out)

    def _on_display(self) -> None:
        out = logic.display_by_index(self.roster, self.edDisplayNumber.text())
        if not out.ok:
            self._show(out)
            return
        StaffInfoDialog(out.value, self).exec()

    def _on_row_double_clicked(self, index) -> None:
        """Doppelklick übernimmt Index und Vakanznummer ins Formular."""
        if not index.isValid():
            return
        row = self.model.rows[index.row()]
        self.edDisplayNumber.setText(row[0])
        self.edVacancy.setText(row[1])
