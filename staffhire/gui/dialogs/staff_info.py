# gui/dialogs/staff_info.py
from __future__ import annotations

from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QPlainTextEdit,
    QPushButton,
)


class StaffInfoDialog(QDialog):
    """Modaler Dialog mit der Textbeschreibung eines Datensatzes."""

    def __init__(self, text: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Staff Information")
        self.setModal(True)
        self.resize(500, 400)

        self.text = QPlainTextEdit()
        self.text.setReadOnly(True)
        self.text.setFont(QFontDatabase.systemFont(QFontDatabase.FixedFont))
        self.text.setPlainText(text)

        self.btnClose = QPushButton("Close")
        self.btnClose.clicked.connect(self.accept)

        btns = QHBoxLayout()
        btns.addStretch()
        btns.addWidget(self.btnClose)
        btns.addStretch()

        lay = QVBoxLayout(self)
        lay.addWidget(self.text)
        lay.addLayout(btns)
