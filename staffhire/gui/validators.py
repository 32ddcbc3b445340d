# gui/validators.py
"""
Eingabemasken für die Formularfelder (QValidator).

Die eigentlichen Regeln liegen GUI-frei in `staffhire.logic`.
"""

from __future__ import annotations
from typing import Callable

from PySide6.QtGui import QValidator

from staffhire.logic import (
    is_valid_complete_date,
    is_valid_decimal_text,
    is_valid_integer_text,
    is_valid_partial_date,
    is_valid_text,
)


class PredicateValidator(QValidator):
    """Lässt nur Texte zu, für die ``predicate`` wahr ist."""

    def __init__(self, predicate: Callable[[str], bool], parent=None):
        super().__init__(parent)
        self._accepts = predicate

    def validate(self, text: str, pos: int):
        if self._accepts(text):
            return QValidator.Acceptable, text, pos
        return QValidator.Invalid, text, pos


class DateValidator(QValidator):
    """dd/mm/yyyy: Teileingaben sind Intermediate, nur echte Daten Acceptable."""

    def validate(self, text: str, pos: int):
        if not is_valid_partial_date(text):
            return QValidator.Invalid, text, pos
        if is_valid_complete_date(text):
            return QValidator.Acceptable, text, pos
        return QValidator.Intermediate, text, pos


def text_validator(parent=None) -> QValidator:
    return PredicateValidator(is_valid_text, parent)


def integer_validator(parent=None) -> QValidator:
    return PredicateValidator(is_valid_integer_text, parent)


def decimal_validator(parent=None) -> QValidator:
    return PredicateValidator(is_valid_decimal_text, parent)


def date_validator(parent=None) -> QValidator:
    return DateValidator(parent)
