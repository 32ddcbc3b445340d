"""
Fachlogik für StaffHire (GUI-frei, mit Doctests).

- Nimmt rohe Formularwerte entgegen und liefert immer ein :class:`Outcome`.
- Nutzt ausschließlich Modell und Roster (model.py, roster.py).
- Keine Abhängigkeit von PySide6 oder GUI.

Doctests ausführen:
    pytest -q --doctest-modules staffhire/logic.py
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, List

from staffhire.model import (
    ErrorKind,
    FullTimeStaffHire,
    Outcome,
    PartTimeStaffHire,
    describe,
    parse_decimal,
    parse_flag,
    parse_int,
)
from staffhire.roster import StaffRoster, SummaryRow

logger = logging.getLogger(__name__)

__all__ = [
    "create_full_time",
    "create_part_time",
    "update_salary",
    "update_shifts",
    "terminate",
    "display_by_index",
    "list_summary",
    "is_valid_text",
    "is_valid_integer_text",
    "is_valid_decimal_text",
    "is_valid_partial_date",
    "is_valid_complete_date",
    "parse_int",
    "parse_decimal",
    "parse_flag",
]

DATE_FORMAT = "%d/%m/%Y"
DATE_MAX_LENGTH = 10

_TEXT_RE = re.compile(r"[a-zA-Z\s]*")
_INT_RE = re.compile(r"\d*")
_DECIMAL_RE = re.compile(r"\d*\.?\d*")
_PARTIAL_DATE_RE = re.compile(r"([0-9]{0,2}/)?([0-9]{0,2}/)?([0-9]{0,4})")


# ------------------------ Eingabeprüfung ------------------------


def is_valid_text(s: str) -> bool:
    """Nur Buchstaben und Leerzeichen (leer ist erlaubt).

    Examples:
        >>> is_valid_text("Head lecturer")
        True
        >>> is_valid_text("R2D2")
        False
    """
    return _TEXT_RE.fullmatch(s or "") is not None


def is_valid_integer_text(s: str) -> bool:
    """Nur Ziffern.

    Examples:
        >>> is_valid_integer_text("123456"), is_valid_integer_text("-1")
        (True, False)
    """
    return _INT_RE.fullmatch(s or "") is not None


def is_valid_decimal_text(s: str) -> bool:
    """Ziffern mit höchstens einem Dezimalpunkt.

    Examples:
        >>> is_valid_decimal_text("13.82"), is_valid_decimal_text("1.2.3")
        (True, False)
    """
    return _DECIMAL_RE.fullmatch(s or "") is not None


def is_valid_complete_date(s: str) -> bool:
    """Vollständiges, tatsächlich existierendes Datum im Format dd/mm/yyyy.

    Examples:
        >>> is_valid_complete_date("29/02/2024")
        True
        >>> is_valid_complete_date("31/02/2024")
        False
        >>> is_valid_complete_date("1/2/2024")
        False
    """
    s = s or ""
    if len(s) != DATE_MAX_LENGTH or not _PARTIAL_DATE_RE.fullmatch(s):
        return False
    try:
        datetime.strptime(s, DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_partial_date(s: str) -> bool:
    """Teileingabe eines Datums (für schrittweises Tippen im Formular).

    Examples:
        >>> [is_valid_partial_date(x) for x in ("", "12/", "12/05/20", "12/05/2024")]
        [True, True, True, True]
        >>> is_valid_partial_date("12-05"), is_valid_partial_date("32/13/2024")
        (False, False)
    """
    s = s or ""
    if not s:
        return True
    if len(s) > DATE_MAX_LENGTH or not _PARTIAL_DATE_RE.fullmatch(s):
        return False
    if len(s) == DATE_MAX_LENGTH:
        return is_valid_complete_date(s)
    return True


# ------------------------ Hilfen ------------------------


def _clean(value: Any) -> str:
    return str(value or "").strip()


def _missing(*values: str) -> bool:
    return any(not v for v in values)


def _invalid(message: str) -> Outcome:
    logger.warning("Invalid input: %s", message)
    return Outcome.failure(ErrorKind.INVALID_FORMAT, message)


def _not_found(vacancy_number: int) -> Outcome:
    logger.warning("No staff with vacancy number %s", vacancy_number)
    return Outcome.failure(
        ErrorKind.NOT_FOUND, f"Staff with vacancy number {vacancy_number} not found."
    )


def _wrong_variant(expected: str) -> Outcome:
    logger.warning("Record is not a %s staff position", expected.lower())
    return Outcome.failure(
        ErrorKind.WRONG_VARIANT, f"This is not a {expected} Staff position."
    )


MISSING_MESSAGE = "All fields must be filled out."


# ------------------------ Anlegen ------------------------


def create_full_time(
    roster: StaffRoster,
    *,
    vacancy_number: Any,
    designation: str,
    job_type: str,
    staff_name: str,
    joining_date: str,
    qualification: str,
    appointed_by: str,
    joined: bool,
    salary: Any,
    weekly_fractional_hours: Any,
) -> Outcome:
    """Vollzeit-Datensatz aus Formularwerten anlegen und anhängen.

    Examples:
        >>> roster = StaffRoster()
        >>> out = create_full_time(roster, vacancy_number="100", designation="Lecturer",
        ...     job_type="Teaching", staff_name="Lisa Rinna", joining_date="01/09/2024",
        ...     qualification="PHD", appointed_by="Head", joined=False,
        ...     salary="5000", weekly_fractional_hours="10")
        >>> out.ok, out.message, len(roster)
        (True, 'Lisa Rinna has been added as a full time staff!', 1)
        >>> create_full_time(roster, vacancy_number="x", designation="L", job_type="T",
        ...     staff_name="N", joining_date="01/09/2024", qualification="Q",
        ...     appointed_by="A", joined=True, salary="1", weekly_fractional_hours="1").error.value
        'InvalidFormat'
    """
    try:
        vacancy = parse_int(vacancy_number)
        salary_value = parse_decimal(salary)
        hours = parse_int(weekly_fractional_hours)
        joined_flag = parse_flag(joined)
    except (TypeError, ValueError):
        return _invalid(
            "Please enter valid numbers for Vacancy Number, Salary, and Weekly Hours."
        )

    texts = [_clean(v) for v in (designation, job_type, staff_name, joining_date, qualification, appointed_by)]
    if _missing(*texts):
        return Outcome.failure(ErrorKind.MISSING_FIELDS, MISSING_MESSAGE)
    if not is_valid_complete_date(texts[3]):
        return _invalid("Please enter the joining date as dd/mm/yyyy.")

    record = FullTimeStaffHire(vacancy, *texts, joined_flag, salary_value, hours)
    roster.append(record)
    return Outcome.success(f"{record.staff_name} has been added as a full time staff!", record)


def create_part_time(
    roster: StaffRoster,
    *,
    vacancy_number: Any,
    designation: str,
    job_type: str,
    staff_name: str,
    joining_date: str,
    qualification: str,
    appointed_by: str,
    joined: bool,
    working_hours: Any,
    wages_per_hour: Any,
    shifts: str,
) -> Outcome:
    """Teilzeit-Datensatz anlegen; ``terminated`` startet immer mit ``False``.

    Examples:
        >>> roster = StaffRoster()
        >>> out = create_part_time(roster, vacancy_number=200, designation="Tutor",
        ...     job_type="Mentor", staff_name="Ann Lee", joining_date="02/01/2024",
        ...     qualification="Masters", appointed_by="Dean", joined=True,
        ...     working_hours="20", wages_per_hour="13.5", shifts="")
        >>> out.error.value
        'MissingFields'
    """
    try:
        vacancy = parse_int(vacancy_number)
        hours = parse_int(working_hours)
        wages = parse_decimal(wages_per_hour)
        joined_flag = parse_flag(joined)
    except (TypeError, ValueError):
        return _invalid(
            "Please enter valid numbers for Vacancy Number, Working Hour, and Wages Per Hour."
        )

    texts = [_clean(v) for v in (designation, job_type, staff_name, joining_date, qualification, appointed_by)]
    shift = _clean(shifts)
    if _missing(*texts, shift):
        return Outcome.failure(ErrorKind.MISSING_FIELDS, MISSING_MESSAGE)
    if not is_valid_complete_date(texts[3]):
        return _invalid("Please enter the joining date as dd/mm/yyyy.")

    record = PartTimeStaffHire(vacancy, *texts, joined_flag, hours, wages, shift)
    roster.append(record)
    return Outcome.success(f"{record.staff_name} has been added as a part time staff!", record)


# ------------------------ Ändern ------------------------


def update_salary(roster: StaffRoster, vacancy_number: Any, salary: Any) -> Outcome:
    """Gehalt des ersten Vollzeit-Treffers setzen.

    Examples:
        >>> roster = StaffRoster()
        >>> _ = create_full_time(roster, vacancy_number=100, designation="Lecturer",
        ...     job_type="Teaching", staff_name="Lisa", joining_date="01/09/2024",
        ...     qualification="PHD", appointed_by="Head", joined=False,
        ...     salary=5000, weekly_fractional_hours=10)
        >>> out = update_salary(roster, 100, 6000)
        >>> out.error.value, roster.find_first_by_vacancy_number(100).salary
        ('NotJoined', 5000.0)
        >>> update_salary(roster, 999, 6000).error.value
        'NotFound'
    """
    try:
        vacancy = parse_int(vacancy_number)
        new_salary = parse_decimal(salary)
    except (TypeError, ValueError):
        return _invalid("Please enter valid numbers for Vacancy Number and Salary.")

    record = roster.find_first_by_vacancy_number(vacancy)
    if record is None:
        return _not_found(vacancy)
    if not isinstance(record, FullTimeStaffHire):
        return _wrong_variant("Full Time")

    out = record.set_salary(new_salary)
    if not out:
        return out
    return Outcome.success("Salary updated successfully!", record)


def update_shifts(roster: StaffRoster, vacancy_number: Any, shifts: str) -> Outcome:
    """Schicht des ersten Teilzeit-Treffers setzen.

    Examples:
        >>> roster = StaffRoster()
        >>> _ = create_full_time(roster, vacancy_number=100, designation="Lecturer",
        ...     job_type="Teaching", staff_name="Lisa", joining_date="01/09/2024",
        ...     qualification="PHD", appointed_by="Head", joined=True,
        ...     salary=5000, weekly_fractional_hours=10)
        >>> update_shifts(roster, 100, "Evening").error.value
        'WrongVariant'
    """
    try:
        vacancy = parse_int(vacancy_number)
    except (TypeError, ValueError):
        return _invalid("Please enter a valid number for Vacancy Number.")

    new_shift = _clean(shifts)
    if not new_shift:
        return Outcome.failure(ErrorKind.MISSING_FIELDS, "Please enter shifts information.")

    record = roster.find_first_by_vacancy_number(vacancy)
    if record is None:
        return _not_found(vacancy)
    if not isinstance(record, PartTimeStaffHire):
        return _wrong_variant("Part Time")

    out = record.set_shifts(new_shift)
    if not out:
        return out
    return Outcome.success("Shifts updated successfully!", record)


def terminate(roster: StaffRoster, vacancy_number: Any) -> Outcome:
    """Ersten Teilzeit-Treffer kündigen."""
    try:
        vacancy = parse_int(vacancy_number)
    except (TypeError, ValueError):
        return _invalid("Please enter a valid number for Vacancy Number.")

    record = roster.find_first_by_vacancy_number(vacancy)
    if record is None:
        return _not_found(vacancy)
    if not isinstance(record, PartTimeStaffHire):
        return _wrong_variant("Part Time")

    out = record.terminate()
    if not out:
        return out
    return Outcome.success("Staff terminated successfully!", record)


# ------------------------ Anzeigen ------------------------


def display_by_index(roster: StaffRoster, index: Any) -> Outcome:
    """Beschreibung des Datensatzes an Position ``index`` (0-basiert).

    Examples:
        >>> display_by_index(StaffRoster(), "abc").error.value
        'InvalidFormat'
        >>> display_by_index(StaffRoster(), 0).error.value
        'IndexOutOfRange'
    """
    try:
        position = parse_int(index)
    except (TypeError, ValueError):
        return _invalid("Please enter a valid number for Display Number.")

    out = roster.get(position)
    if not out:
        return out
    return Outcome.success("", describe(out.value))


def list_summary(roster: StaffRoster) -> List[SummaryRow]:
    """Übersichtszeilen für die Tabelle (Einfügereihenfolge)."""
    return roster.summary()
