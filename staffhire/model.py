"""
Domänenmodelle für StaffHire.

- HireRecord: gemeinsame Felder (wird nie allein verwendet)
- FullTimeStaffHire / PartTimeStaffHire: die beiden Varianten
- Outcome/ErrorKind: Ergebnis jeder Änderung statt Konsolenausgabe
- describe()/status_label(): reine Darstellung für Dialog und Tabelle
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, List, Optional, Union

logger = logging.getLogger(__name__)

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_DECIMAL_TEXT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    WRONG_VARIANT = "WrongVariant"
    NOT_JOINED = "NotJoined"
    NOT_ELIGIBLE = "NotEligible"
    ALREADY_TERMINATED = "AlreadyTerminated"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_FIELDS = "MissingFields"


@dataclass(frozen=True)
class Outcome:
    """Ergebnis einer Operation: ``ok`` plus Meldung, Fehlerart und Wert.

    Examples:
        >>> bool(Outcome.success("done", 5))
        True
        >>> out = Outcome.failure(ErrorKind.NOT_FOUND, "nope")
        >>> bool(out), out.error.value
        (False, 'NotFound')
    """

    ok: bool
    message: str = ""
    error: Optional[ErrorKind] = None
    value: Any = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "", value: Any = None) -> "Outcome":
        return cls(True, message, None, value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Outcome":
        return cls(False, message, error, None)


# -------- Parsing --------


def parse_int(value: Any) -> int:
    """Ganze Zahl aus int oder Text; alles andere wirft ``ValueError``.

    Text nur mit ASCII-Ziffern und optionalem Vorzeichen.

    Examples:
        >>> parse_int(" 42 ")
        42
        >>> parse_int(7.0)
        7
        >>> parse_int("4.5")
        Traceback (most recent call last):
        ...
        ValueError: not a whole number: '4.5'
        >>> parse_int("1_00")
        Traceback (most recent call last):
        ...
        ValueError: not a whole number: '1_00'
    """
    if isinstance(value, bool):
        raise ValueError(f"not a whole number: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"not a whole number: {value!r}")
        return int(value)
    txt = str(value).strip()
    if not _INT_TEXT.fullmatch(txt):
        raise ValueError(f"not a whole number: {value!r}")
    return int(txt)


def parse_decimal(value: Any) -> float:
    """Endliche Dezimalzahl aus int, float oder Text.

    Examples:
        >>> parse_decimal("13.82")
        13.82
        >>> parse_decimal(5000)
        5000.0
        >>> parse_decimal("5_000")
        Traceback (most recent call last):
        ...
        ValueError: not a number: '5_000'
        >>> parse_decimal(float("inf"))
        Traceback (most recent call last):
        ...
        ValueError: not a finite number: inf
    """
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        txt = str(value).strip()
        if not _DECIMAL_TEXT.fullmatch(txt):
            raise ValueError(f"not a number: {value!r}")
        number = float(txt)
    # 1e999 passt ins Muster, ist aber unendlich
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


_TRUE = {"1", "true", "yes", "y"}
_FALSE = {"0", "false", "no", "n", ""}


def parse_flag(value: Any) -> bool:
    """Wahrheitswert aus bool, 0/1 oder Ja/Nein-Text (englisch).

    Examples:
        >>> parse_flag(True), parse_flag("No"), parse_flag(1)
        (True, False, True)
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    txt = str(value).strip().lower()
    if txt in _TRUE:
        return True
    if txt in _FALSE:
        return False
    raise ValueError(f"not a yes/no value: {value!r}")


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


# -------- Records --------


@dataclass
class HireRecord:
    """Gemeinsame Felder einer Einstellung (Basis der beiden Varianten)."""

    vacancy_number: int
    designation: str
    job_type: str
    staff_name: str
    joining_date: str  # dd/mm/yyyy
    qualification: str
    appointed_by: str
    joined: bool

    kind: ClassVar[str] = "base"

    def __post_init__(self) -> None:
        self.vacancy_number = parse_int(self.vacancy_number)
        self.joined = parse_flag(self.joined)

    # --- interne Helfer ---
    def _assign(self, name: str, label: str, value: Any) -> Outcome:
        setattr(self, name, value)
        logger.info("%s has been changed to: %s", label, value)
        return Outcome.success(f"{label} has been changed to: {value}", value)

    def _assign_parsed(
        self, name: str, label: str, value: Any, parse: Callable[[Any], Any]
    ) -> Outcome:
        try:
            parsed = parse(value)
        except (TypeError, ValueError):
            logger.warning("Rejected %s value %r", label.lower(), value)
            return Outcome.failure(
                ErrorKind.INVALID_FORMAT, f"Invalid value for {label.lower()}: {value!r}."
            )
        return self._assign(name, label, parsed)

    # --- Setter (immer erfolgreich, außer Zahlenformat) ---
    def set_vacancy_number(self, value: Any) -> Outcome:
        return self._assign_parsed("vacancy_number", "Vacancy number", value, parse_int)

    def set_designation(self, value: str) -> Outcome:
        return self._assign("designation", "Designation", value)

    def set_job_type(self, value: str) -> Outcome:
        return self._assign("job_type", "Job type", value)

    def set_staff_name(self, value: str) -> Outcome:
        return self._assign("staff_name", "Staff name", value)

    def set_joining_date(self, value: str) -> Outcome:
        return self._assign("joining_date", "Join date", value)

    def set_qualification(self, value: str) -> Outcome:
        return self._assign("qualification", "Qualification", value)

    def set_appointed_by(self, value: str) -> Outcome:
        return self._assign("appointed_by", "Appointed by", value)

    def set_joined(self, value: Any) -> Outcome:
        return self._assign_parsed("joined", "Joined", value, parse_flag)


@dataclass
class FullTimeStaffHire(HireRecord):
    salary: float = 0.0
    weekly_fractional_hours: int = 0

    kind: ClassVar[str] = "full_time"

    def __post_init__(self) -> None:
        super().__post_init__()
        self.salary = parse_decimal(self.salary)
        self.weekly_fractional_hours = parse_int(self.weekly_fractional_hours)

    def set_salary(self, value: Any) -> Outcome:
        """Gehalt ändern, nur solange ``joined`` gesetzt ist."""
        if not self.joined:
            logger.warning(
                "Cannot set salary for vacancy %s as no staff is appointed yet.",
                self.vacancy_number,
            )
            return Outcome.failure(
                ErrorKind.NOT_JOINED, "Cannot set salary as no staff is appointed yet."
            )
        return self._assign_parsed("salary", "Salary", value, parse_decimal)

    def set_weekly_fractional_hours(self, value: Any) -> Outcome:
        return self._assign_parsed(
            "weekly_fractional_hours", "Weekly fractional hours", value, parse_int
        )


@dataclass
class PartTimeStaffHire(HireRecord):
    working_hours: int = 0
    wages_per_hour: float = 0.0
    shifts: str = ""
    terminated: bool = field(default=False, init=False)

    kind: ClassVar[str] = "part_time"

    def __post_init__(self) -> None:
        super().__post_init__()
        self.working_hours = parse_int(self.working_hours)
        self.wages_per_hour = parse_decimal(self.wages_per_hour)

    @property
    def income_per_day(self) -> float:
        return self.working_hours * self.wages_per_hour

    def set_working_hours(self, value: Any) -> Outcome:
        return self._assign_parsed("working_hours", "Working hours", value, parse_int)

    def set_wages_per_hour(self, value: Any) -> Outcome:
        return self._assign_parsed(
            "wages_per_hour", "Wages per hour", value, parse_decimal
        )

    def set_shifts(self, value: str) -> Outcome:
        """Schicht ändern, nur wenn eingestellt und nicht gekündigt."""
        if not self.joined or self.terminated:
            logger.warning(
                "Cannot change shifts for vacancy %s (joined=%s, terminated=%s).",
                self.vacancy_number,
                self.joined,
                self.terminated,
            )
            return Outcome.failure(
                ErrorKind.NOT_ELIGIBLE,
                "Cannot change shifts as staff is not appointed or has been terminated.",
            )
        return self._assign("shifts", "Shifts", value)

    def terminate(self) -> Outcome:
        """Kündigen: Personendaten leeren, ``joined`` aus, ``terminated`` an.

        Vakanz, Bezeichnung, Art, Stunden, Lohn und Schicht bleiben stehen.

        Examples:
            >>> p = PartTimeStaffHire(200, "Tutor", "Lecturer", "Ann Lee",
            ...                       "01/02/2024", "Masters", "Dean", True,
            ...                       20, 13.5, "Morning")
            >>> p.terminate().ok
            True
            >>> (p.staff_name, p.joined, p.terminated, p.shifts)
            ('', False, True, 'Morning')
            >>> p.terminate().error.value
            'AlreadyTerminated'
        """
        if self.terminated:
            logger.warning("Staff for vacancy %s is already terminated.", self.vacancy_number)
            return Outcome.failure(
                ErrorKind.ALREADY_TERMINATED, "Staff is already terminated."
            )
        self.set_staff_name("")
        self.set_joining_date("")
        self.set_qualification("")
        self.set_appointed_by("")
        self.set_joined(False)
        self.terminated = True
        logger.info("Staff for vacancy %s has been terminated.", self.vacancy_number)
        return Outcome.success("Staff has been terminated.", self)


StaffHire = Union[FullTimeStaffHire, PartTimeStaffHire]


# -------- Darstellung --------


def _base_lines(record: HireRecord) -> List[str]:
    return [
        f"Vacancy Number: {record.vacancy_number}",
        f"Designation: {record.designation}",
        f"Job Type: {record.job_type}",
        f"Staff Name: {record.staff_name}",
        f"Joining Date: {record.joining_date}",
        f"Qualification: {record.qualification}",
        f"Appointed By: {record.appointed_by}",
        f"Joined: {_yes_no(record.joined)}",
    ]


def describe(record: StaffHire) -> str:
    """Mehrzeilige Beschreibung eines Datensatzes (für den Anzeige-Dialog).

    Examples:
        >>> ft = FullTimeStaffHire(101, "Lecturer", "Teaching", "Lisa Rinna",
        ...                        "01/09/2024", "PHD", "Head", True, 5000, 10)
        >>> print(describe(ft).splitlines()[-2:])
        ['Salary: 5000.0', 'Weekly Fractional Hours: 10']
        >>> ft.joined = False
        >>> describe(ft).splitlines()[-1]
        'Joined: No'
    """
    lines = _base_lines(record)
    if isinstance(record, FullTimeStaffHire):
        if record.joined:
            lines.append(f"Salary: {record.salary}")
            lines.append(f"Weekly Fractional Hours: {record.weekly_fractional_hours}")
    elif isinstance(record, PartTimeStaffHire):
        if record.joined and not record.terminated:
            lines.append(f"Working Hours: {record.working_hours}")
            lines.append(f"Wages Per Hour: {record.wages_per_hour}")
            lines.append(f"Shifts: {record.shifts}")
            lines.append(f"Income Per Day: {record.income_per_day}")
        lines.append(f"Terminated: {_yes_no(record.terminated)}")
    return "\n".join(lines) + "\n"


def status_label(record: StaffHire) -> str:
    """Statusspalte der Übersicht: Full Time / Part Time / Terminated."""
    if isinstance(record, FullTimeStaffHire):
        return "Full Time"
    return "Terminated" if record.terminated else "Part Time"
