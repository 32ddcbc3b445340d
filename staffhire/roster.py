"""
Roster-Schicht für StaffHire.

- Spaltenköpfe der Übersichtstabelle
- StaffRoster: geordnete, nur anhängbare Liste aller Datensätze der Sitzung
- Keine Abhängigkeit zu `logic.py` oder zur GUI (wichtig gegen Zyklen)
"""

from __future__ import annotations

import logging
from dataclasses import astuple, dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from staffhire.model import (
    ErrorKind,
    FullTimeStaffHire,
    Outcome,
    PartTimeStaffHire,
    StaffHire,
    status_label,
)

logger = logging.getLogger(__name__)

# Header
ROSTER_HEADERS = [
    "Index",
    "Vacancy #",
    "Staff Name",
    "Designation",
    "Job Type",
    "Status",
]


@dataclass(frozen=True)
class SummaryRow:
    index: int
    vacancy_number: int
    staff_name: str
    designation: str
    job_type: str
    status: str

    def as_list(self) -> List[str]:
        """Zeile als Textliste in der Reihenfolge von :data:`ROSTER_HEADERS`."""
        return [str(v) for v in astuple(self)]


class StaffRoster:
    """Alle Einstellungen der laufenden Sitzung, in Einfügereihenfolge.

    Examples:
        >>> from staffhire.model import FullTimeStaffHire
        >>> roster = StaffRoster()
        >>> a = FullTimeStaffHire(7, "Lecturer", "Teaching", "A", "01/01/2024",
        ...                       "PHD", "Dean", True, 100, 10)
        >>> b = FullTimeStaffHire(7, "Tutor", "Teaching", "B", "01/01/2024",
        ...                       "PHD", "Dean", True, 100, 10)
        >>> roster.append(a).ok and roster.append(b).ok
        True
        >>> roster.find_first_by_vacancy_number(7).staff_name
        'A'
        >>> roster.get(2).error.value
        'IndexOutOfRange'
    """

    def __init__(self, records: Optional[Iterable[StaffHire]] = None):
        self._records: List[StaffHire] = []
        for r in records or ():
            self.append(r)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StaffHire]:
        return iter(self._records)

    def records(self) -> Tuple[StaffHire, ...]:
        return tuple(self._records)

    def append(self, record: StaffHire) -> Outcome:
        """Datensatz hinten anhängen (keine Duplikatprüfung der Vakanznummer)."""
        if not isinstance(record, (FullTimeStaffHire, PartTimeStaffHire)):
            raise TypeError(f"not a staff hire record: {type(record).__name__}")
        self._records.append(record)
        logger.info(
            "Appended %s record for vacancy %s at index %d",
            record.kind,
            record.vacancy_number,
            len(self._records) - 1,
        )
        return Outcome.success(f"Record added at index {len(self._records) - 1}.", record)

    def find_first_by_vacancy_number(self, vacancy_number: int) -> Optional[StaffHire]:
        """Erster Treffer in Einfügereihenfolge oder ``None``; Variante wird nicht geprüft."""
        for r in self._records:
            if r.vacancy_number == vacancy_number:
                return r
        return None

    def get(self, index: int) -> Outcome:
        """Datensatz an Position ``index``; nur echte ints werden angenommen."""
        if isinstance(index, bool) or not isinstance(index, int):
            logger.warning("Rejected display number %r", index)
            return Outcome.failure(
                ErrorKind.INVALID_FORMAT, f"Display number must be a whole number, got {index!r}."
            )
        if not 0 <= index < len(self._records):
            if not self._records:
                msg = "The staff list is empty."
            else:
                msg = f"Display number must be between 0 and {len(self._records) - 1}"
            return Outcome.failure(ErrorKind.INDEX_OUT_OF_RANGE, msg)
        return Outcome.success("", self._records[index])

    def summary(self) -> List[SummaryRow]:
        return [
            SummaryRow(
                i,
                r.vacancy_number,
                r.staff_name,
                r.designation,
                r.job_type,
                status_label(r),
            )
            for i, r in enumerate(self._records)
        ]
