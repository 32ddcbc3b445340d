"""
Pytest-Fixtures für StaffHire.

- Qt läuft auf der Offscreen-Plattform (kein Display nötig)
- Fabriken für Voll- und Teilzeit-Datensätze mit sinnvollen Standardwerten
"""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from staffhire.model import FullTimeStaffHire, PartTimeStaffHire
from staffhire.roster import StaffRoster


BASE_FIELDS = {
    "vacancy_number": 100,
    "designation": "Lecturer",
    "job_type": "Teaching",
    "staff_name": "Lisa Rinna",
    "joining_date": "01/09/2024",
    "qualification": "PHD",
    "appointed_by": "Head of School",
    "joined": True,
}


@pytest.fixture
def make_full_time():
    def _make(**overrides) -> FullTimeStaffHire:
        values = {**BASE_FIELDS, "salary": 5000, "weekly_fractional_hours": 10}
        values.update(overrides)
        return FullTimeStaffHire(**values)

    return _make


@pytest.fixture
def make_part_time():
    def _make(**overrides) -> PartTimeStaffHire:
        values = {
            **BASE_FIELDS,
            "vacancy_number": 200,
            "staff_name": "Ann Lee",
            "working_hours": 20,
            "wages_per_hour": 13.5,
            "shifts": "Morning",
        }
        values.update(overrides)
        return PartTimeStaffHire(**values)

    return _make


@pytest.fixture
def roster():
    return StaffRoster()


@pytest.fixture(scope="module")
def qapp():
    """QApplication-Instanz für Qt-Tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app
