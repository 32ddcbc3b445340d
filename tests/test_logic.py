"""
Tests für die Fachlogik (logic.py).

Abgedeckt:
- Anlegen mit Pflichtfeld- und Formatprüfung
- Gehalt / Schicht / Kündigung über die Vakanznummer
- Anzeige per Index und Übersicht
"""

import pytest

from staffhire import logic
from staffhire.model import ErrorKind, FullTimeStaffHire, PartTimeStaffHire


def full_time_form(**overrides):
    values = {
        "vacancy_number": "100",
        "designation": "Lecturer",
        "job_type": "Teaching",
        "staff_name": "Lisa Rinna",
        "joining_date": "01/09/2024",
        "qualification": "PHD",
        "appointed_by": "Head",
        "joined": False,
        "salary": "5000",
        "weekly_fractional_hours": "10",
    }
    values.update(overrides)
    return values


def part_time_form(**overrides):
    values = {
        "vacancy_number": "200",
        "designation": "Tutor",
        "job_type": "Mentor",
        "staff_name": "Ann Lee",
        "joining_date": "02/01/2024",
        "qualification": "Masters",
        "appointed_by": "Dean",
        "joined": True,
        "working_hours": "20",
        "wages_per_hour": "13.82",
        "shifts": "Morning",
    }
    values.update(overrides)
    return values


# ============================================================================
# CREATE
# ============================================================================

class TestCreate:
    def test_full_time_appended(self, roster):
        out = logic.create_full_time(roster, **full_time_form())
        assert out.ok
        assert isinstance(out.value, FullTimeStaffHire)
        assert roster.records() == (out.value,)
        assert out.value.salary == 5000.0

    def test_part_time_appended_not_terminated(self, roster):
        out = logic.create_part_time(roster, **part_time_form())
        assert out.ok
        assert isinstance(out.value, PartTimeStaffHire)
        assert out.value.terminated is False
        assert out.message == "Ann Lee has been added as a part time staff!"

    def test_text_is_trimmed(self, roster):
        out = logic.create_full_time(roster, **full_time_form(staff_name="  Lisa  "))
        assert out.value.staff_name == "Lisa"

    @pytest.mark.parametrize(
        "field", ["designation", "job_type", "staff_name", "joining_date", "qualification", "appointed_by"]
    )
    def test_missing_text_field(self, roster, field):
        out = logic.create_full_time(roster, **full_time_form(**{field: "  "}))
        assert out.error is ErrorKind.MISSING_FIELDS
        assert len(roster) == 0

    def test_part_time_requires_shift(self, roster):
        out = logic.create_part_time(roster, **part_time_form(shifts=""))
        assert out.error is ErrorKind.MISSING_FIELDS
        assert len(roster) == 0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("vacancy_number", ""),
            ("vacancy_number", "1_00"),
            ("salary", "12.3.4"),
            ("salary", "5_000"),
            ("weekly_fractional_hours", "2.5"),
        ],
    )
    def test_full_time_bad_numbers(self, roster, field, value):
        out = logic.create_full_time(roster, **full_time_form(**{field: value}))
        assert out.error is ErrorKind.INVALID_FORMAT
        assert len(roster) == 0

    def test_part_time_bad_wages(self, roster):
        out = logic.create_part_time(roster, **part_time_form(wages_per_hour="abc"))
        assert out.error is ErrorKind.INVALID_FORMAT

    def test_bad_joining_date(self, roster):
        out = logic.create_full_time(roster, **full_time_form(joining_date="31/02/2024"))
        assert out.error is ErrorKind.INVALID_FORMAT
        assert len(roster) == 0

    def test_duplicate_vacancy_numbers_accepted(self, roster):
        logic.create_full_time(roster, **full_time_form())
        assert logic.create_part_time(roster, **part_time_form(vacancy_number="100")).ok
        assert len(roster) == 2


# ============================================================================
# UPDATE SALARY
# ============================================================================

class TestUpdateSalary:
    def test_scenario_not_joined(self, roster):
        logic.create_full_time(roster, **full_time_form(vacancy_number="100", joined=False))
        out = logic.update_salary(roster, 100, 6000)
        assert out.error is ErrorKind.NOT_JOINED
        assert roster.find_first_by_vacancy_number(100).salary == 5000.0

    def test_scenario_joined(self, roster):
        logic.create_full_time(roster, **full_time_form(vacancy_number="101", joined=True))
        out = logic.update_salary(roster, "101", "6000")
        assert out.ok
        assert out.message == "Salary updated successfully!"
        assert roster.find_first_by_vacancy_number(101).salary == 6000.0

    def test_not_found(self, roster):
        assert logic.update_salary(roster, 1, 10).error is ErrorKind.NOT_FOUND

    def test_wrong_variant(self, roster):
        logic.create_part_time(roster, **part_time_form(vacancy_number="5"))
        assert logic.update_salary(roster, 5, 10).error is ErrorKind.WRONG_VARIANT

    def test_wrong_variant_is_logged(self, roster, caplog):
        logic.create_part_time(roster, **part_time_form(vacancy_number="5"))
        with caplog.at_level("WARNING", logger="staffhire.logic"):
            logic.update_salary(roster, 5, 10)
        assert "not a full time staff position" in caplog.text

    def test_first_match_decides_variant(self, roster):
        logic.create_part_time(roster, **part_time_form(vacancy_number="5"))
        logic.create_full_time(roster, **full_time_form(vacancy_number="5", joined=True))
        assert logic.update_salary(roster, 5, 10).error is ErrorKind.WRONG_VARIANT

    def test_bad_salary_text(self, roster):
        assert logic.update_salary(roster, "100", "").error is ErrorKind.INVALID_FORMAT


# ============================================================================
# UPDATE SHIFTS / TERMINATE
# ============================================================================

class TestShiftsAndTerminate:
    def test_update_shift(self, roster):
        logic.create_part_time(roster, **part_time_form())
        out = logic.update_shifts(roster, 200, "Evening")
        assert out.ok
        assert roster.find_first_by_vacancy_number(200).shifts == "Evening"

    def test_update_shift_not_eligible(self, roster):
        logic.create_part_time(roster, **part_time_form(joined=False))
        out = logic.update_shifts(roster, 200, "Evening")
        assert out.error is ErrorKind.NOT_ELIGIBLE
        assert roster.find_first_by_vacancy_number(200).shifts == "Morning"

    def test_update_shift_empty(self, roster):
        logic.create_part_time(roster, **part_time_form())
        assert logic.update_shifts(roster, 200, " ").error is ErrorKind.MISSING_FIELDS

    def test_update_shift_wrong_variant_and_missing(self, roster):
        logic.create_full_time(roster, **full_time_form())
        assert logic.update_shifts(roster, 100, "Night").error is ErrorKind.WRONG_VARIANT
        assert logic.update_shifts(roster, 999, "Night").error is ErrorKind.NOT_FOUND

    def test_scenario_terminate_twice(self, roster):
        logic.create_part_time(roster, **part_time_form(vacancy_number="200", shifts="Morning"))
        first = logic.terminate(roster, 200)
        assert first.ok
        rec = roster.find_first_by_vacancy_number(200)
        assert (rec.staff_name, rec.joining_date, rec.qualification, rec.appointed_by) == ("", "", "", "")
        assert rec.joined is False and rec.terminated is True
        assert rec.shifts == "Morning"

        second = logic.terminate(roster, 200)
        assert second.error is ErrorKind.ALREADY_TERMINATED
        assert rec.terminated is True and rec.shifts == "Morning"

    def test_terminate_full_time_is_wrong_variant(self, roster):
        logic.create_full_time(roster, **full_time_form())
        assert logic.terminate(roster, 100).error is ErrorKind.WRONG_VARIANT

    def test_terminate_bad_number(self, roster):
        assert logic.terminate(roster, "1x").error is ErrorKind.INVALID_FORMAT


# ============================================================================
# DISPLAY / SUMMARY
# ============================================================================

class TestDisplay:
    def test_display_by_index(self, roster):
        logic.create_full_time(roster, **full_time_form(joined=True))
        out = logic.display_by_index(roster, "0")
        assert out.ok
        assert out.value.startswith("Vacancy Number: 100\n")
        assert "Salary: 5000.0" in out.value

    def test_scenario_index_out_of_range(self, roster):
        logic.create_full_time(roster, **full_time_form())
        logic.create_part_time(roster, **part_time_form())
        assert logic.display_by_index(roster, 2).error is ErrorKind.INDEX_OUT_OF_RANGE

    def test_scenario_summary_statuses(self, roster):
        logic.create_full_time(roster, **full_time_form())
        logic.create_part_time(roster, **part_time_form())
        logic.terminate(roster, 200)
        rows = logic.list_summary(roster)
        assert [r.status for r in rows] == ["Full Time", "Terminated"]
        assert [r.index for r in rows] == [0, 1]


# ============================================================================
# INPUT MASKS
# ============================================================================

@pytest.mark.parametrize(
    "text,expected",
    [("", True), ("1", True), ("12/0", True), ("12/05/2024", True),
     ("12/05/20245", False), ("ab", False), ("00/01/2024", False)],
)
def test_partial_date(text, expected):
    assert logic.is_valid_partial_date(text) is expected


def test_text_masks():
    assert logic.is_valid_text("Lisa Rinna")
    assert not logic.is_valid_text("Lisa.")
    assert logic.is_valid_integer_text("")
    assert not logic.is_valid_decimal_text("-1.0")
