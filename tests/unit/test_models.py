from __future__ import annotations

import json
from datetime import date

import pytest

from employee_manager.domain import models as models_module
from employee_manager.domain.models import Employee, whole_years_between

REFERENCE_DAY = date(2026, 10, 17)


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        (date(2020, 1, 10), date(2026, 10, 17), 6),
        (date(2020, 10, 17), date(2026, 10, 17), 6),
        (date(2020, 10, 18), date(2026, 10, 17), 5),
        (date(2026, 10, 17), date(2026, 10, 17), 0),
        (date(2020, 2, 29), date(2021, 2, 28), 0),
        (date(2020, 2, 29), date(2021, 3, 1), 1),
    ],
)
def test_whole_years_between_counts_complete_years(start: date, end: date, expected: int) -> None:
    assert whole_years_between(start, end) == expected


def test_whole_years_between_truncates_future_dates_toward_zero() -> None:
    # Less than a year ahead is 0, not -1.
    assert whole_years_between(date(2027, 6, 1), REFERENCE_DAY) == 0
    assert whole_years_between(date(2028, 10, 17), REFERENCE_DAY) == -2


def test_tenure_on_uses_joining_date(employee_factory) -> None:
    emp = employee_factory(joining_date=date(2019, 3, 1))
    assert emp.tenure_on(REFERENCE_DAY) == 7


def test_tenure_is_recomputed_on_every_access(employee_factory, monkeypatch) -> None:
    class _FakeDate(date):
        current = date(2021, 1, 9)

        @classmethod
        def today(cls) -> date:
            return cls.current

    monkeypatch.setattr(models_module, "date", _FakeDate)
    emp = employee_factory(joining_date=date(2020, 1, 10))

    assert emp.tenure == 0
    _FakeDate.current = date(2021, 1, 10)
    assert emp.tenure == 1


def test_tenure_is_not_serialized(employee_factory) -> None:
    payload = json.loads(employee_factory().model_dump_json(by_alias=True))

    assert "tenure" not in payload
    assert payload["joiningDate"] == "2020-01-10"
    assert set(payload) == {
        "id",
        "name",
        "age",
        "address",
        "department",
        "designation",
        "salary",
        "joiningDate",
    }


def test_employee_accepts_alias_and_field_name() -> None:
    by_alias = Employee.model_validate(
        {"id": 3, "name": "Chen", "salary": 1.5, "joiningDate": "2022-02-02"}
    )
    by_name = Employee(id=3, name="Chen", salary=1.5, joining_date=date(2022, 2, 2))

    assert by_alias == by_name
    assert by_alias.joining_date == date(2022, 2, 2)


def test_employee_construction_does_not_apply_store_rules() -> None:
    emp = Employee(id=0, name="", salary=-1.0, joining_date=date(2020, 1, 1))
    assert emp.id == 0
    assert emp.salary == -1.0


def test_assignment_is_not_validated(employee_factory) -> None:
    emp = employee_factory()
    emp.salary = 0
    assert emp.salary == 0
