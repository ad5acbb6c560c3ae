"""
In-memory record store for the Employee Record Manager.

Owns the mapping from employee id to Employee and exposes the add/find/list/
filter/update/remove operations the interactive shell drives. Every operation
reports its outcome as a value; nothing here raises for unknown ids or
rejected candidates.

Usage:
    from employee_manager.store import RecordStore, SortKey

    store = RecordStore()
    store.add(employee)
    for emp in store.list(SortKey.SALARY):
        ...
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional

from employee_manager.domain.models import Employee
from employee_manager.domain.updates import FieldUpdate, apply_update
from employee_manager.utils.logging import get_logger

log = get_logger(__name__)


class AddOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class UpdateOutcome(str, Enum):
    APPLIED = "applied"
    NOT_FOUND = "not_found"


class RemoveOutcome(str, Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class SortKey(str, Enum):
    """Orderings supported by `RecordStore.list`."""

    NAME = "name"
    SALARY = "salary"
    JOINING_DATE = "joining_date"


def is_valid_employee(employee: Employee) -> bool:
    """Acceptance rule for `add`: non-empty name, positive id and salary."""
    return bool(employee.name) and employee.id > 0 and employee.salary > 0


class RecordStore:
    """
    Mapping of employee id to Employee with insertion-ordered iteration.

    Records are held by reference: `find_by_id` and `list` return the stored
    objects, and `update` mutates them in place.
    """

    def __init__(self, employees: Optional[Iterable[Employee]] = None) -> None:
        self._employees: Dict[int, Employee] = {}
        if employees is not None:
            self.replace_all(employees)

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees

    def add(self, employee: Employee) -> AddOutcome:
        """
        Insert or overwrite the record under `employee.id`.

        Returns REJECTED, leaving the store unchanged, when the candidate fails
        `is_valid_employee`.
        """
        if not is_valid_employee(employee):
            log.info("Employee rejected", extra={"employee_id": employee.id})
            return AddOutcome.REJECTED
        replaced = employee.id in self._employees
        self._employees[employee.id] = employee
        log.info(
            "Employee added",
            extra={"employee_id": employee.id, "replaced": replaced},
        )
        return AddOutcome.ACCEPTED

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def list(self, ordering: SortKey = SortKey.NAME) -> List[Employee]:
        """
        Return all records sorted by `ordering`.

        Name and joining date sort ascending, salary descending. The sort is
        stable, so ties keep insertion order.
        """
        values = list(self._employees.values())
        if ordering is SortKey.NAME:
            return sorted(values, key=lambda e: e.name)
        if ordering is SortKey.SALARY:
            return sorted(values, key=lambda e: e.salary, reverse=True)
        if ordering is SortKey.JOINING_DATE:
            return sorted(values, key=lambda e: e.joining_date)
        raise ValueError(f"Unsupported ordering: {ordering!r}")

    def filter_by_joining_date_range(self, start: date, end: date) -> List[Employee]:
        """Records with start <= joining_date <= end; empty when start > end."""
        if start > end:
            return []
        return [e for e in self._employees.values() if start <= e.joining_date <= end]

    def update(self, employee_id: int, update: FieldUpdate) -> UpdateOutcome:
        """
        Apply a single-field update to the stored record.

        The result is not checked against `is_valid_employee`.
        """
        employee = self._employees.get(employee_id)
        if employee is None:
            log.info("Employee not found for update", extra={"employee_id": employee_id})
            return UpdateOutcome.NOT_FOUND
        apply_update(employee, update)
        log.info(
            "Employee updated",
            extra={"employee_id": employee_id, "update": type(update).__name__},
        )
        return UpdateOutcome.APPLIED

    def remove(self, employee_id: int) -> RemoveOutcome:
        if self._employees.pop(employee_id, None) is None:
            return RemoveOutcome.NOT_FOUND
        log.info("Employee removed", extra={"employee_id": employee_id})
        return RemoveOutcome.REMOVED

    def replace_all(self, employees: Iterable[Employee]) -> None:
        """Discard current contents and key `employees` by id; later ids win."""
        self._employees = {e.id: e for e in employees}

    def snapshot(self) -> List[Employee]:
        """Current records in insertion order."""
        return list(self._employees.values())


__all__ = [
    "AddOutcome",
    "RecordStore",
    "RemoveOutcome",
    "SortKey",
    "UpdateOutcome",
    "is_valid_employee",
]
