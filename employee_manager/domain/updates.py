"""
Single-field updates applicable to a stored employee.

Each updatable field has its own small value type; `apply_update` dispatches
over them with an exhaustive `match`. Updates are applied in place and are not
re-validated against the store's acceptance rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Union, assert_never

from employee_manager.domain.models import Employee


@dataclass(frozen=True)
class UpdateName:
    value: str


@dataclass(frozen=True)
class UpdateAge:
    value: int


@dataclass(frozen=True)
class UpdateAddress:
    value: str


@dataclass(frozen=True)
class UpdateDepartment:
    value: str


@dataclass(frozen=True)
class UpdateDesignation:
    value: str


@dataclass(frozen=True)
class UpdateSalary:
    value: float


FieldUpdate = Union[
    UpdateName,
    UpdateAge,
    UpdateAddress,
    UpdateDepartment,
    UpdateDesignation,
    UpdateSalary,
]

# Field name -> update constructor, in the order the shell presents them.
UPDATABLE_FIELDS: Dict[str, Callable[[Any], FieldUpdate]] = {
    "name": UpdateName,
    "age": UpdateAge,
    "address": UpdateAddress,
    "department": UpdateDepartment,
    "designation": UpdateDesignation,
    "salary": UpdateSalary,
}


def make_update(field: str, value: Any) -> FieldUpdate:
    """
    Build the update for a field given by name.

    Raises
    ------
    ValueError
        If `field` is not one of UPDATABLE_FIELDS.
    """
    try:
        factory = UPDATABLE_FIELDS[field]
    except KeyError:
        raise ValueError(
            f"Unknown field '{field}'. Updatable: {', '.join(UPDATABLE_FIELDS)}"
        ) from None
    return factory(value)


def apply_update(employee: Employee, update: FieldUpdate) -> None:
    """Assign the update's value to the matching field of `employee`."""
    match update:
        case UpdateName(value=value):
            employee.name = value
        case UpdateAge(value=value):
            employee.age = value
        case UpdateAddress(value=value):
            employee.address = value
        case UpdateDepartment(value=value):
            employee.department = value
        case UpdateDesignation(value=value):
            employee.designation = value
        case UpdateSalary(value=value):
            employee.salary = value
        case _:
            assert_never(update)


__all__ = [
    "FieldUpdate",
    "UPDATABLE_FIELDS",
    "UpdateAddress",
    "UpdateAge",
    "UpdateDepartment",
    "UpdateDesignation",
    "UpdateName",
    "UpdateSalary",
    "apply_update",
    "make_update",
]
