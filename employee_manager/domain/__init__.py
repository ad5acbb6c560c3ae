"""
Domain package for the Employee Record Manager.

Exports the employee model and the single-field update types.
Keep this package focused on data definitions.
"""

from employee_manager.domain.models import Employee, whole_years_between
from employee_manager.domain.updates import (
    UPDATABLE_FIELDS,
    FieldUpdate,
    UpdateAddress,
    UpdateAge,
    UpdateDepartment,
    UpdateDesignation,
    UpdateName,
    UpdateSalary,
    apply_update,
    make_update,
)

__all__ = [
    "Employee",
    "whole_years_between",
    # Updates
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
