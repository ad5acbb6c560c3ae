"""
Domain models for the Employee Record Manager.

Defines the employee record held by the store and persisted by the gateway.
The model only coerces field types; the acceptance rules (non-empty name,
positive id and salary) belong to `RecordStore.add`, so a candidate that
fails them can still be constructed and then rejected.
"""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


def whole_years_between(start: date, end: date) -> int:
    """
    Count complete years from `start` to `end`, truncated toward zero.

    Negative when `end` precedes `start`.
    """
    if end < start:
        return -whole_years_between(end, start)
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class Employee(BaseModel):
    """
    A single employee record.

    `tenure` is derived from `joining_date` on every access and is never
    serialized.
    """

    id: int = Field(..., description="Employee identifier, primary key of the store.")
    name: str = Field(..., description="Full name.")
    age: int = Field(0, description="Age in years.")
    address: str = Field("", description="Postal address.")
    department: str = Field("", description="Department name.")
    designation: str = Field("", description="Job title.")
    salary: float = Field(..., description="Salary amount.")
    joining_date: date = Field(
        ..., alias="joiningDate", description="Calendar date the employee joined."
    )

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra="ignore",
        ser_json_inf_nan="constants",
    )

    def tenure_on(self, day: date) -> int:
        """Whole years between the joining date and `day`."""
        return whole_years_between(self.joining_date, day)

    @property
    def tenure(self) -> int:
        return self.tenure_on(date.today())


__all__ = ["Employee", "whole_years_between"]
