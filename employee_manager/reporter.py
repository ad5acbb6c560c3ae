from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from employee_manager.domain.models import Employee


def build_employee_table(
    employees: Sequence[Employee],
    title: Optional[str] = None,
    caption: Optional[str] = None,
    today: Optional[date] = None,
) -> Table:
    """
    Build a rich table of employees, one row each, with tenure computed
    against `today` (defaults to the current date).
    """
    reference = today or date.today()
    table = Table(title=title, caption=caption, box=box.ROUNDED)

    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Age", justify="right")
    table.add_column("Address")
    table.add_column("Department", style="magenta")
    table.add_column("Designation", style="blue")
    table.add_column("Salary", justify="right", style="green")
    table.add_column("Joining Date", justify="right")
    table.add_column("Tenure (years)", justify="right", style="yellow")

    for emp in employees:
        table.add_row(
            str(emp.id),
            escape(emp.name),
            str(emp.age),
            escape(emp.address),
            escape(emp.department),
            escape(emp.designation),
            f"{emp.salary:,.2f}",
            emp.joining_date.isoformat(),
            str(emp.tenure_on(reference)),
        )
    return table


def print_employees(
    console: Console,
    employees: Sequence[Employee],
    title: Optional[str] = None,
    caption: Optional[str] = None,
    empty_message: str = "No employees to display.",
) -> None:
    """Render employees as a table, or a notice when there are none."""
    if not employees:
        console.print(f"[yellow]{empty_message}[/yellow]")
        return
    console.print(build_employee_table(employees, title=title, caption=caption))


def print_employee(console: Console, employee: Employee, title: Optional[str] = None) -> None:
    console.print(build_employee_table([employee], title=title))


__all__ = ["build_employee_table", "print_employee", "print_employees"]
