from __future__ import annotations

import io
from datetime import date

from rich.console import Console

from employee_manager.reporter import build_employee_table, print_employees

REFERENCE_DAY = date(2026, 10, 17)


def _render(renderable) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=200, color_system=None).print(renderable)
    return buffer.getvalue()


def test_table_has_one_row_per_employee_with_tenure(ana, bo) -> None:
    table = build_employee_table([ana, bo], title="Employees", today=REFERENCE_DAY)

    assert table.row_count == 2
    out = _render(table)
    assert "50,000.00" in out
    assert "2021-06-01" in out
    # Ana joined 2020-01-10 -> 6 years, Bo joined 2021-06-01 -> 5 years.
    ana_line = next(line for line in out.splitlines() if "Ana" in line)
    bo_line = next(line for line in out.splitlines() if " Bo " in line)
    assert ana_line.rstrip(" │|").endswith("6")
    assert bo_line.rstrip(" │|").endswith("5")


def test_markup_in_text_fields_is_rendered_literally(employee_factory) -> None:
    emp = employee_factory(name="[bold]Eve[/bold]")
    out = _render(build_employee_table([emp], today=REFERENCE_DAY))
    assert "[bold]Eve[/bold]" in out


def test_print_employees_shows_notice_when_empty() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)

    print_employees(console, [], empty_message="Nothing here.")

    assert buffer.getvalue().strip() == "Nothing here."
