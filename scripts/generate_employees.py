"""
Synthetic employee data generator for the Employee Record Manager.

Implements deterministic pseudo-random employee generation and writes the
result through the same JSON gateway the application loads from.
"""

from __future__ import annotations

import random
import sys
import time
from datetime import date, timedelta
from pathlib import Path
from typing import List

import typer

from employee_manager.domain.models import Employee
from employee_manager.infrastructure.persistence import JsonFileGateway

app = typer.Typer(help="Generate synthetic employees and write them to a data file.")

FIRST_NAMES = ["Ana", "Bo", "Chen", "Dara", "Emeka", "Farah", "Goran", "Hana", "Ivo", "Jun"]
LAST_NAMES = ["Alves", "Berg", "Costa", "Diallo", "Eriksen", "Fujita", "Garcia", "Haddad"]
DEPARTMENTS = {
    "Engineering": ["Engineer", "Senior Engineer", "Staff Engineer"],
    "Finance": ["Analyst", "Accountant", "Controller"],
    "People": ["Recruiter", "HR Partner"],
    "Sales": ["Account Executive", "Sales Manager"],
}
STREETS = ["Oak St", "Maple Ave", "Harbor Rd", "Mill Ln", "Station Sq"]
EARLIEST_JOINING = date(2005, 1, 1)


def _generate_employees(count: int, seed: int, today: date | None = None) -> List[Employee]:
    rng = random.Random(seed)
    latest = today or date.today()
    span_days = (latest - EARLIEST_JOINING).days

    employees: List[Employee] = []
    for employee_id in range(1, count + 1):
        department = rng.choice(sorted(DEPARTMENTS))
        employees.append(
            Employee(
                id=employee_id,
                name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                age=rng.randint(21, 65),
                address=f"{rng.randint(1, 999)} {rng.choice(STREETS)}",
                department=department,
                designation=rng.choice(DEPARTMENTS[department]),
                salary=round(rng.uniform(30_000, 180_000), 2),
                joining_date=EARLIEST_JOINING + timedelta(days=rng.randint(0, span_days)),
            )
        )
    return employees


@app.command()
def main(
    count: int = typer.Option(
        50,
        "--count",
        "-n",
        min=0,
        help="Number of employees to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("employees.json"),
        "--output",
        "-o",
        help="Data file to write (overwritten).",
    ),
) -> None:
    """
    Generate synthetic employees and save them as a data file.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {count:,} employees -> {output} (seed={seed})")
    employees = _generate_employees(count, seed=seed)
    result = JsonFileGateway(output).save(employees)
    if not result.ok:
        typer.echo(f"Save failed: {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {result.count:,} employees in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
