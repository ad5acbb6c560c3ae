from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from employee_manager.config import get_settings
from employee_manager.infrastructure.persistence import JsonFileGateway, LoadStatus
from employee_manager.reporter import print_employees
from employee_manager.shell import InteractionShell
from employee_manager.store import RecordStore, SortKey
from employee_manager.utils.logging import configure_logging

app = typer.Typer(help="Employee Record Manager CLI.")

DATA_FILE_OPTION = typer.Option(
    None,
    "--data-file",
    "-f",
    help="Path of the employee data file (default from settings).",
)


def _gateway(data_file: Optional[Path]) -> JsonFileGateway:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    return JsonFileGateway(
        data_file or settings.data_file,
        replace_attempts=settings.save_retry_attempts,
    )


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data_file={settings.data_file} | env={settings.app_env} | "
        f"log_level={settings.log_level} json_logs={settings.log_json} | "
        f"save_retry_attempts={settings.save_retry_attempts}"
    )


@app.command()
def run(data_file: Optional[Path] = DATA_FILE_OPTION) -> None:
    """
    Start an interactive session; records are saved on "Save and Exit".
    """
    shell = InteractionShell(RecordStore(), _gateway(data_file))
    result = shell.run()
    if not result.ok:
        raise typer.Exit(code=1)


@app.command("list")
def list_employees(
    sort: SortKey = typer.Option(
        SortKey.NAME,
        "--sort",
        "-s",
        help="Ordering: name (ascending), salary (descending) or joining_date (ascending).",
    ),
    data_file: Optional[Path] = DATA_FILE_OPTION,
) -> None:
    """
    Print the stored employees once, without entering the interactive menu.
    """
    gateway = _gateway(data_file)
    result = gateway.load()
    if result.status is LoadStatus.FAILED:
        typer.echo(f"Error loading employees: {result.error}", err=True)
        raise typer.Exit(code=1)
    store = RecordStore(result.employees)
    print_employees(Console(), store.list(sort), title="Employees", caption=f"Sorted by {sort.value}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user. Unsaved changes were discarded.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
