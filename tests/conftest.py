"""
Pytest configuration for the Employee Record Manager.

Provides fixtures for:
- Sample employees and a pre-populated store
- Temporary data files and gateways
- Scripted interactive shell sessions with captured output
- Settings isolation from the developer's environment
"""

from __future__ import annotations

import io
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, List

import pytest
from rich.console import Console

from employee_manager.config import get_settings
from employee_manager.domain.models import Employee
from employee_manager.infrastructure.persistence import JsonFileGateway
from employee_manager.shell import InteractionShell
from employee_manager.store import RecordStore


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Keep Settings independent of the caller's environment and `.env` file.
    """
    for var in ("EMPLOYEE_DATA_FILE", "LOG_LEVEL", "LOG_JSON", "SAVE_RETRY_ATTEMPTS", "APP_ENV"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_employee(
    id: int = 1,
    name: str = "Ana",
    salary: float = 50_000.0,
    joining_date: date = date(2020, 1, 10),
    age: int = 30,
    address: str = "1 Oak St",
    department: str = "Engineering",
    designation: str = "Engineer",
) -> Employee:
    return Employee(
        id=id,
        name=name,
        age=age,
        address=address,
        department=department,
        designation=designation,
        salary=salary,
        joining_date=joining_date,
    )


@pytest.fixture
def employee_factory() -> Callable[..., Employee]:
    return make_employee


@pytest.fixture
def ana() -> Employee:
    return make_employee(id=1, name="Ana", salary=50_000.0, joining_date=date(2020, 1, 10))


@pytest.fixture
def bo() -> Employee:
    return make_employee(
        id=2,
        name="Bo",
        salary=70_000.0,
        joining_date=date(2021, 6, 1),
        department="Finance",
        designation="Analyst",
    )


@pytest.fixture
def populated_store(ana: Employee, bo: Employee) -> RecordStore:
    store = RecordStore()
    store.add(ana)
    store.add(bo)
    return store


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "employees.json"


@pytest.fixture
def gateway(data_file: Path) -> JsonFileGateway:
    return JsonFileGateway(data_file, replace_attempts=2)


class ScriptedSession:
    """An InteractionShell fed from a list of lines, capturing all output."""

    def __init__(self, store: RecordStore, gateway: JsonFileGateway, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: List[str] = []
        self.buffer = io.StringIO()
        console = Console(file=self.buffer, width=200, color_system=None, force_terminal=False)
        self.shell = InteractionShell(store, gateway, console=console, read_line=self._read_line)

    def _read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def scripted_session(gateway: JsonFileGateway) -> Callable[..., ScriptedSession]:
    def factory(lines: Iterable[str], store: RecordStore | None = None) -> ScriptedSession:
        return ScriptedSession(store if store is not None else RecordStore(), gateway, lines)

    return factory
