"""
Interactive menu shell for the Employee Record Manager.

The shell owns no state beyond its collaborators: it reads operator input,
parses it into typed values, calls the RecordStore and the persistence
gateway, and prints results through a rich Console. Malformed input aborts
only the operation in progress; the menu loop keeps running until the
operator chooses "Save and Exit" or input ends.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from employee_manager.domain.models import Employee
from employee_manager.domain.updates import UPDATABLE_FIELDS, make_update
from employee_manager.infrastructure.persistence import (
    JsonFileGateway,
    LoadResult,
    LoadStatus,
    SaveResult,
)
from employee_manager.parsing import MalformedInput, parse_date, parse_float, parse_int
from employee_manager.reporter import print_employee, print_employees
from employee_manager.store import (
    AddOutcome,
    RecordStore,
    RemoveOutcome,
    SortKey,
    UpdateOutcome,
)
from employee_manager.utils.logging import get_logger

log = get_logger(__name__)

SORT_CHOICES: Dict[str, Tuple[str, SortKey]] = {
    "1": ("Name", SortKey.NAME),
    "2": ("Salary", SortKey.SALARY),
    "3": ("Joining Date", SortKey.JOINING_DATE),
}

_FIELD_PARSERS: Dict[str, Callable[[str, str], object]] = {
    "age": parse_int,
    "salary": parse_float,
}


class InteractionShell:
    """
    Numbered-menu session over a RecordStore.

    Parameters
    ----------
    store : RecordStore
        Store the session operates on; replaced wholesale by `start`.
    gateway : JsonFileGateway
        Loaded once by `start`, saved once by `save_and_exit`.
    console : Console, optional
        Output target. Defaults to a new stdout console.
    read_line : callable, optional
        Prompt function returning one line of input; raising EOFError ends the
        session. Defaults to `console.input`.
    """

    def __init__(
        self,
        store: RecordStore,
        gateway: JsonFileGateway,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.store = store
        self.gateway = gateway
        self.console = console or Console()
        self._read_line = read_line or self.console.input
        self._actions: Dict[str, Tuple[str, Callable[[], None]]] = {
            "1": ("Add Employee", self.add_employee),
            "2": ("View Employees", self.view_employees),
            "3": ("Search Employee", self.search_employee),
            "4": ("Update Employee", self.update_employee),
            "5": ("Remove Employee", self.remove_employee),
            "6": ("Filter Employees by Joining Date", self.filter_by_joining_date),
        }

    def _ask(self, label: str) -> str:
        return self._read_line(label).strip()

    def _say(self, message: str) -> None:
        self.console.print(message, highlight=False)

    def _error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]", highlight=False)

    # --- Session lifecycle ---
    def start(self) -> LoadResult:
        """Load the backing file into the store; a failed load leaves it empty."""
        result = self.gateway.load()
        self.store.replace_all(result.employees)
        if result.status is LoadStatus.LOADED:
            self._say(f"Employees loaded successfully ({len(result.employees)} records).")
        elif result.status is LoadStatus.MISSING:
            self._say("No existing employee data found. Starting with empty database.")
        else:
            self._error(f"Error loading employees: {result.error}")
            self._say("Continuing with an empty database.")
        return result

    def run(self) -> SaveResult:
        """Load, loop over the main menu, and save on exit."""
        self.start()
        while True:
            self._print_menu()
            try:
                try:
                    choice = parse_int(self._ask("Enter your choice: "), "choice")
                except MalformedInput:
                    self._say("Invalid input. Please enter a number.")
                    continue
                if choice == 7:
                    return self.save_and_exit()
                action = self._actions.get(str(choice))
                if action is None:
                    self._say("Invalid choice. Please try again.")
                    continue
                action[1]()
            except EOFError:
                self._say("")
                log.info("Input ended; saving and exiting")
                return self.save_and_exit()

    def _print_menu(self) -> None:
        self._say("\n[bold]--- Employee Management System ---[/bold]")
        for key, (label, _) in self._actions.items():
            self._say(f"{key}. {label}")
        self._say("7. Save and Exit")

    def save_and_exit(self) -> SaveResult:
        result = self.gateway.save(self.store.snapshot())
        if result.ok:
            self._say(f"Employees saved successfully ({result.count} records).")
        else:
            self._error(f"Error saving employees: {result.error}")
            self._error("Changes made in this session may be lost.")
        self._say("Exiting Employee Management System. Goodbye!")
        return result

    # --- Menu actions ---
    def add_employee(self) -> None:
        self._say("\n--- Add New Employee ---")
        try:
            employee_id = parse_int(self._ask("Enter Employee ID: "), "employee ID")
            if employee_id in self.store:
                self._say("Employee ID already exists. Please use a unique ID.")
                return
            name = self._ask("Enter Name: ")
            age = parse_int(self._ask("Enter Age: "), "age")
            address = self._ask("Enter Address: ")
            department = self._ask("Enter Department: ")
            designation = self._ask("Enter Designation: ")
            salary = parse_float(self._ask("Enter Salary: "), "salary")
            joining_date = parse_date(self._ask("Enter Joining Date (yyyy-MM-dd): "), "joining date")
        except MalformedInput as exc:
            log.debug("Add aborted", extra={"error": str(exc)})
            self._say("Invalid input. Employee not added.")
            return

        employee = Employee(
            id=employee_id,
            name=name,
            age=age,
            address=address,
            department=department,
            designation=designation,
            salary=salary,
            joining_date=joining_date,
        )
        if self.store.add(employee) is AddOutcome.ACCEPTED:
            self._say(f"Employee added successfully: {escape(employee.name)}")
        else:
            self._say("Invalid employee data. Cannot add employee.")

    def view_employees(self) -> None:
        self._say("\n--- View Employees ---")
        self._say("Sort By:")
        for key, (label, _) in SORT_CHOICES.items():
            self._say(f"{key}. {label}")
        choice = SORT_CHOICES.get(self._ask("Enter your choice: "))
        if choice is None:
            self._say("Invalid selection. Showing default (by name).")
            choice = SORT_CHOICES["1"]
        label, key = choice
        print_employees(
            self.console,
            self.store.list(key),
            title="Employees",
            caption=f"Sorted by {label}",
        )

    def _ask_employee_id(self, label: str) -> Optional[int]:
        try:
            return parse_int(self._ask(label), "employee ID")
        except MalformedInput:
            self._say("Invalid Employee ID.")
            return None

    def search_employee(self) -> None:
        self._say("\n--- Search Employee ---")
        employee_id = self._ask_employee_id("Enter Employee ID to search: ")
        if employee_id is None:
            return
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            self._say(f"Employee not found with ID: {employee_id}")
            return
        print_employee(self.console, employee)

    def update_employee(self) -> None:
        self._say("\n--- Update Employee ---")
        employee_id = self._ask_employee_id("Enter Employee ID to update: ")
        if employee_id is None:
            return
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            self._say(f"Employee not found with ID: {employee_id}")
            return

        print_employee(self.console, employee, title="Current Employee Details")
        fields = list(UPDATABLE_FIELDS)
        self._say("Select attribute to update:")
        for index, field in enumerate(fields, start=1):
            self._say(f"{index}. {field.capitalize()}")
        try:
            index = parse_int(self._ask("Enter your choice: "), "choice")
        except MalformedInput:
            self._say("Invalid input.")
            return
        if not 1 <= index <= len(fields):
            self._say("Invalid choice.")
            return

        field = fields[index - 1]
        raw = self._ask(f"Enter new {field.capitalize()}: ")
        parser = _FIELD_PARSERS.get(field)
        try:
            value = parser(raw, field) if parser else raw
        except MalformedInput:
            self._say("Invalid input.")
            return

        if self.store.update(employee_id, make_update(field, value)) is UpdateOutcome.APPLIED:
            self._say("Employee updated successfully.")
            print_employee(self.console, employee, title="Updated Employee")
        else:
            self._say(f"Employee not found with ID: {employee_id}")

    def remove_employee(self) -> None:
        self._say("\n--- Remove Employee ---")
        employee_id = self._ask_employee_id("Enter Employee ID to remove: ")
        if employee_id is None:
            return
        if self.store.remove(employee_id) is RemoveOutcome.REMOVED:
            self._say("Employee removed successfully.")
        else:
            self._say("Employee not found.")

    def filter_by_joining_date(self) -> None:
        self._say("\n--- Filter Employees by Joining Date ---")
        try:
            start = parse_date(self._ask("Enter Start Date (yyyy-MM-dd): "), "start date")
            end = parse_date(self._ask("Enter End Date (yyyy-MM-dd): "), "end date")
        except MalformedInput:
            self._say("Invalid date format. Use yyyy-MM-dd.")
            return

        matches = self.store.filter_by_joining_date_range(start, end)
        if not matches:
            self._say("No employees found in the specified date range.")
            return
        print_employees(
            self.console,
            matches,
            title=f"Employees joining between {start.isoformat()} and {end.isoformat()}",
        )


__all__ = ["InteractionShell", "SORT_CHOICES"]
