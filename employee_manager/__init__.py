"""
Employee Record Manager - an interactive, single-operator employee register.

This package keeps employee records in an in-memory store, lets an operator
add, view, search, update, remove and date-filter them through a numbered
menu, and persists the whole record set to a local JSON file between runs:

- Employee model with tenure derived from the joining date
- RecordStore with validated add, sorted listing and date-range filtering
- JsonFileGateway with atomic whole-snapshot saves
- Interactive shell and typer CLI
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from employee_manager.config import Settings, get_settings
from employee_manager.domain.models import Employee
from employee_manager.domain.updates import FieldUpdate, apply_update, make_update
from employee_manager.infrastructure.persistence import (
    JsonFileGateway,
    LoadResult,
    LoadStatus,
    SaveResult,
)
from employee_manager.store import (
    AddOutcome,
    RecordStore,
    RemoveOutcome,
    SortKey,
    UpdateOutcome,
)
from employee_manager.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Employee",
    "FieldUpdate",
    "apply_update",
    "make_update",
    # Store
    "AddOutcome",
    "RecordStore",
    "RemoveOutcome",
    "SortKey",
    "UpdateOutcome",
    # Persistence
    "JsonFileGateway",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    # Logging
    "configure_logging",
    "get_logger",
]
