"""
Infrastructure package for the Employee Record Manager.

Centralizes storage concerns (the JSON file gateway). Keep this layer focused
on I/O and resource management, decoupled from the store and the shell.
"""

from employee_manager.infrastructure.persistence import (
    JsonFileGateway,
    LoadResult,
    LoadStatus,
    PersistenceIOFailure,
    SaveResult,
)

__all__ = [
    "JsonFileGateway",
    "LoadResult",
    "LoadStatus",
    "PersistenceIOFailure",
    "SaveResult",
]
