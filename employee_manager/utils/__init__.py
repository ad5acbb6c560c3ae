"""
Utilities package for the Employee Record Manager.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of domain-specific logic.
"""

from employee_manager.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
