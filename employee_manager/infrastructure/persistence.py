"""
JSON file persistence for the employee record set.

The gateway is the only component that touches storage. It loads the whole
record set at startup and writes the whole set back on save; there is no
incremental persistence. Saves go to a temporary sibling file that is fsynced
and then swapped into place with `os.replace`, so a later load sees either the
previous snapshot or the new one, never a partial write.

The final replace is retried with tenacity on PermissionError, which Windows
raises while another process (an editor, an indexer) briefly holds the target.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from employee_manager.domain.models import Employee
from employee_manager.utils.logging import get_logger

log = get_logger(__name__)

_EMPLOYEE_LIST = TypeAdapter(List[Employee])


class PersistenceIOFailure(OSError):
    """The backing file exists but could not be read, parsed or written."""


class LoadStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    employees: List[Employee] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is not LoadStatus.FAILED


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    count: int = 0
    error: Optional[str] = None


class JsonFileGateway:
    """
    Load and save the full employee list as a JSON array.

    Parameters
    ----------
    path : Path | str
        Backing file location. Its parent directory is created on save.
    replace_attempts : int
        Attempts for the final atomic replace when it fails with PermissionError.
    """

    def __init__(self, path: Path | str, replace_attempts: int = 3) -> None:
        self.path = Path(path)
        self.replace_attempts = max(1, replace_attempts)

    def read(self) -> List[Employee]:
        """
        Parse the backing file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        PersistenceIOFailure
            If the file cannot be read or does not hold a valid employee list.
        """
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceIOFailure(f"Cannot read {self.path}: {exc}") from exc
        try:
            return _EMPLOYEE_LIST.validate_json(raw)
        except ValidationError as exc:
            raise PersistenceIOFailure(
                f"Corrupt employee data in {self.path}: {exc.error_count()} error(s)"
            ) from exc

    def write(self, employees: Iterable[Employee]) -> int:
        """
        Atomically replace the backing file with `employees`.

        Returns the number of records written.

        Raises
        ------
        PersistenceIOFailure
            If the snapshot could not be written or swapped into place.
        """
        records = list(employees)
        payload = _EMPLOYEE_LIST.dump_json(records, by_alias=True, indent=2)
        tmp_path: Optional[Path] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            self._replace(tmp_path)
            tmp_path = None
        except RetryError as exc:
            last = exc.last_attempt.exception()
            raise PersistenceIOFailure(f"Cannot replace {self.path}: {last}") from last
        except OSError as exc:
            raise PersistenceIOFailure(f"Cannot write {self.path}: {exc}") from exc
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
        return len(records)

    def _replace(self, tmp_path: Path) -> None:
        for attempt in Retrying(
            stop=stop_after_attempt(self.replace_attempts),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
            retry=retry_if_exception_type(PermissionError),
        ):
            with attempt:
                os.replace(tmp_path, self.path)

    def load(self) -> LoadResult:
        """
        Restore the record set.

        A missing file is the expected first-run state and yields MISSING with
        no records. An unreadable or corrupt file yields FAILED with no records.
        """
        try:
            employees = self.read()
        except FileNotFoundError:
            log.info("No data file; starting empty", extra={"path": str(self.path)})
            return LoadResult(status=LoadStatus.MISSING)
        except PersistenceIOFailure as exc:
            log.error("Failed to load employees", extra={"path": str(self.path), "error": str(exc)})
            return LoadResult(status=LoadStatus.FAILED, error=str(exc))
        log.info("Employees loaded", extra={"path": str(self.path), "count": len(employees)})
        return LoadResult(status=LoadStatus.LOADED, employees=employees)

    def save(self, employees: Iterable[Employee]) -> SaveResult:
        """Write the full record set; the previous file survives any failure."""
        try:
            count = self.write(employees)
        except PersistenceIOFailure as exc:
            log.error("Failed to save employees", extra={"path": str(self.path), "error": str(exc)})
            return SaveResult(ok=False, error=str(exc))
        log.info("Employees saved", extra={"path": str(self.path), "count": count})
        return SaveResult(ok=True, count=count)


__all__ = [
    "JsonFileGateway",
    "LoadResult",
    "LoadStatus",
    "PersistenceIOFailure",
    "SaveResult",
]
