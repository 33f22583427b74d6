"""CSV-backed storage for the task list and its table rendering."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from tabulate import tabulate

FILE_NAME = "tasks.csv"
HEADERS = ("ID", "Description", "Status", "Date Added")
FIELD_COUNT = 4


class TaskFileError(Exception):
    """Raised when the task file cannot be created, opened, read or written."""


@dataclass(frozen=True)
class Task:
    """One row of the task file."""

    id: str
    description: str
    status: str
    date: str

    def to_row(self) -> list[str]:
        """Return the task as the four CSV fields it is stored as."""
        return [self.id, self.description, self.status, self.date]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Task":
        """Build a task from a CSV row of exactly four fields."""
        fields = list(row)
        if len(fields) != FIELD_COUNT:
            raise TaskFileError(
                f"expected {FIELD_COUNT} fields per record, got {len(fields)}"
            )
        return cls(*fields)


def default_path() -> Path:
    """Return the task file location: tasks.csv in the user's home directory."""
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise TaskFileError("Could not find home directory") from exc
    return home / FILE_NAME


class TaskStore:
    """Reads and writes the task list kept in a CSV file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_path()

    def create(self) -> None:
        """Create the task file if it does not exist; existing tasks are kept."""
        try:
            self.path.touch(exist_ok=True)
        except OSError as exc:
            raise TaskFileError("Error while trying to create file.") from exc

    def load(self) -> list[Task]:
        """Read every task from the file."""
        try:
            with self.path.open(newline="", encoding="utf-8") as handle:
                rows = [row for row in csv.reader(handle) if row]
        except (csv.Error, UnicodeDecodeError) as exc:
            raise TaskFileError("Could not read the file") from exc
        except OSError as exc:
            raise TaskFileError("Could not open file.") from exc
        try:
            return [Task.from_row(row) for row in rows]
        except TaskFileError as exc:
            raise TaskFileError("Could not read the file") from exc

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with the given tasks."""
        try:
            with self.path.open("w", newline="", encoding="utf-8") as handle:
                writer = csv.writer(handle, lineterminator="\n")
                writer.writerows(task.to_row() for task in tasks)
        except OSError as exc:
            raise TaskFileError("Could not write the task file.") from exc

    def clear(self) -> None:
        """Empty the task file, creating it if needed."""
        self.save([])


def render_table(tasks: Iterable[Task]) -> str:
    """Render tasks as a text table with the standard headers."""
    return tabulate(
        [task.to_row() for task in tasks], headers=HEADERS, tablefmt="grid"
    )