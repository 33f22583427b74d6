"""Operations on a task list: adding, deleting and updating tasks."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Sequence

from .storage import Task

NOT_COMPLETED = "not completed"
COMPLETED = "completed ✅"

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(day: date) -> str:
    """Format a date as '<year> <Month> <day>'."""
    return f"{day.year} {_MONTHS[day.month - 1]} {day.day}"


def add_task(
    tasks: Sequence[Task], description: str, day: date | None = None
) -> list[Task]:
    """Return the list with a new, not completed task appended."""
    added = Task(
        id=str(len(tasks) + 1),
        description=description,
        status=NOT_COMPLETED,
        date=format_date(day or date.today()),
    )
    return [*tasks, added]


def delete_task(tasks: Sequence[Task], task_id: str | int) -> list[Task]:
    """Return the list without tasks whose id matches, renumbered from 1."""
    key = str(task_id)
    kept = [task for task in tasks if task.id != key]
    return [replace(task, id=str(number)) for number, task in enumerate(kept, 1)]


def update_description(
    tasks: Sequence[Task], task_id: int, description: str
) -> list[Task]:
    """Return the list with the description of the task at position task_id replaced."""
    target = task_id - 1
    return [
        replace(task, description=description) if index == target else task
        for index, task in enumerate(tasks)
    ]


def update_status(tasks: Sequence[Task], task_id: int, completed: bool) -> list[Task]:
    """Return the list with the task at position task_id marked (not) completed."""
    target = task_id - 1
    status = COMPLETED if completed else NOT_COMPLETED
    return [
        replace(task, status=status) if index == target else task
        for index, task in enumerate(tasks)
    ]