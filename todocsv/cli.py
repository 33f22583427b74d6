"""Command line interface for the CSV todo list."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from .storage import TaskFileError, TaskStore, render_table
from .tasks import add_task, delete_task, update_description, update_status

Handler = Callable[[TaskStore, argparse.Namespace], int]


def _show(store: TaskStore) -> None:
    print(render_table(store.load()))


def _read_line() -> str:
    return sys.stdin.readline()


def _create(store: TaskStore, args: argparse.Namespace) -> int:
    store.create()
    print("New CSV file has been initialized.")
    return 0


def _clear(store: TaskStore, args: argparse.Namespace) -> int:
    store.clear()
    print("Task list successfully cleared.")
    return 0


def _list(store: TaskStore, args: argparse.Namespace) -> int:
    _show(store)
    return 0


def _add(store: TaskStore, args: argparse.Namespace) -> int:
    print("enter your task below:")
    line = _read_line()
    if not line.endswith("\n"):
        print("Could not read the input.", file=sys.stderr)
        return 1
    store.save(add_task(store.load(), line.strip()))
    print("successfully added task!")
    _show(store)
    return 0


def _delete(store: TaskStore, args: argparse.Namespace) -> int:
    print("Enter the id of the task you want to delete: ", end="", flush=True)
    task_id = _read_line().strip()
    store.save(delete_task(store.load(), task_id))
    print("successfully deleted task")
    _show(store)
    return 0


def _description(store: TaskStore, args: argparse.Namespace) -> int:
    print("Enter the id of the task you would like to update: ", end="", flush=True)
    raw_id = _read_line().strip()
    try:
        task_id = int(raw_id)
    except ValueError:
        print("Could not convert input to an id.", file=sys.stderr)
        task_id = 0
    print("\nNow, enter the new description")
    description = _read_line().strip()
    store.save(update_description(store.load(), task_id, description))
    print("successfully updated task description")
    _show(store)
    return 0


def _status(store: TaskStore, args: argparse.Namespace) -> int:
    if args.completed and args.ncompleted:
        print("Cannot use both flags at once", file=sys.stderr)
        return 1
    if not args.completed and not args.ncompleted:
        print("Please make sure to use -c for completed or -n for not completed")
        return 0
    print("Enter the id of the task you would like to update below:")
    line = _read_line()
    if not line.endswith("\n"):
        print("Could not read input.", file=sys.stderr)
        return 1
    try:
        task_id = int(line.strip())
    except ValueError:
        print(f"Invalid task id: {line.strip()!r}", file=sys.stderr)
        return 1
    store.save(update_status(store.load(), task_id, args.completed))
    print("successfully updated task's status!")
    _show(store)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="todo",
        description="A todo application that allows the user to add, update, "
        "and delete tasks as needed.",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="task file (default: tasks.csv in the home directory)",
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="toggle")
    parser.set_defaults(handler=None, help_parser=parser)
    commands = parser.add_subparsers(dest="command", metavar="command")

    simple: list[tuple[str, str, Handler]] = [
        ("create", "Creates a new CSV file", _create),
        ("clear", "Clears the task list.", _clear),
        ("list", "List all of your tasks", _list),
        ("addTask", "Add a new task to your todo list.", _add),
        ("delete", "Deletes a task.", _delete),
    ]
    for name, summary, handler in simple:
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.set_defaults(handler=handler)

    update = commands.add_parser(
        "updateTask",
        help="Update a task's description or status",
        description="Update a task's description or status.",
    )
    update.set_defaults(handler=None, help_parser=update)
    update_commands = update.add_subparsers(dest="update_command", metavar="command")

    description = update_commands.add_parser(
        "description", help="Allows user to update a task's description"
    )
    description.set_defaults(handler=_description)

    status = update_commands.add_parser(
        "status", help="Updates a task's status. -c or -n required"
    )
    status.add_argument("arg", nargs="?", help=argparse.SUPPRESS)
    status.add_argument(
        "-c", "--completed", action="store_true", help="marks tasks as completed"
    )
    status.add_argument(
        "-n",
        "--ncompleted",
        action="store_true",
        help="marks tasks as Not completed",
    )
    status.set_defaults(handler=_status)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the todo command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.handler is None:
        args.help_parser.print_help()
        return 0
    try:
        return args.handler(TaskStore(args.file), args)
    except TaskFileError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())