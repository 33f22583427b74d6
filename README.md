# todocsv

A simple command-line todo list. Tasks are kept in a CSV file, by default
`tasks.csv` in your home directory. Each row holds four fields, with no
header row:

```
<id>,<description>,<status>,<date added>
```

The status is either `not completed` or `completed ✅`, and the date is
written as year, month name and day, for example `2025 July 4`.

## Installation

```
pip install .
```

This installs the `todo` command.

## Usage

Every command accepts `-f FILE` / `--file FILE` before the command name to
use another task file instead of `tasks.csv` in your home directory:

```
todo -f ./my-tasks.csv list
```

Create the task file (existing tasks are kept if it already exists):

```
todo create
```

Add a task. You are prompted for its description, and the task is stored
as "not completed" with today's date. Its id is one more than the number
of tasks already in the file:

```
todo addTask
```

Show all tasks as a table with the columns ID, Description, Status and
Date Added:

```
todo list
```

Change a task's description. You are prompted for the task's number and
then for the new text. The task is found by its position in the list
(1 is the first row); if the number is not valid, nothing is changed:

```
todo updateTask description
```

Mark a task as completed (`-c` / `--completed`) or not completed
(`-n` / `--ncompleted`). Exactly one of the two flags is needed: giving
both is an error, and giving neither only prints a reminder. You are
prompted for the task's number, which must be an integer:

```
todo updateTask status -c
todo updateTask status -n
```

Delete a task. You are prompted for its id; every task with that id is
removed and the remaining tasks are numbered again from 1:

```
todo delete
```

Empty the task list:

```
todo clear
```

After each change the updated list is printed. Running `todo` or
`todo updateTask` without a command prints the help. Commands other than
`create` and `clear` need the task file to exist; if it is missing or is
not a valid four-column CSV file, an error is printed and the exit status
is 1.

## Using it from Python

The `todocsv.storage` module reads and writes the task file through
`TaskStore` (with `create`, `load`, `save` and `clear`), holds each row as
a `Task` and raises `TaskFileError` when the file cannot be used.
`render_table` formats tasks as a text table. The `todocsv.tasks` module
has the list operations `add_task`, `delete_task`, `update_description`
and `update_status`; each returns a new list and leaves its input alone.

```python
import datetime

from todocsv.storage import TaskStore, default_path, render_table
from todocsv.tasks import add_task, update_status

store = TaskStore(default_path())
store.create()
tasks = add_task(store.load(), "water the plants", datetime.date.today())
tasks = update_status(tasks, 1, completed=True)
store.save(tasks)
print(render_table(tasks))
```

## What it does not do

The list is deliberately minimal: there are no due dates, priorities,
categories or reminders, and tasks cannot be sorted or filtered. The task
file is read and written whole on every command, with no locking between
concurrent runs.