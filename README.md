# tasktracker

A small command-line task tracker. Tasks are kept in `tasks.txt` in the
current directory, one task per line, and each one has a status of `todo`,
`in-progress` or `done`.

## Installation

```
pip install .
```

This installs the `task-cli` command.

## Usage

```
task-cli add "Buy groceries"          # add a new task
task-cli update 1 "Buy milk and eggs" # change a task's description
task-cli delete 1                     # delete a task
task-cli mark-in-progress 2           # mark a task as in progress
task-cli mark-done 2                  # mark a task as done
task-cli list                         # list every task
task-cli list todo                    # list tasks that are still to do
task-cli list in-progress             # list tasks in progress
task-cli list done                    # list finished tasks
```

Every run first reports whether it loaded `tasks.txt` ("Successfully loaded
N tasks.") or found no file ("No existing tasks file found. Starting
fresh!"). The file is written back after every change.

If you run `task-cli` with no command, or with a command it does not know
or without the arguments it needs, it shows a welcome message and the usage
guide, then exits with status 1. It also exits with status 1 when a task id
is not a number or the tasks file cannot be read or written. When no task
has the given id, it prints an error to standard error and exits with
status 0.

Every task has an id, a description, a status, and the times it was created
and last updated. Ids start at 1 and each new task gets one more than the
highest id loaded. The times are stored as Unix timestamps and shown in
local time as `YYYY-MM-DD HH:MM:SS`. Output is coloured with ANSI escape
codes when it goes to a terminal, and plain otherwise.

Each line of `tasks.txt` has the form `id|description|status|created|updated`,
so a description should not itself contain `|`.

## Using it from Python

```python
from tasktracker.manager import TaskManager, TaskNotFoundError

manager = TaskManager("tasks.txt")
task = manager.add("Write the report")
manager.mark_in_progress(task.id)
print([t.description for t in manager.with_status("in-progress")])
print(manager.render_all(color=False))
```

`TaskManager` offers `add`, `update`, `delete`, `mark_in_progress`,
`mark_done`, `with_status`, `exists`, `save`, `render_all` and
`render_by_status`. If no task has the given id, `update`, `delete` and the
`mark_*` methods raise `TaskNotFoundError`.

`tasktracker.task` holds the `Task` dataclass and the `Status` enum;
`Task.to_line` and `Task.from_line` convert to and from the storage line.
`tasktracker.color` holds the `Color` enum and the helpers `colorize`,
`status_color` and `priority_color`.

## Running the tests

```
pip install ".[test]"
pytest
```