"""A collection of tasks kept in a plain text file."""

from __future__ import annotations

from .color import Color, _paint
from .task import Status, Task


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id):
        super().__init__(f"Task {task_id} not found!")
        self.task_id = task_id


class TaskManager:
    """Loads tasks from a file, changes them and writes them back."""

    def __init__(self, filename="tasks.txt"):
        self.filename = filename
        self.tasks: list[Task] = []
        self._next_id = 1
        self.loaded = self._load()

    def _load(self) -> bool:
        try:
            with open(self.filename, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            return False
        for line in lines:
            if line:
                task = Task.from_line(line)
                self.tasks.append(task)
                self._next_id = max(self._next_id, task.id + 1)
        return True

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def save(self) -> None:
        """Write every task to the file, one per line."""
        with open(self.filename, "w", encoding="utf-8") as handle:
            handle.writelines(task.to_line() + "\n" for task in self.tasks)

    def _find(self, task_id) -> Task:
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def add(self, description) -> Task:
        """Create a task with the next free id and save it."""
        task = Task(self._next_id, description)
        self._next_id += 1
        self.tasks.append(task)
        self.save()
        return task

    def update(self, task_id, description) -> Task:
        """Replace a task's description."""
        task = self._find(task_id)
        task.rename(description)
        self.save()
        return task

    def delete(self, task_id) -> None:
        """Remove every task with the given id."""
        remaining = [task for task in self.tasks if task.id != task_id]
        if len(remaining) == len(self.tasks):
            raise TaskNotFoundError(task_id)
        self.tasks = remaining
        self.save()

    def _mark(self, task_id, status) -> Task:
        task = self._find(task_id)
        task.mark(status)
        self.save()
        return task

    def mark_in_progress(self, task_id) -> Task:
        """Set a task's status to in-progress."""
        return self._mark(task_id, Status.IN_PROGRESS)

    def mark_done(self, task_id) -> Task:
        """Set a task's status to done."""
        return self._mark(task_id, Status.DONE)

    def with_status(self, status) -> list[Task]:
        """The tasks whose status equals status, in stored order."""
        wanted = status.value if isinstance(status, Status) else status
        return [task for task in self.tasks if task.status == wanted]

    def exists(self, task_id) -> bool:
        """Whether a task with this id is present."""
        return any(task.id == task_id for task in self.tasks)

    def render_all(self, color) -> str:
        """A listing of every task."""
        if not self.tasks:
            return _paint(" No tasks found. Add some tasks to get started!", Color.YELLOW, color) + "\n"
        header = _paint(f"\n Task List ({len(self.tasks)} tasks):\n", Color.CYAN, color) + "\n"
        return header + "".join(task.render(color) + "\n" for task in self.tasks)

    def render_by_status(self, status, color) -> str:
        """A listing of the tasks with a given status, with a summary line."""
        label = status.value if isinstance(status, Status) else status
        matches = self.with_status(status)
        parts = [_paint(f"\n Tasks with status '{label}':\n", Color.CYAN, color) + "\n"]
        parts.extend(task.render(color) + "\n" for task in matches)
        if matches:
            summary = _paint(f"Found {len(matches)} task(s) with status '{label}'", Color.GREEN, color)
        else:
            summary = _paint(f" No tasks found with status: {label}", Color.YELLOW, color)
        parts.append(summary + "\n")
        return "".join(parts)


_USAGE_LINES = (
    '  task-cli add "Task description"     - Add a new task\n'
    '  task-cli update <id> "New desc"     - Update a task\n'
    "  task-cli delete <id>                - Delete a task\n"
    "  task-cli mark-in-progress <id>      - Mark task as in progress\n"
    "  task-cli mark-done <id>             - Mark task as done\n"
    "  task-cli list                       - List all tasks\n"
    "  task-cli list todo                  - List todo tasks\n"
    "  task-cli list in-progress           - List in-progress tasks\n"
    "  task-cli list done                  - List done tasks\n"
)


def usage_text(color) -> str:
    """The command-line usage guide."""
    header = _paint("\n Task Tracker CLI - Usage Guide:\n", Color.CYAN, color) + "\n"
    return header + _paint(_USAGE_LINES, Color.WHITE, color) + "\n"