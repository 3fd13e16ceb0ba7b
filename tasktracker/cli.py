"""Command-line entry point for the task tracker."""

from __future__ import annotations

import sys

from .color import Color, _paint
from .manager import TaskManager, TaskNotFoundError, usage_text


def welcome_text(color) -> str:
    """The greeting shown above the usage guide."""
    return _paint("\n Welcome to Task Tracker CLI!\n", Color.CYAN, color) + "\n"


def _say(message, shade, stream):
    print(_paint(message, shade, stream.isatty()), file=stream)


def _report_load(manager):
    if manager.loaded:
        _say(f"Successfully loaded {len(manager)} tasks.", Color.GREEN, sys.stdout)
    else:
        _say("No existing tasks file found. Starting fresh!", Color.YELLOW, sys.stdout)


def main(argv=None) -> int:
    """Run one tracker command; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    command, rest = (args[0], args[1:]) if args else (None, [])
    color = sys.stdout.isatty()
    out = sys.stdout

    try:
        manager = TaskManager()
        _report_load(manager)

        if command == "add" and rest:
            task = manager.add(rest[0])
            _say(f" Task added successfully (ID: {task.id})", Color.GREEN, out)
        elif command == "update" and len(rest) >= 2:
            task_id = int(rest[0])
            manager.update(task_id, rest[1])
            _say(f" Task {task_id} updated successfully", Color.GREEN, out)
        elif command == "delete" and rest:
            task_id = int(rest[0])
            manager.delete(task_id)
            _say(f" Task {task_id} deleted successfully", Color.GREEN, out)
        elif command == "mark-in-progress" and rest:
            task_id = int(rest[0])
            manager.mark_in_progress(task_id)
            _say(f" Task {task_id} marked as in-progress", Color.BLUE, out)
        elif command == "mark-done" and rest:
            task_id = int(rest[0])
            manager.mark_done(task_id)
            _say(f" Task {task_id} marked as done", Color.GREEN, out)
        elif command == "list":
            if rest:
                out.write(manager.render_by_status(rest[0], color))
            else:
                out.write(manager.render_all(color))
        else:
            out.write(welcome_text(color))
            out.write(usage_text(color))
            return 1
    except TaskNotFoundError as exc:
        _say(f" Error: {exc}", Color.RED, sys.stderr)
        return 0
    except (OSError, ValueError) as exc:
        _say(f" Error: {exc}", Color.RED, sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())