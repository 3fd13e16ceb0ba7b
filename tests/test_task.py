import re

import pytest

from tasktracker.color import Color
from tasktracker.task import Status, Task


def test_new_task_defaults():
    task = Task(1, "Write report")
    assert task.status == "todo"
    assert task.updated_at == task.created_at


def test_to_line_format():
    task = Task(id=1, description="Buy milk", status="todo", created_at=100, updated_at=200)
    assert task.to_line() == "1|Buy milk|todo|100|200"


def test_round_trip():
    task = Task(id=7, description="Call mom", status="in-progress", created_at=11, updated_at=22)
    assert Task.from_line(task.to_line()) == task


def test_from_line_ignores_trailing_newline():
    parsed = Task.from_line("3|Read|done|5|6\n")
    assert parsed.id == 3
    assert parsed.status == "done"
    assert parsed.updated_at == 6


@pytest.mark.parametrize("line", ["", "1|only|two", "x|desc|todo|1|2", "1|desc|todo|a|2"])
def test_from_line_rejects_malformed(line):
    with pytest.raises(ValueError):
        Task.from_line(line)


def test_mark_accepts_enum_and_updates_time():
    task = Task(id=2, description="x", created_at=0, updated_at=0)
    task.mark(Status.DONE)
    assert task.status == "done"
    assert task.updated_at >= task.created_at
    assert task.updated_at > 0


def test_rename_changes_description_and_touches():
    task = Task(id=2, description="old", created_at=0, updated_at=0)
    task.rename("new")
    assert task.description == "new"
    assert task.updated_at > 0


def test_status_enum_value_stored_as_text():
    task = Task(id=1, description="d", status=Status.IN_PROGRESS)
    assert task.to_line().split("|")[2] == "in-progress"


def test_render_plain():
    task = Task(id=3, description="Read book", status="done", created_at=0, updated_at=0)
    text = task.render(False)
    assert text.startswith("ID: 3\nDescription: Read book\nStatus: done\n")
    assert text.endswith("---\n")
    assert "\033[" not in text
    assert re.search(r"Created: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", text)


def test_render_coloured_uses_status_colour():
    task = Task(id=3, description="Read book", status="done", created_at=0, updated_at=0)
    text = task.render(True)
    assert Color.GREEN.ansi + "Status: done" in text
    assert Color.CYAN.ansi + "ID: 3" in text