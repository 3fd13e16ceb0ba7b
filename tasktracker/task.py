"""A single tracked task and its line-based storage format."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum

from .color import Color, _paint, status_color

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Status(str, Enum):
    """The states a task moves through."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


def _now() -> int:
    return int(time.time())


def _status_text(status) -> str:
    return status.value if isinstance(status, Status) else str(status)


@dataclass
class Task:
    """A task with an id, a description, a status and timestamps."""

    id: int = 0
    description: str = ""
    status: str = Status.TODO.value
    created_at: int = field(default_factory=_now)
    updated_at: int | None = None

    def __post_init__(self) -> None:
        self.status = _status_text(self.status)
        if self.updated_at is None:
            self.updated_at = self.created_at

    def touch(self) -> None:
        """Set the update time to now."""
        self.updated_at = _now()

    def rename(self, description) -> None:
        """Replace the description and record the update."""
        self.description = description
        self.touch()

    def mark(self, status) -> None:
        """Change the status and record the update."""
        self.status = _status_text(status)
        self.touch()

    def to_line(self) -> str:
        """The task as one storage line, fields separated by '|'."""
        return f"{self.id}|{self.description}|{self.status}|{self.created_at}|{self.updated_at}"

    @classmethod
    def from_line(cls, line) -> Task:
        """Parse a storage line written by to_line."""
        parts = line.rstrip("\r\n").split("|")
        if len(parts) < 5:
            raise ValueError(f"malformed task line: {line!r}")
        task_id, description, status, created, updated = parts[:5]
        return cls(
            id=int(task_id),
            description=description,
            status=status,
            created_at=int(created),
            updated_at=int(updated),
        )

    def render(self, color) -> str:
        """A multi-line human-readable description, optionally coloured."""
        created = time.strftime(_TIME_FORMAT, time.localtime(self.created_at))
        updated = time.strftime(_TIME_FORMAT, time.localtime(self.updated_at))
        lines = [
            _paint(f"ID: {self.id}", Color.CYAN, color),
            _paint(f"Description: {self.description}", Color.WHITE, color),
            _paint(f"Status: {self.status}", status_color(self.status), color),
            _paint(f"Created: {created}", Color.GRAY, color),
            _paint(f"Updated: {updated}", Color.GRAY, color),
            _paint("---", Color.GRAY, color),
        ]
        return "\n".join(lines) + "\n"