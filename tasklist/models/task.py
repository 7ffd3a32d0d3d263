"""
Task models for the tasklist CLI.

Tasks are immutable once created. Identity is assigned by the repository,
not carried by the task itself.
"""

import uuid
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Priority(Enum):
    """Task priority levels.

    Ordered High < Medium < Low, so sorting ascending puts High first.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Sort position of this priority (0 is most urgent)."""
        return _PRIORITY_ORDER.index(self)

    def __lt__(self, other):
        if isinstance(other, Priority):
            return self.rank < other.rank
        return NotImplemented

    @classmethod
    def values(cls) -> List["Priority"]:
        """Priorities in menu order."""
        return list(_PRIORITY_ORDER)

    @classmethod
    def from_string(cls, value: str) -> "Priority":
        """Parse priority from string, case-insensitive."""
        for priority in cls:
            if priority.value.lower() == value.strip().lower():
                return priority
        valid = ", ".join(p.value for p in cls)
        raise ValueError(f"Invalid priority '{value}'. Must be one of: {valid}")


_PRIORITY_ORDER = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)


class Task(BaseModel):
    """A task: display name and priority.

    Empty names are accepted as-is.
    """

    name: str
    priority: Priority

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"[{self.priority}]{self.name}"


class KeyedTask(BaseModel):
    """A (task id, task) pair handed out by a repository.

    Used wherever a task must be referenced for removal or shown together
    with its identity. Never persisted.
    """

    task_id: uuid.UUID
    task: Task

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.task} - {self.task_id}"


DEFAULT_TASKS = (
    Task(name="Learn Rust", priority=Priority.HIGH),
    Task(name="Learn NeoVim", priority=Priority.MEDIUM),
)
