"""
Task repository for the tasklist CLI.

Stores tasks under generated UUIDs. Ordering is not kept here; it is applied
at display time by priority.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from tasklist.models.task import KeyedTask, Task

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Stores and retrieves tasks.

    Once added, a task is identified by the UUID returned from add_task.
    See KeyedTask.
    """

    @abstractmethod
    def add_task(self, task: Task) -> uuid.UUID:
        """Add a task and return its id."""
        pass

    @abstractmethod
    def get_task(self, task_id: uuid.UUID) -> Optional[Task]:
        """Get the task for task_id, or None if unknown."""
        pass

    @abstractmethod
    def ids(self) -> List[uuid.UUID]:
        """Get all task ids, in no particular order."""
        pass

    @abstractmethod
    def get_all(self) -> List[KeyedTask]:
        """Get all (id, task) pairs, in no particular order."""
        pass

    @abstractmethod
    def remove_task(self, keyed_task: KeyedTask) -> None:
        """Remove the task with keyed_task's id. Unknown ids are ignored."""
        pass

    def __len__(self) -> int:
        return len(self.ids())


class MapTaskRepository(TaskRepository):
    """TaskRepository backed by a dict keyed by UUID."""

    def __init__(self) -> None:
        self._tasks: Dict[uuid.UUID, Task] = {}

    def add_task(self, task: Task) -> uuid.UUID:
        task_id = uuid.uuid4()
        self._tasks[task_id] = task
        logger.debug("Added task %s: %s", task_id, task)
        return task_id

    def get_task(self, task_id: uuid.UUID) -> Optional[Task]:
        return self._tasks.get(task_id)

    def ids(self) -> List[uuid.UUID]:
        return list(self._tasks.keys())

    def get_all(self) -> List[KeyedTask]:
        return [KeyedTask(task_id=task_id, task=task) for task_id, task in self._tasks.items()]

    def remove_task(self, keyed_task: KeyedTask) -> None:
        removed = self._tasks.pop(keyed_task.task_id, None)
        if removed is None:
            logger.debug("Task %s already absent, nothing to remove", keyed_task.task_id)
        else:
            logger.debug("Removed task %s: %s", keyed_task.task_id, removed)

    def __len__(self) -> int:
        return len(self._tasks)


def sorted_by_priority(keyed_tasks: Iterable[KeyedTask]) -> List[KeyedTask]:
    """Sort tasks by priority, High first. Ties keep their enumeration order."""
    return sorted(keyed_tasks, key=lambda kt: kt.task.priority)
