"""
Managers for the tasklist CLI.

- TaskRepository / MapTaskRepository: in-memory task store keyed by UUID
- StorageManager: persistence of the task list to a JSON file
"""

from tasklist.managers.storage_manager import StorageManager
from tasklist.managers.task_repository import (
    MapTaskRepository,
    TaskRepository,
    sorted_by_priority,
)
from tasklist.exceptions import StorageError

__all__ = [
    "MapTaskRepository",
    "StorageError",
    "StorageManager",
    "TaskRepository",
    "sorted_by_priority",
]
