"""
Data models for the tasklist CLI.

    from tasklist.models.task import Priority, Task, KeyedTask, DEFAULT_TASKS
    from tasklist.models.files import TaskListFile
"""

from .files import TaskListFile
from .task import DEFAULT_TASKS, KeyedTask, Priority, Task

__all__ = ["DEFAULT_TASKS", "KeyedTask", "Priority", "Task", "TaskListFile"]
