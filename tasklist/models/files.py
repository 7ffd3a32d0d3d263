"""
File models for the tasklist CLI.

Models representing the structure of JSON files written by tasklist.
"""

from typing import List

from pydantic import RootModel

from .task import Task


class TaskListFile(RootModel[List[Task]]):
    """Model for the task file.

    A bare JSON array of ``{"name": ..., "priority": ...}`` objects.
    """

    root: List[Task] = []
