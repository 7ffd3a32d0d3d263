"""
Storage manager for the tasklist CLI.

Handles loading and saving the task file. The file is read once at startup
and written once at shutdown.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from tasklist.constants import DEFAULT_TASKS_FILE
from tasklist.exceptions import StorageError
from tasklist.managers.task_repository import TaskRepository
from tasklist.models.files import TaskListFile
from tasklist.models.task import DEFAULT_TASKS, Task

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Manages persistence of the task list to a single JSON file.

    Writes overwrite the whole file in place; they are not atomic.
    """

    def __init__(self, tasks_file: Optional[Path] = None) -> None:
        """
        Initialize the StorageManager with the task file path.

        Args:
            tasks_file: Path to the task file. Defaults to tasks.json in current directory.
        """
        self.tasks_file = tasks_file if tasks_file else Path(DEFAULT_TASKS_FILE)

    def load_tasks(self) -> List[Task]:
        """Load the task file and return its tasks.

        A missing or unreadable file is not an error and yields an empty list.

        Raises:
            StorageError: If the file content is not a valid task list.
        """
        if not self.tasks_file.exists():
            logger.info("No task file at %s, starting empty", self.tasks_file)
            return []

        try:
            with open(self.tasks_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            tasks = TaskListFile.model_validate(data).root
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise StorageError(f"Failed to load {self.tasks_file}: {e}")
        except OSError as e:
            logger.warning("Could not read %s, starting empty: %s", self.tasks_file, e)
            return []

        logger.info("Loaded %d task(s) from %s", len(tasks), self.tasks_file)
        return tasks

    def save_tasks(self, tasks: Iterable[Task]) -> None:
        """Save tasks to the task file, replacing its contents.

        Raises:
            StorageError: If writing to the file fails.
        """
        data = TaskListFile(list(tasks))
        try:
            self.tasks_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.tasks_file, "w", encoding="utf-8") as f:
                json.dump(data.model_dump(mode="json"), f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to write to {self.tasks_file}: {e}")

        logger.info("Saved %d task(s) to %s", len(data.root), self.tasks_file)

    # =========================================================================
    # Repository helpers
    # =========================================================================

    def load_into(self, repository: TaskRepository, seed_defaults: bool = True) -> int:
        """Load the task file into a repository.

        If nothing was loaded and the repository is still empty, it is seeded
        with DEFAULT_TASKS (unless seed_defaults is False).

        Returns:
            Number of tasks in the repository afterwards.
        """
        for task in self.load_tasks():
            repository.add_task(task)

        if len(repository) == 0 and seed_defaults:
            logger.info("Task list empty, seeding %d default task(s)", len(DEFAULT_TASKS))
            for task in DEFAULT_TASKS:
                repository.add_task(task)

        return len(repository)

    def save_from(self, repository: TaskRepository) -> None:
        """Save every task currently in the repository."""
        self.save_tasks(keyed.task for keyed in repository.get_all())
