"""
Test fixtures for the tasklist test suite.

Provides:
- Temporary directory fixtures (isolated from the working directory)
- Builders for tasks and repositories
- Scripted prompter and recording renderer fakes for the action loop
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator, List, Optional, Sequence

import pytest

from tasklist.actions import Action, ActionChoice
from tasklist.constants import CONFIG_ENV_VAR, reset_config_manager
from tasklist.managers.task_repository import MapTaskRepository, sorted_by_priority
from tasklist.models.task import KeyedTask, Priority, Task


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Make every test start with a fresh config singleton and logger."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()
    tasklist_logger = logging.getLogger("tasklist")
    for handler in list(tasklist_logger.handlers):
        tasklist_logger.removeHandler(handler)
        handler.close()
    tasklist_logger.propagate = True
    tasklist_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="tasklist_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def tasks_file(temp_dir: Path) -> Path:
    """Path to a task file that does not exist yet."""
    return temp_dir / "tasks.json"


# =============================================================================
# Builders
# =============================================================================


def make_task(name: str = "Test Task", priority: Priority = Priority.MEDIUM) -> Task:
    """Create a Task for testing."""
    return Task(name=name, priority=priority)


@pytest.fixture
def repository() -> MapTaskRepository:
    """An empty in-memory repository."""
    return MapTaskRepository()


@pytest.fixture
def populated_repository() -> MapTaskRepository:
    """A repository holding one task of each priority, added Low first."""
    repo = MapTaskRepository()
    repo.add_task(make_task("Buy milk", Priority.LOW))
    repo.add_task(make_task("Write report", Priority.MEDIUM))
    repo.add_task(make_task("Fix bug", Priority.HIGH))
    return repo


# =============================================================================
# Fakes
# =============================================================================


class ScriptedPrompter:
    """Prompter fake that replays scripted answers.

    Any scripted value that is an exception instance is raised instead of
    returned. select_task answers are task names (or None); the matching
    task is looked up in the listing it is given.
    """

    def __init__(
        self,
        actions: Sequence[ActionChoice] = (),
        names: Sequence = (),
        priorities: Sequence = (),
        selections: Sequence[Optional[str]] = (),
    ) -> None:
        self.actions = list(actions)
        self.names = list(names)
        self.priorities = list(priorities)
        self.selections = list(selections)
        self.offered: List[List[KeyedTask]] = []

    @staticmethod
    def _next(queue: list):
        value = queue.pop(0)
        if isinstance(value, Exception):
            raise value
        return value

    def select_action(self) -> ActionChoice:
        if not self.actions:
            return Action.QUIT
        return self._next(self.actions)

    def ask_task_name(self) -> str:
        return self._next(self.names)

    def ask_priority(self) -> Priority:
        return self._next(self.priorities)

    def select_task(self, keyed_tasks: Sequence[KeyedTask]) -> Optional[KeyedTask]:
        options = sorted_by_priority(keyed_tasks)
        self.offered.append(options)
        wanted = self._next(self.selections)
        if wanted is None:
            return None
        for keyed in options:
            if keyed.task.name == wanted:
                return keyed
        return None


class RecordingRenderer:
    """Renderer fake that records what would have been shown."""

    def __init__(self) -> None:
        self.clears = 0
        self.listings: List[List[str]] = []
        self.messages: List[str] = []
        self.errors: List[str] = []

    def clear(self) -> None:
        self.clears += 1

    def show_tasks(self, keyed_tasks) -> None:
        self.clear()
        self.listings.append([kt.task.name for kt in sorted_by_priority(keyed_tasks)])

    def message(self, text: str) -> None:
        self.messages.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def scripted_prompter():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter


@pytest.fixture
def task_factory():
    """Factory for Task instances."""
    return make_task
