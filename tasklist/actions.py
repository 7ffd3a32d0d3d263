"""
Action loop for the tasklist CLI.

Each cycle asks the user for an Action and applies it to a TaskRepository.
State carries at most one pending (Remove, task) pair between cycles.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from tasklist.constants import READ_PRIORITY_ERROR, READ_TASK_ERROR, UNDEFINED_ACTION_MESSAGE
from tasklist.display import Renderer
from tasklist.exceptions import PromptError
from tasklist.managers.task_repository import TaskRepository
from tasklist.models.task import KeyedTask, Task

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """User actions offered by the menu, in menu order."""

    QUIT = "Quit"
    LIST = "List"
    ADD = "Add"
    REMOVE = "Remove"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def values(cls) -> List["Action"]:
        return list(cls)


@dataclass(frozen=True)
class UnknownAction:
    """An action that could not be read, with the reason."""

    message: str

    def __str__(self) -> str:
        return "unknown"


ActionChoice = Union[Action, UnknownAction]


@dataclass(frozen=True)
class State:
    """State kept between loop cycles.

    pending_action/pending_task hold a Remove whose target was selected but
    not yet removed.
    """

    should_continue: bool = True
    pending_task: Optional[KeyedTask] = None
    pending_action: Optional[Action] = None

    @classmethod
    def initial(cls) -> "State":
        return cls()


class ActionLoop:
    """Applies user actions to a repository until the user quits.

    With deferred_remove the task chosen by Remove is only removed at the
    start of the next cycle. Otherwise it is removed as soon as it is chosen.
    """

    def __init__(
        self,
        repository: TaskRepository,
        prompter,
        renderer: Optional[Renderer] = None,
        deferred_remove: bool = False,
    ) -> None:
        self.repository = repository
        self.prompter = prompter
        self.renderer = renderer if renderer is not None else Renderer()
        self.deferred_remove = deferred_remove

    def run(self, state: Optional[State] = None) -> State:
        """Run cycles until a Quit. Returns the final state."""
        state = state if state is not None else State.initial()
        self.renderer.clear()
        while state.should_continue:
            choice = self.prompter.select_action()
            state = self.execute(choice, state)
        return state

    def execute(self, choice: ActionChoice, state: State) -> State:
        """Apply one action and return the next state."""
        should_continue = state.should_continue
        pending_action = state.pending_action
        pending_task = state.pending_task

        if pending_action is Action.REMOVE and pending_task is not None:
            self._remove(pending_task)
            pending_action = None
            pending_task = None

        if isinstance(choice, UnknownAction):
            self.renderer.message(UNDEFINED_ACTION_MESSAGE.format(choice.message))
        elif choice is Action.QUIT:
            self.renderer.clear()
            should_continue = False
        elif choice is Action.LIST:
            self.renderer.show_tasks(self.repository.get_all())
        elif choice is Action.ADD:
            self._add()
        elif choice is Action.REMOVE:
            selected = self.prompter.select_task(self.repository.get_all())
            if self.deferred_remove:
                pending_action = Action.REMOVE
                pending_task = selected
            elif selected is not None:
                self._remove(selected)
        else:
            raise ValueError(f"Unhandled action: {choice!r}")

        return State(
            should_continue=should_continue,
            pending_task=pending_task,
            pending_action=pending_action,
        )

    def _add(self) -> None:
        try:
            name = self.prompter.ask_task_name()
        except PromptError as e:
            logger.info("Task name prompt failed: %s", e)
            self.renderer.error(READ_TASK_ERROR)
            return
        try:
            priority = self.prompter.ask_priority()
        except PromptError as e:
            logger.info("Priority prompt failed: %s", e)
            self.renderer.error(READ_PRIORITY_ERROR)
            return
        task_id = self.repository.add_task(Task(name=name, priority=priority))
        logger.info("Added task %s (%s)", task_id, priority)

    def _remove(self, keyed_task: KeyedTask) -> None:
        self.repository.remove_task(keyed_task)
        logger.info("Removed task %s", keyed_task.task_id)
