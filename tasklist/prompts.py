"""
Interactive prompts for the tasklist CLI.

Wraps click.prompt so that callers get domain values back and a single
exception type (PromptError) when the user cancels or input runs out.
"""
import logging
from typing import List, Optional, Sequence

import click

from tasklist.actions import Action, ActionChoice, UnknownAction
from tasklist.constants import PROMPT_ABORTED
from tasklist.display import format_task
from tasklist.exceptions import PromptError
from tasklist.managers.task_repository import sorted_by_priority
from tasklist.models.task import KeyedTask, Priority

logger = logging.getLogger(__name__)


class Prompter:
    """Asks the user for actions, task details and task selections."""

    def _prompt(self, text: str, **kwargs):
        try:
            return click.prompt(text, **kwargs)
        except click.Abort as e:
            raise PromptError(str(e) or PROMPT_ABORTED) from e

    def select_action(self) -> ActionChoice:
        """Ask which action to run next.

        Never raises; a failed prompt comes back as an UnknownAction.
        """
        try:
            value = self._prompt(
                "Select action",
                type=click.Choice([a.value for a in Action.values()], case_sensitive=False),
            )
        except PromptError as e:
            logger.info("Action prompt failed: %s", e)
            return UnknownAction(str(e))
        return Action(value)

    def ask_task_name(self) -> str:
        """Ask for a task name. Empty input is returned as an empty name."""
        return self._prompt("Task", default="", show_default=False)

    def ask_priority(self) -> Priority:
        """Ask for one of the fixed priorities."""
        value = self._prompt(
            "Priority",
            type=click.Choice([p.value for p in Priority.values()], case_sensitive=False),
        )
        return Priority.from_string(value)

    def select_task(self, keyed_tasks: Sequence[KeyedTask]) -> Optional[KeyedTask]:
        """Show a numbered task listing and ask for one of them.

        Returns None when there is nothing to select or the prompt is cancelled.
        """
        options: List[KeyedTask] = sorted_by_priority(keyed_tasks)
        if not options:
            return None

        for number, keyed in enumerate(options, start=1):
            click.echo(f"{number:>3}) {format_task(keyed.task)}")

        try:
            choice = self._prompt("Select one of tasks", type=click.IntRange(1, len(options)))
        except PromptError as e:
            logger.info("Task selection cancelled: %s", e)
            return None
        return options[choice - 1]
