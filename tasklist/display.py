"""
Terminal rendering for the tasklist CLI.

All output goes through click so colors are stripped automatically when
stdout is not a terminal.
"""
from typing import Iterable

import click

from tasklist.constants import NO_TASKS_MESSAGE, PRIORITY_WIDTH, TASK_NAME_COLOR
from tasklist.managers.task_repository import sorted_by_priority
from tasklist.models.task import KeyedTask, Priority, Task

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


def priority_color(priority: Priority) -> str:
    """Map a priority to the terminal color it is shown in."""
    return PRIORITY_COLORS[priority]


def format_task(task: Task) -> str:
    """Format a task as ``[  priority] name`` with color-coded priority."""
    label = click.style(f"[{str(task.priority):>{PRIORITY_WIDTH}}]", fg=priority_color(task.priority))
    name = click.style(task.name, fg=TASK_NAME_COLOR)
    return f"{label} {name}"


class Renderer:
    """Prints task listings and messages to the terminal."""

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        click.clear()

    def show_tasks(self, keyed_tasks: Iterable[KeyedTask]) -> None:
        """Clear the screen and list tasks sorted by priority, High first."""
        self.clear()
        ordered = sorted_by_priority(keyed_tasks)
        if not ordered:
            click.echo(click.style(NO_TASKS_MESSAGE, fg="green"))
            return
        for keyed in ordered:
            click.echo(format_task(keyed.task))

    def message(self, text: str) -> None:
        click.echo(text)

    def error(self, text: str) -> None:
        click.echo(click.style(text, fg="red"), err=True)
