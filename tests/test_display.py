"""
Tests for terminal rendering.
"""

import uuid

import click
import pytest

from tasklist.display import Renderer, format_task, priority_color
from tasklist.models.task import KeyedTask, Priority, Task


@pytest.mark.parametrize(
    "priority,color",
    [(Priority.HIGH, "red"), (Priority.MEDIUM, "yellow"), (Priority.LOW, "green")],
)
def test_priority_color(priority, color):
    assert priority_color(priority) == color


def test_format_task_plain_text():
    line = click.unstyle(format_task(Task(name="Fix bug", priority=Priority.HIGH)))
    assert line == "[      High] Fix bug"


def test_format_task_colors():
    line = format_task(Task(name="Buy milk", priority=Priority.LOW))
    assert line.startswith(click.style("[       Low]", fg="green"))
    assert click.style("Buy milk", fg="magenta") in line


def test_show_tasks_sorted(capsys, monkeypatch):
    monkeypatch.setattr(click, "clear", lambda: None)
    keyed = [
        KeyedTask(task_id=uuid.uuid4(), task=Task(name="Buy milk", priority=Priority.LOW)),
        KeyedTask(task_id=uuid.uuid4(), task=Task(name="Fix bug", priority=Priority.HIGH)),
        KeyedTask(task_id=uuid.uuid4(), task=Task(name="Write report", priority=Priority.MEDIUM)),
    ]

    Renderer().show_tasks(keyed)

    lines = click.unstyle(capsys.readouterr().out).splitlines()
    assert lines == ["[      High] Fix bug", "[    Medium] Write report", "[       Low] Buy milk"]


def test_show_tasks_empty(capsys, monkeypatch):
    monkeypatch.setattr(click, "clear", lambda: None)
    Renderer().show_tasks([])
    assert click.unstyle(capsys.readouterr().out).strip() == "No tasks"


def test_show_tasks_clears_screen(monkeypatch):
    calls = []
    monkeypatch.setattr(click, "clear", lambda: calls.append(True))
    Renderer().show_tasks([])
    assert calls == [True]


def test_error_goes_to_stderr(capsys):
    Renderer().error("error reading prompt")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error reading prompt" in captured.err
