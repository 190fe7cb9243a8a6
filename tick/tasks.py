from collections.abc import Iterator
from contextlib import contextmanager

from fncli import cli

from . import config, store
from .core.errors import ValidationError
from .core.models import Task
from .lib.dates import require_date
from .lib.format import format_count, format_listing, format_status
from .lib.output import echo
from .lib.parsing import join_words
from .task_list import SORT_KEYS, TaskList

__all__ = [
    "add_deadline_cmd",
    "add_event_cmd",
    "add_todo_cmd",
    "done",
    "find",
    "list_tasks",
    "on",
    "remove",
    "sort",
]


@contextmanager
def _editing() -> Iterator[TaskList]:
    """Load the list, hand it out for one mutation, save it back on success."""
    task_list = store.load()
    yield task_list
    store.save(task_list)


def _echo_added(task: Task, count: int) -> None:
    echo(format_status("□", task, config.get_date_format()))
    echo(format_count(count))


def _echo_listing(task_list: TaskList, tasks: list[Task], empty: str) -> None:
    if not tasks:
        echo(empty)
        return
    for line in format_listing(task_list.numbered(tasks), config.get_date_format()):
        echo(line)


@cli("tick", name="list", default=True, aliases=["ls"])
def list_tasks():
    """List all tasks"""
    task_list = store.load()
    _echo_listing(task_list, list(task_list.tasks), "no tasks yet")


@cli("tick", name="todo")
def add_todo_cmd(name: list[str]):
    """Add a todo"""
    with _editing() as task_list:
        task = task_list.add_todo(join_words(name))
    _echo_added(task, task_list.count)


@cli("tick", name="deadline", flags={"by": ["-b", "--by"]}, required=["by"])
def add_deadline_cmd(name: list[str], by: str | None = None):
    """Add a task due by a date"""
    with _editing() as task_list:
        task = task_list.add_deadline(join_words(name), require_date(by))
    _echo_added(task, task_list.count)


@cli("tick", name="event", flags={"at": ["-a", "--at"]}, required=["at"])
def add_event_cmd(name: list[str], at: str | None = None):
    """Add an event on a date"""
    with _editing() as task_list:
        task = task_list.add_event(join_words(name), require_date(at))
    _echo_added(task, task_list.count)


@cli("tick")
def done(index: int):
    """Mark a task as done"""
    with _editing() as task_list:
        task = task_list.complete_task(index)
    echo(format_status("✓", task, config.get_date_format()))


@cli("tick", name="rm", aliases=["delete"])
def remove(index: int):
    """Delete a task"""
    with _editing() as task_list:
        task = task_list.delete_task(index)
    echo(format_status("✗", task, config.get_date_format()))
    echo(format_count(task_list.count))


@cli("tick")
def find(keyword: list[str]):
    """Find tasks whose name contains a keyword"""
    task_list = store.load()
    matches = task_list.get_tasks_with_word(join_words(keyword))
    _echo_listing(task_list, matches, "no matching tasks")


@cli("tick")
def on(day: str):
    """List deadlines and events on a date"""
    task_list = store.load()
    matches = task_list.get_tasks_with_date(require_date(day))
    _echo_listing(task_list, matches, "nothing on that date")


@cli("tick", flags={"by": ["-b", "--by"]})
def sort(by: str | None = None, reverse: bool = False):
    """Reorder tasks by date, status or name"""
    key_name = by or config.get_sort()
    key = SORT_KEYS.get(key_name)
    if key is None:
        raise ValidationError(f"unknown sort key '{key_name}' (use: {', '.join(SORT_KEYS)})")
    with _editing() as task_list:
        task_list.sort(key, reverse=reverse)
    _echo_listing(task_list, list(task_list.tasks), "no tasks yet")
