import logging
from collections.abc import Callable, Iterable
from datetime import date as _date
from typing import Any

from .core.errors import IndexOutOfRangeError, ValidationError
from .core.models import Task
from .lib.parsing import validate_content

__all__ = [
    "SORT_KEYS",
    "TaskList",
    "by_date",
    "by_name",
    "by_status",
]

logger = logging.getLogger(__name__)

SortKey = Callable[[Task], Any]


def by_date(task: Task) -> tuple[bool, _date]:
    return (task.date is None, task.date or _date.max)


def by_status(task: Task) -> bool:
    return task.done


def by_name(task: Task) -> str:
    return task.name.casefold()


SORT_KEYS: dict[str, SortKey] = {
    "date": by_date,
    "status": by_status,
    "name": by_name,
}


class TaskList:
    """Ordered tasks addressed by 1-based position.

    Position is insertion order until `sort` reorders the list.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        for task in self._tasks:
            if not isinstance(task, Task):
                raise ValidationError(f"not a task: {task!r}")

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def count(self) -> int:
        return len(self._tasks)

    def _slot(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValidationError(f"task number must be an integer, got {index!r}")
        if not 1 <= index <= len(self._tasks):
            raise IndexOutOfRangeError(index, len(self._tasks))
        return index - 1

    def get(self, index: int) -> Task:
        return self._tasks[self._slot(index)]

    def sort(self, key: SortKey, reverse: bool = False) -> None:
        self._tasks.sort(key=key, reverse=reverse)
        logger.debug("sorted %d tasks by %s", len(self._tasks), getattr(key, "__name__", key))

    def complete_task(self, index: int) -> Task:
        task = self._tasks[self._slot(index)].mark_done()
        logger.debug("completed task %d: %s", index, task.name)
        return task

    def delete_task(self, index: int) -> Task:
        task = self._tasks.pop(self._slot(index))
        logger.debug("deleted task %d: %s", index, task.name)
        return task

    def _append(self, task: Task) -> Task:
        self._tasks.append(task)
        logger.debug("added task %d: %s", len(self._tasks), task)
        return task

    def add_todo(self, name: str) -> Task:
        return self._append(Task.todo(name))

    def add_deadline(self, name: str, due: _date | None) -> Task:
        if due is None:
            raise ValidationError(f"deadline '{name}' needs a due date")
        return self._append(Task.deadline(name, due))

    def add_event(self, name: str, on: _date | None) -> Task:
        if on is None:
            raise ValidationError(f"event '{name}' needs a date")
        return self._append(Task.event(name, on))

    def get_tasks_with_date(self, on: _date | None) -> list[Task]:
        if on is None:
            raise ValidationError("date is required")
        return [t for t in self._tasks if t.kind.dated and t.date == on]

    def get_tasks_with_word(self, keyword: str) -> list[Task]:
        validate_content(keyword, "keyword")
        return [t for t in self._tasks if keyword in t.name]

    def numbered(self, tasks: Iterable[Task] | None = None) -> list[tuple[int, Task]]:
        """Pair tasks with their current 1-based position in the list."""
        if tasks is None:
            return list(enumerate(self._tasks, start=1))
        wanted = {id(t) for t in tasks}
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if id(t) in wanted]
