from datetime import date
from typing import cast

from tick.core.errors import StoreError, TickError
from tick.core.models import Task, TaskKind

TaskRow = tuple[object, ...]


def _parse_date(val) -> date | None:
    """Parse a stored date value (ISO string, optional time part)."""
    if isinstance(val, str) and val:
        return date.fromisoformat(val.split("T")[0])
    return None


def row_to_task(row: TaskRow) -> Task:
    """
    Converts a raw database row from tasks table into a Task object.
    Expected row format: (position, kind, name, done, date)
    """
    position = row[0]
    try:
        return Task(
            name=cast(str, row[2]),
            done=bool(row[3]),
            kind=TaskKind.from_tag(cast(str, row[1])),
            date=_parse_date(row[4]),
        )
    except (TickError, ValueError) as e:
        raise StoreError(f"corrupt task at position {position}: {e}") from e


def task_to_row(position: int, task: Task) -> TaskRow:
    """Inverse of row_to_task. Dates are stored as YYYY-MM-DD."""
    return (
        position,
        task.kind.tag,
        task.name,
        int(task.done),
        task.date.isoformat() if task.date else None,
    )
