import logging
from pathlib import Path

from . import db
from .lib.converters import row_to_task, task_to_row
from .task_list import TaskList

__all__ = ["load", "save"]

logger = logging.getLogger(__name__)

_TASK_COLS = "position, kind, name, done, date"


def load(db_path: Path | None = None) -> TaskList:
    """Read the persisted snapshot back into a TaskList, in saved order."""
    with db.get_db(db_path) as conn:
        rows = conn.execute(f"SELECT {_TASK_COLS} FROM tasks ORDER BY position").fetchall()  # noqa: S608
    task_list = TaskList(row_to_task(row) for row in rows)
    logger.info("loaded %d tasks", task_list.count)
    return task_list


def save(task_list: TaskList, db_path: Path | None = None) -> None:
    """Replace the persisted snapshot with the list's current contents."""
    rows = [task_to_row(i, task) for i, task in task_list.numbered()]
    with db.get_db(db_path) as conn:
        conn.execute("DELETE FROM tasks")
        conn.executemany(
            f"INSERT INTO tasks ({_TASK_COLS}) VALUES (?, ?, ?, ?, ?)",  # noqa: S608
            rows,
        )
    logger.info("saved %d tasks", len(rows))
