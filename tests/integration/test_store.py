from datetime import date

import pytest

from tick import db, store
from tick.core.errors import StoreError
from tick.task_list import TaskList, by_name

MAY_1 = date(2024, 5, 1)


def test_load_empty(tmp_tick_dir):
    assert store.load().count == 0


def test_save_then_load_keeps_order_kind_and_state(tmp_tick_dir):
    task_list = TaskList()
    task_list.add_todo("read book")
    task_list.add_deadline("submit report", MAY_1)
    task_list.add_event("team meeting", MAY_1)
    task_list.complete_task(1)
    store.save(task_list)

    loaded = store.load()
    assert loaded.tasks == task_list.tasks
    assert str(loaded.get(1)) == "[T][X] read book"
    assert loaded.get(3).date == MAY_1


def test_save_replaces_previous_snapshot(tmp_tick_dir):
    task_list = TaskList()
    task_list.add_todo("b")
    task_list.add_todo("a")
    store.save(task_list)

    task_list.delete_task(1)
    task_list.add_todo("c")
    task_list.sort(by_name)
    store.save(task_list)

    assert [t.name for t in store.load().tasks] == ["a", "c"]


def test_corrupt_row_raises(tmp_tick_dir):
    with db.get_db() as conn:
        conn.execute("INSERT INTO tasks (position, kind, name, done, date) VALUES (1, 'D', 'x', 0, NULL)")
    with pytest.raises(StoreError, match="position 1"):
        store.load()


def test_explicit_db_path(tmp_path):
    path = tmp_path / "other.db"
    db.init(path)
    task_list = TaskList()
    task_list.add_event("party", MAY_1)
    store.save(task_list, path)
    assert store.load(path).get(1).name == "party"
