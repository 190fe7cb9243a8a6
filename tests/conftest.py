import io
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from datetime import date, datetime

import pytest

from tick import config, db
from tick.cli import run
from tick.lib import ansi, clock


@dataclass
class CLIResult:
    exit_code: int
    stdout: str
    stderr: str
    raw_stdout: str = ""


class FnCLIRunner:
    """Runs the tick entry point in-process.

    `stdout` and `stderr` have ANSI codes stripped; `raw_stdout` keeps them.
    """

    def invoke(self, args: list[str]) -> CLIResult:
        out, err = io.StringIO(), io.StringIO()
        try:
            with redirect_stdout(out), redirect_stderr(err):
                code = run(["tick", *args])
        except SystemExit as e:
            code = int(e.code) if e.code is not None else 1
        raw = out.getvalue()
        return CLIResult(code, ansi.strip(raw), ansi.strip(err.getvalue()), raw)


@pytest.fixture
def tmp_tick_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "TICK_DIR", tmp_path)
    monkeypatch.setattr(config, "DB_PATH", tmp_path / "tick.db")
    monkeypatch.setattr(config, "CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(config, "LOG_PATH", tmp_path / "tick.log")
    config.Config.reset()
    db.init()
    yield tmp_path
    config.Config.reset()
    ansi.use(ansi.DEFAULT)


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the clock to Wednesday 2024-05-01."""
    today = date(2024, 5, 1)
    monkeypatch.setattr(clock, "now", lambda: datetime(2024, 5, 1, 9, 30))
    return today
