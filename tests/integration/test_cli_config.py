from tests.conftest import FnCLIRunner


def test_show_defaults(tmp_tick_dir):
    runner = FnCLIRunner()
    result = runner.invoke(["config"])

    assert result.exit_code == 0
    assert "date_format: %b %d %Y" in result.stdout
    assert "sort: date" in result.stdout


def test_set_and_show(tmp_tick_dir):
    runner = FnCLIRunner()
    result = runner.invoke(["config", "set", "sort", "name"])

    assert result.exit_code == 0
    assert "sort = name" in result.stdout
    assert "sort: name" in runner.invoke(["config", "show"]).stdout


def test_set_unknown_key_fails(tmp_tick_dir):
    runner = FnCLIRunner()
    result = runner.invoke(["config", "set", "theme", "dark"])

    assert result.exit_code == 1
    assert "unknown config key" in result.stderr


def test_color_off_removes_codes(tmp_tick_dir):
    runner = FnCLIRunner()
    runner.invoke(["config", "set", "color", "false"])
    result = runner.invoke(["todo", "read", "book"])

    assert result.exit_code == 0
    assert "read book" in result.raw_stdout
    assert "\x1b[" not in result.raw_stdout


def test_color_on_by_default(tmp_tick_dir):
    result = FnCLIRunner().invoke(["todo", "read", "book"])

    assert "\x1b[" in result.raw_stdout


def test_default_sort_key_from_config(tmp_tick_dir):
    runner = FnCLIRunner()
    runner.invoke(["config", "set", "sort", "name"])
    runner.invoke(["todo", "zebra"])
    runner.invoke(["todo", "apple"])

    result = runner.invoke(["sort"])

    assert result.exit_code == 0
    assert "1. [T][ ] apple" in result.stdout
