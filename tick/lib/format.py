from tick.core.models import DATE_FORMAT, Task, TaskKind

from . import ansi

__all__ = [
    "format_count",
    "format_listing",
    "format_status",
    "format_task",
]

_KIND_COLORS = {
    TaskKind.PLAIN: "cyan",
    TaskKind.DEADLINE: "orange",
    TaskKind.EVENT: "purple",
}


def format_task(task: Task, index: int | None = None, fmt: str = DATE_FORMAT) -> str:
    """Format a task for display. Returns: [index.] [tag][X| ] name [details]"""
    color = getattr(ansi, _KIND_COLORS[task.kind])
    line = task.render(fmt)
    tag, rest = line[:3], line[3:]
    body = ansi.muted(rest) if task.done else rest
    prefix = ansi.muted(f"{index}.") + " " if index is not None else ""
    return f"{prefix}{color(tag)}{body}"


def format_listing(numbered: list[tuple[int, Task]], fmt: str = DATE_FORMAT) -> list[str]:
    return [format_task(task, index, fmt) for index, task in numbered]


def format_count(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"{count} {noun} in the list"


def format_status(symbol: str, task: Task, fmt: str = DATE_FORMAT) -> str:
    """Format status message for action confirmations."""
    return f"{symbol} {format_task(task, fmt=fmt)}"
