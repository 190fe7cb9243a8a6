import dataclasses
from datetime import date as _date
from datetime import datetime
from enum import Enum

from tick.lib.parsing import validate_content

from .errors import ValidationError

DATE_FORMAT = "%b %d %Y"


class TaskKind(Enum):
    PLAIN = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def dated(self) -> bool:
        return self is not TaskKind.PLAIN

    @classmethod
    def from_tag(cls, tag: str) -> "TaskKind":
        try:
            return cls(tag)
        except ValueError:
            raise ValidationError(f"unknown task tag '{tag}'") from None


_DETAIL_LABELS = {TaskKind.DEADLINE: "by", TaskKind.EVENT: "at"}


@dataclasses.dataclass
class Task:
    """One unit of work. `date` is set for DEADLINE and EVENT, None for PLAIN.

    Every field is fixed once constructed; `done` only changes through `mark_done`.
    """

    name: str
    done: bool
    kind: TaskKind
    date: _date | None = None

    def __setattr__(self, key: str, value: object) -> None:
        if key in self.__dict__:
            raise AttributeError(f"cannot assign to field '{key}'")
        super().__setattr__(key, value)

    def __post_init__(self) -> None:
        validate_content(self.name)
        if not isinstance(self.kind, TaskKind):
            raise ValidationError(f"unknown task kind: {self.kind!r}")
        if self.kind.dated:
            if self.date is None:
                raise ValidationError(f"{self.kind.name.lower()} '{self.name}' needs a date")
            if isinstance(self.date, datetime) or not isinstance(self.date, _date):
                raise ValidationError(f"expected a calendar date, got {self.date!r}")
        elif self.date is not None:
            raise ValidationError(f"todo '{self.name}' cannot have a date")

    @classmethod
    def todo(cls, name: str) -> "Task":
        return cls(name, False, TaskKind.PLAIN)

    @classmethod
    def deadline(cls, name: str, due: _date) -> "Task":
        return cls(name, False, TaskKind.DEADLINE, due)

    @classmethod
    def event(cls, name: str, on: _date) -> "Task":
        return cls(name, False, TaskKind.EVENT, on)

    def mark_done(self) -> "Task":
        """Mark this task complete and return it. Completion is one-way."""
        self.__dict__["done"] = True
        return self

    def details(self, fmt: str = DATE_FORMAT) -> str:
        if self.date is None:
            return ""
        return f"({_DETAIL_LABELS[self.kind]}: {self.date.strftime(fmt)})"

    def render(self, fmt: str = DATE_FORMAT) -> str:
        """Format a task for display. Returns: [tag][X| ] name [details]"""
        mark = "X" if self.done else " "
        text = f"[{self.kind.tag}][{mark}] {self.name}"
        details = self.details(fmt)
        return f"{text} {details}" if details else text

    def __str__(self) -> str:
        return self.render()
