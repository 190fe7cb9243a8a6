import os
from pathlib import Path

import yaml

from .core.errors import ValidationError
from .core.models import DATE_FORMAT

TICK_DIR = Path(os.environ.get("TICK_HOME", Path.home() / ".tick"))
DB_PATH = TICK_DIR / "tick.db"
CONFIG_PATH = TICK_DIR / "config.yaml"
LOG_PATH = TICK_DIR / "tick.log"

DEFAULTS: dict[str, object] = {
    "date_format": DATE_FORMAT,
    "sort": "date",
    "color": True,
}


class Config:
    """Single-instance config manager. Load once, cache in memory."""

    _instance: "Config | None" = None
    _data: dict[str, object]

    def __new__(cls) -> "Config":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._data = {}
            instance._load()
            cls._instance = instance
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next access reloads from disk."""
        cls._instance = None

    def _load(self) -> None:
        """Load config from disk."""
        if not CONFIG_PATH.exists():
            self._data = {}
            return
        try:
            with CONFIG_PATH.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"{CONFIG_PATH} is not valid YAML: {e}") from e
        if not isinstance(data, dict):
            raise ValidationError(f"{CONFIG_PATH} must contain a mapping")
        self._data = data

    def _save(self) -> None:
        """Persist config to disk."""
        TICK_DIR.mkdir(parents=True, exist_ok=True)
        with CONFIG_PATH.open("w") as f:
            yaml.dump(self._data, f, default_flow_style=False, allow_unicode=True)

    def get(self, key: str, default: object = None) -> object:
        """Get config value."""
        return self._data.get(key, DEFAULTS.get(key, default))

    def set(self, key: str, value: object) -> None:
        """Set config value and persist."""
        self._data[key] = value
        self._save()

    def items(self) -> dict[str, object]:
        return {**DEFAULTS, **self._data}


def get_date_format() -> str:
    """Display format for task dates (strftime)."""
    val = Config().get("date_format")
    return str(val) if val else DATE_FORMAT


def get_sort() -> str:
    val = Config().get("sort")
    return str(val).strip() if val else "date"


def get_color() -> bool:
    val = Config().get("color")
    if isinstance(val, str):
        return val.strip().lower() not in {"0", "false", "no", "off", ""}
    return bool(val)


def set_value(key: str, value: str) -> None:
    """Set a known config key from CLI text."""
    if key not in DEFAULTS:
        raise ValidationError(f"unknown config key '{key}' (known: {', '.join(DEFAULTS)})")
    parsed: object = value
    if isinstance(DEFAULTS[key], bool):
        parsed = value.strip().lower() in {"1", "true", "yes", "on"}
    Config().set(key, parsed)
