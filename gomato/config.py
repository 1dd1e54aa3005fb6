"""User settings stored as JSON in the per-user configuration directory."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

SETTINGS_FILE = "setting.json"
MODE_ANSI = "ansi"
MODE_NORMAL = "normal"

_NUMBER_FIELDS = (
    ("pomodoro", "pomodoro"),
    ("short_break", "shortBreak"),
    ("long_break", "longBreak"),
    ("cycle", "cycle"),
)


class SettingsError(ValueError):
    """Raised when the settings file cannot be understood."""


@dataclass
class Settings:
    """Timer lengths in minutes, the number of work sessions per cycle, and the clock style."""

    pomodoro: int = 25
    short_break: int = 5
    long_break: int = 15
    cycle: int = 4
    time_display_mode: str = MODE_ANSI

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {key: getattr(self, attr) for attr, key in _NUMBER_FIELDS}
        data["timeDisplayMode"] = self.time_display_mode
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        """Build settings from decoded JSON; absent fields become zero or empty."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("settings must be a JSON object")
        values: dict[str, Any] = {}
        for attr, key in _NUMBER_FIELDS:
            raw = data.get(key)
            if raw is None:
                values[attr] = 0
                continue
            if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
                raise SettingsError(f"{key} must be a non-negative integer, got {raw!r}")
            values[attr] = raw
        mode = data.get("timeDisplayMode")
        if mode is None:
            mode = ""
        elif not isinstance(mode, str):
            raise SettingsError(f"timeDisplayMode must be a string, got {mode!r}")
        return cls(**values, time_display_mode=mode)

    def save(self, directory: str | Path | None = None) -> Path:
        """Write the settings as indented JSON and return the file path."""
        path = settings_path(directory)
        path.write_text(
            json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
        return path


def config_dir() -> Path:
    """The directory holding settings, tasks and the log."""
    return Path.home() / ".gomato"


def settings_path(directory: str | Path | None = None) -> Path:
    """Path of the settings file, creating its directory if needed."""
    base = Path(directory) if directory is not None else config_dir()
    base.mkdir(parents=True, exist_ok=True)
    return base / SETTINGS_FILE


def load_settings(directory: str | Path | None = None) -> Settings:
    """Load settings; a missing or empty file gives the defaults."""
    path = settings_path(directory)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return Settings()
    if not data:
        return Settings()
    try:
        decoded = json.loads(data)
    except ValueError as exc:
        raise SettingsError(f"invalid settings file {path}: {exc}") from exc
    return Settings.from_dict(decoded)