"""Tasks, their timers, and the JSON file that stores them."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from gomato.ansi import time_to_ansi_art
from gomato.config import MODE_NORMAL, Settings, config_dir
from gomato.styles import status_message_style, title_style

TASKS_FILE = "tasks.json"
CONTROLS = "[空格]开始/暂停  [r]重置  [q]返回"


def _clock(remaining: int) -> str:
    sign = -1 if remaining < 0 else 1
    minutes, seconds = divmod(abs(remaining), 60)
    return f"{sign * minutes:02d}:{sign * seconds:02d}"


@dataclass
class TimeModel:
    """State of one countdown timer, in seconds."""

    timer_duration: int = 0
    timer_remaining: int = 0
    timer_is_running: bool = False
    is_work_session: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "timerDuration": self.timer_duration,
            "timerRemaining": self.timer_remaining,
            "timerIsRunning": self.timer_is_running,
            "isWorkSession": self.is_work_session,
        }

    @classmethod
    def from_dict(cls, data: Any) -> TimeModel:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("timer must be a JSON object")
        return cls(
            timer_duration=int(data.get("timerDuration") or 0),
            timer_remaining=int(data.get("timerRemaining") or 0),
            timer_is_running=bool(data.get("timerIsRunning", False)),
            is_work_session=bool(data.get("isWorkSession", False)),
        )

    def view(self, settings: Settings | None = None) -> str:
        """Render the timer screen; the clock is ASCII art unless settings ask for plain digits."""
        clock = _clock(self.timer_remaining)
        if settings is None or settings.time_display_mode != MODE_NORMAL:
            clock = time_to_ansi_art(clock)
        status = "运行中" if self.timer_is_running else "已暂停"
        parts = [
            title_style("番茄钟计时器"),
            clock,
            "状态: " + status,
            status_message_style(CONTROLS),
        ]
        if self.is_work_session:
            parts.append("当前是工作时间，请专注！")
        elif self.timer_is_running:
            parts.append("当前是休息时间，请放松！")
        else:
            parts.append("当前是休息时间，请放松！")
            parts.append("按 [空格] 开始计时，或按 [r] 重置计时器。")
        return "\n\n".join(parts)


@dataclass
class Task:
    """A named task with its own timer."""

    title: str = ""
    description: str = ""
    timer: TimeModel = field(default_factory=TimeModel)

    def filter_value(self) -> str:
        return self.title

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "timer": self.timer.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        if not isinstance(data, dict):
            raise ValueError("task must be a JSON object")
        return cls(
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            timer=TimeModel.from_dict(data.get("timer")),
        )


class TaskManager:
    """Loads, edits and saves the task list."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else config_dir() / TASKS_FILE
        self.tasks: list[Task] = []
        try:
            self.load()
        except FileNotFoundError:
            pass

    def load(self) -> None:
        """Replace the tasks with those in the file."""
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if data is None:
            self.tasks = []
            return
        if not isinstance(data, list):
            raise ValueError(f"{self.path} must hold a JSON array")
        self.tasks = [Task.from_dict(item) for item in data]

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [task.to_dict() for task in self.tasks]
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    def add_item(self, title: str, description: str) -> Task:
        """Append a new task, save, and return it."""
        task = Task(title=title, description=description)
        self.tasks.append(task)
        self.save()
        return task

    def delete_item(self, index: int) -> Task | None:
        """Remove the task at ``index`` and save; out-of-range indexes do nothing."""
        if not 0 <= index < len(self.tasks):
            return None
        removed = self.tasks.pop(index)
        self.save()
        return removed