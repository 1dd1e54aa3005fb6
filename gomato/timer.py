"""The running pomodoro session: ticking, work/break cycles and timer controls."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from gomato.ansi import time_to_ansi_art
from gomato.applog import log
from gomato.config import MODE_NORMAL, Settings
from gomato.task import TaskManager, TimeModel


def format_remaining(remaining: int, mode: str) -> str:
    """Format seconds as ``MM:SS``; drawn as ASCII art unless ``mode`` is ``normal``."""
    sign = -1 if remaining < 0 else 1
    minutes, seconds = divmod(abs(remaining), 60)
    clock = f"{sign * minutes:02d}:{sign * seconds:02d}"
    if mode == MODE_NORMAL:
        return clock
    return time_to_ansi_art(clock)


@dataclass(frozen=True)
class TickOutcome:
    """What one tick produced: a status message, and whether another tick should follow."""

    message: str
    schedule_next: bool


@dataclass
class Session:
    """The active timer together with the task it belongs to and the cycle counter."""

    settings: Settings = field(default_factory=Settings)
    task_manager: TaskManager | None = None
    time_model: TimeModel = field(default_factory=lambda: TimeModel(is_work_session=True))
    current_task_index: int = 0
    cycle_count: int = 0

    def _task_in_range(self) -> bool:
        return self.task_manager is not None and 0 <= self.current_task_index < len(
            self.task_manager.tasks
        )

    def sync_task(self) -> bool:
        """Copy the active timer into the current task and save; False if there is no such task."""
        if not self._task_in_range():
            return False
        assert self.task_manager is not None
        self.task_manager.tasks[self.current_task_index].timer = replace(self.time_model)
        self.task_manager.save()
        return True

    def select_task(self, index: int) -> TimeModel:
        """Make the task at ``index`` current, take over its timer and start it."""
        self.current_task_index = index
        if self._task_in_range():
            assert self.task_manager is not None
            self.time_model = replace(self.task_manager.tasks[index].timer)
        self.time_model.timer_is_running = True
        return self.time_model

    def toggle(self) -> bool:
        """Start or pause the timer; True when ticking should be scheduled."""
        model = self.time_model
        model.timer_is_running = not model.timer_is_running
        return model.timer_is_running and model.timer_remaining > -2

    def reset(self) -> None:
        """Stop the timer and go back to a full work session."""
        model = self.time_model
        model.timer_is_running = False
        model.is_work_session = True
        model.timer_remaining = self.settings.pomodoro * 60
        self.sync_task()

    def tick(self) -> TickOutcome | None:
        """Advance the timer by one second; None when the timer is not counting down."""
        model = self.time_model
        if not (model.timer_is_running and model.timer_remaining > 0):
            return None
        model.timer_remaining -= 1
        log(f"[Tick] Timer ticked, remaining: {model.timer_remaining}")
        if model.timer_remaining == 0:
            return self._finish_phase()
        clock = format_remaining(model.timer_remaining, self.settings.time_display_mode)
        message = "剩余时间: " + clock
        self.sync_task()
        return TickOutcome(message, model.timer_is_running and model.timer_remaining > 0)

    def _finish_phase(self) -> TickOutcome:
        model = self.time_model
        settings = self.settings
        if model.is_work_session:
            self.cycle_count += 1
            log(f"[Cycle] 完成一次工作，当前cycle计数: {self.cycle_count}/{settings.cycle}")
            if self.cycle_count < settings.cycle:
                model.is_work_session = False
                model.timer_remaining = settings.short_break * 60
                message = (
                    "工作结束，开始休息！\n"
                    f"现在是休息时间！(第{self.cycle_count}/{settings.cycle}次)"
                )
            else:
                log("[Cycle] 达到cycle上限，进入长休息，重置cycle计数")
                self.cycle_count = 0
                model.is_work_session = False
                model.timer_remaining = settings.long_break * 60
                message = "本周期已完成，进入长休息！"
        else:
            model.is_work_session = True
            model.timer_is_running = True
            model.timer_remaining = settings.pomodoro * 60
            log(
                "[Cycle] 休息结束，开始新一轮工作。"
                f"当前cycle计数: {self.cycle_count}/{settings.cycle}"
            )
            message = "休息结束，开始新一轮工作！"
        self.sync_task()
        return TickOutcome(message, True)