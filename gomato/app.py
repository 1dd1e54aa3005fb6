"""The application: screens, key dispatch, ticking, and the terminal entry point."""

from __future__ import annotations

import argparse
import time
from enum import Enum, auto
from pathlib import Path

from gomato.applog import close_logging, init_logging
from gomato.config import config_dir
from gomato.input_form import Back, FormResult, Quit, TaskCreated, TaskInputForm
from gomato.keymap import DelegateKeyMap, ListKeyMap, TimeViewKeyMap
from gomato.settings_form import SettingsForm
from gomato.styles import app_frame, status_message_style
from gomato.task import TASKS_FILE, TaskManager, TimeModel
from gomato.tasklist import TaskList
from gomato.timer import Session

WELCOME_TITLE = "欢迎使用Gomato!"
WELCOME_DESCRIPTION = "这是一个番茄钟应用，希望能帮助你提高效率。"
NEW_TASK_SECONDS = 25 * 60
TICK_SECONDS = 1.0


class View(Enum):
    TASK_LIST = auto()
    TASK_INPUT = auto()
    TIME = auto()
    SETTING = auto()


class App:
    """Holds every screen and routes keys and ticks to them."""

    def __init__(self, directory: str | Path | None = None) -> None:
        base = Path(directory) if directory is not None else config_dir()
        self.task_manager = TaskManager(base / TASKS_FILE)
        if not self.task_manager.tasks:
            self.task_manager.add_item(WELCOME_TITLE, WELCOME_DESCRIPTION)
        self.settings_form = SettingsForm(directory=directory)
        seconds = self.settings_form.settings.pomodoro * 60
        for task in self.task_manager.tasks:
            task.timer = TimeModel(timer_duration=seconds, timer_remaining=seconds)
        self.list_keys = ListKeyMap()
        self.delegate_keys = DelegateKeyMap()
        self.time_view_keys = TimeViewKeyMap()
        self.task_list = TaskList(self.task_manager.tasks, self.list_keys, self.delegate_keys)
        self.task_input = TaskInputForm()
        self.session = Session(
            settings=self.settings_form.settings,
            task_manager=self.task_manager,
            time_model=TimeModel(
                timer_duration=seconds, timer_remaining=seconds, is_work_session=True
            ),
        )
        self.current_view = View.TASK_LIST
        self.width = 80
        self.height = 24
        self.done = False

    def _sync_settings(self) -> None:
        self.session.settings = self.settings_form.settings

    def handle_key(self, key: str) -> bool:
        """Handle a key press; True when a tick should be scheduled."""
        self._sync_settings()
        try:
            if self.current_view is View.TASK_LIST:
                return self._update_task_list(key)
            if self.current_view is View.TIME:
                return self._update_time_view(key)
            if self.current_view is View.TASK_INPUT:
                self._dispatch(self.task_input.handle_key(key))
            elif self.current_view is View.SETTING:
                self._dispatch(self.settings_form.handle_key(key))
            return False
        finally:
            self._sync_settings()

    def _dispatch(self, result: FormResult) -> None:
        if isinstance(result, TaskCreated):
            self._task_created(result)
        elif isinstance(result, Back):
            self._back()
        elif isinstance(result, Quit):
            self.done = True

    def _task_created(self, created: TaskCreated) -> None:
        task = self.task_manager.add_item(created.title, created.description)
        task.timer = TimeModel(
            timer_duration=NEW_TASK_SECONDS,
            timer_remaining=NEW_TASK_SECONDS,
            is_work_session=True,
        )
        self.task_list.insert(task)
        self.task_list.set_status(status_message_style("添加了新任务: " + task.title))
        self.current_view = View.TASK_LIST

    def _back(self) -> None:
        if self.current_view is View.SETTING:
            seconds = self.settings_form.settings.pomodoro * 60
            timers = [self.session.time_model] + [t.timer for t in self.task_manager.tasks]
            for timer in timers:
                timer.timer_duration = seconds
                if timer.timer_remaining > seconds or not timer.timer_is_running:
                    timer.timer_remaining = seconds
            self.task_manager.save()
        self.current_view = View.TASK_LIST
        self.task_input = TaskInputForm()

    def _update_task_list(self, key: str) -> bool:
        task_list = self.task_list
        if not task_list.filtering:
            keys = self.list_keys
            if keys.setting.matches(key):
                self.settings_form.reload()
                self._sync_settings()
                self.current_view = View.SETTING
                return False
            if keys.toggle_title_bar.matches(key):
                shown = not task_list.show_title
                task_list.show_title = shown
                task_list.show_filter = shown
                task_list.filtering_enabled = shown
                return False
            if keys.toggle_status_bar.matches(key):
                task_list.show_status_bar = not task_list.show_status_bar
                return False
            if keys.toggle_pagination.matches(key):
                task_list.show_pagination = not task_list.show_pagination
                return False
            if keys.toggle_help_menu.matches(key):
                task_list.show_help = not task_list.show_help
                return False
            if keys.insert_item.matches(key):
                self.current_view = View.TASK_INPUT
                return False
            if self.delegate_keys.remove.matches(key):
                index = task_list.index
                if 0 <= index < len(self.task_manager.tasks):
                    title = self.task_manager.tasks[index].title
                    self.task_manager.delete_item(index)
                    task_list.remove(index)
                    if not task_list.items:
                        self.delegate_keys.remove.enabled = False
                    task_list.set_status(status_message_style("删除了任务: " + title))
                    return False
            elif keys.choose_task.matches(key):
                self.session.select_task(task_list.index)
                self.current_view = View.TIME
                task_list.set_status(status_message_style("任务已选择，计时已开始！"))
                return True
        if isinstance(task_list.handle_key(key), Quit):
            self.done = True
        return False

    def _update_time_view(self, key: str) -> bool:
        keys = self.time_view_keys
        if keys.back.matches(key):
            self.session.sync_task()
            self.current_view = View.TASK_LIST
            return False
        if keys.start_pause.matches(key):
            return self.session.toggle()
        if keys.reset.matches(key):
            self.session.reset()
        return False

    def handle_tick(self) -> bool:
        """Advance the active timer one second; True when another tick should follow."""
        self._sync_settings()
        outcome = self.session.tick()
        if outcome is None:
            return False
        self.task_list.set_status(status_message_style(outcome.message))
        return outcome.schedule_next

    def view(self) -> str:
        if self.current_view is View.TASK_LIST:
            return app_frame(self.task_list.view(self.width - 4, self.height - 2))
        if self.current_view is View.TIME:
            return app_frame(self.session.time_model.view(self.settings_form.settings))
        if self.current_view is View.TASK_INPUT:
            return app_frame(self.task_input.view())
        return self.settings_form.view()


_SEQUENCE_NAMES = {
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_TAB": "tab",
    "KEY_BTAB": "shift+tab",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_HOME": "home",
    "KEY_END": "end",
    "KEY_PGUP": "pgup",
    "KEY_PGDOWN": "pgdown",
}

_CONTROL_NAMES = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def _key_name(keystroke) -> str:
    """Translate a terminal keystroke to the key names the screens understand."""
    if keystroke.is_sequence:
        name = keystroke.name or ""
        if name in _SEQUENCE_NAMES:
            return _SEQUENCE_NAMES[name]
        return name.removeprefix("KEY_").lower()
    text = str(keystroke)
    if text in _CONTROL_NAMES:
        return _CONTROL_NAMES[text]
    if len(text) == 1 and ord(text) < 32:
        return "ctrl+" + chr(ord(text) + 96)
    return text


def _run(app: App) -> None:
    from blessed import Terminal

    term = Terminal()
    deadlines: list[float] = []
    with term.fullscreen(), term.raw(), term.hidden_cursor():
        while not app.done:
            app.width, app.height = term.width, term.height
            screen = app.view().replace("\n", "\r\n")
            print(term.home + term.clear + screen, end="", flush=True)
            timeout = None
            if deadlines:
                timeout = max(0.0, min(deadlines) - time.monotonic())
            keystroke = term.inkey(timeout=timeout)
            if keystroke and app.handle_key(_key_name(keystroke)):
                deadlines.append(time.monotonic() + TICK_SECONDS)
            now = time.monotonic()
            due = [deadline for deadline in deadlines if deadline <= now]
            deadlines = [deadline for deadline in deadlines if deadline > now]
            for _ in due:
                if app.handle_tick():
                    deadlines.append(now + TICK_SECONDS)


def main(argv: list[str] | None = None) -> int:
    """Start the pomodoro timer in the terminal."""
    parser = argparse.ArgumentParser(prog="gomato", description="A terminal pomodoro timer.")
    parser.parse_args(argv)
    try:
        init_logging()
    except OSError as exc:
        print("日志系统初始化失败:", exc)
        return 1
    try:
        _run(App())
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print("运行程序时出错:", exc)
        return 1
    finally:
        close_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())