"""Key bindings for the task list, list items and the timer screen."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class KeyBinding:
    """A set of key names with help text; a disabled binding matches nothing."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    def matches(self, key: str) -> bool:
        return self.enabled and key in self.keys


def _binding(keys: tuple[str, ...], help_key: str, help_desc: str):
    return field(default_factory=lambda: KeyBinding(keys, help_key, help_desc))


@dataclass
class ListKeyMap:
    """Bindings of the task list screen."""

    setting: KeyBinding = _binding(("s",), "s", "setting")
    toggle_title_bar: KeyBinding = _binding(("T",), "T", "toggle title")
    toggle_status_bar: KeyBinding = _binding(("S",), "S", "toggle status")
    toggle_pagination: KeyBinding = _binding(("P",), "P", "toggle pagination")
    toggle_help_menu: KeyBinding = _binding(("H",), "H", "toggle help")
    insert_item: KeyBinding = _binding(("a",), "a", "add item")
    choose_task: KeyBinding = _binding(("enter",), "enter", "choose a task")


@dataclass
class DelegateKeyMap:
    """Bindings that act on the selected list item."""

    choose: KeyBinding = _binding(("enter",), "enter", "choose")
    remove: KeyBinding = _binding(("x", "backspace"), "x", "delete")

    def short_help(self) -> list[KeyBinding]:
        return [self.choose, self.remove]

    def full_help(self) -> list[list[KeyBinding]]:
        return [[self.choose, self.remove]]


@dataclass
class TimeViewKeyMap:
    """Bindings of the timer screen."""

    back: KeyBinding = _binding(("q", "esc"), "q/esc", "返回任务列表")
    start_pause: KeyBinding = _binding((" ",), "space", "开始/暂停")
    reset: KeyBinding = _binding(("r",), "r", "重置计时")