"""The settings screen: timer lengths, cycle size and clock style."""

from __future__ import annotations

import re
import unicodedata
from enum import IntEnum
from pathlib import Path

from gomato.config import (
    MODE_ANSI,
    MODE_NORMAL,
    Settings,
    SettingsError,
    load_settings,
)
from gomato.input_form import Back, FormResult, Quit, TextField
from gomato.styles import (
    FOCUSED_FG,
    app_frame,
    blurred_style,
    colorize,
    focused_style,
    strip_styles,
)

POMODORO, SHORT_BREAK, LONG_BREAK, CYCLE, TIME_DISPLAY = range(5)

TABS = ("Timer", "Appearance", "Notifications")
TIME_DISPLAY_OPTIONS = ("ANSI艺术显示", "普通数字显示")
HIGHLIGHT = "#7D56F4"
HELP_TEXT = "  ↑/↓: navigate • tab: next field • enter: confirm • q: quit"
TIME_DISPLAY_PROMPT = "时间显示方式: "

_INTEGER = re.compile(r"[+-]?[0-9]+")

_FIELD_SPECS = (
    ("pomodoro", "25", "Pomodoro: "),
    ("short_break", "5", "Short Break: "),
    ("long_break", "15", "Long Break: "),
    ("cycle", "4", "Cycle (每周期工作/短休息次数): "),
)


class CursorMode(IntEnum):
    """How the text cursor is drawn."""

    BLINK = 0
    STATIC = 1
    HIDE = 2


def _parse_int(text: str) -> int | None:
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def _validate_number(text: str) -> None:
    if text and _parse_int(text) is None:
        raise ValueError("must be a number")


def _width(text: str) -> int:
    width = 0
    for char in strip_styles(text):
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _paint(text: str) -> str:
    return colorize(text, HIGHLIGHT)


def _render_tab(title: str, active: bool, first: bool, last: bool) -> list[str]:
    inner = _width(title) + 2
    left, bottom, right = ("┘", " ", "└") if active else ("┴", "─", "┴")
    if first:
        left = "│" if active else "├"
    elif last:
        right = "│" if active else "┤"
    return [
        _paint("╭" + "─" * inner + "╮"),
        _paint("│") + f" {title} " + _paint("│"),
        _paint(left + bottom * inner + right),
    ]


def _render_window(content: str, width: int) -> str:
    inner = max(width - 2, 0)
    lines = ["", ""] + content.split("\n") + ["", ""]
    rows = []
    for line in lines:
        short = max(inner - _width(line), 0)
        left = short // 2
        rows.append(_paint("│") + " " * left + line + " " * (short - left) + _paint("│"))
    rows.append(_paint("└" + "─" * inner + "┘"))
    return "\n".join(rows)


class SettingsForm:
    """Editable settings with tabs, numeric fields, a clock-style selector and a submit button."""

    def __init__(
        self, settings: Settings | None = None, directory: str | Path | None = None
    ) -> None:
        self.directory = directory
        if settings is None:
            try:
                settings = load_settings(directory)
            except (SettingsError, OSError) as exc:
                print("could not load settings:", exc)
                settings = Settings()
        self.settings = settings
        self.tabs = list(TABS)
        self.active_tab = 0
        self.focus_index = 0
        self.cursor_mode = CursorMode.BLINK
        self.time_display_options = list(TIME_DISPLAY_OPTIONS)
        self.time_display_index = self._mode_index()
        self.fields = [
            TextField(
                placeholder=placeholder,
                prompt=prompt,
                char_limit=3,
                validate=_validate_number,
                value=str(getattr(self.settings, attr)),
            )
            for attr, placeholder, prompt in _FIELD_SPECS
        ]
        first = self.fields[POMODORO]
        first.focus()
        first.prompt_color = FOCUSED_FG
        first.text_color = FOCUSED_FG

    def _mode_index(self) -> int:
        return 1 if self.settings.time_display_mode == MODE_NORMAL else 0

    def _apply_fields(self) -> None:
        for (attr, _, _), text_field in zip(_FIELD_SPECS, self.fields):
            number = _parse_int(text_field.value)
            if number is None or number < 0:
                number = getattr(self.settings, attr)
            setattr(self.settings, attr, number)
        self.settings.time_display_mode = (
            MODE_NORMAL if self.time_display_index == 1 else MODE_ANSI
        )

    def _move_focus(self, step: int) -> None:
        last = len(self.fields) + 1
        index = self.focus_index + step
        if index > last:
            index = 0
        elif index < 0:
            index = last
        self.focus_index = index
        for position, text_field in enumerate(self.fields):
            if position == index:
                text_field.focus()
                text_field.prompt_color = FOCUSED_FG
                text_field.text_color = FOCUSED_FG
            else:
                text_field.blur()
                text_field.prompt_color = None
                text_field.text_color = None

    def handle_key(self, key: str) -> FormResult:
        """Handle a key; Back when leaving (after saving on enter), Quit on ctrl+c."""
        if key == "ctrl+c":
            return Quit()
        if key in ("q", "esc"):
            return Back()
        if key == "enter":
            self._apply_fields()
            self.settings.save(self.directory)
            return Back()
        if key == "ctrl+r":
            following = self.cursor_mode + 1
            self.cursor_mode = (
                CursorMode.BLINK if following > CursorMode.HIDE else CursorMode(following)
            )
            return None
        if key in ("tab", "shift+tab", "up", "down"):
            self._move_focus(-1 if key in ("up", "shift+tab") else 1)
            return None
        if key in ("right", "l"):
            if self.focus_index == TIME_DISPLAY:
                self.time_display_index = min(
                    len(self.time_display_options) - 1, self.time_display_index + 1
                )
            else:
                self.active_tab = min(self.active_tab + 1, len(self.tabs) - 1)
            return None
        if key in ("left", "h"):
            if self.focus_index == TIME_DISPLAY:
                self.time_display_index = max(0, self.time_display_index - 1)
            else:
                self.active_tab = max(self.active_tab - 1, 0)
            return None
        if key in ("1", "2"):
            if self.focus_index == TIME_DISPLAY:
                self.time_display_index = 0 if key == "1" else 1
            return None
        for text_field in self.fields:
            text_field.handle_key(key)
        return None

    def _timer_tab(self) -> str:
        parts = ["\n".join(text_field.view() for text_field in self.fields), "\n"]
        prompt = TIME_DISPLAY_PROMPT
        if self.focus_index == TIME_DISPLAY:
            prompt = focused_style(prompt)
        parts.append(prompt + "\n")
        for position, option in enumerate(self.time_display_options):
            selected = position == self.time_display_index
            line = ("> " if selected else "  ") + option
            parts.append((focused_style(line) if selected else line) + "\n")
        if self.focus_index == len(self.fields) + 1:
            button = focused_style("[ Submit ]")
        else:
            button = f"[ {blurred_style('Submit')} ]"
        parts.append(f"\n\n{button}\n\n")
        return "".join(parts)

    def view(self) -> str:
        count = len(self.tabs)
        rendered = [
            _render_tab(title, index == self.active_tab, index == 0, index == count - 1)
            for index, title in enumerate(self.tabs)
        ]
        row_lines = ["".join(parts) for parts in zip(*rendered)]
        row = "\n".join(row_lines)
        row_width = max(_width(line) for line in row_lines)
        if self.active_tab == 0:
            content = self._timer_tab()
        else:
            content = f"{self.tabs[self.active_tab]} Content"
        doc = row + "\n" + _render_window(content, row_width)
        doc += "\n" + blurred_style(HELP_TEXT)
        return app_frame(doc)

    def reload(self) -> None:
        """Reload settings from disk into the fields; on failure keep the current ones."""
        try:
            self.settings = load_settings(self.directory)
        except (SettingsError, OSError):
            pass
        for (attr, _, _), text_field in zip(_FIELD_SPECS, self.fields):
            text_field.set_value(str(getattr(self.settings, attr)))
        self.time_display_index = self._mode_index()