"""Single-line text fields and the form that creates a new task."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from gomato.styles import FOCUSED_FG, RESET, blurred_style, colorize, focused_style

_REVERSE = "\x1b[7m"


def _cursor(char: str) -> str:
    return f"{_REVERSE}{char}{RESET}"


@dataclass(frozen=True)
class TaskCreated:
    """The form was submitted with these values."""

    title: str
    description: str


@dataclass(frozen=True)
class Back:
    """Leave the current screen and return to the task list."""


@dataclass(frozen=True)
class Quit:
    """Quit the program."""


FormResult = Optional[Union[TaskCreated, Back, Quit]]


@dataclass
class TextField:
    """An editable single-line input with a prompt, placeholder and length limit.

    ``validate`` may raise ValueError; its message is kept in ``error`` while
    the value is still updated.
    """

    placeholder: str = ""
    prompt: str = "> "
    char_limit: int = 0
    width: int = 0
    value: str = ""
    focused: bool = False
    prompt_color: str | None = None
    text_color: str | None = None
    validate: Callable[[str], None] | None = None
    error: str | None = None
    position: int = field(default=0)

    def __post_init__(self) -> None:
        self.set_value(self.value)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def _check(self) -> None:
        if self.validate is None:
            self.error = None
            return
        try:
            self.validate(self.value)
        except ValueError as exc:
            self.error = str(exc)
        else:
            self.error = None

    def set_value(self, value: str) -> None:
        """Replace the text, cut to the limit, and put the cursor at the end."""
        if self.char_limit > 0:
            value = value[: self.char_limit]
        self.value = value
        self.position = len(value)
        self._check()

    def _edit(self, value: str, position: int) -> None:
        self.value = value
        self.position = position
        self._check()

    def handle_key(self, key: str) -> bool:
        """Apply an editing key; True if the key was used. Unfocused fields ignore keys."""
        if not self.focused:
            return False
        value, pos = self.value, self.position
        if key == "backspace":
            if pos > 0:
                self._edit(value[: pos - 1] + value[pos:], pos - 1)
        elif key == "delete":
            if pos < len(value):
                self._edit(value[:pos] + value[pos + 1 :], pos)
        elif key == "ctrl+u":
            self._edit(value[pos:], 0)
        elif key == "ctrl+k":
            self._edit(value[:pos], pos)
        elif key == "left":
            self.position = max(0, pos - 1)
        elif key == "right":
            self.position = min(len(value), pos + 1)
        elif key in ("home", "ctrl+a"):
            self.position = 0
        elif key in ("end", "ctrl+e"):
            self.position = len(value)
        elif len(key) == 1 and key.isprintable():
            if self.char_limit > 0 and len(value) >= self.char_limit:
                return False
            self._edit(value[:pos] + key + value[pos:], pos + 1)
        else:
            return False
        return True

    def _paint(self, text: str) -> str:
        if not text or self.text_color is None:
            return text
        return colorize(text, self.text_color)

    def view(self) -> str:
        prompt = colorize(self.prompt, self.prompt_color) if self.prompt_color else self.prompt
        if not self.value and self.placeholder:
            if self.focused:
                return prompt + _cursor(self.placeholder[0]) + blurred_style(self.placeholder[1:])
            return prompt + blurred_style(self.placeholder)
        start = 0
        if self.width > 0 and self.position > self.width:
            start = self.position - self.width
        end = len(self.value) if self.width <= 0 else start + self.width + 1
        shown = self.value[start:end]
        cursor_at = self.position - start
        if not self.focused:
            return prompt + self._paint(shown)
        under = shown[cursor_at] if cursor_at < len(shown) else " "
        return (
            prompt
            + self._paint(shown[:cursor_at])
            + _cursor(under)
            + self._paint(shown[cursor_at + 1 :])
        )


class TaskInputForm:
    """Title and description fields followed by a submit button."""

    def __init__(self) -> None:
        self.fields = [
            TextField(placeholder="Title", char_limit=156, width=20, focused=True),
            TextField(placeholder="Description", char_limit=156, width=50),
        ]
        self.focused = 0
        self.submit_button = "Create"

    def _move_focus(self, index: int) -> None:
        count = len(self.fields)
        self.focused = index % (count + 1)
        for position, text_field in enumerate(self.fields):
            if position == self.focused:
                text_field.focus()
                text_field.prompt_color = FOCUSED_FG
            else:
                text_field.blur()
                if self.focused != count:
                    text_field.prompt_color = None

    def handle_key(self, key: str) -> FormResult:
        """Handle a key; returns TaskCreated on submit, Back on cancel, otherwise None."""
        if key == "enter":
            if self.focused == len(self.fields):
                return TaskCreated(self.fields[0].value, self.fields[1].value)
            self._move_focus(self.focused + 1)
        elif key in ("ctrl+c", "esc"):
            return Back()
        elif key in ("shift+tab", "ctrl+p"):
            self._move_focus(self.focused - 1)
        elif key in ("tab", "ctrl+n"):
            self._move_focus(self.focused + 1)
        for text_field in self.fields:
            text_field.handle_key(key)
        return None

    def view(self) -> str:
        body = "\n".join(text_field.view() for text_field in self.fields)
        if self.focused == len(self.fields):
            button = "> " + focused_style(self.submit_button)
        else:
            button = "> " + self.submit_button
        return (
            "Create a new task\n\n"
            + body
            + f"\n\n{button}\n\n"
            + blurred_style("(press esc to cancel)")
        )