"""Terminal text styling with ANSI escape sequences."""

from __future__ import annotations

import re
import unicodedata

RESET = "\x1b[0m"
TITLE_FG = "#FFFDF5"
TITLE_BG = "#25A065"
STATUS_FG = "#04B575"
FOCUSED_FG = "205"
BLURRED_FG = "240"

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _color_code(color: str, layer: int) -> str:
    if color.startswith("#"):
        digits = color[1:]
        if len(digits) != 6:
            raise ValueError(f"invalid color: {color!r}")
        red, green, blue = bytes.fromhex(digits)
        return f"{layer};2;{red};{green};{blue}"
    if color.isdigit() and int(color) <= 255:
        return f"{layer};5;{int(color)}"
    raise ValueError(f"invalid color: {color!r}")


def colorize(text: str, fg: str | None = None, bg: str | None = None) -> str:
    """Colour each line of ``text``; colours are ``#RRGGBB`` or a 0-255 palette index."""
    codes = []
    if fg is not None:
        codes.append(_color_code(fg, 38))
    if bg is not None:
        codes.append(_color_code(bg, 48))
    if not codes:
        return text
    prefix = f"\x1b[{';'.join(codes)}m"
    return "\n".join(f"{prefix}{line}{RESET}" for line in text.split("\n"))


def title_style(text: str) -> str:
    """Light text on a green background with one space of padding on each side."""
    padded = "\n".join(f" {line} " for line in text.split("\n"))
    return colorize(padded, TITLE_FG, TITLE_BG)


def status_message_style(text: str) -> str:
    return colorize(text, STATUS_FG)


def focused_style(text: str) -> str:
    return colorize(text, FOCUSED_FG)


def blurred_style(text: str) -> str:
    return colorize(text, BLURRED_FG)


def strip_styles(text: str) -> str:
    """Remove colour escape sequences."""
    return _ESCAPE.sub("", text)


def _display_width(text: str) -> int:
    width = 0
    for char in strip_styles(text):
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def app_frame(text: str) -> str:
    """Pad a block with one blank line above and below and two spaces at each side."""
    lines = text.split("\n")
    width = max(_display_width(line) for line in lines)
    body = [f"  {line}{' ' * (width - _display_width(line))}  " for line in lines]
    blank = " " * (width + 4)
    return "\n".join([blank, *body, blank])