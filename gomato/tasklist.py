"""The scrollable, filterable list of tasks shown on the main screen."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Iterable

from gomato.input_form import Quit
from gomato.keymap import DelegateKeyMap, KeyBinding, ListKeyMap
from gomato.styles import blurred_style, focused_style, title_style
from gomato.task import Task

LIST_TITLE = "番茄钟任务列表"

_UP = ("up", "k")
_DOWN = ("down", "j")
_PREV_PAGE = ("left", "h", "pgup", "b", "u")
_NEXT_PAGE = ("right", "l", "pgdown", "f", "d")
_HOME = ("home", "g")
_END = ("end", "G")
_ACCEPT_FILTER = ("enter", "tab", "shift+tab", "up", "down")


class _FilterState(Enum):
    UNFILTERED = auto()
    FILTERING = auto()
    FILTER_APPLIED = auto()


def _truncate(text: str, limit: int) -> str:
    if limit <= 0 or len(text) <= limit:
        return text
    return text[: max(limit - 1, 0)] + "…"


def _help_entry(binding: KeyBinding) -> str:
    return f"{binding.help_key} {binding.help_desc}"


class TaskList:
    """Tasks with a cursor, paging, an optional title filter, a status line and help."""

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        list_keys: ListKeyMap | None = None,
        delegate_keys: DelegateKeyMap | None = None,
    ) -> None:
        self.items: list[Task] = list(tasks)
        self.list_keys = list_keys if list_keys is not None else ListKeyMap()
        self.delegate_keys = delegate_keys if delegate_keys is not None else DelegateKeyMap()
        self.title = LIST_TITLE
        self.cursor = 0
        self.per_page = 10
        self.status = ""
        self.show_title = True
        self.show_filter = True
        self.filtering_enabled = True
        self.show_status_bar = True
        self.show_pagination = True
        self.show_help = True
        self.show_full_help = False
        self.filter_state = _FilterState.UNFILTERED
        self.filter_text = ""

    @property
    def filtering(self) -> bool:
        """True while a filter is being typed."""
        return self.filter_state is _FilterState.FILTERING

    @property
    def visible_items(self) -> list[Task]:
        if self.filter_state is _FilterState.UNFILTERED or not self.filter_text:
            return list(self.items)
        needle = self.filter_text.lower()
        return [task for task in self.items if needle in task.filter_value().lower()]

    @property
    def index(self) -> int:
        """Position of the cursor among the visible items."""
        return self.cursor

    @property
    def selected_item(self) -> Task | None:
        visible = self.visible_items
        if 0 <= self.cursor < len(visible):
            return visible[self.cursor]
        return None

    def _clamp(self) -> None:
        count = len(self.visible_items)
        self.cursor = max(0, min(self.cursor, count - 1))

    def _reset_filter(self) -> None:
        self.filter_state = _FilterState.UNFILTERED
        self.filter_text = ""
        self._clamp()

    def _handle_filter_key(self, key: str) -> None:
        if key == "esc":
            self._reset_filter()
        elif key in _ACCEPT_FILTER:
            if self.filter_text:
                self.filter_state = _FilterState.FILTER_APPLIED
            else:
                self._reset_filter()
        elif key == "backspace":
            self.filter_text = self.filter_text[:-1]
            self.cursor = 0
        elif len(key) == 1 and key.isprintable():
            self.filter_text += key
            self.cursor = 0

    def handle_key(self, key: str) -> Quit | None:
        """Move the cursor, page, filter or toggle help; Quit when the list is left."""
        if self.filtering:
            self._handle_filter_key(key)
            return None
        if key == "ctrl+c":
            return Quit()
        if key == "esc" and self.filter_state is _FilterState.FILTER_APPLIED:
            self._reset_filter()
            return None
        if key in ("q", "esc"):
            return Quit()
        selected = self.selected_item
        if selected is not None and self.delegate_keys.choose.matches(key):
            self.status = "You chose " + selected.title
            return None
        count = len(self.visible_items)
        page = self.cursor // self.per_page
        if key in _UP:
            self.cursor = max(0, self.cursor - 1)
        elif key in _DOWN:
            self.cursor = max(0, min(count - 1, self.cursor + 1))
        elif key in _PREV_PAGE:
            if page > 0:
                self.cursor = (page - 1) * self.per_page
        elif key in _NEXT_PAGE:
            if (page + 1) * self.per_page < count:
                self.cursor = (page + 1) * self.per_page
        elif key in _HOME:
            self.cursor = 0
        elif key in _END:
            self.cursor = max(0, count - 1)
        elif key == "/" and self.filtering_enabled:
            self.filter_state = _FilterState.FILTERING
            self.filter_text = ""
            self.cursor = 0
        elif key == "?":
            self.show_full_help = not self.show_full_help
        return None

    def insert(self, task: Task) -> None:
        """Append a task to the end of the list."""
        self.items.append(task)

    def remove(self, index: int) -> Task | None:
        """Remove the item at ``index``; out-of-range indexes do nothing."""
        if not 0 <= index < len(self.items):
            return None
        removed = self.items.pop(index)
        self._clamp()
        return removed

    def set_status(self, message: str) -> None:
        self.status = message

    def _count_text(self, visible: list[Task]) -> str:
        count = len(visible)
        if count == 0:
            text = "No items"
        elif count == 1:
            text = "1 item"
        else:
            text = f"{count} items"
        if self.filter_state is _FilterState.FILTER_APPLIED:
            text = f"“{self.filter_text}” {text}"
        return text

    def _help_lines(self) -> list[str]:
        entries = ["↑/k up", "↓/j down"]
        if self.filtering_enabled:
            entries.append("/ filter")
        entries += ["q quit", "? more" if not self.show_full_help else "? close help"]
        entries += [
            _help_entry(binding)
            for binding in self.delegate_keys.short_help()
            if binding.enabled
        ]
        lines = [" • ".join(entries)]
        if self.show_full_help:
            keys = self.list_keys
            extra = (
                keys.setting,
                keys.insert_item,
                keys.toggle_title_bar,
                keys.toggle_status_bar,
                keys.toggle_pagination,
                keys.toggle_help_menu,
            )
            lines.append(" • ".join(_help_entry(binding) for binding in extra))
        return [blurred_style(line) for line in lines]

    def view(self, width: int, height: int) -> str:
        """Render the list to fit roughly ``width`` columns and ``height`` rows."""
        visible = self.visible_items
        header: list[str] = []
        if self.show_title:
            if self.filtering and self.show_filter:
                header.append("Filter: " + self.filter_text)
            else:
                line = title_style(self.title)
                if self.status:
                    line += "  " + self.status
                header.append(line)
        if self.show_status_bar:
            header.append(blurred_style(self._count_text(visible)))
        help_lines = self._help_lines() if self.show_help else []
        reserved = len(header) + 1 + (1 if self.show_pagination else 0)
        reserved += len(help_lines) + (1 if help_lines else 0)
        self.per_page = max(1, (height - reserved) // 3)
        self._clamp()

        limit = width - 2
        page = self.cursor // self.per_page
        pages = max(1, math.ceil(len(visible) / self.per_page))
        body: list[str] = []
        if not visible:
            body.append(blurred_style("No items."))
        start = page * self.per_page
        for offset, task in enumerate(visible[start : start + self.per_page]):
            title = _truncate(task.title, limit)
            description = _truncate(task.description, limit)
            if start + offset == self.cursor:
                body.append(focused_style("│ " + title))
                body.append(focused_style("│ " + description))
            else:
                body.append("  " + title)
                body.append(blurred_style("  " + description))
            body.append("")

        lines = header + [""] + body
        if self.show_pagination and pages > 1:
            lines.append(" ".join("•" if p == page else "○" for p in range(pages)))
        if help_lines:
            lines.append("")
            lines.extend(help_lines)
        return "\n".join(lines)