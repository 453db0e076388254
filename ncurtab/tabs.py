"""Tabs holding two directory panels, and the actions on them."""

from __future__ import annotations

import os
import posixpath
from collections.abc import Callable
from dataclasses import dataclass, field

from ncurtab.filesystem import (
    PARENT,
    FileEntry,
    copy_entity,
    get_directory_contents,
    move_entity,
    remove_entity,
    rename_entity,
)

MAX_TABS = 10
SCROLL_MARGIN = 3
RESERVED_ROWS = 4


def _parent_dir(path: str) -> str:
    """Parent directory with the semantics of POSIX ``dirname``."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    parent = posixpath.dirname(stripped)
    if not parent:
        return "."
    return parent.rstrip("/") or "/"


@dataclass
class Panel:
    """One side of a tab: a directory, its listing and the cursor in it."""

    path: str
    entries: list[FileEntry] = field(init=False, default_factory=list)
    cursor: int = 0
    offset: int = 0

    def __post_init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Read the directory listing again."""
        self.entries = get_directory_contents(self.path)

    def selected(self) -> FileEntry | None:
        """The entry under the cursor, or None if there is none."""
        if 0 <= self.cursor < len(self.entries):
            return self.entries[self.cursor]
        return None

    def clamp_cursor(self) -> None:
        """Pull the cursor back onto the last entry if it ran past it."""
        if self.cursor >= len(self.entries):
            self.cursor = max(len(self.entries) - 1, 0)

    def _selected_path(self) -> str | None:
        entry = self.selected()
        if entry is None or entry.name == PARENT:
            return None
        return os.path.join(self.path, entry.name)


@dataclass
class Tab:
    """A pair of panels, one of which is active."""

    left: Panel
    right: Panel
    left_active: bool = True

    def current(self) -> Panel:
        """The active panel."""
        return self.left if self.left_active else self.right

    def other(self) -> Panel:
        """The inactive panel."""
        return self.right if self.left_active else self.left

    def toggle_panel(self) -> None:
        """Make the other panel active."""
        self.left_active = not self.left_active

    def move_cursor(self, direction: int, screen_height: int) -> None:
        """Move the active cursor and scroll to keep it in view."""
        panel = self.current()
        count = len(panel.entries)

        panel.cursor += direction
        if panel.cursor < 0:
            panel.cursor = 0
            panel.offset = 0
        if panel.cursor >= count:
            panel.cursor = max(count - 1, 0)

        visible = screen_height - RESERVED_ROWS
        bottom_margin = visible - SCROLL_MARGIN
        if panel.cursor > panel.offset + bottom_margin:
            panel.offset = min(panel.cursor - bottom_margin, count - visible)
        if panel.cursor < panel.offset + SCROLL_MARGIN:
            panel.offset = max(panel.cursor - SCROLL_MARGIN, 0)

    def enter_directory(self) -> bool:
        """Open the directory under the cursor; True if the panel changed."""
        panel = self.current()
        entry = panel.selected()
        if entry is None or not entry.is_dir:
            return False
        if entry.name == PARENT:
            new_path = _parent_dir(panel.path)
        elif panel.path == "/":
            new_path = "/" + entry.name
        else:
            new_path = f"{panel.path}/{entry.name}"
        panel.path = new_path
        panel.reload()
        panel.cursor = 0
        panel.offset = 0
        return True

    def delete_selected(self, confirm: Callable[[str], bool]) -> bool:
        """Delete the entry under the cursor once ``confirm(name)`` agrees."""
        panel = self.current()
        target = panel._selected_path()
        if target is None:
            return False
        if not confirm(os.path.basename(target)):
            return False
        try:
            remove_entity(target)
        except OSError:
            return False
        panel.reload()
        panel.clamp_cursor()
        return True

    def rename_selected(self, new_name: str) -> bool:
        """Rename the entry under the cursor; True on success."""
        panel = self.current()
        target = panel._selected_path()
        if target is None or not new_name:
            return False
        try:
            rename_entity(target, os.path.join(panel.path, new_name))
        except OSError:
            return False
        panel.reload()
        panel.cursor = 0
        return True

    def copy_to_other_panel(self) -> bool:
        """Copy the entry under the cursor into the other panel's directory."""
        source, dest = self.current(), self.other()
        target = source._selected_path()
        if target is None:
            return False
        try:
            copy_entity(target, os.path.join(dest.path, os.path.basename(target)))
        except OSError:
            return False
        dest.reload()
        return True

    def move_to_other_panel(self) -> bool:
        """Move the entry under the cursor into the other panel's directory."""
        source, dest = self.current(), self.other()
        target = source._selected_path()
        if target is None:
            return False
        try:
            move_entity(target, os.path.join(dest.path, os.path.basename(target)))
        except OSError:
            return False
        dest.reload()
        source.reload()
        source.clamp_cursor()
        return True


@dataclass
class TabManager:
    """The open tabs and which one is shown."""

    tabs: list[Tab] = field(default_factory=list)
    active_index: int = 0

    def add_tab(self, path: str) -> Tab | None:
        """Open a tab with both panels on ``path`` and make it active.

        Returns None when ``MAX_TABS`` tabs are already open.
        """
        if len(self.tabs) >= MAX_TABS:
            return None
        tab = Tab(left=Panel(path), right=Panel(path))
        self.tabs.append(tab)
        self.active_index = len(self.tabs) - 1
        return tab

    def switch_tab(self, index: int) -> None:
        """Activate tab ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self.tabs):
            self.active_index = index

    def next_tab(self) -> None:
        """Activate the following tab, wrapping round to the first."""
        if self.tabs:
            self.switch_tab((self.active_index + 1) % len(self.tabs))

    def active(self) -> Tab:
        """The tab being shown."""
        return self.tabs[self.active_index]