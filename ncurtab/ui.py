"""Curses drawing of the tab bar, the two panels and the dialogs."""

from __future__ import annotations

import contextlib
import curses
from typing import Any

from ncurtab.tabs import Panel, TabManager

MAX_NAME = 64
TAB_LABEL_WIDTH = 10
DIALOG_WIDTH = 50

PAIR_ACTIVE_TAB = 2
PAIR_DIRECTORY = 3
PAIR_FILE = 4

KEY_ENTER = 10
KEY_ESCAPE = 27
KEY_DELETE = 127

_HELP_LINES = (
    (4, "q          : Quit the program"),
    (5, "t          : New tab"),
    (6, "Tab        : Switch to next tab"),
    (7, "Up/Down    : Move cursor"),
    (8, "Enter      : Enter directory"),
    (9, "F1         : Switch panel"),
    (10, "d          : Delete file/directory"),
    (11, "r          : Rename file/directory"),
    (12, "c          : Copy to other panel"),
    (13, "m          : Move to other panel"),
    (14, "h          : Show this help"),
    (16, "Press any key to close"),
)


def format_entry_name(name: str, is_dir: bool, width: int) -> str:
    """Text of one panel row: the name, ``/`` for directories, padded to fit.

    ``width`` is the panel width; the row takes ``width - 4`` columns and
    names that do not fit end in ``...``.
    """
    limit = max(width - 4, 0)
    text = name[: MAX_NAME - 2]
    if is_dir:
        text += "/"
    if len(text) > limit:
        text = text[: limit - 3] + "..." if limit >= 3 else text[:limit]
    return text.ljust(limit)


def truncate_path(path: str, width: int) -> str:
    """Keep at most ``width`` leading characters of ``path``."""
    return path[: max(width, 0)]


def _new_window(height: int, width: int, y: int, x: int) -> Any:
    return curses.newwin(max(height, 1), max(width, 1), max(y, 0), max(x, 0))


def _put(win: Any, y: int, x: int, text: str, attr: int = 0) -> None:
    with contextlib.suppress(curses.error):
        win.addstr(y, x, text, attr)


def _put_char(win: Any, y: int, x: int, char: int) -> None:
    with contextlib.suppress(curses.error):
        win.addch(y, x, char)


def _move(win: Any, y: int, x: int) -> None:
    with contextlib.suppress(curses.error):
        win.move(y, x)


def _set_cursor(visibility: int) -> None:
    with contextlib.suppress(curses.error):
        curses.curs_set(visibility)


class UI:
    """The windows on the screen and the dialogs drawn over them."""

    def __init__(self, stdscr: Any) -> None:
        self.stdscr = stdscr
        self.max_y = 0
        self.max_x = 0
        self.tabs_win: Any = None
        self.status_win: Any = None
        self.container_win: Any = None
        self.left_win: Any = None
        self.right_win: Any = None
        self.resize()

    def resize(self) -> None:
        """Lay the windows out again for the current terminal size."""
        self.stdscr.clear()
        self.max_y, self.max_x = self.stdscr.getmaxyx()
        panel_height = self.max_y - 2
        panel_width = self.max_x // 2

        self.tabs_win = _new_window(1, self.max_x, 0, 0)
        self.status_win = _new_window(1, self.max_x, self.max_y - 1, 0)
        self.container_win = _new_window(panel_height, self.max_x, 1, 0)
        self.left_win = _new_window(panel_height - 2, panel_width - 2, 2, 1)
        self.right_win = _new_window(panel_height - 2, panel_width - 1, 2, panel_width)
        self.stdscr.refresh()

    def _draw_tabs(self, manager: TabManager) -> None:
        win = self.tabs_win
        win.erase()
        for index in range(len(manager.tabs)):
            attr = curses.color_pair(PAIR_ACTIVE_TAB) if index == manager.active_index else 0
            _put(win, 0, index * TAB_LABEL_WIDTH, f"Tab {index + 1}", attr)
        win.refresh()

    @staticmethod
    def _draw_panel(win: Any, panel: Panel, height: int, width: int, active: bool) -> None:
        win.erase()
        start = max(panel.offset, 0)
        visible = panel.entries[start : start + max(height - 2, 0)]
        for row, entry in enumerate(visible, start=0):
            attr = curses.color_pair(PAIR_DIRECTORY if entry.is_dir else PAIR_FILE)
            if active and start + row == panel.cursor:
                attr |= curses.A_REVERSE
            _put(win, row, 1, format_entry_name(entry.name, entry.is_dir, width), attr)
        win.refresh()

    def draw(self, manager: TabManager) -> None:
        """Draw the tab bar and both panels of the active tab."""
        tab = manager.active()
        self._draw_tabs(manager)

        win = self.container_win
        win.erase()
        with contextlib.suppress(curses.error):
            win.box()
        half = self.max_x // 2
        _put(win, 0, 2, truncate_path(tab.left.path, half - 3))
        _put(win, 0, half + 2, truncate_path(tab.right.path, half - 3))

        separator_x = half - 1
        _put_char(win, 0, separator_x, curses.ACS_TTEE)
        for y in range(1, self.max_y - 3):
            _put_char(win, y, separator_x, curses.ACS_VLINE)
        _put_char(win, self.max_y - 3, separator_x, curses.ACS_BTEE)
        win.refresh()

        panel_height = self.max_y - 2
        self._draw_panel(self.left_win, tab.left, panel_height, half, tab.left_active)
        self._draw_panel(self.right_win, tab.right, panel_height, half, not tab.left_active)

    def _dialog(self, height: int, title: str) -> Any:
        width = DIALOG_WIDTH
        win = _new_window(height, width, (self.max_y - height) // 2, (self.max_x - width) // 2)
        with contextlib.suppress(curses.error):
            win.box()
        _put(win, 1, 2, title)
        _put_char(win, 2, 0, curses.ACS_LTEE)
        with contextlib.suppress(curses.error):
            win.hline(2, 1, curses.ACS_HLINE, width - 2)
        _put_char(win, 2, width - 1, curses.ACS_RTEE)
        return win

    def _restore(self) -> None:
        for win in (self.tabs_win, self.left_win, self.right_win, self.status_win):
            win.touchwin()
            win.refresh()

    def show_help(self) -> None:
        """Show the key reference until a key is pressed."""
        win = self._dialog(17, "Command Reference")
        for row, text in _HELP_LINES:
            _put(win, row, 2, text)
        win.refresh()
        self.stdscr.getch()
        del win
        self._restore()

    def prompt_new_name(self, old_name: str) -> str | None:
        """Ask for a new name; None if cancelled with Esc or left empty."""
        win = self._dialog(7, "Rename File/Directory")
        _put(win, 3, 2, f"Current name: {old_name}")
        _put(win, 4, 2, "New name: ")
        _put(win, 6, 2, "Enter to confirm, Esc to cancel")

        curses.echo()
        _set_cursor(1)
        win.keypad(True)
        _move(win, 4, 12)
        win.refresh()

        chars: list[str] = []
        key = KEY_ESCAPE
        try:
            while True:
                key = win.getch()
                if key in (KEY_ENTER, KEY_ESCAPE):
                    break
                if key in (curses.KEY_BACKSPACE, KEY_DELETE):
                    if chars:
                        chars.pop()
                        _put(win, 4, 12, "".join(chars).ljust(DIALOG_WIDTH - 14))
                        _move(win, 4, 12 + len(chars))
                        win.refresh()
                elif len(chars) < MAX_NAME - 1 and 32 <= key <= 126:
                    chars.append(chr(key))
                    _put(win, 4, 12, "".join(chars))
                    _move(win, 4, 12 + len(chars))
                    win.refresh()
        finally:
            curses.noecho()
            _set_cursor(0)
        del win
        self._restore()

        if key == KEY_ESCAPE or not chars:
            return None
        return "".join(chars)

    def confirm_delete(self, name: str) -> bool:
        """Ask whether ``name`` should be deleted; True for y or Y."""
        win = self._dialog(6, "Confirm Deletion")
        _put(win, 3, 2, f"Delete {name}? (y/n)")
        _put(win, 5, 2, "y: Yes, n: No")
        win.refresh()

        answers = {ord("y"), ord("Y"), ord("n"), ord("N")}
        key = self.stdscr.getch()
        while key not in answers:
            key = self.stdscr.getch()
        del win
        self._restore()
        return key in (ord("y"), ord("Y"))

    def close(self) -> None:
        """Drop the windows and clear the screen."""
        self.tabs_win = self.status_win = self.container_win = None
        self.left_win = self.right_win = None
        self.stdscr.clear()
        self.stdscr.refresh()