"""Main loop of the file manager and the key bindings."""

from __future__ import annotations

import argparse
import contextlib
import curses
import os
from typing import Any

from ncurtab.tabs import TabManager

KEY_TAB = 9
KEY_ENTER = 10


def handle_key(manager: TabManager, ui: Any, key: int, screen_height: int) -> bool:
    """Carry out the action bound to ``key``; False when the program should quit."""
    tab = manager.active()

    if key == curses.KEY_RESIZE:
        ui.resize()
    elif key == ord("q"):
        return False
    elif key == ord("t"):
        manager.add_tab(tab.left.path)
    elif key == KEY_TAB:
        manager.next_tab()
    elif key == curses.KEY_UP:
        tab.move_cursor(-1, screen_height)
    elif key == curses.KEY_DOWN:
        tab.move_cursor(1, screen_height)
    elif key == KEY_ENTER:
        tab.enter_directory()
    elif key == curses.KEY_F1:
        tab.toggle_panel()
    elif key == ord("d"):
        tab.delete_selected(ui.confirm_delete)
    elif key == ord("r"):
        entry = tab.current().selected()
        if entry is not None:
            new_name = ui.prompt_new_name(entry.name)
            if new_name:
                tab.rename_selected(new_name)
    elif key == ord("c"):
        tab.copy_to_other_panel()
    elif key == ord("m"):
        tab.move_to_other_panel()
    elif key == ord("h"):
        ui.show_help()
    return True


def _setup_terminal(stdscr: Any) -> None:
    with contextlib.suppress(curses.error):
        curses.start_color()
    curses.cbreak()
    curses.noecho()
    stdscr.keypad(True)
    with contextlib.suppress(curses.error):
        curses.curs_set(0)
    colours = (
        (1, curses.COLOR_CYAN),
        (2, curses.COLOR_YELLOW),
        (3, curses.COLOR_BLUE),
        (4, curses.COLOR_WHITE),
    )
    for pair, foreground in colours:
        with contextlib.suppress(curses.error):
            curses.init_pair(pair, foreground, curses.COLOR_BLACK)


def run(stdscr: Any) -> None:
    """Run the file manager on an initialised curses screen."""
    from ncurtab.ui import UI

    _setup_terminal(stdscr)
    ui = UI(stdscr)
    manager = TabManager()
    manager.add_tab(os.path.expanduser("~"))

    try:
        running = True
        while running:
            ui.draw(manager)
            key = stdscr.getch()
            screen_height = stdscr.getmaxyx()[0]
            running = handle_key(manager, ui, key, screen_height)
    finally:
        ui.close()


def main(argv: list[str] | None = None) -> int:
    """Start the file manager in the home directory."""
    parser = argparse.ArgumentParser(
        prog="ncurtab",
        description="Tabbed two-panel file manager for the terminal. Press h for help.",
    )
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())