"""A two-panel terminal file manager with tabs, built on curses."""

__version__ = "0.1.0"