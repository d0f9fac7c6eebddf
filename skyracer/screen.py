"""Curses-backed terminal drawing and keyboard input."""

from __future__ import annotations

import curses
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

NO_KEY = -1
CLEAR_SEQUENCE = "\033[2J\033[H"


def _set_echo(enabled: bool) -> None:
    try:
        if enabled:
            curses.echo()
        else:
            curses.noecho()
    except curses.error:
        pass


class Terminal:
    """A full-screen curses window with non-blocking key input."""

    def __init__(self, window) -> None:
        self.window = window
        self._pending: int | None = None

    def width(self) -> int:
        return self.window.getmaxyx()[1]

    def height(self) -> int:
        return self.window.getmaxyx()[0]

    def clear(self) -> None:
        self.window.clear()

    def update(self) -> None:
        self.window.refresh()

    def put_char(self, x: int, y: int, ch: str) -> None:
        """Draw one character; writes outside the window are ignored."""
        try:
            self.window.addch(y, x, ch)
        except curses.error:
            pass

    def put_string(self, x: int, y: int, text: str) -> None:
        """Draw text; writes outside the window are ignored."""
        try:
            self.window.addstr(y, x, text)
        except curses.error:
            pass

    def key_hit(self) -> bool:
        """Return True if a key is waiting, keeping it for read_key."""
        if self._pending is not None:
            return True
        key = self.window.getch()
        if key != NO_KEY:
            self._pending = key
            return True
        return False

    def read_key(self) -> int:
        """Return the next key code, or -1 if none is waiting."""
        if self._pending is not None:
            key, self._pending = self._pending, None
            return key
        return self.window.getch()

    def read_line(self, x: int, y: int, max_length: int) -> str:
        """Read a line of echoed text typed at the given position."""
        self.window.nodelay(False)
        _set_echo(True)
        try:
            raw = self.window.getstr(y, x, max_length)
        finally:
            _set_echo(False)
            self.window.nodelay(True)
        if isinstance(raw, bytes):
            return raw.decode("utf-8", errors="replace")
        return raw


@contextmanager
def open_terminal() -> Iterator[Terminal]:
    """Set up curses for the game and restore the terminal on exit."""
    window = curses.initscr()
    try:
        curses.noecho()
        curses.cbreak()
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        window.keypad(True)
        window.nodelay(True)
        window.timeout(0)
        window.scrollok(False)
        yield Terminal(window)
    finally:
        curses.endwin()


def clear_console(stream: TextIO | None = None) -> None:
    """Clear a plain console with ANSI escape codes."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SEQUENCE)
    out.flush()