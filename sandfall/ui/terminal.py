"""Curses terminal frontend.

Draws the canvas as text inside a ``+---+`` box and turns curses key and
mouse input into loop events.  Entering the frontend switches the
terminal into raw mode on the alternate screen with mouse capture;
leaving it undoes all three, whichever way the loop ended.
"""

from __future__ import annotations

import contextlib
import curses
import logging
import sys
from types import TracebackType
from typing import TYPE_CHECKING

from sandfall.ui.events import Event, KeyPress, MouseDown, MouseMove, MouseUp
from sandfall.ui.frontend import FrontendError

if TYPE_CHECKING:
    from sandfall.world.grid import Grid

logger = logging.getLogger(__name__)

# xterm any-motion tracking, so drags are reported without a button change
_MOTION_ON = "\033[?1003h"
_MOTION_OFF = "\033[?1003l"

_BORDER_ROWS = 2
_BANNER_GAP = 2


class CursesTerminal:
    """Frontend backed by the process's controlling terminal."""

    def __init__(self) -> None:
        self._screen: curses.window | None = None
        self._mouse = False

    def __enter__(self) -> CursesTerminal:
        try:
            self._screen = curses.initscr()
            curses.raw()
            curses.noecho()
            self._screen.keypad(True)
            # Not every terminal can hide the cursor
            with contextlib.suppress(curses.error):
                curses.curs_set(0)
            available, _ = curses.mousemask(
                curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION,
            )
            if available:
                self._mouse = True
                curses.mouseinterval(0)
                _write_escape(_MOTION_ON)
        except BaseException as exc:
            # Release whatever was acquired; the setup error wins over any
            # error raised while releasing
            try:
                self.close()
            finally:
                if isinstance(exc, (curses.error, OSError)):
                    msg = f"terminal setup failed: {exc}"
                    raise FrontendError(msg) from exc
                raise exc
        logger.debug("Terminal acquired (mouse capture: %s)", self._mouse)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def screen(self) -> curses.window:
        """The active curses window."""
        if self._screen is None:
            msg = "terminal is not active"
            raise FrontendError(msg)
        return self._screen

    def close(self) -> None:
        """Restore the terminal: mouse capture off, cooked mode, main screen."""
        if self._screen is None:
            return
        screen, self._screen = self._screen, None
        try:
            try:
                if self._mouse:
                    curses.mousemask(0)
                    _write_escape(_MOTION_OFF)
            finally:
                screen.keypad(False)
                curses.noraw()
                curses.echo()
                with contextlib.suppress(curses.error):
                    curses.curs_set(1)
        except (curses.error, OSError) as exc:
            msg = f"terminal restore failed: {exc}"
            raise FrontendError(msg) from exc
        finally:
            self._mouse = False
            curses.endwin()
            logger.debug("Terminal released")

    def draw_frame(self, width: int, height: int, banner: str) -> None:
        """Draw the border box and the instruction banner.

        Raises:
            FrontendError: If the terminal is too small or drawing fails.
        """
        screen = self.screen
        rows, cols = screen.getmaxyx()
        need_cols = width + _BORDER_ROWS
        need_rows = height + _BORDER_ROWS + _BANNER_GAP
        if rows < need_rows or cols < need_cols:
            msg = (
                f"terminal is {cols}x{rows}, "
                f"need at least {need_cols}x{need_rows}"
            )
            raise FrontendError(msg)

        edge = "+" + "-" * width + "+"
        try:
            screen.erase()
            screen.addstr(0, 0, edge)
            for y in range(1, height + 1):
                screen.addstr(y, 0, "|")
                screen.addstr(y, width + 1, "|")
            screen.addstr(height + 1, 0, edge)
            screen.addnstr(height + 3, 0, banner, cols - 1)
            screen.refresh()
        except curses.error as exc:
            msg = f"drawing frame failed: {exc}"
            raise FrontendError(msg) from exc

    def render(self, grid: Grid) -> None:
        """Write each grid row inside the border and refresh."""
        screen = self.screen
        try:
            for y, row in enumerate(grid.rows()):
                screen.addstr(y + 1, 1, "".join(cell.glyph for cell in row))
            screen.refresh()
        except curses.error as exc:
            msg = f"rendering failed: {exc}"
            raise FrontendError(msg) from exc

    def poll_event(self, timeout: float) -> Event | None:
        """Wait up to ``timeout`` seconds for a key or mouse event."""
        screen = self.screen
        screen.timeout(max(0, round(timeout * 1000)))
        key = screen.getch()
        if key == -1:
            return None
        if key == curses.KEY_MOUSE:
            return self._read_mouse()
        if 0 <= key < 256:
            return KeyPress(chr(key))
        return None

    def _read_mouse(self) -> Event | None:
        try:
            _, x, y, _, bstate = curses.getmouse()
        except curses.error:
            # Mouse queue was empty
            return None
        if bstate & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
            return MouseDown(x, y)
        if bstate & curses.BUTTON1_RELEASED:
            return MouseUp(x, y)
        if bstate & curses.REPORT_MOUSE_POSITION:
            return MouseMove(x, y)
        return None


def _write_escape(sequence: str) -> None:
    sys.stdout.write(sequence)
    sys.stdout.flush()
