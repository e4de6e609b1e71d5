"""Pygame window frontend for the sand box.

Lays the canvas out on the same screen-cell grid as the terminal (border
in cell 0, banner two cells under the box) scaled by ``cell_size``
pixels, so the interaction loop maps pointer positions identically for
both frontends.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING

import numpy as np
import pygame

from sandfall.ui.events import (
    Event,
    KeyPress,
    MouseDown,
    MouseMove,
    MouseUp,
    QuitRequested,
)
from sandfall.ui.frontend import FrontendError

if TYPE_CHECKING:
    from sandfall.world.grid import Grid

logger = logging.getLogger(__name__)

# Colour palette
_BG = (20, 16, 12)
_BORDER = (120, 110, 100)
_TEXT = (200, 200, 200)

# Indexed by Cell value
_CELL_COLOURS = np.array(
    [
        _BG,  # EMPTY
        (230, 190, 90),  # SAND
    ],
    dtype=np.uint8,
)


class PygameWindow:
    """Frontend that draws into a Pygame window.

    Attributes:
        cell_size: Pixel width/height of one screen cell.
        screen: The Pygame display surface while the window is open.
    """

    def __init__(self, cell_size: int = 12) -> None:
        """Initialise the frontend.

        Args:
            cell_size: Pixel width/height per grid cell.
        """
        self.cell_size = cell_size
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self._canvas: pygame.Surface | None = None

    def __enter__(self) -> PygameWindow:
        try:
            pygame.init()
            self.font = pygame.font.SysFont("monospace", max(10, self.cell_size))
        except pygame.error as exc:
            pygame.quit()
            msg = f"pygame setup failed: {exc}"
            raise FrontendError(msg) from exc
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.screen = None
        self._canvas = None
        pygame.quit()
        logger.debug("Window closed")

    def draw_frame(self, width: int, height: int, banner: str) -> None:
        """Open the window and draw the border and banner."""
        cs = self.cell_size
        try:
            self.screen = pygame.display.set_mode(
                ((width + 2) * cs, (height + 4) * cs),
            )
            pygame.display.set_caption("Sandfall")
            self._canvas = pygame.Surface((width, height))
            self.screen.fill(_BG)
            pygame.draw.rect(
                self.screen,
                _BORDER,
                (cs // 2, cs // 2, (width + 1) * cs, (height + 1) * cs),
                width=max(1, cs // 4),
            )
            if self.font is not None:
                text = self.font.render(banner, True, _TEXT)
                self.screen.blit(text, (0, (height + 3) * cs))
            pygame.display.flip()
        except pygame.error as exc:
            msg = f"drawing frame failed: {exc}"
            raise FrontendError(msg) from exc

    def render(self, grid: Grid) -> None:
        """Blit the grid as one scaled surface and flip the display."""
        if self.screen is None or self._canvas is None:
            msg = "window is not open"
            raise FrontendError(msg)
        cs = self.cell_size
        try:
            # surfarray is indexed [x, y]
            pixels = _CELL_COLOURS[grid.cells.T]
            pygame.surfarray.blit_array(self._canvas, pixels)
            scaled = pygame.transform.scale(
                self._canvas,
                (grid.width * cs, grid.height * cs),
            )
            self.screen.blit(scaled, (cs, cs))
            pygame.display.flip()
        except pygame.error as exc:
            msg = f"rendering failed: {exc}"
            raise FrontendError(msg) from exc

    def poll_event(self, timeout: float) -> Event | None:
        """Wait up to ``timeout`` seconds for one translatable event."""
        wait_ms = round(timeout * 1000)
        try:
            # wait(0) blocks forever
            event = pygame.event.wait(wait_ms) if wait_ms > 0 else pygame.event.poll()
        except pygame.error as exc:
            msg = f"reading input failed: {exc}"
            raise FrontendError(msg) from exc
        return self._translate(event)

    def _translate(self, event: pygame.event.Event) -> Event | None:
        cs = self.cell_size
        if event.type == pygame.QUIT:
            return QuitRequested()
        if event.type == pygame.KEYDOWN and event.unicode:
            return KeyPress(event.unicode)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return MouseDown(event.pos[0] // cs, event.pos[1] // cs)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return MouseUp(event.pos[0] // cs, event.pos[1] // cs)
        if event.type == pygame.MOUSEMOTION:
            return MouseMove(event.pos[0] // cs, event.pos[1] // cs)
        return None
