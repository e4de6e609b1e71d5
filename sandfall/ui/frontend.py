"""The display contract the interaction loop is written against.

A frontend is a context manager: entering it acquires the display
(raw input, alternate screen, mouse capture), leaving it releases all of
that again on every exit path.
"""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sandfall.ui.events import Event
    from sandfall.world.grid import Grid


class FrontendError(OSError):
    """An I/O failure in the display layer.  Always fatal to the loop."""


class Frontend(Protocol):
    """Display and input collaborator of ``InteractionLoop``."""

    def __enter__(self) -> Frontend: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    def draw_frame(self, width: int, height: int, banner: str) -> None:
        """Draw the static border around the canvas and the banner below it."""
        ...

    def poll_event(self, timeout: float) -> Event | None:
        """Wait up to ``timeout`` seconds for one input event."""
        ...

    def render(self, grid: Grid) -> None:
        """Draw every grid cell inside the border and flush."""
        ...
