"""InteractionLoop — merges input, physics ticks and rendering.

The loop is single-threaded.  Each iteration it:

1. optionally applies gravity unconditionally (``physics_every_frame``),
2. waits up to ``poll_timeout`` for one input event and handles it,
3. stamps sand under the pointer while the button is held
   (``continuous_paint``),
4. applies gravity once if ``tick_interval`` has elapsed since the last
   gated tick,
5. renders the grid.

The grid is only ever touched from here, so simulation, input handling
and rendering never overlap.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

from sandfall.ui.events import KeyPress, MouseDown, MouseMove, MouseUp, QuitRequested

if TYPE_CHECKING:
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.ui.events import Event
    from sandfall.ui.frontend import Frontend

logger = logging.getLogger(__name__)

QUIT_KEY = "q"
RESET_KEY = "r"


class LoopState(Enum):
    """Lifecycle of the interaction loop."""

    RUNNING = auto()
    TERMINATING = auto()


def banner_for(*, continuous_paint: bool, allow_reset: bool) -> str:
    """Return the instruction line shown under the canvas."""
    action = "Click and drag" if continuous_paint else "Click"
    keys = f"Press '{QUIT_KEY}' to quit."
    if allow_reset:
        keys = f"Press '{RESET_KEY}' to reset, '{QUIT_KEY}' to quit."
    return f"Sand Simulation! {action} to place sand. {keys}"


def screen_to_grid(column: int, row: int) -> tuple[int, int]:
    """Map a screen cell to grid coordinates by removing the border offset."""
    return column - 1, row - 1


class InteractionLoop:
    """Runs the sand box against a frontend until the user quits.

    Attributes:
        engine: Simulation engine holding the grid.
        frontend: Display and input collaborator.
        state: Current loop state.
        painting: Whether the mouse button is held (continuous mode).
        pointer: Last known pointer position in grid coordinates.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        frontend: Frontend,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialise the loop.

        Args:
            engine: The simulation to drive.
            frontend: Where to draw and read input from.
            clock: Monotonic time source in seconds.
        """
        self.engine = engine
        self.frontend = frontend
        self._clock = clock
        cfg = engine.config
        self.continuous_paint = cfg.continuous_paint
        self.physics_every_frame = cfg.physics_every_frame
        self.allow_reset = cfg.allow_reset
        self.tick_interval = cfg.tick_interval
        self.poll_timeout = cfg.poll_timeout

        self.state = LoopState.RUNNING
        self.painting = False
        self.pointer: tuple[int, int] | None = None
        self._last_update = clock()

    @property
    def banner(self) -> str:
        """Instruction line for the configured variant."""
        return banner_for(
            continuous_paint=self.continuous_paint,
            allow_reset=self.allow_reset,
        )

    def run(self) -> None:
        """Acquire the frontend, loop until quit, release the frontend.

        Raises:
            FrontendError: If drawing or input fails.  The frontend is
                released before the error propagates.
        """
        grid = self.engine.grid
        with self.frontend:
            self.frontend.draw_frame(grid.width, grid.height, self.banner)
            self._last_update = self._clock()
            logger.info("Loop started on a %dx%d grid", grid.width, grid.height)
            while self.state is LoopState.RUNNING:
                self.iterate()
        logger.info("Loop finished after %d ticks", self.engine.tick)

    def iterate(self) -> None:
        """Run a single loop iteration."""
        if self.physics_every_frame:
            self.engine.step()

        event = self.frontend.poll_event(self.poll_timeout)
        if event is not None:
            self.handle_event(event)
        if self.state is LoopState.TERMINATING:
            return

        if self.painting and self.pointer is not None:
            self.engine.paint(*self.pointer)

        now = self._clock()
        if now - self._last_update >= self.tick_interval:
            self._last_update = now
            self.engine.step()

        self.frontend.render(self.engine.grid)

    def handle_event(self, event: Event) -> None:
        """Apply one input event to the loop state and grid."""
        if isinstance(event, QuitRequested):
            self.quit()
        elif isinstance(event, KeyPress):
            self._handle_key(event.char)
        elif isinstance(event, MouseDown):
            self._handle_press(event.column, event.row)
        elif isinstance(event, MouseUp):
            self.painting = False
        elif isinstance(event, MouseMove):
            self.pointer = screen_to_grid(event.column, event.row)

    def quit(self) -> None:
        """Stop the loop after the current iteration."""
        logger.info("Quit requested")
        self.state = LoopState.TERMINATING

    def _handle_key(self, char: str) -> None:
        if char == QUIT_KEY:
            self.quit()
        elif char == RESET_KEY and self.allow_reset:
            logger.info("Reset requested")
            self.engine.reset()

    def _handle_press(self, column: int, row: int) -> None:
        col, grid_row = screen_to_grid(column, row)
        self.engine.paint(col, grid_row)
        if self.continuous_paint:
            self.painting = True
            self.pointer = (col, grid_row)
