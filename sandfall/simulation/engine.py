"""SimulationEngine — owns the grid and advances it tick by tick.

The engine is the only writer of the grid.  Input handlers call
``paint`` and ``reset``; the interaction loop calls ``step`` whenever a
tick is due.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sandfall.simulation.config import SimulationConfig
from sandfall.simulation.gravity import sand_fall
from sandfall.world.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the sand simulation forward.

    Attributes:
        config: Loaded configuration.
        grid: The sand canvas.
        tick: Number of gravity ticks applied so far.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    grid: Grid = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build an empty grid from config."""
        self.grid = Grid(
            width=self.config.grid_width,
            height=self.config.grid_height,
        )

    def step(self) -> int:
        """Advance the simulation by one tick.

        Returns:
            Number of grains that moved.
        """
        moved = sand_fall(self.grid)
        self.tick += 1
        return moved

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def run_until_settled(self, max_ticks: int) -> int:
        """Step until nothing moves or ``max_ticks`` is reached.

        Args:
            max_ticks: Upper bound on ticks to apply.

        Returns:
            Number of ticks applied, including the final quiet one.
        """
        for taken in range(1, max_ticks + 1):
            if self.step() == 0:
                return taken
        return max_ticks

    @property
    def is_settled(self) -> bool:
        """True if another tick would leave the grid unchanged."""
        return sand_fall(self.grid.copy()) == 0

    def paint(self, col: int, row: int) -> bool:
        """Drop sand at a grid position; out-of-range positions are ignored."""
        return self.grid.paint(col, row)

    def reset(self) -> None:
        """Empty the canvas."""
        logger.debug("Clearing %d grains", self.grid.sand_count())
        self.grid.clear()
