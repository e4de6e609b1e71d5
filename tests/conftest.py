"""Shared fixtures for the Sandfall test suite."""

from __future__ import annotations

from types import TracebackType

import numpy as np
import pytest
from numpy.random import Generator

from sandfall.simulation.config import SimulationConfig
from sandfall.simulation.engine import SimulationEngine
from sandfall.ui.events import Event, KeyPress
from sandfall.world.grid import Grid


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFrontend:
    """Records what the loop asks of it and replays scripted input.

    Exceptions in ``events`` are raised from ``poll_event``.  Once the
    script runs out every poll returns a quit key.
    """

    def __init__(self, events: list[Event | None | Exception] | None = None) -> None:
        self.events = list(events or [])
        self.entered = False
        self.exited = False
        self.frames: list[tuple[int, int, str]] = []
        self.timeouts: list[float] = []
        self.renders = 0

    def __enter__(self) -> FakeFrontend:
        self.entered = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.exited = True

    def draw_frame(self, width: int, height: int, banner: str) -> None:
        self.frames.append((width, height, banner))

    def poll_event(self, timeout: float) -> Event | None:
        self.timeouts.append(timeout)
        if not self.events:
            return KeyPress("q")
        event = self.events.pop(0)
        if isinstance(event, Exception):
            raise event
        return event

    def render(self, grid: Grid) -> None:
        self.renders += 1


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """A small 8x8 grid for fast tests."""
    return Grid(width=8, height=8)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default configuration (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def engine(default_config: SimulationConfig) -> SimulationEngine:
    """An engine on the default 60x24 grid."""
    return SimulationEngine(config=default_config)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def random_grid(rng: Generator) -> Grid:
    """A 12x10 grid with roughly a third of its cells filled with sand."""
    grid = Grid(width=12, height=10)
    grid.cells[:] = (rng.random((10, 12)) < 0.35).astype(np.uint8)
    return grid


@pytest.fixture
def frontend_factory() -> type[FakeFrontend]:
    """The scripted frontend class, for tests that build their own."""
    return FakeFrontend
