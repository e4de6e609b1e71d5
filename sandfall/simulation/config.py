"""Config — load simulation and loop parameters from YAML files.

The defaults reproduce the interactive sand box: a 60x24 canvas, a 30 ms
physics tick, click-and-drag painting and a reset key.  A YAML file can
override any of them; the older click-to-place behaviour is just a
different set of values here.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    """Top-level configuration.

    Attributes:
        grid_width: Number of grid columns.
        grid_height: Number of grid rows.
        tick_interval_ms: Minimum wall-clock time between gated physics
            ticks.
        poll_timeout_ms: How long the loop waits for an input event
            before moving on.
        continuous_paint: If True, holding the mouse button paints every
            loop iteration and follows drags; otherwise each press drops
            a single grain.
        physics_every_frame: If True, gravity is also applied once per
            loop iteration in addition to the gated tick.
        allow_reset: Whether the ``r`` key clears the canvas.
    """

    grid_width: int = 60
    grid_height: int = 24
    tick_interval_ms: int = 30
    poll_timeout_ms: int = 30

    continuous_paint: bool = True
    physics_every_frame: bool = False
    allow_reset: bool = True

    def __post_init__(self) -> None:
        for name in ("grid_width", "grid_height", "tick_interval_ms", "poll_timeout_ms"):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"{name} must be an integer, got {value!r}"
                raise ValueError(msg)
        for name in ("continuous_paint", "physics_every_frame", "allow_reset"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be true or false, got {value!r}"
                raise ValueError(msg)
        if self.grid_width <= 0 or self.grid_height <= 0:
            msg = (
                "grid dimensions must be positive, "
                f"got {self.grid_width}x{self.grid_height}"
            )
            raise ValueError(msg)
        if self.tick_interval_ms < 0 or self.poll_timeout_ms < 0:
            msg = "tick_interval_ms and poll_timeout_ms must not be negative"
            raise ValueError(msg)

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    @property
    def poll_timeout(self) -> float:
        """Poll timeout in seconds."""
        return self.poll_timeout_ms / 1000.0

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys missing from the file keep their defaults; unknown keys are
        ignored.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the file holds something other than a mapping
                or a value is out of range.
        """
        path = Path(path)
        with path.open("r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                msg = f"{path}: invalid YAML: {exc}"
                raise ValueError(msg) from exc

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at top level"
            raise ValueError(msg)

        known = {fld.name for fld in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
