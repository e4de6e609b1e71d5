"""Entry point for ``python -m sandfall``.

Loads the configuration, builds the simulation engine and runs the
interactive sand box in the terminal (or a Pygame window with
``--window``).
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from sandfall.logging_config import setup_logging
from sandfall.simulation.config import SimulationConfig
from sandfall.simulation.engine import SimulationEngine
from sandfall.ui.frontend import Frontend, FrontendError
from sandfall.ui.loop import InteractionLoop
from sandfall.ui.terminal import CursesTerminal

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="sandfall",
        description="Sandfall - falling sand in the terminal",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: built-in settings)",
    )
    parser.add_argument(
        "--window",
        action="store_true",
        help="Open a Pygame window instead of using the terminal",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=12,
        help="Pixel size per grid cell in window mode (default: 12)",
    )
    parser.add_argument(
        "--log-file",
        type=pathlib.Path,
        default=None,
        help="Write log records to this file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    return parser


def make_frontend(args: argparse.Namespace) -> Frontend:
    """Return the Pygame window for ``--window``, the terminal otherwise."""
    if args.window:
        from sandfall.ui.pygame_client import PygameWindow

        return PygameWindow(cell_size=args.cell_size)
    return CursesTerminal()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, run the interaction loop.

    A display failure is reported on stdout as ``Error: ...`` and the
    process still exits normally.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = SimulationConfig()
    if args.config is not None:
        try:
            config = SimulationConfig.from_yaml(args.config)
        except (OSError, ValueError, TypeError) as exc:
            parser.error(f"cannot load config {args.config}: {exc}")

    engine = SimulationEngine(config=config)
    loop = InteractionLoop(engine=engine, frontend=make_frontend(args))
    try:
        loop.run()
    except FrontendError as exc:
        logger.exception("Display failure")
        print(f"Error: {exc}")


if __name__ == "__main__":
    main()
