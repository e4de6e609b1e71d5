"""Input events delivered by a frontend to the interaction loop.

Positions are screen cells: 0-based, with the canvas border occupying
column 0 and row 0, so grid cell ``(c, r)`` is drawn at ``(c + 1, r + 1)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPress:
    """A printable key was pressed."""

    char: str


@dataclass(frozen=True)
class MouseDown:
    """The primary mouse button went down."""

    column: int
    row: int


@dataclass(frozen=True)
class MouseUp:
    """The primary mouse button was released."""

    column: int
    row: int


@dataclass(frozen=True)
class MouseMove:
    """The pointer moved, with or without a button held."""

    column: int
    row: int


@dataclass(frozen=True)
class QuitRequested:
    """The window was closed."""


Event = KeyPress | MouseDown | MouseUp | MouseMove | QuitRequested
