"""Per-pixel curve stepping: depth, color lookup, advance and turn."""
from __future__ import annotations

import math
from dataclasses import dataclass

from dragon_curve.gradient import GradientTable
from dragon_curve.oracle import TurnState, advance
from dragon_curve.types import Color, Turn, Vec2

UNIT_DIRECTIONS: tuple[Vec2, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass
class Cursor:
    position: Vec2
    direction: Vec2
    segment_progress: int = 0
    step: int = 0


def rotate(direction: Vec2, turn: Turn) -> Vec2:
    """Quarter turn in pixel space (y grows downward)."""
    dx, dy = direction
    if turn is Turn.LEFT:
        return (dy, -dx)
    return (-dy, dx)


def depth_at(step: int) -> float:
    """Fractional part of log2(step + 1); wraps once per doubling."""
    d = math.log2(step + 1)
    return d - math.floor(d)


def step_walker(
    cursor: Cursor,
    turns: TurnState,
    gradient: GradientTable,
    segment_length: int,
    width: int,
    height: int,
) -> tuple[Vec2, Color] | None:
    """Advance ``cursor`` by one pixel.

    Returns the position and color to plot for the pixel the cursor was
    on, or None when that pixel lies outside the canvas.
    """
    color = gradient.color_at(depth_at(cursor.step))
    x, y = cursor.position
    plotted = ((x, y), color) if 0 <= x < width and 0 <= y < height else None

    cursor.step += 1
    cursor.segment_progress += 1
    dx, dy = cursor.direction
    cursor.position = (x + dx, y + dy)

    if cursor.segment_progress >= segment_length:
        cursor.direction = rotate(cursor.direction, advance(turns))
        cursor.segment_progress = 0

    return plotted
