"""Gradient tables mapping a normalized depth to an interpolated color."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from dragon_curve.types import Color, ContractViolation, InvalidDepthError

# Named colors
WHITE: Color = (1.0, 1.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)
YELLOW: Color = (1.0, 1.0, 0.0)
GREEN: Color = (0.0, 1.0, 0.0)
CYAN: Color = (0.0, 1.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0)
MAGENTA: Color = (1.0, 0.0, 1.0)
ORANGE: Color = (1.0, 136.0 / 255.0, 0.0)
BLURPLE: Color = (80.0 / 255.0, 0.0, 1.0)
PINKISH: Color = (187.0 / 255.0, 0.0, 80.0 / 255.0)
DIM_SKY: Color = (153.0 / 255.0 / 5.0, 204.0 / 255.0 / 5.0, 1.0 / 5.0)
AZURE: Color = (0.0, 176.0 / 255.0, 240.0 / 255.0)  # 00b0f0
DARK_GREY: Color = (0.1, 0.1, 0.1)
GREY: Color = (0.6, 0.6, 0.6)


@dataclass(frozen=True)
class GradientStop:
    depth: float
    color: Color


def lerp(u: float, v: float, t: float) -> float:
    return v * t + u * (1.0 - t)


def lerp_color(u: Color, v: Color, t: float) -> Color:
    return (lerp(u[0], v[0], t), lerp(u[1], v[1], t), lerp(u[2], v[2], t))


def validate_stops(stops: Sequence[GradientStop]) -> list[str]:
    """Return every problem found in ``stops``; an empty list means valid."""
    problems: list[str] = []
    if len(stops) < 2:
        problems.append(f"gradient needs at least 2 stops, got {len(stops)}")
        return problems

    if stops[0].depth != 0.0:
        problems.append(f"first stop depth must be 0.0, got {stops[0].depth!r}")
    if stops[-1].depth != 1.0:
        problems.append(f"last stop depth must be 1.0, got {stops[-1].depth!r}")

    for i, stop in enumerate(stops):
        if not 0.0 <= stop.depth <= 1.0:
            problems.append(f"stop {i} depth {stop.depth!r} outside [0, 1]")
        if len(stop.color) != 3:
            problems.append(f"stop {i} color must have 3 channels")
        elif not all(0.0 <= c <= 1.0 for c in stop.color):
            problems.append(f"stop {i} color {stop.color!r} outside [0, 1]")
        if i > 0 and stop.depth < stops[i - 1].depth:
            problems.append(
                f"stop {i} depth {stop.depth!r} precedes stop {i - 1} "
                f"depth {stops[i - 1].depth!r}"
            )
    return problems


class GradientTable:
    """Ordered color stops spanning depth 0.0 to 1.0.

    The table is validated once at construction, so ``color_at`` only
    fails when it is handed a depth outside [0, 1].
    """

    def __init__(self, stops: Iterable[GradientStop]) -> None:
        stops = tuple(stops)
        problems = validate_stops(stops)
        if problems:
            raise ContractViolation("Invalid gradient: " + "; ".join(problems))
        self._stops = stops

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, Color]]) -> GradientTable:
        return cls(GradientStop(depth, tuple(color)) for depth, color in pairs)

    @property
    def stops(self) -> tuple[GradientStop, ...]:
        return self._stops

    def color_at(self, depth: float) -> Color:
        if not 0.0 <= depth <= 1.0:
            raise InvalidDepthError(depth, f"Invalid gradient depth: {depth!r}")

        stops = self._stops
        if depth == 1.0:
            return stops[-1].color
        for i in range(1, len(stops)):
            upper = stops[i]
            if upper.depth >= depth:
                lower = stops[i - 1]
                width = upper.depth - lower.depth
                # Coincident stops form a hard edge.
                if width == 0.0:
                    return lower.color
                t = (depth - lower.depth) / width
                return lerp_color(lower.color, upper.color, t)
        # Unreachable: the last stop sits at depth 1.0.
        raise InvalidDepthError(depth, f"Invalid gradient depth: {depth!r}")

    def __len__(self) -> int:
        return len(self._stops)

    def __repr__(self) -> str:
        return f"GradientTable({list(self._stops)!r})"


def two_color_gradient(a: Color, b: Color) -> GradientTable:
    """Blend a -> b -> a as depth runs from 0 to 1."""
    return GradientTable(
        [
            GradientStop(0.0, a),
            GradientStop(0.5, b),
            GradientStop(1.0, a),
        ]
    )


def solid_gradient(color: Color) -> GradientTable:
    return GradientTable([GradientStop(0.0, color), GradientStop(1.0, color)])


def rainbow_gradient() -> GradientTable:
    hues = [RED, YELLOW, GREEN, CYAN, BLUE, MAGENTA, RED]
    return GradientTable(
        GradientStop(i / 6.0, color) for i, color in enumerate(hues)
    )
