"""CurveInstance component: one independently animated curve."""
from __future__ import annotations

from dataclasses import dataclass, field

from dragon_curve.gradient import GradientTable
from dragon_curve.oracle import TurnState
from dragon_curve.types import ContractViolation, Turn, Vec2
from dragon_curve.walker import UNIT_DIRECTIONS, Cursor, rotate



def is_pixel_coord(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(c, int) and not isinstance(c, bool) for c in value)
    )


@dataclass
class CurveInstance:
    """Cursor, turn history, palette and lifecycle timers for one curve.

    ``countdown`` is the number of sub-steps skipped before the curve
    starts. ``duration`` is the number of pixels drawn before the curve
    restarts from ``start`` heading the opposite way; 0 means never.
    """

    start: Vec2
    start_direction: Vec2
    gradient: GradientTable
    countdown: int = 0
    duration: int = 0
    cursor: Cursor = field(init=False)
    turns: TurnState = field(default_factory=TurnState, init=False)
    resets: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if not is_pixel_coord(self.start):
            raise ContractViolation(f"start must be a pair of ints, got {self.start!r}")
        if tuple(self.start_direction) not in UNIT_DIRECTIONS:
            raise ContractViolation(
                f"start_direction must be a unit axis vector, got {self.start_direction!r}"
            )
        if self.countdown < 0:
            raise ValueError("countdown must be non-negative")
        if self.duration < 0:
            raise ValueError("duration must be non-negative")
        self._initial = (self.start_direction, self.countdown)
        self.cursor = Cursor(position=self.start, direction=self.start_direction)

    @property
    def expired(self) -> bool:
        return self.duration > 0 and self.cursor.step >= self.duration

    def reset(self) -> None:
        """Replay from the start with the stored direction turned 180 degrees."""
        flipped = rotate(rotate(self.start_direction, Turn.RIGHT), Turn.RIGHT)
        self.start_direction = flipped
        self.cursor = Cursor(position=self.start, direction=flipped)
        self.turns.reset()
        self.resets += 1

    def restart(self) -> None:
        """Return to the configuration the instance was created with."""
        self.start_direction, self.countdown = self._initial
        self.cursor = Cursor(position=self.start, direction=self.start_direction)
        self.turns.reset()
        self.resets = 0
