"""Shared type aliases, enums and errors for dragon-curve."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

Vec2 = tuple[int, int]
Color = tuple[float, float, float]


class Turn(enum.Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    request_stop: Callable[[], None]


class ContractViolation(ValueError):
    """Raised when a gradient table or scene configuration is malformed."""


class InvalidDepthError(ContractViolation):
    """Raised when a gradient is sampled outside its [0, 1] depth range."""

    def __init__(self, depth: float, message: str) -> None:
        self.depth = depth
        super().__init__(message)


if TYPE_CHECKING:
    from dragon_curve.compositor import Compositor

System = Callable[["Compositor", FrameContext], None]
