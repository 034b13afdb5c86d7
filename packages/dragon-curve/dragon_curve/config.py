"""Scene configuration and wiring of framebuffer, compositor and engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from dragon_curve.components import CurveInstance, is_pixel_coord
from dragon_curve.compositor import Compositor, ResetCallback
from dragon_curve.engine import Engine
from dragon_curve.gradient import (
    AZURE,
    BLURPLE,
    DARK_GREY,
    DIM_SKY,
    GREY,
    ORANGE,
    PINKISH,
    RED,
    GradientTable,
    two_color_gradient,
)
from dragon_curve.pixels import PIXEL_FORMATS, Framebuffer, packer_for
from dragon_curve.systems import make_compositor_system
from dragon_curve.types import ContractViolation, Vec2
from dragon_curve.walker import UNIT_DIRECTIONS


@dataclass(frozen=True)
class SceneConfig:
    """Immutable per-run constants.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        segment_length: Pixels drawn in a straight line between turns.
        batch_size: Sub-steps each curve advances per presented frame.
        fps: Frame cadence used when the engine paces itself.
        pixel_format: Channel order of the sink, "RGBA" or "BGRA".
    """

    width: int = 1200
    height: int = 800
    segment_length: int = 1
    batch_size: int = 1000
    fps: int = 60
    pixel_format: str = "RGBA"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {self.width}x{self.height}")
        if self.segment_length <= 0:
            raise ValueError("segment_length must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")
        if self.pixel_format not in PIXEL_FORMATS:
            raise ValueError(f"Unknown pixel format {self.pixel_format!r}")

    @property
    def center(self) -> Vec2:
        return (self.width // 2, self.height // 2)


@dataclass(frozen=True)
class InstanceConfig:
    start: Vec2
    direction: Vec2
    gradient: GradientTable
    countdown: int = 0
    duration: int = 0

    def __post_init__(self) -> None:
        if not is_pixel_coord(tuple(self.start)):
            raise ContractViolation(f"start must be a pair of ints, got {self.start!r}")
        if tuple(self.direction) not in UNIT_DIRECTIONS:
            raise ContractViolation(
                f"direction must be a unit axis vector, got {self.direction!r}"
            )
        if self.countdown < 0 or self.duration < 0:
            raise ValueError("countdown and duration must be non-negative")

    def build(self) -> CurveInstance:
        return CurveInstance(
            start=tuple(self.start),
            start_direction=tuple(self.direction),
            gradient=self.gradient,
            countdown=self.countdown,
            duration=self.duration,
        )


DEFAULT_PALETTES: list[GradientTable] = [
    two_color_gradient(RED, ORANGE),
    two_color_gradient(BLURPLE, PINKISH),
    two_color_gradient(DIM_SKY, AZURE),
    two_color_gradient(DARK_GREY, GREY),
]


def default_instances(config: SceneConfig) -> list[InstanceConfig]:
    """Four curves from the canvas center, one per heading."""
    return [
        InstanceConfig(start=config.center, direction=direction, gradient=gradient)
        for direction, gradient in zip(UNIT_DIRECTIONS, DEFAULT_PALETTES)
    ]


def staggered_instances(
    config: SceneConfig, stagger: int, duration: int = 0
) -> list[InstanceConfig]:
    """Default curves, each starting ``stagger`` sub-steps after the previous one."""
    if stagger < 0:
        raise ValueError("stagger must be non-negative")
    return [
        InstanceConfig(
            start=inst.start,
            direction=inst.direction,
            gradient=inst.gradient,
            countdown=i * stagger,
            duration=duration,
        )
        for i, inst in enumerate(default_instances(config))
    ]


@dataclass
class Scene:
    config: SceneConfig
    framebuffer: Framebuffer
    compositor: Compositor
    engine: Engine
    instances: list[CurveInstance] = field(default_factory=list)


def build_scene(
    config: SceneConfig | None = None,
    instances: Sequence[InstanceConfig] | None = None,
    on_reset: ResetCallback | None = None,
) -> Scene:
    """Wire a framebuffer, compositor and engine for ``config``."""
    if config is None:
        config = SceneConfig()
    if instances is None:
        instances = default_instances(config)

    framebuffer = Framebuffer(config.width, config.height)
    compositor = Compositor(
        framebuffer,
        segment_length=config.segment_length,
        pack=packer_for(config.pixel_format),
        on_reset=on_reset,
    )
    built = [inst.build() for inst in instances]
    for instance in built:
        compositor.add(instance)

    engine = Engine(compositor, fps=config.fps)
    engine.add_system(make_compositor_system(config.batch_size))
    return Scene(
        config=config,
        framebuffer=framebuffer,
        compositor=compositor,
        engine=engine,
        instances=built,
    )
