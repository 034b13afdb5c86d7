"""dragon-curve - Incremental dragon-curve rasterizer driven one frame at a time."""

from dragon_curve.components import CurveInstance
from dragon_curve.compositor import Compositor
from dragon_curve.config import (
    InstanceConfig,
    Scene,
    SceneConfig,
    build_scene,
    default_instances,
    staggered_instances,
)
from dragon_curve.engine import Engine
from dragon_curve.gradient import (
    GradientStop,
    GradientTable,
    rainbow_gradient,
    solid_gradient,
    two_color_gradient,
    validate_stops,
)
from dragon_curve.oracle import TurnState, advance, turn_sequence
from dragon_curve.pixels import (
    PIXEL_FORMATS,
    Framebuffer,
    PixelSink,
    draw_test_card,
    pack_bgra,
    pack_rgba,
)
from dragon_curve.systems import make_compositor_system
from dragon_curve.types import (
    Color,
    ContractViolation,
    FrameContext,
    InvalidDepthError,
    Turn,
    Vec2,
)
from dragon_curve.walker import Cursor, depth_at, rotate, step_walker

__all__ = [
    "Engine",
    "FrameContext",
    "Compositor",
    "CurveInstance",
    "Cursor",
    "TurnState",
    "Turn",
    "advance",
    "turn_sequence",
    "rotate",
    "depth_at",
    "step_walker",
    "GradientStop",
    "GradientTable",
    "validate_stops",
    "two_color_gradient",
    "solid_gradient",
    "rainbow_gradient",
    "Framebuffer",
    "PixelSink",
    "PIXEL_FORMATS",
    "pack_rgba",
    "pack_bgra",
    "draw_test_card",
    "make_compositor_system",
    "SceneConfig",
    "InstanceConfig",
    "Scene",
    "build_scene",
    "default_instances",
    "staggered_instances",
    "Color",
    "Vec2",
    "ContractViolation",
    "InvalidDepthError",
]
