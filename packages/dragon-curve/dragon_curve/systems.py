"""System factories for the frame driver."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from dragon_curve.compositor import Compositor
    from dragon_curve.types import FrameContext


def make_compositor_system(
    batch_size: int,
    on_drawn: Callable[[FrameContext, int], None] | None = None,
) -> Callable[[Compositor, FrameContext], None]:
    """Return a system that advances the compositor ``batch_size`` sub-steps per frame."""
    if batch_size <= 0:
        raise ValueError("batch_size must be positive")

    def compositor_system(compositor: Compositor, ctx: FrameContext) -> None:
        written = compositor.tick(batch_size)
        if on_drawn is not None:
            on_drawn(ctx, written)

    return compositor_system
