"""Engine - frame loop, pacing, pause and presentation hooks."""

import logging
import time
from typing import Callable

from dragon_curve.compositor import Compositor
from dragon_curve.types import FrameContext, System

logger = logging.getLogger(__name__)

Hook = Callable[[Compositor, FrameContext], None]


class Engine:
    """Drives a compositor one presented frame at a time.

    The frame counter only advances on frames that run the systems, so a
    paused engine keeps presenting the same frame number.
    """

    def __init__(self, compositor: Compositor, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._compositor = compositor
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._present_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._paused: bool = False

    @property
    def compositor(self) -> Compositor:
        return self._compositor

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def paused(self) -> bool:
        return self._paused

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_present(self, hook: Hook) -> None:
        self._present_hooks.append(hook)

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> bool:
        self._paused = not self._paused
        return self._paused

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            request_stop=self._request_stop,
        )

    def _run_hooks(self, hooks: list[Hook]) -> None:
        ctx = self._context()
        for hook in hooks:
            hook(self._compositor, ctx)

    def _frame(self) -> None:
        if not self._paused:
            self._frame_number += 1
            ctx = self._context()
            for system in self._systems:
                system(self._compositor, ctx)
                if self._stop_requested:
                    break
        self._run_hooks(self._present_hooks)

    def on_frame(self) -> None:
        """Host callback: draw one frame's batch, then present."""
        self._stop_requested = False
        self._frame()

    step = on_frame

    def run(self, n: int) -> None:
        self._stop_requested = False
        logger.debug("engine starting for %d frames", n)
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._frame()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)
        logger.debug("engine stopped at frame %d", self._frame_number)

    def run_forever(self) -> None:
        self._stop_requested = False
        logger.debug("engine starting at %d fps", self._fps)
        self._run_hooks(self._start_hooks)

        while not self._stop_requested:
            start = time.monotonic()
            self._frame()
            if self._stop_requested:
                break
            sleep_time = self._dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._run_hooks(self._stop_hooks)
        logger.debug("engine stopped at frame %d", self._frame_number)

    def restart(self) -> None:
        """Rewind every curve and the frame counter; the sink is left untouched."""
        self._compositor.restart()
        self._frame_number = 0
