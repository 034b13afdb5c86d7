"""Compositor - advances every curve instance and writes into the sink."""
from __future__ import annotations

import logging
from typing import Callable, Iterator

from dragon_curve.components import CurveInstance
from dragon_curve.pixels import PixelPacker, PixelSink, pack_rgba
from dragon_curve.walker import step_walker

logger = logging.getLogger(__name__)

ResetCallback = Callable[[int, CurveInstance], None]


class Compositor:
    def __init__(
        self,
        sink: PixelSink,
        segment_length: int = 1,
        pack: PixelPacker = pack_rgba,
        on_reset: ResetCallback | None = None,
    ) -> None:
        if segment_length <= 0:
            raise ValueError("segment_length must be positive")
        self._sink = sink
        self._segment_length = segment_length
        self._pack = pack
        self._on_reset = on_reset
        self._instances: list[CurveInstance] = []

    @property
    def sink(self) -> PixelSink:
        return self._sink

    @property
    def segment_length(self) -> int:
        return self._segment_length

    def add(self, instance: CurveInstance) -> int:
        self._instances.append(instance)
        return len(self._instances) - 1

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[CurveInstance]:
        return iter(self._instances)

    def __getitem__(self, index: int) -> CurveInstance:
        return self._instances[index]

    def step_instance(self, index: int) -> bool:
        """Run one sub-step of instance ``index``. Returns True if a pixel was written."""
        instance = self._instances[index]
        if instance.countdown > 0:
            instance.countdown -= 1
            return False

        if instance.expired:
            instance.reset()
            logger.debug(
                "curve %d reset after %d pixels, now heading %s",
                index, instance.duration, instance.start_direction,
            )
            if self._on_reset is not None:
                self._on_reset(index, instance)
            return False

        width, height = self._sink.width, self._sink.height
        plotted = step_walker(
            instance.cursor,
            instance.turns,
            instance.gradient,
            self._segment_length,
            width,
            height,
        )
        if plotted is None:
            return False
        (x, y), color = plotted
        self._sink.write_pixel(x + y * width, self._pack(color))
        return True

    def tick(self, batch_size: int) -> int:
        """Advance every instance ``batch_size`` sub-steps; return pixels written.

        Instances are interleaved per sub-step in insertion order, so where
        curves overlap the later instance's pixel wins.
        """
        if batch_size < 0:
            raise ValueError("batch_size must be non-negative")
        written = 0
        count = len(self._instances)
        for _ in range(batch_size):
            for index in range(count):
                if self.step_instance(index):
                    written += 1
        return written

    def restart(self) -> None:
        for instance in self._instances:
            instance.restart()
