"""Tests for the frame driver: lifecycle, pausing, presenting and pacing."""

import time

import pytest
from dragon_curve.compositor import Compositor
from dragon_curve.components import CurveInstance
from dragon_curve.engine import Engine
from dragon_curve.gradient import solid_gradient
from dragon_curve.pixels import Framebuffer
from dragon_curve.systems import make_compositor_system


def make_engine(fps=60):
    fb = Framebuffer(64, 64)
    comp = Compositor(fb)
    comp.add(CurveInstance(start=(32, 32), start_direction=(1, 0),
                           gradient=solid_gradient((1.0, 1.0, 1.0))))
    return Engine(comp, fps=fps)


# --- Initialization ---

def test_engine_init_defaults():
    engine = make_engine()
    assert engine.fps == 60
    assert engine.frame_number == 0
    assert isinstance(engine.compositor, Compositor)
    assert not engine.paused


@pytest.mark.parametrize("fps", [0, -1])
def test_engine_rejects_non_positive_fps(fps):
    with pytest.raises(ValueError):
        make_engine(fps=fps)


def test_context_carries_frame_and_dt():
    engine = make_engine(fps=20)
    seen = []
    engine.add_system(lambda comp, ctx: seen.append(ctx))
    engine.on_frame()
    engine.on_frame()
    assert [c.frame_number for c in seen] == [1, 2]
    assert abs(seen[0].dt - 0.05) < 1e-9
    with pytest.raises(AttributeError):
        seen[0].frame_number = 99  # type: ignore[misc]


# --- Systems ---

def test_systems_run_in_order():
    engine = make_engine()
    order = []
    engine.add_system(lambda comp, ctx: order.append("first"))
    engine.add_system(lambda comp, ctx: order.append("second"))
    engine.step()
    assert order == ["first", "second"]


def test_compositor_system_draws_batch():
    engine = make_engine()
    drawn = []
    engine.add_system(make_compositor_system(25, on_drawn=lambda ctx, n: drawn.append(n)))
    engine.on_frame()
    assert engine.compositor[0].cursor.step == 25
    assert drawn == [25]


def test_compositor_system_rejects_bad_batch():
    with pytest.raises(ValueError):
        make_compositor_system(0)


# --- on_frame / present ---

def test_present_runs_after_systems():
    engine = make_engine()
    events = []
    engine.add_system(lambda comp, ctx: events.append(f"tick-{ctx.frame_number}"))
    engine.on_present(lambda comp, ctx: events.append(f"present-{ctx.frame_number}"))
    engine.on_frame()
    engine.on_frame()
    assert events == ["tick-1", "present-1", "tick-2", "present-2"]


def test_step_does_not_call_lifecycle_hooks():
    engine = make_engine()
    hooks = []
    engine.on_start(lambda c, x: hooks.append("start"))
    engine.on_stop(lambda c, x: hooks.append("stop"))
    engine.step()
    assert hooks == []


# --- pause / resume ---

def test_paused_frame_presents_without_drawing():
    engine = make_engine()
    events = []
    engine.add_system(make_compositor_system(10))
    engine.on_present(lambda comp, ctx: events.append(ctx.frame_number))
    engine.pause()
    engine.on_frame()
    assert engine.compositor[0].cursor.step == 0
    assert engine.frame_number == 0
    assert events == [0]

    engine.resume()
    engine.on_frame()
    assert engine.compositor[0].cursor.step == 10
    assert events == [0, 1]


def test_toggle_pause():
    engine = make_engine()
    assert engine.toggle_pause() is True
    assert engine.paused
    assert engine.toggle_pause() is False


# --- run(n) ---

def test_run_calls_start_and_stop_hooks():
    engine = make_engine()
    events = []
    engine.on_start(lambda c, x: events.append("start"))
    engine.on_stop(lambda c, x: events.append("stop"))
    engine.add_system(lambda c, x: events.append(f"tick-{x.frame_number}"))
    engine.run(2)
    assert events == ["start", "tick-1", "tick-2", "stop"]


def test_request_stop_from_system():
    engine = make_engine()
    frames = []

    def sys(comp, ctx):
        frames.append(ctx.frame_number)
        if ctx.frame_number == 3:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run(10)
    assert frames == [1, 2, 3]


def test_request_stop_skips_later_systems():
    engine = make_engine()
    calls = []
    engine.add_system(lambda c, x: (calls.append("a"), x.request_stop()))
    engine.add_system(lambda c, x: calls.append("b"))
    engine.run(5)
    assert calls == ["a"]


def test_restart_rewinds_curves_and_frames():
    engine = make_engine()
    engine.add_system(make_compositor_system(10))
    engine.run(3)
    engine.restart()
    assert engine.frame_number == 0
    assert engine.compositor[0].cursor.step == 0
    assert engine.compositor[0].cursor.position == (32, 32)


# --- run_forever ---

def test_run_forever_stops_on_request():
    engine = make_engine(fps=1000)
    frames = []

    def sys(comp, ctx):
        frames.append(ctx.frame_number)
        if ctx.frame_number >= 5:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run_forever()
    assert frames == [1, 2, 3, 4, 5]


def test_run_forever_pacing():
    engine = make_engine(fps=100)
    start_time = time.monotonic()
    count = [0]

    def sys(comp, ctx):
        count[0] += 1
        if count[0] >= 5:
            ctx.request_stop()

    engine.add_system(sys)
    engine.run_forever()
    # 5 frames at 100 fps sleep through at least 4 frame intervals
    assert time.monotonic() - start_time >= 0.03
