"""End-to-end scene tests against an independent doubling-based reference."""

from dragon_curve.config import SceneConfig, build_scene, default_instances

LEFT, RIGHT = "L", "R"


def reference_turns(count):
    flip = {LEFT: RIGHT, RIGHT: LEFT}
    seq = [RIGHT]
    while len(seq) < count:
        seq = seq + [RIGHT] + [flip[t] for t in reversed(seq)]
    return seq[:count]


def reference_points(start, direction, steps, width, height):
    """Trace unit segments with complex arithmetic; y grows downward."""
    turns = reference_turns(steps)
    pos = complex(*start)
    heading = complex(*direction)
    points = set()
    for i in range(steps):
        x, y = int(pos.real), int(pos.imag)
        if 0 <= x < width and 0 <= y < height:
            points.add((x, y))
        pos += heading
        heading *= -1j if turns[i] == LEFT else 1j
    return points


def touched(framebuffer):
    data = framebuffer.data
    return {
        (i % framebuffer.width, i // framebuffer.width)
        for i in range(framebuffer.width * framebuffer.height)
        if data[i * 4 + 3]
    }


def test_four_curves_match_reference():
    config = SceneConfig(batch_size=1000)
    scene = build_scene(config)
    for _ in range(4):
        scene.engine.on_frame()

    expected = set()
    for inst in default_instances(config):
        expected |= reference_points(inst.start, inst.direction, 4000,
                                     config.width, config.height)

    assert all(i.cursor.step == 4000 for i in scene.instances)
    assert touched(scene.framebuffer) == expected


def test_clipped_canvas_matches_reference():
    """Curves that leave a small canvas keep growing off-screen."""
    config = SceneConfig(width=50, height=40, batch_size=500)
    scene = build_scene(config)
    scene.engine.run(6)

    expected = set()
    for inst in default_instances(config):
        expected |= reference_points(inst.start, inst.direction, 3000,
                                     config.width, config.height)
    assert touched(scene.framebuffer) == expected


def test_runs_are_deterministic():
    config = SceneConfig(width=200, height=150, batch_size=300)
    a = build_scene(config)
    b = build_scene(config)
    a.engine.run(3)
    b.engine.run(3)
    assert a.framebuffer.data == b.framebuffer.data
