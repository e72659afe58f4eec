"""Frame rendering from engine events."""

import numpy as np

from breakout.core.bricks import BrickState
from breakout.core.engine import BreakoutEngine
from breakout.core.events import EventBus, EventBusListener
from breakout.core.geometry import Rect
from breakout.graphics.primitives import draw_circle, draw_rect, new_buffer
from breakout.graphics.renderer import FrameRenderer, Palette


def test_draw_rect_clamps_to_buffer():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, Rect(-5.0, 8.0, 10.0, 10.0), (255, 0, 0))
    assert tuple(buffer[9, 0]) == (255, 0, 0)
    assert tuple(buffer[9, 5]) == (0, 0, 0)
    assert tuple(buffer[7, 0]) == (0, 0, 0)


def test_draw_rect_outline():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, Rect(2.0, 2.0, 5.0, 5.0), (0, 255, 0), filled=False)
    assert tuple(buffer[2, 4]) == (0, 255, 0)
    assert tuple(buffer[4, 4]) == (0, 0, 0)


def test_draw_circle():
    buffer = new_buffer(20, 20)
    draw_circle(buffer, 10.0, 10.0, 3.0, (1, 2, 3))
    assert tuple(buffer[10, 10]) == (1, 2, 3)
    assert tuple(buffer[0, 0]) == (0, 0, 0)


def make_rendered_engine():
    bus = EventBus()
    engine = BreakoutEngine(100.0, 100.0, listener=EventBusListener(bus))
    renderer = FrameRenderer(100, 100)
    renderer.attach(bus)
    renderer.set_paddle(engine.paddle.rect)
    return engine, renderer


def test_frame_shows_ball_bricks_and_paddle():
    engine, renderer = make_rendered_engine()
    engine.step()
    frame = renderer.render()
    palette = Palette()

    assert frame.shape == (100, 100, 3)
    assert frame.dtype == np.uint8
    # Ball reported at its pre-move position (50, 50)
    assert tuple(frame[50, 50]) == palette.ball
    # Paddle spans x 0..25 at the bottom
    assert tuple(frame[97, 10]) == palette.paddle
    # Far corner brick is untouched
    assert tuple(frame[45, 90]) == palette.brick_new
    assert len(renderer.scene.bricks) == 16


def test_destroyed_bricks_are_not_drawn():
    engine, renderer = make_rendered_engine()
    for brick in engine.bricks:
        brick.state = BrickState.DESTROYED
    engine.ball.place(50.0, 80.0, 1.0, 1.0)
    engine.step()
    frame = renderer.render()
    assert tuple(frame[5, 5]) == Palette().background


def test_status_text_tracks_lives_and_outcome():
    engine, renderer = make_rendered_engine()
    assert renderer.status_text() == "LIVES -"
    engine.reset_game()
    assert renderer.status_text() == "LIVES 5"

    for _ in range(5):
        engine.ball.place(90.0, 91.0, 1.0, 1.0)
        engine.step()
    assert renderer.status_text().startswith("GAME OVER")

    engine.reset_game()
    assert renderer.status_text() == "LIVES 5"


def test_detach_stops_updates():
    engine, renderer = make_rendered_engine()
    renderer.detach()
    engine.step()
    assert renderer.scene.ball is None
