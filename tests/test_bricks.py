"""Brick collision tests and lifecycle."""

from breakout.core.ball import Ball
from breakout.core.bricks import Brick, BrickGrid, BrickState


def test_hit_lifecycle():
    brick = Brick(0.0, 0.0, 10.0, 5.0)
    assert brick.state is BrickState.NEW
    assert brick.hit() is False
    assert brick.state is BrickState.HIT
    assert brick.hit() is True
    assert brick.state is BrickState.DESTROYED
    assert brick.hit() is False
    assert brick.state is BrickState.DESTROYED


def test_destroyed_brick_ignores_ball():
    destroyed = []
    brick = Brick(10.0, 10.0, 10.0, 10.0, BrickState.DESTROYED)
    ball = Ball(15.0, 15.0, 1.0, 1.0, 2.0)
    brick.check_hit(ball, destroyed.append)
    assert (ball.vx, ball.vy) == (1.0, 1.0)
    assert destroyed == []
    assert brick.state is BrickState.DESTROYED


def test_horizontal_hit_from_left():
    brick = Brick(10.0, 10.0, 10.0, 10.0)
    ball = Ball(7.0, 15.0, 4.0, 0.0, 2.0)
    brick.check_hit(ball, lambda b: None)
    assert ball.vx == -4.0
    assert ball.vy == 0.0
    assert brick.state is BrickState.HIT


def test_horizontal_leading_edge_is_ball_centre():
    # Box edge would reach the brick (5 + 4 + 2 > 10), centre does not (5 + 2 + 2)
    brick = Brick(10.0, 10.0, 10.0, 10.0)
    ball = Ball(7.0, 15.0, 2.0, 0.0, 2.0)
    brick.check_hit(ball, lambda b: None)
    assert ball.vx == 2.0
    assert brick.state is BrickState.NEW


def test_vertical_hit_from_below():
    brick = Brick(10.0, 10.0, 10.0, 10.0)
    ball = Ball(15.0, 23.0, 0.0, -2.0, 2.0)
    brick.check_hit(ball, lambda b: None)
    assert ball.vy == 2.0
    assert ball.vx == 0.0
    assert brick.state is BrickState.HIT


def test_both_tests_in_one_check_destroy_brick():
    destroyed = []
    brick = Brick(10.0, 10.0, 10.0, 10.0)
    ball = Ball(15.0, 15.0, 1.0, 1.0, 2.0)
    brick.check_hit(ball, destroyed.append)
    assert (ball.vx, ball.vy) == (-1.0, -1.0)
    assert brick.state is BrickState.DESTROYED
    assert destroyed == [brick]


def test_miss_leaves_brick_untouched():
    brick = Brick(10.0, 10.0, 10.0, 10.0)
    ball = Ball(50.0, 50.0, 1.0, 1.0, 2.0)
    brick.check_hit(ball, lambda b: None)
    assert brick.state is BrickState.NEW
    assert (ball.vx, ball.vy) == (1.0, 1.0)


def test_grid_layout_is_row_major():
    grid = BrickGrid(4, 2, 100.0, on_cleared=lambda: None)
    assert len(grid) == 8
    assert grid.brick_width == 25.0
    assert grid.brick_height == 25.0
    assert [(b.x, b.y) for b in grid][:5] == [
        (0.0, 0.0), (25.0, 0.0), (50.0, 0.0), (75.0, 0.0), (0.0, 25.0),
    ]
    assert (grid[5].x, grid[5].y) == (25.0, 25.0)
    assert grid.active_count == 8


def test_grid_reports_every_brick_in_order():
    grid = BrickGrid(3, 3, 90.0, on_cleared=lambda: None)
    seen = []
    ball = Ball(500.0, 500.0, 1.0, 1.0, 1.0)
    grid.check_hits(ball, seen.append)
    assert seen == list(grid)


def test_grid_clear_and_reset():
    cleared = []
    grid = BrickGrid(1, 1, 10.0, on_cleared=lambda: cleared.append(True))
    ball = Ball(5.0, 2.5, 1.0, 1.0, 1.0)

    grid.check_hits(ball, lambda b: None)

    assert grid[0].state is BrickState.DESTROYED
    assert grid.active_count == 0
    assert cleared == [True]

    grid.reset()
    assert grid[0].state is BrickState.NEW
    assert grid.active_count == 1


def test_brick_str_names_state():
    assert "state=HIT" in str(Brick(1.0, 2.0, 3.0, 4.0, BrickState.HIT))
