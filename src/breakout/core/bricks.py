"""
Brick grid: per-brick collision and the NEW -> HIT -> DESTROYED lifecycle.

Bricks are checked in row-major order, the same order they are allocated
in. A brick needs two hits to be destroyed. Destroyed bricks stay in the
grid (so renderers keep a stable index) but take no part in collisions.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator
import logging

from .ball import Ball
from .geometry import Rect, spans_overlap

logger = logging.getLogger(__name__)


class BrickState(Enum):
    """Brick lifecycle."""
    NEW = auto()
    HIT = auto()
    DESTROYED = auto()


@dataclass
class Brick:
    """A single brick and its hit state."""
    x: float
    y: float
    width: float
    height: float
    state: BrickState = BrickState.NEW

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def destroyed(self) -> bool:
        return self.state is BrickState.DESTROYED

    def check_hit(self, ball: Ball, on_destroyed: Callable[["Brick"], None]) -> None:
        """
        Test the ball's pending displacement against this brick.

        The horizontal and vertical tests are independent; both may bounce
        the ball in the same tick.

        Args:
            ball: The ball, before its next displacement is applied
            on_destroyed: Called when a hit from this check destroys the brick
        """
        if self.destroyed:
            return

        box = ball.rect

        # Horizontal: leading edge is the ball centre shifted by vx
        if (spans_overlap(box.x + ball.vx, box.x + ball.radius + ball.vx, self.x, self.x + self.width)
                and spans_overlap(box.y, box.bottom, self.y, self.y + self.height)):
            ball.bounce_horizontal()
            if self.hit():
                on_destroyed(self)

        if (spans_overlap(box.x, box.right, self.x, self.x + self.width)
                and spans_overlap(box.y + ball.vy, box.bottom + ball.vy, self.y, self.y + self.height)):
            ball.bounce_vertical()
            if self.hit():
                on_destroyed(self)

    def hit(self) -> bool:
        """
        Register a hit.

        Returns:
            True if this hit destroyed the brick
        """
        if self.state is BrickState.NEW:
            self.state = BrickState.HIT
        elif self.state is BrickState.HIT:
            self.state = BrickState.DESTROYED
            return True
        return False

    def reset(self) -> None:
        self.state = BrickState.NEW

    def __str__(self) -> str:
        return f"Brick(x={self.x}, y={self.y}, w={self.width}, h={self.height}, state={self.state.name})"


class BrickGrid:
    """
    Fixed grid of bricks covering the top half of the canvas width.

    Each brick is ``canvas_width / columns`` wide and
    ``(canvas_width / 2) / rows`` tall.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        canvas_width: float,
        on_cleared: Callable[[], None],
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.brick_width = canvas_width / columns
        self.brick_height = (canvas_width / 2) / rows
        self._on_cleared = on_cleared

        self._bricks: list[Brick] = [
            Brick(
                (i % columns) * self.brick_width,
                (i // columns) * self.brick_height,
                self.brick_width,
                self.brick_height,
            )
            for i in range(columns * rows)
        ]
        self._active = len(self._bricks)

    def __iter__(self) -> Iterator[Brick]:
        return iter(self._bricks)

    def __len__(self) -> int:
        return len(self._bricks)

    def __getitem__(self, index: int) -> Brick:
        return self._bricks[index]

    @property
    def active_count(self) -> int:
        """Number of bricks not yet destroyed."""
        return self._active

    def check_hits(self, ball: Ball, on_checked: Callable[[Brick], None]) -> None:
        """Check every brick in grid order, reporting each one after its check."""
        for brick in self._bricks:
            brick.check_hit(ball, self._brick_destroyed)
            on_checked(brick)

    def reset(self) -> None:
        """Set every brick back to NEW."""
        for brick in self._bricks:
            brick.reset()
        self._active = len(self._bricks)

    def _brick_destroyed(self, brick: Brick) -> None:
        self._active -= 1
        logger.debug(f"Destroyed {brick}, {self._active} left")
        if self._active == 0:
            self._on_cleared()
