"""
Ball model: motion, wall bounces and paddle contact.

The ball advances by its full velocity every tick. Wall checks use the
position after the move, the paddle check looks one tick ahead along y.
Every check runs every tick, so a single tick may bounce the ball more
than once (e.g. in a corner).
"""

from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from .geometry import Rect, strictly_between

if TYPE_CHECKING:
    from .session import Paddle


# Paddle-relative offset beyond which a hit skews the ball
SKEW_THRESHOLD = 0.5


@dataclass(frozen=True)
class Arena:
    """Canvas extents the ball bounces inside."""
    width: float
    height: float


@dataclass
class Ball:
    """
    The ball.

    Attributes:
        x: Centre x coordinate
        y: Centre y coordinate
        vx: Horizontal displacement per tick
        vy: Vertical displacement per tick
        radius: Fixed at construction
    """
    x: float
    y: float
    vx: float
    vy: float
    radius: float

    @property
    def width(self) -> float:
        return self.radius * 2

    @property
    def height(self) -> float:
        return self.radius * 2

    @property
    def rect(self) -> Rect:
        """Bounding box snapshot."""
        return Rect(self.x - self.radius, self.y - self.radius, self.width, self.height)

    def place(self, x: float, y: float, vx: float, vy: float) -> None:
        """Reposition the ball and give it a new velocity."""
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy

    def bounce_horizontal(self) -> None:
        self.vx = -self.vx

    def bounce_vertical(self) -> None:
        self.vy = -self.vy

    def step(self, arena: Arena, paddle: "Paddle", on_miss: Callable[[], None]) -> None:
        """
        Advance the ball one tick.

        Args:
            arena: Canvas extents
            paddle: Current paddle placement
            on_miss: Called synchronously when the ball falls past the paddle.
                The top-wall check of this tick runs after it returns.
        """
        self._move()
        self._check_side_walls(arena)
        self._check_paddle(arena, paddle, on_miss)
        self._check_top_wall()

    def skew(self, paddle: "Paddle") -> None:
        """Replace vx with the paddle-relative offset when hitting near an edge."""
        half_paddle = paddle.width / 2
        center = paddle.x + half_paddle
        diff = self.x - center
        percentage = diff / half_paddle
        if percentage > SKEW_THRESHOLD or percentage < -SKEW_THRESHOLD:
            self.vx = percentage

    def _move(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def _check_side_walls(self, arena: Arena) -> None:
        if self.x >= arena.width - self.radius or self.x <= self.radius:
            self.bounce_horizontal()

    def _check_paddle(self, arena: Arena, paddle: "Paddle", on_miss: Callable[[], None]) -> None:
        if self.y + self.vy >= arena.height - self.radius - paddle.height:
            if strictly_between(self.x, paddle.left, paddle.right):
                self.skew(paddle)
                self.bounce_vertical()
            else:
                on_miss()

    def _check_top_wall(self) -> None:
        if self.y <= self.radius:
            self.bounce_vertical()
