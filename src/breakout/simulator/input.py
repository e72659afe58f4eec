"""
Translation of desktop input into paddle coordinates.

The engine only accepts absolute paddle positions, so pointer, keyboard
and autoplay input are all reduced to a target ``x`` here. Out-of-range
targets are passed through; the engine ignores them.
"""

from ..core.engine import BreakoutEngine


class PaddleController:
    """Computes the next paddle ``x`` from whichever input is active."""

    def __init__(self, engine: BreakoutEngine, speed: float = 6.0, autoplay: bool = False) -> None:
        self.engine = engine
        self.speed = speed
        self.autoplay = autoplay
        self._direction = 0
        self._pointer_x: float | None = None

    def press(self, direction: int) -> None:
        """Start moving left (-1) or right (+1)."""
        self._direction = direction
        self._pointer_x = None

    def release(self, direction: int) -> None:
        if self._direction == direction:
            self._direction = 0

    def point(self, x: float) -> None:
        """Follow a pointer at canvas coordinate ``x``."""
        self._pointer_x = x

    def toggle_autoplay(self) -> bool:
        self.autoplay = not self.autoplay
        return self.autoplay

    def target(self) -> float | None:
        """Paddle ``x`` to request this frame, or None to leave it."""
        paddle = self.engine.paddle
        if self.autoplay:
            return self.engine.ball.x - paddle.width / 2
        if self._pointer_x is not None:
            return self._pointer_x - paddle.width / 2
        if self._direction:
            return paddle.x + self._direction * self.speed
        return None

    def apply(self) -> None:
        x = self.target()
        if x is not None:
            self.engine.update_paddle_location(x)
