"""
Listener interface the engine reports state changes to.

All callbacks are invoked synchronously from inside engine calls.

Re-entrancy contract:
    ``ball_missed_paddle`` is expected to re-serve the ball by calling
    ``engine.reset_ball()`` from inside the callback. This is supported:
    the engine has finished the paddle check when the callback runs.
    Other engine mutations from inside callbacks are not supported.
"""

from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from .bricks import Brick


@runtime_checkable
class GameStateListener(Protocol):
    """Observer of engine state changes."""

    def ball_moved(self, x: float, y: float, radius: float) -> None:
        """Ball position at the start of a tick, before collisions."""
        ...

    def paddle_moved(self, x: float, y: float, w: float, h: float) -> None:
        """A paddle position update was accepted."""
        ...

    def block_updated(self, brick: "Brick") -> None:
        """A brick was checked this tick (its state may be unchanged)."""
        ...

    def ball_missed_paddle(self) -> None:
        """Non-fatal miss; call ``engine.reset_ball()`` to re-serve."""
        ...

    def number_of_lives_changed(self, lives: int) -> None:
        ...

    def game_lose(self) -> None:
        """Lives reached zero; the engine is paused."""
        ...

    def game_win(self) -> None:
        """Every brick was destroyed; the engine is paused."""
        ...


class NullListener:
    """Listener that ignores every notification."""

    def ball_moved(self, x: float, y: float, radius: float) -> None:
        pass

    def paddle_moved(self, x: float, y: float, w: float, h: float) -> None:
        pass

    def block_updated(self, brick: "Brick") -> None:
        pass

    def ball_missed_paddle(self) -> None:
        pass

    def number_of_lives_changed(self, lives: int) -> None:
        pass

    def game_lose(self) -> None:
        pass

    def game_win(self) -> None:
        pass
