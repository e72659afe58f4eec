"""
Breakout simulation engine.

Owns the ball, the brick grid and the session state, and advances them one
fixed tick per ``step()`` call. All state changes are reported to a
``GameStateListener``. The engine never blocks and never raises during
play: out-of-range paddle positions are ignored, and winning or losing is
a state transition reported to the listener.
"""

from typing import TYPE_CHECKING
import logging

from .ball import Arena, Ball
from .bricks import BrickGrid
from .listener import GameStateListener
from .session import GameOutcome, Paddle, Session

if TYPE_CHECKING:
    from ..config.settings import EngineSettings

logger = logging.getLogger(__name__)


# Both velocity components on (re)serve
INITIAL_VELOCITY = -1.0


class BreakoutEngine:
    """
    Fixed-step brick breaker simulation.

    Usage:
        engine = BreakoutEngine(400, 600, listener=listener)
        while engine.running:
            engine.update_paddle_location(pointer_x)
            engine.step()
    """

    def __init__(
        self,
        canvas_width: float,
        canvas_height: float,
        ball_radius: float | None = None,
        paddle_width: float | None = None,
        paddle_height: float | None = None,
        columns: int = 4,
        rows: int = 4,
        lives: int = 5,
        *,
        listener: GameStateListener,
    ) -> None:
        self._arena = Arena(canvas_width, canvas_height)
        self._listener = listener

        radius = ball_radius if ball_radius is not None else canvas_width / 40
        paddle_width = paddle_width if paddle_width is not None else canvas_width / 4
        paddle_height = paddle_height if paddle_height is not None else canvas_height / 20

        self._ball = Ball(
            canvas_width / 2,
            canvas_height / 2,
            INITIAL_VELOCITY,
            INITIAL_VELOCITY,
            radius,
        )
        self._grid = BrickGrid(columns, rows, canvas_width, on_cleared=self._handle_win)
        self._session = Session(
            paddle=Paddle(0.0, canvas_height - paddle_height, paddle_width, paddle_height),
            starting_lives=lives,
        )

        logger.info(
            f"BreakoutEngine created: canvas {canvas_width}x{canvas_height}, "
            f"{columns}x{rows} bricks, {lives} lives"
        )

    @classmethod
    def from_settings(
        cls,
        settings: "EngineSettings",
        listener: GameStateListener,
    ) -> "BreakoutEngine":
        """Build an engine from validated settings."""
        return cls(
            settings.canvas_width,
            settings.canvas_height,
            ball_radius=settings.ball_radius,
            paddle_width=settings.paddle_width,
            paddle_height=settings.paddle_height,
            columns=settings.columns,
            rows=settings.rows,
            lives=settings.lives,
            listener=listener,
        )

    # Read-only views

    @property
    def canvas_width(self) -> float:
        return self._arena.width

    @property
    def canvas_height(self) -> float:
        return self._arena.height

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def paddle(self) -> Paddle:
        return self._session.paddle

    @property
    def bricks(self) -> BrickGrid:
        return self._grid

    @property
    def lives(self) -> int:
        return self._session.lives

    @property
    def active_bricks(self) -> int:
        return self._grid.active_count

    @property
    def outcome(self) -> GameOutcome:
        return self._session.outcome

    @property
    def running(self) -> bool:
        return self._session.running

    @running.setter
    def running(self, value: bool) -> None:
        self._session.running = value

    # Public operations

    def step(self) -> None:
        """Advance the simulation by one tick. No-op while paused."""
        if not self._session.running:
            return

        self._listener.ball_moved(self._ball.x, self._ball.y, self._ball.radius)
        self._ball.step(self._arena, self._session.paddle, self._handle_ball_missed_paddle)
        self._grid.check_hits(self._ball, self._listener.block_updated)

    def update_paddle_location(self, x: float) -> None:
        """
        Move the paddle to ``x``.

        Ignored while paused or unless the paddle stays fully on-screen
        (``0 < x < canvas_width - paddle_width``).
        """
        if not self._session.running:
            return
        paddle = self._session.paddle
        if not (0.0 < x < self._arena.width - paddle.width):
            return

        paddle.x = x
        self._listener.paddle_moved(x, paddle.y, paddle.width, paddle.height)

    def reset_game(self) -> None:
        """Re-serve the ball, restore lives and rebuild every brick.

        The running flag is left as it is.
        """
        self.reset_ball()
        self._session.reset_lives()
        self._listener.number_of_lives_changed(self._session.lives)
        self._grid.reset()
        logger.info("Game reset")

    def reset_ball(self) -> None:
        """Serve the ball from above the paddle centre-screen."""
        paddle_height = self._session.paddle.height
        self._ball.place(
            self._arena.width / 2,
            self._arena.height - paddle_height - paddle_height / 2,
            INITIAL_VELOCITY,
            INITIAL_VELOCITY,
        )
        logger.debug("Ball reset")

    def resume(self) -> None:
        self._session.running = True

    def pause(self) -> None:
        self._session.running = False

    # Transitions

    def _handle_ball_missed_paddle(self) -> None:
        lives = self._session.lose_life()
        logger.debug(f"Ball missed paddle, {lives} lives left")
        self._listener.number_of_lives_changed(lives)
        if lives == 0:
            self._session.finish(GameOutcome.LOST)
            self._listener.game_lose()
        else:
            self._listener.ball_missed_paddle()

    def _handle_win(self) -> None:
        self._session.finish(GameOutcome.WON)
        self._listener.game_win()

    def __repr__(self) -> str:
        return (
            f"BreakoutEngine(canvas={self.canvas_width}x{self.canvas_height}, "
            f"lives={self.lives}, bricks={self.active_bricks}/{len(self._grid)}, "
            f"running={self.running})"
        )
