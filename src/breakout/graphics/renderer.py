"""
Frame renderer fed by engine events.

The renderer keeps its own snapshot of what the engine last reported and
draws it into a numpy RGB buffer on demand, so drawing never touches
engine state.
"""

from dataclasses import dataclass, field
import logging

from ..core.bricks import BrickState
from ..core.events import Event, EventBus, EventType
from ..core.geometry import Rect
from ..core.session import GameOutcome
from .primitives import Buffer, Color, clear, draw_circle, draw_rect, new_buffer

logger = logging.getLogger(__name__)


@dataclass
class Palette:
    """Frame colors."""
    background: Color = (15, 10, 30)
    ball: Color = (251, 191, 36)
    paddle: Color = (20, 184, 166)
    brick_new: Color = (236, 72, 153)
    brick_hit: Color = (124, 58, 237)
    brick_outline: Color = (15, 10, 30)


@dataclass
class SceneSnapshot:
    """Last reported position of everything visible."""
    ball: tuple[float, float, float] | None = None
    paddle: Rect | None = None
    bricks: dict[tuple[float, float], tuple[Rect, BrickState]] = field(default_factory=dict)
    lives: int | None = None
    outcome: GameOutcome = GameOutcome.IN_PROGRESS


class FrameRenderer:
    """Draws engine events into a (height, width, 3) uint8 frame."""

    def __init__(self, width: int, height: int, palette: Palette | None = None) -> None:
        self.width = width
        self.height = height
        self.palette = palette or Palette()
        self.scene = SceneSnapshot()
        self._buffer = new_buffer(width, height)
        self._unsubscribe = None

    def attach(self, bus: EventBus) -> None:
        """Start following engine events on ``bus``."""
        self.detach()
        self._unsubscribe = bus.subscribe_all(self.handle_event)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def handle_event(self, event: Event) -> None:
        data = event.data
        if event.type == EventType.BALL_MOVED:
            self.scene.ball = (data["x"], data["y"], data["radius"])
        elif event.type == EventType.PADDLE_MOVED:
            self.scene.paddle = Rect(data["x"], data["y"], data["w"], data["h"])
        elif event.type == EventType.BLOCK_UPDATED:
            rect = data["rect"]
            self.scene.bricks[(rect.x, rect.y)] = (rect, data["state"])
        elif event.type == EventType.LIVES_CHANGED:
            self.scene.lives = data["lives"]
            if self.scene.outcome is not GameOutcome.IN_PROGRESS and data["lives"] > 0:
                # Lives restored by a reset
                self.scene.outcome = GameOutcome.IN_PROGRESS
        elif event.type == EventType.GAME_WIN:
            self.scene.outcome = GameOutcome.WON
            logger.info("Renderer: game won")
        elif event.type == EventType.GAME_LOSE:
            self.scene.outcome = GameOutcome.LOST
            logger.info("Renderer: game lost")

    def set_paddle(self, rect: Rect) -> None:
        """Seed the paddle before the first accepted move is reported."""
        self.scene.paddle = rect

    def render(self) -> Buffer:
        """Draw the current scene and return a copy of the frame."""
        palette = self.palette
        clear(self._buffer, palette.background)

        for rect, state in self.scene.bricks.values():
            if state is BrickState.DESTROYED:
                continue
            color = palette.brick_new if state is BrickState.NEW else palette.brick_hit
            draw_rect(self._buffer, rect, color)
            draw_rect(self._buffer, rect, palette.brick_outline, filled=False)

        if self.scene.paddle is not None:
            draw_rect(self._buffer, self.scene.paddle, palette.paddle)

        if self.scene.ball is not None:
            x, y, radius = self.scene.ball
            draw_circle(self._buffer, x, y, radius, palette.ball)

        return self._buffer.copy()

    def status_text(self) -> str:
        """Short HUD line."""
        if self.scene.outcome is GameOutcome.WON:
            return "YOU WIN - R to restart"
        if self.scene.outcome is GameOutcome.LOST:
            return "GAME OVER - R to restart"
        lives = "-" if self.scene.lives is None else str(self.scene.lives)
        return f"LIVES {lives}"
