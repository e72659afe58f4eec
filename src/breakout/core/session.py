"""
Session state: paddle placement, lives, running flag and game outcome.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
import logging

from .geometry import Rect

logger = logging.getLogger(__name__)


class GameOutcome(Enum):
    """Terminal state of a session."""
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class Paddle:
    """Paddle rectangle. Only ``x`` changes during play."""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class Session:
    """
    Mutable per-game state owned by the engine.

    Attributes:
        paddle: Paddle placement
        starting_lives: Lives granted on construction and on every reset
        lives: Remaining lives
        running: The engine only advances while this is True
        outcome: Set when the session reaches a terminal state
    """
    paddle: Paddle
    starting_lives: int
    lives: int = field(init=False)
    running: bool = True
    outcome: GameOutcome = GameOutcome.IN_PROGRESS

    def __post_init__(self) -> None:
        self.lives = self.starting_lives

    def lose_life(self) -> int:
        """Take one life away and return how many are left."""
        self.lives -= 1
        return self.lives

    def reset_lives(self) -> None:
        self.lives = self.starting_lives
        self.outcome = GameOutcome.IN_PROGRESS

    def finish(self, outcome: GameOutcome) -> None:
        """Stop the session with a terminal outcome."""
        self.running = False
        self.outcome = outcome
        logger.info(f"Session finished: {outcome.name}")
