"""Simulation core: ball, bricks, session and the engine that drives them."""

from .ball import Arena, Ball
from .bricks import Brick, BrickGrid, BrickState
from .engine import BreakoutEngine, INITIAL_VELOCITY
from .events import Event, EventBus, EventBusListener, EventType
from .geometry import Rect, spans_overlap, strictly_between
from .listener import GameStateListener, NullListener
from .session import GameOutcome, Paddle, Session

__all__ = [
    "Arena",
    "Ball",
    "Brick",
    "BrickGrid",
    "BrickState",
    "BreakoutEngine",
    "INITIAL_VELOCITY",
    "Event",
    "EventBus",
    "EventBusListener",
    "EventType",
    "Rect",
    "spans_overlap",
    "strictly_between",
    "GameStateListener",
    "NullListener",
    "GameOutcome",
    "Paddle",
    "Session",
]
