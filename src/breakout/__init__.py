"""Fixed-step brick breaker simulation engine."""

from .core import (
    Ball,
    BreakoutEngine,
    Brick,
    BrickState,
    EventBus,
    EventBusListener,
    EventType,
    GameOutcome,
    GameStateListener,
    NullListener,
)

__version__ = "0.1.0"

__all__ = [
    "Ball",
    "BreakoutEngine",
    "Brick",
    "BrickState",
    "EventBus",
    "EventBusListener",
    "EventType",
    "GameOutcome",
    "GameStateListener",
    "NullListener",
]
