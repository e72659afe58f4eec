"""
Event bus for fanning engine notifications out to several sinks.

The engine talks to exactly one listener. ``EventBusListener`` is that
listener when more than one component (renderer, HUD, input controller)
needs to observe the same game.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, TYPE_CHECKING
from enum import Enum, auto
from collections import defaultdict
import logging
import time

if TYPE_CHECKING:
    from .bricks import Brick

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Engine notification types, one per listener callback."""
    BALL_MOVED = auto()
    PADDLE_MOVED = auto()
    BLOCK_UPDATED = auto()
    BALL_MISSED_PADDLE = auto()
    LIVES_CHANGED = auto()
    GAME_LOSE = auto()
    GAME_WIN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "engine"
    timestamp: float = field(default_factory=time.monotonic)


Handler = Callable[[Event], None]


class EventBus:
    """
    Synchronous pub/sub bus.

    Handlers run in subscription order on the emitting thread. A failing
    handler is logged and skipped so the rest still receive the event.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._event_history: list[Event] = []
        self._history_limit = history_limit

    def subscribe(self, event_type: EventType, handler: Handler) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type.name}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type.name}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to every event type."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Dispatch an event to its handlers immediately."""
        self._add_to_history(event)

        handlers = self._handlers.get(event.type, []) + self._global_handlers
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type.name}: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(self, event_type: EventType | None = None, limit: int = 10) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        self._event_history.clear()


class EventBusListener:
    """Game state listener that republishes every callback on an ``EventBus``."""

    def __init__(self, bus: EventBus, source: str = "engine") -> None:
        self.bus = bus
        self.source = source

    def _emit(self, event_type: EventType, **data: Any) -> None:
        self.bus.emit(Event(event_type, data=data, source=self.source))

    def ball_moved(self, x: float, y: float, radius: float) -> None:
        self._emit(EventType.BALL_MOVED, x=x, y=y, radius=radius)

    def paddle_moved(self, x: float, y: float, w: float, h: float) -> None:
        self._emit(EventType.PADDLE_MOVED, x=x, y=y, w=w, h=h)

    def block_updated(self, brick: "Brick") -> None:
        # Snapshot: the brick itself keeps changing after the event
        self._emit(EventType.BLOCK_UPDATED, rect=brick.rect, state=brick.state)

    def ball_missed_paddle(self) -> None:
        self._emit(EventType.BALL_MISSED_PADDLE)

    def number_of_lives_changed(self, lives: int) -> None:
        self._emit(EventType.LIVES_CHANGED, lives=lives)

    def game_lose(self) -> None:
        self._emit(EventType.GAME_LOSE)

    def game_win(self) -> None:
        self._emit(EventType.GAME_WIN)
