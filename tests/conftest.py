"""Shared fixtures for engine tests."""

import pytest

from breakout.core.engine import BreakoutEngine


class RecordingListener:
    """Listener that records every callback as ``(name, args)``.

    With ``reset_on_miss`` set, it re-serves the ball from inside
    ``ball_missed_paddle`` the way a real front-end does.
    """

    def __init__(self, reset_on_miss: bool = False) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.engine: BreakoutEngine | None = None
        self.reset_on_miss = reset_on_miss

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def count(self, name: str) -> int:
        return self.names().count(name)

    def ball_moved(self, x, y, radius):
        self.calls.append(("ball_moved", (x, y, radius)))

    def paddle_moved(self, x, y, w, h):
        self.calls.append(("paddle_moved", (x, y, w, h)))

    def block_updated(self, brick):
        self.calls.append(("block_updated", (brick,)))

    def ball_missed_paddle(self):
        self.calls.append(("ball_missed_paddle", ()))
        if self.reset_on_miss and self.engine is not None:
            self.engine.reset_ball()

    def number_of_lives_changed(self, lives):
        self.calls.append(("number_of_lives_changed", (lives,)))

    def game_lose(self):
        self.calls.append(("game_lose", ()))

    def game_win(self):
        self.calls.append(("game_win", ()))


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def make_engine():
    """Build an engine wired to a recording listener."""

    def _make(*args, reset_on_miss: bool = False, **kwargs) -> tuple[BreakoutEngine, RecordingListener]:
        rec = RecordingListener(reset_on_miss=reset_on_miss)
        engine = BreakoutEngine(*args, listener=rec, **kwargs)
        rec.engine = engine
        return engine, rec

    return _make
