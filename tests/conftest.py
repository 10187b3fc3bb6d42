import os

# pygame must not open a real window or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest.mock import Mock  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from snake_game.game import GameUi, SnakeGame  # noqa: E402


class MemoryStore:
    """In-memory stand-in for JsonFileStore."""

    def __init__(self, data=None):
        self.data = dict(data or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class FakeTimer:
    def __init__(self, period_ms, callback):
        self.period_ms = period_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.callback()


class FakeScheduler:
    """Records every timer started and lets tests fire them by hand."""

    def __init__(self):
        self.timers = []

    def __call__(self, period_ms, callback):
        timer = FakeTimer(period_ms, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self):
        return [t for t in self.timers if not t.cancelled]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def ui():
    return Mock(spec=GameUi)


@pytest.fixture
def game(ui, store, scheduler):
    game = SnakeGame(ui, store, scheduler)
    game.initialize()
    ui.reset_mock()
    return game


@pytest.fixture(scope="session")
def pygame_env():
    pygame.init()
    yield
    pygame.quit()
