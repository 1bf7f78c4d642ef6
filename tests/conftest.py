"""
conftest.py
-----------
Shared pytest configuration and fixtures for Goose Runner tests.

Contains:
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
- Shared test helpers (fake clock, scripted random source, event recorder)
"""

import random

import pytest

from goose_runner.core.runtime.frame_driver import FrameDriver
from goose_runner.core.runtime.session import Session
from goose_runner.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    HighScoreEvent,
    JumpEvent,
    PowerUpCollectedEvent,
    RunStartedEvent,
)
from goose_runner.core.services.highscore_store import MemoryHighScoreStore


# ===========================================================
# Test Helpers
# ===========================================================

class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms=1_000_000.0):
        self.now_ms = start_ms

    def __call__(self):
        return self.now_ms

    def advance(self, ms):
        self.now_ms += ms


class ScriptedRandom(random.Random):
    """
    Random source whose random() never triggers a spawn.

    Values can be queued with push(); once the queue is empty random()
    returns `default`. choice() always returns the first element.
    """

    def __init__(self, default=0.99):
        super().__init__(0)
        self.default = default
        self.queue = []

    def push(self, *values):
        self.queue.extend(values)

    def random(self):
        if self.queue:
            return self.queue.pop(0)
        return self.default

    def choice(self, seq):
        return seq[0]


class EventRecorder:
    """Subscribes to every simulation event and keeps them in order."""

    EVENT_TYPES = (
        RunStartedEvent,
        JumpEvent,
        PowerUpCollectedEvent,
        GameOverEvent,
        HighScoreEvent,
    )

    def __init__(self, events):
        self.received = []
        for event_type in self.EVENT_TYPES:
            events.subscribe(event_type, self.received.append)

    def of_type(self, event_type):
        return [e for e in self.received if isinstance(e, event_type)]


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def quiet_rng():
    """Random source that never spawns anything unless told to."""
    return ScriptedRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def event_manager():
    return EventManager()


@pytest.fixture
def recorder(event_manager):
    return EventRecorder(event_manager)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def session(store, event_manager, quiet_rng):
    return Session(store=store, events=event_manager, rng=quiet_rng)


@pytest.fixture
def driver(session, fake_clock):
    return FrameDriver(session, clock=fake_clock)


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark every test outside integration modules as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
