"""
Tests for the in-memory gesture/shape store.

Run with: pytest tests/test_sessions.py -v
"""
import logging

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.gesture import DrawGesture
from core.sessions import SessionStore
from core.shape import Shape


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestSessionExpiry:
    """Entries expire after idle time, not after creation time."""

    def test_active_shape_stays_alive(self, clock):
        """Each lookup renews the lease."""
        store = SessionStore(maxsize=10, ttl=10, timer=clock)
        shape_id = store.add_shape(Shape([0.1, 0.1, 0.2, 0.2]))
        for _ in range(5):
            clock.advance(6)
            assert store.get_shape(shape_id) is not None

    def test_idle_shape_expires(self, clock):
        store = SessionStore(maxsize=10, ttl=10, timer=clock)
        shape_id = store.add_shape(Shape([0.1, 0.1, 0.2, 0.2]))
        clock.advance(6)
        assert store.get_shape(shape_id) is not None
        clock.advance(11)
        assert store.get_shape(shape_id) is None

    def test_active_gesture_stays_alive(self, clock):
        store = SessionStore(maxsize=10, ttl=10, timer=clock)
        gesture_id = store.add_gesture(DrawGesture(0, 0, 100, 100, 0))
        for _ in range(3):
            clock.advance(9)
            assert store.get_gesture(gesture_id) is not None
        clock.advance(11)
        assert store.get_gesture(gesture_id) is None


class TestSessionCapacity:
    """A full store evicts the least recently used entry, loudly."""

    def test_eviction_is_logged(self, clock, caplog):
        store = SessionStore(maxsize=2, ttl=100, timer=clock)
        first = store.add_shape(Shape([0.1, 0.1, 0.2, 0.2]))
        store.add_shape(Shape([0.2, 0.2, 0.2, 0.2]))
        with caplog.at_level(logging.WARNING, logger="core.sessions"):
            store.add_shape(Shape([0.3, 0.3, 0.2, 0.2]))
        assert store.get_shape(first) is None
        assert any(
            "evicted live shape" in r.getMessage() and first in r.getMessage()
            for r in caplog.records
        )

    def test_recently_used_entry_survives(self, clock):
        store = SessionStore(maxsize=2, ttl=100, timer=clock)
        first = store.add_shape(Shape([0.1, 0.1, 0.2, 0.2]))
        second = store.add_shape(Shape([0.2, 0.2, 0.2, 0.2]))
        store.get_shape(first)
        store.add_shape(Shape([0.3, 0.3, 0.2, 0.2]))
        assert store.get_shape(first) is not None
        assert store.get_shape(second) is None

    def test_drop_is_silent(self, clock, caplog):
        store = SessionStore(maxsize=2, ttl=100, timer=clock)
        shape_id = store.add_shape(Shape([0.1, 0.1, 0.2, 0.2]))
        with caplog.at_level(logging.WARNING, logger="core.sessions"):
            assert store.drop_shape(shape_id)
        assert not caplog.records
        assert store.stats() == {"gestures": 0, "shapes": 0}
