"""
In-memory store for live gestures and committed shapes.

Each entry is owned by exactly one client session; ids are opaque strings.
Entries expire after `ttl` seconds without access (every lookup renews the
lease). When the store is full the least recently used entry is evicted and
a warning is logged.
"""
from __future__ import annotations

import time
from logging import getLogger
from typing import Callable, Dict, Optional
from uuid import uuid4

from cachetools import TTLCache

from core.gesture import DrawGesture
from core.shape import Shape

logger = getLogger(__name__)


def _gen_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:10]}"


class _SessionCache(TTLCache):
    """TTLCache that reports capacity evictions of live entries."""

    def __init__(self, kind: str, maxsize: int, ttl: float, timer: Callable[[], float]):
        super().__init__(maxsize=maxsize, ttl=ttl, timer=timer)
        self._kind = kind

    def popitem(self):
        key, value = super().popitem()
        logger.warning(
            f"Session store full ({self.maxsize} {self._kind}s); evicted live {self._kind} {key}"
        )
        return key, value

    def touch(self, key: str):
        """Return the entry and restart its expiry clock, or None."""
        value = self.get(key)
        if value is not None:
            self[key] = value
        return value


class SessionStore:
    def __init__(
        self,
        maxsize: int = 1000,
        ttl: int = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._gestures = _SessionCache("gesture", maxsize, ttl, timer)
        self._shapes = _SessionCache("shape", maxsize, ttl, timer)

    # ---------- gestures ----------

    def add_gesture(self, gesture: DrawGesture) -> str:
        gesture_id = _gen_id("g")
        self._gestures[gesture_id] = gesture
        return gesture_id

    def get_gesture(self, gesture_id: str) -> Optional[DrawGesture]:
        return self._gestures.touch(gesture_id)

    def drop_gesture(self, gesture_id: str) -> bool:
        return self._gestures.pop(gesture_id, None) is not None

    # ---------- shapes ----------

    def add_shape(self, shape: Shape) -> str:
        shape_id = _gen_id("s")
        self._shapes[shape_id] = shape
        return shape_id

    def get_shape(self, shape_id: str) -> Optional[Shape]:
        return self._shapes.touch(shape_id)

    def drop_shape(self, shape_id: str) -> bool:
        return self._shapes.pop(shape_id, None) is not None

    def stats(self) -> Dict[str, int]:
        return {"gestures": len(self._gestures), "shapes": len(self._shapes)}


_store_instance: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Process-wide store, sized from settings on first use."""
    global _store_instance
    if _store_instance is None:
        from settings import get_settings

        settings = get_settings()
        _store_instance = SessionStore(
            maxsize=settings.session_max_items,
            ttl=settings.session_ttl_seconds,
        )
        logger.info(
            f"Session store ready (maxsize={settings.session_max_items}, "
            f"ttl={settings.session_ttl_seconds}s)"
        )
    return _store_instance
