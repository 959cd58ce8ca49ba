from __future__ import annotations

import threading
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Protocol, TypeVar

from ..core.constants import SESSION_IDLE_SECONDS


class PortalView(Protocol):
    def close(self) -> None: ...


V = TypeVar("V", bound=PortalView)


@dataclass
class _Entry(Generic[V]):
    view: V
    owner: Optional[str]
    last_seen: float


class SessionRegistry(Generic[V]):
    """Process-local map of session key -> live portal view.

    The key lives in the signed session cookie; the view (and its change
    subscriptions) lives here until logout, until it sits idle longer than
    `max_idle` seconds, or until the same owner opens another view.
    Eviction happens on `open`/`get`/`get_or_open`, closing each evicted view.
    """

    def __init__(self, *, max_idle: float = SESSION_IDLE_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.max_idle = float(max_idle)
        self._clock = clock
        self._views: dict[str, _Entry[V]] = {}
        self._lock = threading.Lock()

    def _evict_locked(self, owner: Optional[str] = None) -> list[V]:
        now = self._clock()
        doomed = [
            key
            for key, entry in self._views.items()
            if now - entry.last_seen > self.max_idle or (owner is not None and entry.owner == owner)
        ]
        return [self._views.pop(key).view for key in doomed]

    @staticmethod
    def _close_views(views: list[V]) -> None:
        for view in views:
            view.close()

    def open(self, view: V, *, owner: Optional[str] = None) -> str:
        """Register `view` under a fresh key; any other view of `owner` is closed."""
        key = uuid.uuid4().hex
        with self._lock:
            stale = self._evict_locked(owner)
            self._views[key] = _Entry(view, owner, self._clock())
        self._close_views(stale)
        return key

    def get(self, key: Optional[str]) -> Optional[V]:
        if not key:
            return None
        with self._lock:
            stale = self._evict_locked()
            entry = self._views.get(key)
            if entry is not None:
                entry.last_seen = self._clock()
        self._close_views(stale)
        return entry.view if entry is not None else None

    def get_or_open(
        self,
        key: Optional[str],
        factory: Callable[[], V],
        *,
        owner: Optional[str] = None,
    ) -> tuple[str, V]:
        """Return the live view for `key`, rebuilding it if the process lost it."""
        view = self.get(key)
        if view is not None:
            return key, view
        view = factory()
        with self._lock:
            stale = self._evict_locked(owner)
            key = key or uuid.uuid4().hex
            self._views[key] = _Entry(view, owner, self._clock())
        self._close_views(stale)
        return key, view

    def close(self, key: Optional[str]) -> bool:
        if not key:
            return False
        with self._lock:
            entry = self._views.pop(key, None)
        if entry is None:
            return False
        entry.view.close()
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._views)
