"""In-process change feed.

Stores publish one ChangeEvent per written row; views subscribe with a
single equality predicate (table + column = value) and decide what to do
with the event. Delivery is synchronous on the publishing thread.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from ..core.enums import ChangeKind, Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    table: Table
    kind: ChangeKind
    record: Mapping[str, Any] = field(default_factory=dict)


ChangeCallback = Callable[[ChangeEvent], None]


class Subscription:
    def __init__(self, feed: "ChangeFeed", table: Table, column: str, value: Any, callback: ChangeCallback):
        self._feed = feed
        self.table = Table(table)
        self.column = column
        self.value = value
        self.callback = callback
        self.active = True

    def matches(self, event: ChangeEvent) -> bool:
        if event.table != self.table:
            return False
        return str(event.record.get(self.column)) == str(self.value)

    def unsubscribe(self) -> None:
        if self.active:
            self._feed._remove(self)
            self.active = False


class ChangeFeed:
    def __init__(self):
        self._subscriptions: list[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, table: Table, column: str, value: Any, callback: ChangeCallback) -> Subscription:
        sub = Subscription(self, table, column, value, callback)
        with self._lock:
            self._subscriptions.append(sub)
        return sub

    def _remove(self, sub: Subscription) -> None:
        with self._lock:
            if sub in self._subscriptions:
                self._subscriptions.remove(sub)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def publish(self, event: ChangeEvent) -> None:
        with self._lock:
            targets = [s for s in self._subscriptions if s.matches(event)]

        for sub in targets:
            try:
                sub.callback(event)
            except Exception:
                # One broken subscriber must not starve the others.
                logger.exception(
                    "Change callback failed for %s %s (%s=%s)",
                    event.kind.value,
                    event.table.value,
                    sub.column,
                    sub.value,
                )

    def publish_rows(self, table: Table, kind: ChangeKind, rows) -> None:
        for row in rows:
            self.publish(ChangeEvent(table=Table(table), kind=kind, record=dict(row)))


def ensure_feed(changes: Optional[ChangeFeed]) -> ChangeFeed:
    return changes if changes is not None else ChangeFeed()
