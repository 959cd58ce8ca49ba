"""Supabase Realtime -> ChangeFeed.

supabase-py only ships Realtime on its async client, so the bridge owns a
private event loop on a daemon thread. Each `postgres_changes` message for a
watched table is turned into a ChangeEvent and published on the feed, which
makes writes from other workers and other clients reach this process's views.

Delete messages carry the old row only when the table uses
REPLICA IDENTITY FULL (see database/supabase_realtime.sql).
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional

from supabase import acreate_client

from ..core.constants import REALTIME_CHANNEL, REALTIME_SCHEMA, REALTIME_START_TIMEOUT
from ..core.enums import ChangeKind, Table
from .connection import StoreConfig
from .feed import ChangeEvent, ChangeFeed

logger = logging.getLogger(__name__)

# Tables the portal views subscribe to.
WATCHED_TABLES = (Table.TASKS, Table.PAYSLIPS, Table.PERFORMANCE)

KIND_BY_TYPE = {
    "INSERT": ChangeKind.INSERT,
    "UPDATE": ChangeKind.UPDATE,
    "DELETE": ChangeKind.DELETE,
}

ClientFactory = Callable[[str, str], Awaitable[Any]]


def event_from_payload(payload: Mapping[str, Any]) -> Optional[ChangeEvent]:
    """Map one postgres_changes payload to a ChangeEvent, or None if it is not ours."""
    data = payload.get("data") or {}
    kind = KIND_BY_TYPE.get(str(data.get("type", "")).upper())
    if kind is None:
        return None
    try:
        table = Table(data.get("table"))
    except ValueError:
        return None
    record = data.get("old_record") if kind == ChangeKind.DELETE else data.get("record")
    return ChangeEvent(table=table, kind=kind, record=dict(record or {}))


class RealtimeBridge:
    def __init__(
        self,
        config: StoreConfig,
        changes: ChangeFeed,
        *,
        tables: Iterable[Table] = WATCHED_TABLES,
        client_factory: ClientFactory = acreate_client,
    ):
        self._config = config
        self._changes = changes
        self._tables = tuple(Table(t) for t in tables)
        self._client_factory = client_factory
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._client = None
        self._ready = threading.Event()
        self.connected = False

    def start(self, *, timeout: float = REALTIME_START_TIMEOUT) -> bool:
        """Connect and subscribe; True once the channel is joined."""
        if self._thread is not None:
            return self.connected
        self._thread = threading.Thread(target=self._run, name="supabase-realtime", daemon=True)
        self._thread.start()
        if not self._ready.wait(timeout):
            logger.warning("Supabase Realtime did not subscribe within %.0fs", timeout)
        return self.connected

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        try:
            loop.run_until_complete(self._subscribe())
        except Exception:
            logger.exception("Supabase Realtime subscription failed")
            self._ready.set()
            loop.close()
            return

        self._ready.set()
        try:
            # keeps the socket listener and heartbeat tasks running
            loop.run_forever()
        finally:
            loop.close()

    async def _subscribe(self) -> None:
        self._client = await self._client_factory(self._config.endpoint, self._config.access_key)
        channel = self._client.channel(REALTIME_CHANNEL)
        for table in self._tables:
            channel.on_postgres_changes("*", self.forward, table=table.value, schema=REALTIME_SCHEMA)
        await channel.subscribe()
        self.connected = True
        logger.info("Supabase Realtime: watching %s", ", ".join(t.value for t in self._tables))

    def forward(self, payload: Mapping[str, Any]) -> None:
        event = event_from_payload(payload)
        if event is None:
            logger.debug("Ignoring realtime payload: %s", payload)
            return
        self._changes.publish(event)

    def stop(self, *, timeout: float = REALTIME_START_TIMEOUT) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        if self._client is not None:
            future = asyncio.run_coroutine_threadsafe(self._client.remove_all_channels(), loop)
            try:
                future.result(timeout)
            except Exception as e:
                logger.warning("Closing Supabase Realtime channels failed: %s", e)
        loop.call_soon_threadsafe(loop.stop)
        if self._thread is not None:
            self._thread.join(timeout)
        self.connected = False
