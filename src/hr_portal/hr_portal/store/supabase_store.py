"""Record store backed by a Supabase (PostgREST) project."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from postgrest.exceptions import APIError
from supabase import Client, create_client

from ..core.enums import ChangeKind, Table
from ..core.exceptions import StoreError
from .base import RecordStore
from .connection import StoreConfig
from .feed import ChangeFeed, ensure_feed
from .realtime import RealtimeBridge
from .schema import PRIMARY_KEY, check_columns

logger = logging.getLogger(__name__)


class SupabaseRecordStore(RecordStore):
    """PostgREST-backed store.

    Writes publish their own change events until a connected RealtimeBridge is
    attached; from then on every event (ours included) arrives through Realtime.
    """

    def __init__(self, client: Client, *, changes: Optional[ChangeFeed] = None):
        self._client = client
        self.changes = ensure_feed(changes)
        self.realtime: Optional[RealtimeBridge] = None

    def attach_realtime(self, bridge: RealtimeBridge) -> None:
        self.realtime = bridge

    def _publish(self, table: Table, kind: ChangeKind, rows) -> None:
        if self.realtime is None or not self.realtime.connected:
            self.changes.publish_rows(table, kind, rows)

    def close(self) -> None:
        if self.realtime is not None:
            self.realtime.stop()

    @classmethod
    def connect(cls, config: StoreConfig, *, changes: Optional[ChangeFeed] = None) -> "SupabaseRecordStore":
        return cls(create_client(config.endpoint, config.access_key), changes=changes)

    def _execute(self, action: str, table: Table, query) -> list[dict]:
        try:
            response = query.execute()
        except APIError as e:
            logger.warning("Supabase %s on %s failed: %s", action, Table(table).value, e.message)
            raise StoreError(e.message or str(e)) from e
        return list(response.data or [])

    def _filtered(self, query, table: Table, eq: Optional[Mapping[str, Any]]):
        for col in check_columns(table, (eq or {}).keys()):
            query = query.eq(col, eq[col])
        return query

    def select(
        self,
        table: Table,
        *,
        eq: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> Sequence[dict]:
        query = self._filtered(self._client.table(Table(table).value).select("*"), table, eq)
        if order_by:
            check_columns(table, [order_by])
            query = query.order(order_by, desc=not ascending)
            if order_by != PRIMARY_KEY:
                query = query.order(PRIMARY_KEY, desc=not ascending)
        if limit is not None:
            query = query.limit(int(limit))
        return self._execute("select", table, query)

    def select_one(self, table: Table, *, eq: Mapping[str, Any]) -> Optional[dict]:
        rows = self.select(table, eq=eq, limit=1)
        return rows[0] if rows else None

    def insert(self, table: Table, row: Mapping[str, Any]) -> dict:
        table = Table(table)
        check_columns(table, row.keys())
        rows = self._execute("insert", table, self._client.table(table.value).insert(dict(row)))
        saved = rows[0] if rows else dict(row)
        self._publish(table, ChangeKind.INSERT, [saved])
        return saved

    def update(self, table: Table, values: Mapping[str, Any], *, eq: Mapping[str, Any]) -> Sequence[dict]:
        table = Table(table)
        check_columns(table, values.keys())
        query = self._filtered(self._client.table(table.value).update(dict(values)), table, eq)
        rows = self._execute("update", table, query)
        self._publish(table, ChangeKind.UPDATE, rows)
        return rows

    def delete(self, table: Table, *, eq: Mapping[str, Any]) -> Sequence[dict]:
        table = Table(table)
        query = self._filtered(self._client.table(table.value).delete(), table, eq)
        rows = self._execute("delete", table, query)
        self._publish(table, ChangeKind.DELETE, rows)
        return rows
