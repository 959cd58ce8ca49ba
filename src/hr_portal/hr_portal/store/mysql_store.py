from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Mapping, Optional, Sequence

import mysql.connector

from ..core.enums import ChangeKind, Table
from ..core.exceptions import StoreError
from .base import RecordStore
from .connection import DatabaseConnection
from .feed import ChangeFeed, ensure_feed
from .mysql_base import db_cursor, fetchall, fetchone, quote_ident
from .schema import CALLER_KEYED, PRIMARY_KEY, check_columns, columns_of

logger = logging.getLogger(__name__)


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection, *, changes: Optional[ChangeFeed] = None):
        self._conn_factory = conn_factory
        self.changes = ensure_feed(changes)

    @contextmanager
    def _cursor(self, action: str, table: Table):
        try:
            with db_cursor(self._conn_factory) as pair:
                yield pair
        except mysql.connector.Error as e:
            logger.warning("MySQL %s on %s failed: %s", action, Table(table).value, e)
            raise StoreError(getattr(e, "msg", None) or str(e)) from e

    @staticmethod
    def _select_list(table: Table) -> str:
        return ", ".join(quote_ident(c) for c in columns_of(table))

    @staticmethod
    def _where(table: Table, eq: Optional[Mapping[str, Any]]) -> tuple[str, list[Any]]:
        if not eq:
            return "", []
        cols = check_columns(table, eq.keys())
        clause = " AND ".join(f"{quote_ident(c)}=%s" for c in cols)
        return f" WHERE {clause}", [eq[c] for c in cols]

    def _fetch(self, cur, table: Table, eq: Mapping[str, Any]) -> list[dict]:
        where, params = self._where(table, eq)
        cur.execute(f"SELECT {self._select_list(table)} FROM {quote_ident(Table(table).value)}{where}", params)
        return fetchall(cur)

    def select(
        self,
        table: Table,
        *,
        eq: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> Sequence[dict]:
        where, params = self._where(table, eq)
        sql = f"SELECT {self._select_list(table)} FROM {quote_ident(Table(table).value)}{where}"
        if order_by:
            check_columns(table, [order_by])
            direction = "ASC" if ascending else "DESC"
            sql += f" ORDER BY {quote_ident(order_by)} {direction}"
            if order_by != PRIMARY_KEY:
                # ties (same created_at second) keep insertion order
                sql += f", {quote_ident(PRIMARY_KEY)} {direction}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with self._cursor("select", table) as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def select_one(self, table: Table, *, eq: Mapping[str, Any]) -> Optional[dict]:
        where, params = self._where(table, eq)
        with self._cursor("select", table) as (_, cur):
            cur.execute(
                f"SELECT {self._select_list(table)} FROM {quote_ident(Table(table).value)}{where} LIMIT 1",
                params,
            )
            return fetchone(cur)

    def insert(self, table: Table, row: Mapping[str, Any]) -> dict:
        table = Table(table)
        cols = check_columns(table, row.keys())
        placeholders = ",".join(["%s"] * len(cols))
        with self._cursor("insert", table) as (_, cur):
            cur.execute(
                f"INSERT INTO {quote_ident(table.value)}({', '.join(quote_ident(c) for c in cols)}) "
                f"VALUES({placeholders})",
                [row[c] for c in cols],
            )
            key = row[PRIMARY_KEY] if table in CALLER_KEYED else int(cur.lastrowid)
            stored = self._fetch(cur, table, {PRIMARY_KEY: key})

        saved = stored[0] if stored else dict(row)
        self.changes.publish_rows(table, ChangeKind.INSERT, [saved])
        return saved

    def update(self, table: Table, values: Mapping[str, Any], *, eq: Mapping[str, Any]) -> Sequence[dict]:
        table = Table(table)
        cols = check_columns(table, values.keys())
        where, params = self._where(table, eq)
        assignments = ", ".join(f"{quote_ident(c)}=%s" for c in cols)
        with self._cursor("update", table) as (_, cur):
            cur.execute(
                f"UPDATE {quote_ident(table.value)} SET {assignments}{where}",
                [values[c] for c in cols] + params,
            )
            rows = self._fetch(cur, table, eq)

        self.changes.publish_rows(table, ChangeKind.UPDATE, rows)
        return rows

    def delete(self, table: Table, *, eq: Mapping[str, Any]) -> Sequence[dict]:
        table = Table(table)
        where, params = self._where(table, eq)
        with self._cursor("delete", table) as (_, cur):
            rows = self._fetch(cur, table, eq)
            cur.execute(f"DELETE FROM {quote_ident(table.value)}{where}", params)

        self.changes.publish_rows(table, ChangeKind.DELETE, rows)
        return rows
