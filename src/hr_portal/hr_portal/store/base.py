from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import Table
from .feed import ChangeFeed


class RecordStore(Protocol):
    """Generic query/mutate/subscribe client over the HR tables.

    Note (DIP): repositories depend on this interface, never on a concrete backend.
    All methods raise StoreError when the backend rejects the operation.
    """

    changes: ChangeFeed

    def select(
        self,
        table: Table,
        *,
        eq: Optional[Mapping[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> Sequence[dict]:
        raise NotImplementedError

    def select_one(self, table: Table, *, eq: Mapping[str, Any]) -> Optional[dict]:
        raise NotImplementedError

    def insert(self, table: Table, row: Mapping[str, Any]) -> dict:
        """Insert one row and return it as stored (with store-assigned id)."""

        raise NotImplementedError

    def update(self, table: Table, values: Mapping[str, Any], *, eq: Mapping[str, Any]) -> Sequence[dict]:
        raise NotImplementedError

    def delete(self, table: Table, *, eq: Mapping[str, Any]) -> Sequence[dict]:
        raise NotImplementedError
