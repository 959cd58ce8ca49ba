from __future__ import annotations

import logging
from typing import Optional

from .base import RecordStore
from .connection import DatabaseConnection, StoreConfig
from .feed import ChangeFeed

logger = logging.getLogger(__name__)


def build_record_store(
    config: StoreConfig,
    *,
    changes: Optional[ChangeFeed] = None,
    realtime: bool = False,
) -> RecordStore:
    """Pick the backend from the endpoint scheme (https -> Supabase, mysql -> MySQL).

    With `realtime` on, a Supabase store also listens to Realtime so that writes
    made by other processes reach this one. If the subscription cannot be set up
    the store keeps publishing its own writes only.
    """
    if config.backend == "supabase":
        from .realtime import RealtimeBridge
        from .supabase_store import SupabaseRecordStore

        logger.info("Record store: Supabase at %s", config.endpoint)
        store = SupabaseRecordStore.connect(config, changes=changes)
        if realtime:
            bridge = RealtimeBridge(config, store.changes)
            store.attach_realtime(bridge)
            if not bridge.start():
                logger.warning("Supabase Realtime unavailable; only this process's writes reach live views")
        return store

    from .mysql_store import MySQLRecordStore

    db = config.mysql_config()
    logger.info("Record store: MySQL %s@%s:%s/%s", db.user, db.host, db.port, db.database)
    if realtime:
        logger.info("MySQL has no change stream; only this process's writes reach live views")
    return MySQLRecordStore(DatabaseConnection.get_instance(db), changes=changes)
