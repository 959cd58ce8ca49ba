from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.store.bootstrap import apply_schema, list_tables
from src.hr_portal.hr_portal.store.connection import StoreConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store_config = StoreConfig.from_settings(settings)
    if store_config.backend != "mysql":
        raise SystemExit("init_db only applies to the MySQL backend; create Supabase tables from database/schema.sql")

    db = store_config.mysql_config()
    apply_schema(db, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(db)
    print(f"OK: Applied schema.sql -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
