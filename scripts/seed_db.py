from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_portal.hr_portal.store.bootstrap import apply_seed_sql
from src.hr_portal.hr_portal.store.connection import StoreConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    store_config = StoreConfig.from_settings(settings)
    if store_config.backend != "mysql":
        raise SystemExit("seed_db only applies to the MySQL backend")

    db = store_config.mysql_config()
    apply_seed_sql(db, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded database -> {db.user}@{db.host}:{db.port}/{db.database}")


if __name__ == "__main__":
    main()
