from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import SESSION_IDLE_SECONDS
from .employee_portal.controller import register as register_employee_portal
from .identity.controller import register as register_identity
from .manager_portal.controller import register as register_manager_portal
from .store.bootstrap import apply_schema, apply_seed_sql, list_tables
from .store.connection import StoreConfig

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _prepare_mysql(store_config: StoreConfig, *, init_db: bool, seed_db: bool) -> None:
    db = store_config.mysql_config()
    if init_db:
        apply_schema(db, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db)))
    if seed_db:
        apply_seed_sql(db, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("Demo seed ready")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        # Fails fast when RECORD_STORE_URL / RECORD_STORE_KEY are missing.
        store_config = StoreConfig.from_settings(settings)
        logger.info("settings=%s backend=%s", settings_module, store_config.backend)
        if store_config.backend == "mysql":
            _prepare_mysql(
                store_config,
                init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
                seed_db=bool(getattr(settings, "AUTO_SEED_DB", False)),
            )
        container = build_container(
            store_config=store_config,
            realtime=bool(getattr(settings, "REALTIME_ENABLED", False)),
        )

    container.sessions.max_idle = float(getattr(settings, "SESSION_IDLE_SECONDS", SESSION_IDLE_SECONDS))
    app.extensions["hr_portal"] = container

    register_identity(app, container)
    register_employee_portal(app, container)
    register_manager_portal(app, container)

    return app


def main() -> None:
    app = create_app()
    try:
        app.run(debug=app.config["DEBUG"])
    finally:
        close = getattr(app.extensions["hr_portal"].store, "close", None)
        if close is not None:
            close()


if __name__ == "__main__":
    main()
