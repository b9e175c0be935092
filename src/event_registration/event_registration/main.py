from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.logging import setup_logging
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_accounts, list_tables

logger = logging.getLogger(__name__)

SQL_DIR = Path(__file__).resolve().parents[3] / "database"


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    debug = bool(getattr(settings, "DEBUG", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "DEBUG" if debug else "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SQL_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=SQL_DIR / "seed.sql")
        ensure_demo_accounts(db_config)
        logger.info("demo seed ready")

    return build_container(db_config=db_config)
