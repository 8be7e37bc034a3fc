from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from .common.logging_setup import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_user, list_tables

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    keycloak_config = getattr(settings, "KEYCLOAK_CONFIG")

    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_admin_user(db_config)
        logger.info("demo seed ready")

    return build_container(db_config=db_config, keycloak_config=keycloak_config)
