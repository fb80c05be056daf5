from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import configure_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, ensure_owner_account, list_tables

from .checkin.controller import register as register_checkin
from .users.controller import register as register_users
from .attendance.controller import register as register_attendance
from .members.controller import register as register_members

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Tests pass a pre-built ``container`` (in-memory repositories); then no
    database bootstrap is attempted.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_MB", 10)) * 1024 * 1024
    db_config = getattr(settings, "DB_CONFIG")

    if container is None:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=ROOT_DIR / "database" / "schema.sql")
            logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
        owner_email = getattr(settings, "OWNER_EMAIL", "")
        owner_password = getattr(settings, "OWNER_PASSWORD", "")
        if bool(getattr(settings, "AUTO_SEED_DB", False)) and owner_email and owner_password:
            ensure_owner_account(db_config, email=owner_email, password=owner_password)

        container = build_container(db_config=db_config)

    register_users(app, container)
    register_checkin(app, container)
    register_attendance(app, container)
    register_members(app, container)

    return app
