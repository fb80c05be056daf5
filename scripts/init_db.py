from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.youth_attendance.youth_attendance.common.logging_config import configure_logging
from src.youth_attendance.youth_attendance.database.bootstrap import apply_schema, ensure_owner_account, list_tables

logger = logging.getLogger("youth_attendance.init_db")


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply database/schema.sql and optionally create the owner account.")
    parser.add_argument("--owner-email", help="create/reset an approved owner account with this email")
    parser.add_argument("--owner-password", help="password for --owner-email")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = list_tables(db_config)
    logger.info(
        "applied schema.sql -> %s@%s:%s/%s (tables=%s)",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        len(tables),
    )

    if args.owner_email:
        if not args.owner_password:
            parser.error("--owner-password is required with --owner-email")
        ensure_owner_account(db_config, email=args.owner_email.strip().lower(), password=args.owner_password)


if __name__ == "__main__":
    main()
