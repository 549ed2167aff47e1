"""Create the MySQL database and tables for the configured environment.

Usage: APP_ENV=production python scripts/init_db.py
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hotel_hrm.hotel_hrm.database.bootstrap import apply_schema, list_tables
from src.hotel_hrm.hotel_hrm.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(f"OK: {DBConfig.from_dict(db_config).describe()} -> {', '.join(tables)}")


if __name__ == "__main__":
    main()
