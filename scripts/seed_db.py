from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hotel_hrm.hotel_hrm.container import build_container
from src.hotel_hrm.hotel_hrm.database.connection import DBConfig
from src.hotel_hrm.hotel_hrm.database.seed import seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(
        storage_backend="mysql",
        db_config=db_config,
        password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", "scrypt"),
    )
    seeded = seed_demo_data(container.users_repo, container.employees_repo, container.hasher)

    target = DBConfig.from_dict(db_config).describe()
    if seeded:
        print(f"OK: Seeded database -> {target}")
    else:
        print(f"SKIP: {target} already has users or employees")


if __name__ == "__main__":
    main()
