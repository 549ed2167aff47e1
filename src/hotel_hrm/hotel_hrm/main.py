from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .auth.controller import register as register_auth
from .container import build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_demo_data
from .common.http import register_error_handlers
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level_name: str, *, debug: bool) -> None:
    level = logging.DEBUG if debug else getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(
        days=int(getattr(settings, "SESSION_LIFETIME_DAYS", DEFAULT_SESSION_DAYS))
    )

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), debug=app.config["DEBUG"])

    storage_backend = getattr(settings, "STORAGE_BACKEND", "memory")
    db_config = getattr(settings, "DB_CONFIG", None)
    logger.info("settings=%s storage=%s", settings_module, storage_backend)

    if storage_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        storage_backend=storage_backend,
        db_config=db_config,
        password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", "scrypt"),
    )

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        if seed_demo_data(container.users_repo, container.employees_repo, container.hasher):
            logger.info("demo seed ready")

    app.extensions["hotel_hrm"] = container

    register_error_handlers(app)
    register_auth(app, container)
    register_employees(app, container)
    register_payroll(app, container)
    register_users(app, container)

    return app
