"""Settings modules, one per environment, selected by ``APP_ENV``."""
import os

_MODULE_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    # Unknown names run with development settings.
    return _MODULE_BY_ENV.get(env, "config.development")
