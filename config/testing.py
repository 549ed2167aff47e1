SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "hotel_hrm_test",
}

# Cheap KDF so tests stay fast; still the salted Werkzeug format.
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
SESSION_LIFETIME_DAYS = 1

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = True
