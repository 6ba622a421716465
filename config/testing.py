import os

STATE_BACKEND = "file"
STATE_FILE = os.getenv("STATE_FILE", "instance/test_state.json")
STATE_KEY = "mt_test_state"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "childcare_test_db"),
}

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
