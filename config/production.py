import os

STATE_BACKEND = os.getenv("STATE_BACKEND", "file")
STATE_FILE = os.getenv("STATE_FILE", "instance/state.json")
STATE_KEY = os.getenv("STATE_KEY", "mt_demo_state_v1")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "childcare_db"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
