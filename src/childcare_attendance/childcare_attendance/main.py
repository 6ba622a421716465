from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .children.controller import register as register_children
from .common.logging_utils import setup_logging
from .container import Container, build_container, build_store
from .core.constants import STORAGE_KEY
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "STATE_BACKEND", "file")
        store = build_store(
            backend=backend,
            state_file=getattr(settings, "STATE_FILE", "instance/state.json"),
            state_key=getattr(settings, "STATE_KEY", STORAGE_KEY),
            db_config=getattr(settings, "DB_CONFIG", None),
        )
        container = build_container(store=store)
        logger.info("settings=%s state_backend=%s", settings_module, backend)

    register_children(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
