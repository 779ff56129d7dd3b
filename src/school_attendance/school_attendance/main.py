from __future__ import annotations

import atexit
import logging
from typing import Optional

import requests
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .common.logging_utils import configure_logging
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard

logger = logging.getLogger(__name__)


def create_app(env: Optional[str] = None, *, session: Optional[requests.Session] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings(env)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s sheet=%s script=%s", get_settings_module(env), settings.SHEET_CSV_URL, settings.SCRIPT_URL)

    container: Container = build_container(settings, session=session)
    app.extensions["school_attendance"] = container

    register_dashboard(app, container)

    if getattr(settings, "AUTO_REFRESH", False):
        container.scheduler.start()
        atexit.register(container.scheduler.stop)

    return app
