from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .data.mock_store import MockStore
from .attendance.controller import register as register_attendance
from .notifications.controller import register as register_notifications
from .payroll.controller import register as register_payroll


def create_app(*, settings_module: Optional[str] = None, store: Optional[MockStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger(__name__)
    logger.info(
        "%s %s settings=%s backend=%s",
        getattr(settings, "APP_NAME", "salon-payroll"),
        getattr(settings, "APP_VERSION", ""),
        settings_module,
        getattr(settings, "BACKEND_URL", "") if getattr(settings, "USE_BACKEND", False) else "off (mock data)",
    )

    container = build_container(settings=settings, store=store)
    app.extensions["container"] = container

    register_payroll(app, container)
    register_attendance(app, container)
    register_notifications(app, container)

    if container.api_client is not None:
        atexit.register(container.api_client.close)

    if getattr(settings, "NOTIFICATIONS_ENABLED", False):
        container.notification_monitor.start()
        atexit.register(container.notification_monitor.stop)

    return app
