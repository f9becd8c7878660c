from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_UPCOMING_WINDOW_DAYS
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .exports.controller import register as register_exports
from .schedules.controller import register as register_schedules
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ACADEMY_NAME"] = getattr(settings, "ACADEMY_NAME", "R3 Academy")
    app.config["CSV_INCLUDE_HEADER"] = bool(getattr(settings, "CSV_INCLUDE_HEADER", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    seed = bool(getattr(settings, "SEED_STUDENTS", True))
    container = build_container(
        students=None if seed else [],
        upcoming_window_days=int(getattr(settings, "UPCOMING_WINDOW_DAYS", DEFAULT_UPCOMING_WINDOW_DAYS)),
    )
    app.extensions["r3_container"] = container
    logger.info(
        "app ready settings=%s students=%d", settings_module, len(container.students_repo.list_all())
    )

    register_dashboard(app, container)
    register_students(app, container)
    register_schedules(app, container)
    register_attendance(app, container)
    register_exports(app, container)

    return app
