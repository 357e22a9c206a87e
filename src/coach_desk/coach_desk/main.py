from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .app_logger import get_logger, setup_logging
from .attendance.controller import register as register_attendance
from .coaches.controller import register as register_coaches
from .config import get_settings_module
from .container import build_container
from .core.exceptions import (
    ConstraintViolationError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .database.bootstrap import ensure_default_coach, initialize, list_tables
from .payments.controller import register as register_payments
from .reports.controller import register as register_reports
from .students.controller import register as register_students

log = get_logger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConstraintViolationError, 409),
    (StorageError, 500),
)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = next((code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls)), 400)
        if status >= 500:
            log.error("storage failure: %s", e)
        return jsonify({"error": type(e).__name__, "message": str(e)}), status


def create_app(*, settings_module: Optional[str] = None, db_config: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(db_config or getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", None))
    log.debug("settings=%s db=%s", settings_module, db_config.get("path"))

    default_coach_id = int(getattr(settings, "DEFAULT_COACH_ID", 1))
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        initialize(db_config)
        log.debug("schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_default_coach(db_config, coach_id=default_coach_id)

    container = build_container(db_config=db_config, default_coach_id=default_coach_id)
    container.state.set_coach(container.coaches_repo.get_by_id(default_coach_id))
    app.extensions["coach_desk"] = container

    _register_error_handlers(app)
    register_coaches(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_payments(app, container)
    register_reports(app, container)

    return app
