from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .checkins.controller import register as register_checkins
from .container import build_container
from .core.constants import DEFAULT_REPORT_SEND_AT
from .reports.scheduler import DailyReportScheduler, parse_send_at

logger = logging.getLogger(__name__)


def load_settings(settings_module: str) -> dict:
    settings = importlib.import_module(settings_module)
    return {k: getattr(settings, k) for k in dir(settings) if k.isupper()}


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = load_settings(settings_module)
    settings.update(overrides or {})

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = Flask(__name__)
    app.config.update(settings)
    app.secret_key = settings.get("SECRET_KEY")
    CORS(app, send_wildcard=True)

    container = build_container(settings=settings)
    app.extensions["checkin_container"] = container

    logger.info(
        "settings=%s data_file=%s reference=(%s, %s) radius=%sm",
        settings_module,
        container.checkins_repo.path,
        container.reference.latitude,
        container.reference.longitude,
        container.reference.radius_meters,
    )

    if settings.get("REPORT_ENABLED"):
        scheduler = DailyReportScheduler(
            container.daily_report_service.send,
            parse_send_at(settings.get("REPORT_SEND_AT") or DEFAULT_REPORT_SEND_AT),
        )
        scheduler.start()
        app.extensions["daily_report_scheduler"] = scheduler

    register_checkins(app, container)

    return app
