from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .checkins.json_checkin_repository import JsonFileCheckinRepository
from .checkins.store import CheckinStore
from .core.constants import (
    DEFAULT_DATA_FILE,
    DEFAULT_RADIUS_METERS,
    DEFAULT_REFERENCE_LAT,
    DEFAULT_REFERENCE_LON,
)
from .geofence.model import ReferencePoint
from .reports.daily_report import DailyReportService
from .reports.export import CheckinExporter
from .reports.mailer import MailConfig, SmtpMailer


@dataclass(frozen=True)
class Container:
    reference: ReferencePoint

    checkins_repo: JsonFileCheckinRepository
    checkin_store: CheckinStore

    exporter: CheckinExporter
    mailer: Optional[SmtpMailer]
    daily_report_service: DailyReportService


def _split_recipients(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [v.strip() for v in value if v and v.strip()]


def build_container(*, settings: Mapping[str, Any]) -> Container:
    reference = ReferencePoint(
        latitude=float(settings.get("REFERENCE_LAT", DEFAULT_REFERENCE_LAT)),
        longitude=float(settings.get("REFERENCE_LON", DEFAULT_REFERENCE_LON)),
        radius_meters=float(settings.get("RADIUS_METERS", DEFAULT_RADIUS_METERS)),
    )

    checkins_repo = JsonFileCheckinRepository(settings.get("DATA_FILE") or DEFAULT_DATA_FILE)
    checkin_store = CheckinStore(checkins_repo, reference)
    checkin_store.load()

    mailer = None
    if settings.get("MAIL_SERVER"):
        mailer = SmtpMailer(
            MailConfig(
                server=str(settings["MAIL_SERVER"]),
                port=int(settings.get("MAIL_PORT", 587)),
                use_tls=bool(settings.get("MAIL_USE_TLS", True)),
                username=settings.get("MAIL_USERNAME") or None,
                password=settings.get("MAIL_PASSWORD") or None,
                sender=settings.get("MAIL_SENDER") or None,
            )
        )

    exporter = CheckinExporter()
    daily_report_service = DailyReportService(
        checkin_store,
        mailer,
        recipients=_split_recipients(settings.get("REPORT_RECIPIENTS")),
        exporter=exporter,
    )

    return Container(
        reference=reference,
        checkins_repo=checkins_repo,
        checkin_store=checkin_store,
        exporter=exporter,
        mailer=mailer,
        daily_report_service=daily_report_service,
    )
