from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..checkins.model import CheckinRecord
from ..checkins.store import CheckinStore
from ..common.datetime_utils import calendar_date, now_utc
from .export import CheckinExporter
from .mailer import Attachment, Mailer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyReport:
    date: str
    records: tuple[CheckinRecord, ...]
    subject: str
    body: str


class DailyReportService:
    """Builds the end-of-day attendance digest and mails it out."""

    def __init__(
        self,
        store: CheckinStore,
        mailer: Optional[Mailer],
        *,
        recipients: Sequence[str] = (),
        exporter: Optional[CheckinExporter] = None,
    ):
        self._store = store
        self._mailer = mailer
        self._recipients = [r for r in recipients if r]
        self._exporter = exporter or CheckinExporter()

    def build(self, report_date: str) -> DailyReport:
        records = self._store.list_for_date(report_date)

        lines = [f"Check-ins for {report_date}: {len(records)}", ""]
        for i, r in enumerate(records, start=1):
            lines.append(f"{i:>3}. {r.time}  {r.name} ({r.device_id})")
        if not records:
            lines.append("No check-ins were recorded.")

        return DailyReport(
            date=report_date,
            records=records,
            subject=f"Daily check-in report {report_date}",
            body="\n".join(lines) + "\n",
        )

    def send(self, report_date: Optional[str] = None) -> Optional[DailyReport]:
        """Send the report for ``report_date`` (today, UTC, by default).

        Returns the report, or ``None`` when no mailer/recipients are configured.
        """
        report_date = report_date or calendar_date(now_utc())
        if self._mailer is None or not self._recipients:
            logger.warning("Daily report for %s skipped: no mail server or recipients configured", report_date)
            return None

        report = self.build(report_date)
        attachment = Attachment(
            filename=f"checkins_{report_date}.xlsx",
            content=self._exporter.to_xlsx_bytes(report.records, sheet_name=report_date),
        )
        self._mailer.send(
            subject=report.subject,
            body=report.body,
            recipients=self._recipients,
            attachments=[attachment],
        )
        logger.info("Daily report for %s sent (%d check-ins)", report_date, len(report.records))
        return report
