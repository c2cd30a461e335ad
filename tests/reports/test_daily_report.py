from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.checkin_system.checkin_system.checkins.model import CheckinCandidate
from src.checkin_system.checkin_system.checkins.store import CheckinStore
from src.checkin_system.checkin_system.core.exceptions import ReportDeliveryError
from src.checkin_system.checkin_system.geofence.model import ReferencePoint
from src.checkin_system.checkin_system.reports.daily_report import DailyReportService
from src.checkin_system.checkin_system.reports.mailer import Attachment, MailConfig, SmtpMailer

SITE = ReferencePoint(latitude=-1.2910592, longitude=36.8050176, radius_meters=1000)
NOW = datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


class NullRepo:
    def load_all(self):
        return []

    def save_all(self, records):
        pass


class FakeMailer:
    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    def send(self, *, subject, body, recipients, attachments=()):
        if self.error:
            raise self.error
        self.sent.append({"subject": subject, "body": body, "recipients": list(recipients), "attachments": list(attachments)})


@pytest.fixture
def store():
    s = CheckinStore(NullRepo(), SITE, clock=lambda: NOW)
    s.submit(CheckinCandidate("D1", "Alice", -1.2910592, 36.8050176))
    s.submit(CheckinCandidate("D2", "Bob", -1.2910592, 36.8050176))
    s.submit(CheckinCandidate("D1", "Alice", -1.2910592, 36.8050176), now=NOW + timedelta(days=1))
    return s


def test_build_only_includes_that_day(store):
    report = DailyReportService(store, FakeMailer()).build("2026-02-01")

    assert report.subject == "Daily check-in report 2026-02-01"
    assert [r.device_id for r in report.records] == ["D1", "D2"]
    assert "Check-ins for 2026-02-01: 2" in report.body
    assert "Bob (D2)" in report.body


def test_build_for_empty_day(store):
    report = DailyReportService(store, FakeMailer()).build("2030-01-01")
    assert report.records == ()
    assert "No check-ins were recorded." in report.body


def test_send_mails_report_with_xlsx_attachment(store):
    mailer = FakeMailer()
    svc = DailyReportService(store, mailer, recipients=["hr@example.com", ""])

    report = svc.send("2026-02-02")

    assert report is not None
    assert len(mailer.sent) == 1
    sent = mailer.sent[0]
    assert sent["recipients"] == ["hr@example.com"]
    assert sent["attachments"][0].filename == "checkins_2026-02-02.xlsx"
    assert sent["attachments"][0].content[:2] == b"PK"


def test_send_without_recipients_is_skipped(store):
    mailer = FakeMailer()
    assert DailyReportService(store, mailer).send("2026-02-01") is None
    assert mailer.sent == []


def test_send_propagates_delivery_errors(store):
    svc = DailyReportService(store, FakeMailer(ReportDeliveryError("smtp down")), recipients=["hr@example.com"])
    with pytest.raises(ReportDeliveryError):
        svc.send("2026-02-01")


def test_smtp_message_carries_attachment():
    mailer = SmtpMailer(MailConfig(server="smtp.example.com", sender="checkin@example.com"))
    msg = mailer.build_message(
        subject="Daily check-in report 2026-02-01",
        body="Check-ins for 2026-02-01: 0\n",
        recipients=["a@example.com", "b@example.com"],
        attachments=[Attachment(filename="checkins.xlsx", content=b"PK\x03\x04")],
    )

    assert msg["To"] == "a@example.com, b@example.com"
    assert msg["From"] == "checkin@example.com"
    names = [part.get_filename() for part in msg.iter_attachments()]
    assert names == ["checkins.xlsx"]


def test_smtp_connection_failure_is_delivery_error(monkeypatch):
    def refuse(*args, **kwargs):
        raise ConnectionRefusedError("no server")

    monkeypatch.setattr("smtplib.SMTP", refuse)
    mailer = SmtpMailer(MailConfig(server="localhost", port=2525, use_tls=False))

    with pytest.raises(ReportDeliveryError):
        mailer.send(subject="s", body="b", recipients=["a@example.com"])
