from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import Optional, Protocol, Sequence

from ..core.exceptions import ReportDeliveryError

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    mimetype: str = XLSX_MIMETYPE


class Mailer(Protocol):
    def send(
        self,
        *,
        subject: str,
        body: str,
        recipients: Sequence[str],
        attachments: Sequence[Attachment] = (),
    ) -> None:
        raise NotImplementedError


@dataclass
class MailConfig:
    server: str
    port: int = 587
    use_tls: bool = True
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    sender: Optional[str] = None


class SmtpMailer(Mailer):
    def __init__(self, config: MailConfig, *, timeout: float = 30.0):
        self._config = config
        self._timeout = timeout

    def build_message(
        self,
        *,
        subject: str,
        body: str,
        recipients: Sequence[str],
        attachments: Sequence[Attachment] = (),
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self._config.sender or self._config.username or "checkin@localhost"
        msg["To"] = ", ".join(recipients)
        msg.set_content(body)
        for a in attachments:
            maintype, _, subtype = a.mimetype.partition("/")
            msg.add_attachment(a.content, maintype=maintype, subtype=subtype, filename=a.filename)
        return msg

    def send(
        self,
        *,
        subject: str,
        body: str,
        recipients: Sequence[str],
        attachments: Sequence[Attachment] = (),
    ) -> None:
        msg = self.build_message(subject=subject, body=body, recipients=recipients, attachments=attachments)
        try:
            with smtplib.SMTP(self._config.server, int(self._config.port), timeout=self._timeout) as smtp:
                if self._config.use_tls:
                    smtp.starttls()
                if self._config.username:
                    smtp.login(self._config.username, self._config.password or "")
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise ReportDeliveryError(f"Could not send '{subject}' via {self._config.server}: {e}") from e

        logger.info("Sent '%s' to %d recipient(s)", subject, len(recipients))
