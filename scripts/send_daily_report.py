"""Send the daily check-in report once.

Note: Meant for cron/Task Scheduler when the in-process scheduler is disabled
(REPORT_ENABLED=0). Pass a YYYY-MM-DD date to resend an earlier day.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.checkin_system.checkin_system.common.datetime_utils import parse_iso_date
from src.checkin_system.checkin_system.container import build_container
from src.checkin_system.checkin_system.main import load_settings


def main(argv: list[str]) -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    report_date = None
    if argv:
        try:
            report_date = parse_iso_date(argv[0]).isoformat()
        except ValueError:
            raise SystemExit(f"Invalid date {argv[0]!r}, expected YYYY-MM-DD")

    container = build_container(settings=load_settings(get_settings_module()))
    report = container.daily_report_service.send(report_date)
    if report is None:
        raise SystemExit("Report not sent: set MAIL_SERVER and REPORT_RECIPIENTS.")
    print(f"OK: Sent report for {report.date} ({len(report.records)} check-ins)")


if __name__ == "__main__":
    main(sys.argv[1:])
