from __future__ import annotations

import logging
import threading
from datetime import datetime, time, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import calendar_date, now_utc

logger = logging.getLogger(__name__)


def parse_send_at(value: str) -> time:
    """Parse an ``HH:MM`` wall-clock time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def next_run_after(now: datetime, at: time) -> datetime:
    """Next datetime at wall-clock ``at`` strictly after ``now``."""
    candidate = datetime.combine(now.date(), at, tzinfo=now.tzinfo)
    if candidate <= now:
        candidate += timedelta(days=1)
    return candidate


class DailyReportScheduler:
    """Runs ``job(report_date)`` once a day at ``at`` on a daemon thread.

    ``at`` is read on the same UTC clock that check-in dates use, and the
    job receives the calendar date of the moment it fires.
    """

    def __init__(
        self,
        job: Callable[[str], object],
        at: time,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._job = job
        self._at = at
        self._clock = clock
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def clock(self) -> Callable[[], datetime]:
        return self._clock

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="daily-report", daemon=True)
        self._thread.start()
        logger.info("Daily report scheduled at %s UTC", self._at.strftime("%H:%M"))

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def run_once(self, now: Optional[datetime] = None) -> None:
        report_date = calendar_date(now or self._clock())
        try:
            self._job(report_date)
        except Exception:
            # A failed send must not end the schedule; tomorrow's run still happens.
            logger.exception("Daily report job for %s failed", report_date)

    def _run(self) -> None:
        while not self._stop.is_set():
            now = self._clock()
            due = next_run_after(now, self._at)
            if self._stop.wait((due - now).total_seconds()):
                break
            self.run_once(due)
