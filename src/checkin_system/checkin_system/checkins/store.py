from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import calendar_date, local_time_label, now_utc
from ..common.validators import require_coordinate, require_non_empty
from ..core.exceptions import DuplicateError, OutOfRangeError, PersistenceError, ValidationError
from ..geofence.model import ReferencePoint
from .model import CheckinCandidate, CheckinRecord, CheckinResult
from .repository import CheckinRepository

logger = logging.getLogger(__name__)


class CheckinStore:
    """Owns the accepted check-ins and their durable mirror.

    The in-memory sequence is an immutable tuple that is swapped on commit,
    so ``list()`` always sees a complete sequence. ``submit`` runs its
    date/distance/duplicate/write steps under one lock.
    """

    def __init__(
        self,
        repository: CheckinRepository,
        reference: ReferencePoint,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._repository = repository
        self._reference = reference
        self._clock = clock
        self._records: tuple[CheckinRecord, ...] = ()
        self._lock = threading.Lock()

    @property
    def reference(self) -> ReferencePoint:
        return self._reference

    def load(self) -> None:
        try:
            records = tuple(self._repository.load_all())
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error("Error loading check-ins, starting with an empty store: %s", e)
            records = ()

        with self._lock:
            self._records = records
        logger.info("Loaded %d check-in(s)", len(records))

    def submit(
        self,
        candidate: CheckinCandidate,
        *,
        now: Optional[datetime] = None,
        ip: Optional[str] = None,
    ) -> CheckinResult:
        if (
            not candidate.device_id
            or not candidate.name
            or candidate.latitude is None
            or candidate.longitude is None
        ):
            raise ValidationError("Missing required fields")

        device_id = require_non_empty(candidate.device_id, "deviceId")
        name = require_non_empty(candidate.name, "name")
        latitude = require_coordinate(candidate.latitude, "latitude", limit=90)
        longitude = require_coordinate(candidate.longitude, "longitude", limit=180)

        with self._lock:
            now = now or self._clock()
            today = calendar_date(now)

            distance = self._reference.distance_to(latitude, longitude)
            logger.info("User '%s' at %s, %s | Distance = %.1f m", name, latitude, longitude, distance)
            if not self._reference.contains(latitude, longitude):
                raise OutOfRangeError("Error verifying location", distance_meters=distance)

            if any(r.device_id == device_id and r.date == today for r in self._records):
                raise DuplicateError("Device already checked in today")

            record = CheckinRecord(
                name=name,
                device_id=device_id,
                latitude=latitude,
                longitude=longitude,
                date=today,
                time=local_time_label(now),
                ip=ip,
            )
            updated = self._records + (record,)

            # Commit to memory only once the file reflects the new record.
            try:
                self._repository.save_all(updated)
            except PersistenceError:
                logger.exception("Could not persist check-in for device %s", device_id)
                raise
            self._records = updated

        logger.info("Check-in saved for %s", name)
        return CheckinResult(record=record, date=today, message=f"Check-in successful for {name}")

    def list(self) -> tuple[CheckinRecord, ...]:
        return self._records

    def list_for_date(self, day: str) -> tuple[CheckinRecord, ...]:
        return tuple(r for r in self._records if r.date == day)

    def __len__(self) -> int:
        return len(self._records)
