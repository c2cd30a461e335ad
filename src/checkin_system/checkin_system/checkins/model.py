from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class CheckinRecord:
    """Domain entity: one accepted attendance event."""

    name: str
    device_id: str
    latitude: float
    longitude: float
    date: str
    time: str
    ip: Optional[str] = None

    def to_dict(self) -> dict:
        """Durable/JSON form, keyed the way clients and the data file expect."""
        return {
            "name": self.name,
            "deviceId": self.device_id,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "date": self.date,
            "time": self.time,
            "ip": self.ip,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckinRecord":
        return cls(
            name=str(data["name"]),
            device_id=str(data["deviceId"]),
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            date=str(data["date"]),
            time=str(data["time"]),
            ip=data.get("ip"),
        )


@dataclass(frozen=True)
class CheckinCandidate:
    """Raw, not yet validated check-in request."""

    device_id: Any = None
    name: Any = None
    latitude: Any = None
    longitude: Any = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CheckinCandidate":
        return cls(
            device_id=payload.get("deviceId"),
            name=payload.get("name"),
            latitude=payload.get("latitude"),
            longitude=payload.get("longitude"),
        )


@dataclass(frozen=True)
class CheckinResult:
    record: CheckinRecord
    date: str
    message: str

    def to_dict(self) -> dict:
        return {"message": self.message, "date": self.date}
