from __future__ import annotations

import json
import os
import stat
from datetime import datetime, timedelta, timezone

import pytest

from src.checkin_system.checkin_system.checkins.json_checkin_repository import JsonFileCheckinRepository
from src.checkin_system.checkin_system.checkins.model import CheckinCandidate, CheckinRecord
from src.checkin_system.checkin_system.checkins.store import CheckinStore
from src.checkin_system.checkin_system.core.exceptions import PersistenceError
from src.checkin_system.checkin_system.geofence.model import ReferencePoint

SITE = ReferencePoint(latitude=-1.2910592, longitude=36.8050176, radius_meters=1000)
NOW = datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


def test_missing_file_loads_empty(tmp_path):
    repo = JsonFileCheckinRepository(tmp_path / "checkins.json")
    assert list(repo.load_all()) == []


def test_saved_file_uses_camel_case_keys(tmp_path):
    path = tmp_path / "checkins.json"
    repo = JsonFileCheckinRepository(path)
    rec = CheckinRecord(
        name="Alice", device_id="D1", latitude=-1.29, longitude=36.8, date="2026-02-01", time="11:30:00", ip="::1"
    )

    repo.save_all([rec])

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [
        {
            "name": "Alice",
            "deviceId": "D1",
            "latitude": -1.29,
            "longitude": 36.8,
            "date": "2026-02-01",
            "time": "11:30:00",
            "ip": "::1",
        }
    ]
    assert [p.name for p in tmp_path.iterdir()] == ["checkins.json"]


@pytest.mark.parametrize("content", ["{not json", '{"name": "x"}', '[{"name": "x"}]', "[1, 2]"])
def test_malformed_content_raises_value_error(tmp_path, content):
    path = tmp_path / "checkins.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileCheckinRepository(path).load_all()


def test_store_starts_empty_on_malformed_file(tmp_path):
    path = tmp_path / "checkins.json"
    path.write_text("{not json", encoding="utf-8")

    store = CheckinStore(JsonFileCheckinRepository(path), SITE, clock=lambda: NOW)
    store.load()

    assert store.list() == ()


def test_write_failure_raises_persistence_error(tmp_path):
    target = tmp_path / "as_dir"
    target.mkdir()

    with pytest.raises(PersistenceError):
        JsonFileCheckinRepository(target).save_all([])

    assert [p.name for p in tmp_path.iterdir()] == ["as_dir"]


def test_reload_reproduces_same_ordered_sequence(tmp_path):
    path = tmp_path / "checkins.json"
    store = CheckinStore(JsonFileCheckinRepository(path), SITE, clock=lambda: NOW)
    store.load()
    store.submit(CheckinCandidate("D1", "Alice", -1.2910592, 36.8050176), ip="10.0.0.1")
    store.submit(CheckinCandidate("D2", "Bob", -1.2911, 36.8051), ip="10.0.0.2")
    store.submit(CheckinCandidate("D1", "Alice", -1.2910592, 36.8050176), now=NOW + timedelta(days=1))

    fresh = CheckinStore(JsonFileCheckinRepository(path), SITE, clock=lambda: NOW)
    fresh.load()

    assert fresh.list() == store.list()
    assert [r.device_id for r in fresh.list()] == ["D1", "D2", "D1"]


def test_new_file_is_readable_by_others(tmp_path):
    path = tmp_path / "checkins.json"
    JsonFileCheckinRepository(path).save_all([])

    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_rewrite_keeps_existing_file_mode(tmp_path):
    path = tmp_path / "checkins.json"
    path.write_text("[]", encoding="utf-8")
    os.chmod(path, 0o640)
    rec = CheckinRecord(name="Alice", device_id="D1", latitude=-1.29, longitude=36.8, date="2026-02-01", time="11:30:00")

    JsonFileCheckinRepository(path).save_all([rec])

    assert stat.S_IMODE(path.stat().st_mode) == 0o640
    assert json.loads(path.read_text(encoding="utf-8"))[0]["deviceId"] == "D1"
