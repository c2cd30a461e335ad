"""Example: use the store directly (without Flask).

Goal: show that controllers are a thin layer; acceptance rules live in CheckinStore.
"""

from datetime import datetime, timezone

from config import get_settings_module

from src.checkin_system.checkin_system.checkins.model import CheckinCandidate
from src.checkin_system.checkin_system.container import build_container
from src.checkin_system.checkin_system.core.exceptions import DomainError
from src.checkin_system.checkin_system.main import load_settings


def main():
    container = build_container(settings=load_settings(get_settings_module()))
    store = container.checkin_store

    candidate = CheckinCandidate(device_id="demo-device", name="Alice", latitude=-1.2910592, longitude=36.8050176)
    try:
        result = store.submit(candidate, now=datetime.now(timezone.utc), ip="127.0.0.1")
        print(result.to_dict())
    except DomainError as e:
        print(f"Rejected: {e}")

    print([r.to_dict() for r in store.list()])


if __name__ == "__main__":
    main()
