from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Sequence, Union

from ..core.constants import RECORD_FIELDS
from ..core.exceptions import PersistenceError
from .model import CheckinRecord
from .repository import CheckinRepository

# mkstemp creates 0600 files; a brand-new data file gets this instead.
DEFAULT_FILE_MODE = 0o644


class JsonFileCheckinRepository(CheckinRepository):
    """Stores the whole sequence as a pretty-printed JSON array in one file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> Sequence[CheckinRecord]:
        if not self._path.exists():
            return []

        with self._path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"{self._path} does not contain a JSON array")

        records = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise ValueError(f"Entry #{i} in {self._path} is not an object")
            missing = [k for k in RECORD_FIELDS if k != "ip" and k not in item]
            if missing:
                raise ValueError(f"Entry #{i} in {self._path} is missing {', '.join(missing)}")
            records.append(CheckinRecord.from_dict(item))
        return records

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    def save_all(self, records: Sequence[CheckinRecord]) -> None:
        payload = json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)

        # Write next to the target and swap it in, so readers never see half a file.
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                os.chmod(tmp_name, self._target_mode())
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Could not write {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
