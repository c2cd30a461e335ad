from __future__ import annotations

from typing import Protocol, Sequence

from .model import CheckinRecord


class CheckinRepository(Protocol):
    """Durable mirror of the check-in sequence."""

    def load_all(self) -> Sequence[CheckinRecord]:
        """Return the stored sequence; empty when nothing has been stored yet.

        Raises ``ValueError`` (or ``OSError``) when stored content is unreadable.
        """

        raise NotImplementedError

    def save_all(self, records: Sequence[CheckinRecord]) -> None:
        """Overwrite storage with ``records``; raises ``PersistenceError`` on failure."""

        raise NotImplementedError
