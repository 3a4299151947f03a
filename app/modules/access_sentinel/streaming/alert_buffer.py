"""Bounded newest-first alert buffer with read bookkeeping"""

from app.modules.access_sentinel.domain.entities import Alert
from app.modules.access_sentinel.utils import ALERT_BUFFER_CAPACITY


class AlertBuffer:
    """Not thread safe; AlertStreamProcessor serializes access

    ``unread_count`` always equals the number of buffered entries with
    ``read == False``.
    """

    def __init__(self, capacity: int = ALERT_BUFFER_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._entries: list[Alert] = []
        self._unread = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def alerts(self) -> list[Alert]:
        return list(self._entries)

    @property
    def unread_count(self) -> int:
        return self._unread

    def ingest(self, alert: Alert) -> list[Alert]:
        """Prepend alert and return evicted entries, oldest last"""
        self._entries.insert(0, alert)
        if not alert.read:
            self._unread += 1

        evicted = self._entries[self.capacity:]
        del self._entries[self.capacity:]
        self._unread -= sum(1 for entry in evicted if not entry.read)
        return evicted

    def mark_as_read(self, alert_id: str) -> bool:
        """Flip the first unread entry with this id; False when nothing changed"""
        for index, entry in enumerate(self._entries):
            if entry.id == alert_id and not entry.read:
                self._entries[index] = entry.model_copy(update={"read": True})
                self._unread = max(0, self._unread - 1)
                return True
        return False

    def mark_all_as_read(self) -> int:
        """Mark every entry read and return how many were unread"""
        changed = self._unread
        self._entries = [
            entry if entry.read else entry.model_copy(update={"read": True})
            for entry in self._entries
        ]
        self._unread = 0
        return changed

    def clear(self) -> None:
        self._entries = []
        self._unread = 0

    def get(self, alert_id: str) -> Alert | None:
        return next((entry for entry in self._entries if entry.id == alert_id), None)
