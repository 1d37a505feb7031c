"""Store interfaces (repository pattern).

Stores must be swappable and hold domain records under composite keys.
"""

from abc import ABC, abstractmethod

from venue.domain import Record, RecordKind


class RecordStore(ABC):
    """Interface for an ordered, string-keyed record container."""

    @abstractmethod
    def insert(self, key: str, record: Record) -> None:
        """Store a record under key. An existing key is left untouched."""
        ...

    @abstractmethod
    def search(self, key: str) -> Record | None:
        """Return the record stored under key, or None if not found."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the record stored under key. Absent keys are a no-op."""
        ...

    @abstractmethod
    def traverse_filtered(
        self, kind: RecordKind | None = None, event_code: int | None = None
    ) -> list[Record]:
        """Return records in ascending key order, filtered by kind.

        When kind is TICKET and event_code is given, only tickets of that
        event are returned.
        """
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """Return every key in ascending order."""
        ...

    @abstractmethod
    def destroy(self) -> int:
        """Release every record and return how many were released."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None
