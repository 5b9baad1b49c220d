"""
Bounded, insertion-ordered contact directory.

The directory holds at most ``capacity`` entries in the order they were
added. No two live entries share a first and last name (ignoring case).
Every operation is total: absent input, blank names, a full directory,
duplicates and missing entries are all reported through the return value
and never raised.
"""

from typing import Optional

from ..config.defaults import DEFAULT_CAPACITY
from ..logging.config import get_directory_logger, log_directory_operation
from .models import AddResult, DirectoryStats, Entry

logger = get_directory_logger(__name__)


class Directory:
    """In-memory contact directory with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        # Capacity is taken as given; resolve_capacity guards the boundary.
        self._capacity = capacity
        self._entries: list[Entry] = []
        self.logger = logger

    @property
    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    def free_slots(self) -> int:
        return self._capacity - len(self._entries)

    def stats(self) -> DirectoryStats:
        """Snapshot of capacity and occupancy."""
        return DirectoryStats(
            capacity=self._capacity,
            size=self.size(),
            free_slots=self.free_slots(),
            is_full=self.is_full(),
        )

    def try_add(self, entry: Optional[Entry]) -> AddResult:
        """
        Append an entry, reporting which check rejected it if any.

        Checks run in order: missing entry, blank names, full directory,
        duplicate name. The directory is only modified on ADDED.
        """
        if entry is None:
            result = AddResult.MISSING
        elif not entry.is_valid():
            result = AddResult.INVALID
        elif self.is_full():
            result = AddResult.FULL
        elif self.exists(entry):
            result = AddResult.DUPLICATE
        else:
            self._entries.append(entry)
            result = AddResult.ADDED

        log_directory_operation(
            self.logger,
            operation="add",
            succeeded=result is AddResult.ADDED,
            reason=result.value,
            context={"size": self.size(), "capacity": self._capacity},
        )
        return result

    def add(self, entry: Optional[Entry]) -> bool:
        """Append an entry; False if it is missing, invalid, a duplicate or there is no room."""
        return self.try_add(entry) is AddResult.ADDED

    def exists(self, entry: Optional[Entry]) -> bool:
        """True if a live entry has the same first and last name."""
        if entry is None:
            return False
        return self._index_of(entry) is not None

    def list_entries(self) -> list[Entry]:
        """
        Return the live entries sorted by display key.

        Sorting happens on a copy so insertion order is preserved. Adjacent
        pairs are only exchanged when strictly out of order, which keeps
        entries with equal keys in insertion order.
        """
        ordered = list(self._entries)
        count = len(ordered)

        for i in range(count - 1):
            for j in range(count - 1 - i):
                if ordered[j].display_key() > ordered[j + 1].display_key():
                    ordered[j], ordered[j + 1] = ordered[j + 1], ordered[j]

        log_directory_operation(
            self.logger,
            operation="list",
            succeeded=count > 0,
            reason="listed" if count else "empty",
            context={"size": count},
        )
        return ordered

    def find_by_name(self, first_name: str, last_name: str) -> Optional[Entry]:
        """First entry whose names match ignoring case, or None."""
        found = None
        for entry in self._entries:
            if entry.matches_name(first_name, last_name):
                found = entry
                break

        log_directory_operation(
            self.logger,
            operation="find",
            succeeded=found is not None,
            reason="found" if found is not None else "not_found",
        )
        return found

    def remove(self, entry: Optional[Entry]) -> bool:
        """Remove the first entry equal to ``entry``; later entries move up one place."""
        if entry is None:
            index, reason = None, "missing"
        else:
            index = self._index_of(entry)
            reason = "removed" if index is not None else "not_found"

        if index is not None:
            del self._entries[index]

        log_directory_operation(
            self.logger,
            operation="remove",
            succeeded=index is not None,
            reason=reason,
            context={"size": self.size()},
        )
        return index is not None

    def update_phone(self, first_name: str, last_name: str, new_phone: str) -> bool:
        """Overwrite the phone of the first entry matching the names."""
        for entry in self._entries:
            if entry.matches_name(first_name, last_name):
                entry.phone = new_phone
                log_directory_operation(
                    self.logger,
                    operation="update_phone",
                    succeeded=True,
                    reason="updated",
                )
                return True

        log_directory_operation(
            self.logger,
            operation="update_phone",
            succeeded=False,
            reason="not_found",
        )
        return False

    def _index_of(self, entry: Entry) -> Optional[int]:
        for index, candidate in enumerate(self._entries):
            if candidate.matches(entry):
                return index
        return None
