"""
Data models for the contact directory.

Entries are identified by their first and last name, compared without
regard to case. The phone number is carried along but never takes part in
identity, so it is the one field the directory may change in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AddResult(str, Enum):
    """Outcome of adding an entry to a directory."""
    ADDED = "added"
    MISSING = "missing"
    INVALID = "invalid"
    FULL = "full"
    DUPLICATE = "duplicate"


@dataclass(eq=False)
class Entry:
    """A single directory record."""

    first_name: str
    last_name: str
    phone: str

    def is_valid(self) -> bool:
        """Both names must contain something besides whitespace."""
        return (
            self.first_name is not None and bool(self.first_name.strip())
            and self.last_name is not None and bool(self.last_name.strip())
        )

    def matches_name(self, first_name: Optional[str], last_name: Optional[str]) -> bool:
        """Case-insensitive comparison against a raw (first, last) pair."""
        if None in (first_name, last_name, self.first_name, self.last_name):
            return False
        return (
            self.first_name.lower() == first_name.lower()
            and self.last_name.lower() == last_name.lower()
        )

    def matches(self, other: Optional["Entry"]) -> bool:
        """True when other names the same person; phone is ignored."""
        if not isinstance(other, Entry):
            return False
        return self.matches_name(other.first_name, other.last_name)

    def display_key(self) -> str:
        """Lower-cased "first last", used only for ordering."""
        return f"{self.first_name} {self.last_name}".lower()

    def render(self) -> str:
        return f"{self.first_name} {self.last_name} - {self.phone}"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(((self.first_name or "").lower(), (self.last_name or "").lower()))

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class DirectoryStats:
    """Point-in-time occupancy of a directory."""
    capacity: int
    size: int
    free_slots: int
    is_full: bool
