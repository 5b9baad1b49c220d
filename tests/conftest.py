"""Pytest configuration and shared fixtures."""

import pytest

from contacts_app.directory import Directory, Entry


@pytest.fixture
def ana() -> Entry:
    """A valid entry."""
    return Entry("Ana", "Lopez", "555")


@pytest.fixture
def sample_entries() -> list:
    """Pairwise-distinct valid entries, in insertion order."""
    return [
        Entry("beto", "Alvarez", "1"),
        Entry("Ana", "Zeta", "2"),
        Entry("Carla", "Moreno", "3"),
    ]


@pytest.fixture
def directory() -> Directory:
    """Empty directory with the default capacity."""
    return Directory()


@pytest.fixture
def populated_directory(sample_entries) -> Directory:
    """Capacity-5 directory holding the sample entries."""
    directory = Directory(5)
    for entry in sample_entries:
        assert directory.add(entry)
    return directory
