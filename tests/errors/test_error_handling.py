"""
Error handling tests for the contact directory application.

Directory operations report expected failures through return values; the
exception hierarchy only covers operator input and configuration.
"""

import pytest

from contacts_app.directory import AddResult, Directory, Entry
from contacts_app.errors import (
    ConfigurationError,
    InputError,
    InvalidCapacityError,
    InvalidChoiceError,
    SystemFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_input_error_hierarchy(self):
        """Input errors are recoverable and carry the raw text."""
        base_error = InputError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        choice_error = InvalidChoiceError("bad choice", raw_value="abc")
        assert isinstance(choice_error, InputError)
        assert choice_error.raw_value == "abc"

        capacity_error = InvalidCapacityError("bad size", raw_value="ten", fallback_capacity=10)
        assert isinstance(capacity_error, InputError)
        assert capacity_error.fallback_capacity == 10

    def test_system_failure_hierarchy(self):
        """Configuration failures are unrecoverable."""
        config_error = ConfigurationError(
            "broken", config_file="contacts.yaml", context={"line": 3}
        )

        assert isinstance(config_error, SystemFailureError)
        assert config_error.recoverable is False
        assert config_error.config_file == "contacts.yaml"
        assert config_error.errors == []
        assert config_error.context == {"line": 3}


class TestDirectoryNeverRaises:
    """Expected failures come back as values."""

    def test_all_failures_are_values(self):
        """Missing, invalid, full, duplicate and not-found do not raise."""
        directory = Directory(1)

        assert directory.try_add(None) is AddResult.MISSING
        assert directory.try_add(Entry(" ", "x", "")) is AddResult.INVALID
        assert directory.try_add(Entry("Ana", "Lopez", "")) is AddResult.ADDED
        assert directory.try_add(Entry("Ben", "Cruz", "")) is AddResult.FULL
        assert directory.exists(None) is False
        assert directory.find_by_name("Ben", "Cruz") is None
        assert directory.remove(None) is False
        assert directory.remove(Entry("Ben", "Cruz", "")) is False
        assert directory.update_phone("Ben", "Cruz", "1") is False

    def test_duplicate_on_spare_capacity(self):
        """With room left, a case variant reports DUPLICATE."""
        directory = Directory(3)
        directory.add(Entry("Ana", "Lopez", ""))

        assert directory.try_add(Entry("ANA", "LOPEZ", "9")) is AddResult.DUPLICATE

    @pytest.mark.parametrize("first,last", [(None, None), (None, "x"), ("x", None)])
    def test_none_names_rejected(self, first, last):
        """Entries with missing names are invalid rather than an error."""
        directory = Directory()

        assert directory.try_add(Entry(first, last, "")) is AddResult.INVALID
