"""
Error classification for the contact directory application.

Directory operations never raise for expected outcomes (missing, invalid,
full, duplicate or not-found entries); those are reported through return
values. The exceptions here cover the boundaries around the directory:
operator input that cannot be parsed and configuration that cannot be used.
"""

from .input_errors import (
    InputError,
    InvalidChoiceError,
    InvalidCapacityError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Input Errors
    "InputError",
    "InvalidChoiceError",
    "InvalidCapacityError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
