"""
Input error classifications for the interactive menu.

These exceptions describe operator input that could not be interpreted.
They are always recoverable: the menu reports them and prompts again.
"""

from typing import Optional, Dict, Any


class InputError(Exception):
    """Base class for operator input problems that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidChoiceError(InputError):
    """Menu selection is not a number."""

    def __init__(self, message: str, raw_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value


class InvalidCapacityError(InputError):
    """Requested directory capacity is not a number."""

    def __init__(self, message: str, raw_value: Optional[str] = None,
                 fallback_capacity: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.fallback_capacity = fallback_capacity
