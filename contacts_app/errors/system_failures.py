"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that stop the application from
starting and require the operator to fix the environment.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Configuration file is unreadable or fails validation."""

    def __init__(self, message: str, config_file: Optional[str] = None,
                 errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_file = config_file
        self.errors = errors or []
