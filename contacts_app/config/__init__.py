"""
Configuration defaults, loading and validation for the contacts application.
"""
from .defaults import DEFAULT_CAPACITY, DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CAPACITY",
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
