"""
Contact directory: entries, the bounded directory and its construction.
"""
from .factory import create_directory, resolve_capacity
from .models import AddResult, DirectoryStats, Entry
from .store import Directory

__all__ = [
    "AddResult",
    "Directory",
    "DirectoryStats",
    "Entry",
    "create_directory",
    "resolve_capacity",
]
