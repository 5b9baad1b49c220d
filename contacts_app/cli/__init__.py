"""
Interactive text menu for the contact directory.
"""
from .menu import MenuSession, choose_directory

__all__ = ["MenuSession", "choose_directory"]
